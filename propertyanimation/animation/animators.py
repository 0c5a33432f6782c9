"""
属性动画器

在 QVariantAnimation 之上提供“按属性名驱动”的动画：
- 按属性名读取当前值 / 写入新值（QObject.property / setProperty）
- 支持一个动画同时驱动多个属性（如 scale_x 与 scale_y）
- 支持重复次数与反向重复（往返动画）
- 插值曲线按每次迭代独立应用
- 颜色按 ARGB 整数通道插值

使用方法：
    animator = PropertyAnimator.of_float(star, "rotation", -360.0, 0.0, parent=star)
    animator.set_duration(1000)
    animator.start()
"""

import logging
from enum import Enum
from typing import Any, Callable, List, Optional

from PyQt6 import sip
from PyQt6.QtCore import QAbstractAnimation, QEasingCurve, QObject, QVariantAnimation, pyqtSignal
from PyQt6.QtGui import QColor

from propertyanimation.exceptions import AnimationConfigError
from propertyanimation.utils.constants import AnimationDefaults

logger = logging.getLogger(__name__)


class RepeatMode(Enum):
    """重复模式"""
    RESTART = "restart"  # 每次从起点重新开始
    REVERSE = "reverse"  # 奇数次迭代反向播放


def evaluate_float(fraction: float, start: float, end: float) -> float:
    """浮点线性插值"""
    return start + fraction * (end - start)


def evaluate_argb(fraction: float, start: int, end: int) -> int:
    """ARGB整数颜色插值

    A、R、G、B 四个通道分别插值后四舍五入（.5 进位）到整数。

    Args:
        fraction: 进度（通常在0-1之间）
        start: 起始颜色（无符号ARGB整数，如 0xFF000000）
        end: 结束颜色

    Returns:
        int: 插值后的无符号ARGB整数
    """
    result = 0
    for shift in (24, 16, 8, 0):
        start_channel = (start >> shift) & 0xFF
        end_channel = (end >> shift) & 0xFF
        channel = int(start_channel + fraction * (end_channel - start_channel) + 0.5)
        result |= max(0, min(255, channel)) << shift
    return result


def evaluate_color(fraction: float, start: QColor, end: QColor) -> QColor:
    """QColor插值（内部按ARGB整数通道计算）"""
    return QColor.fromRgba(evaluate_argb(fraction, start.rgba(), end.rgba()))


def to_color(value: Any) -> QColor:
    """将颜色值统一转换为QColor

    支持 QColor、颜色字符串（#RRGGBB / #AARRGGBB）和无符号ARGB整数。
    """
    if isinstance(value, QColor):
        color = QColor(value)
    elif isinstance(value, int):
        color = QColor.fromRgba(value & 0xFFFFFFFF)
    elif isinstance(value, str):
        color = QColor(value)
    else:
        raise AnimationConfigError(f"无法识别的颜色值: {value!r}", "color")

    if not color.isValid():
        raise AnimationConfigError(f"无效的颜色值: {value!r}", "color")
    return color


def emit_lifecycle(animation: QAbstractAnimation, new_state, old_state):
    """把 stateChanged 转换为 animation_started / animation_ended

    Qt 在析构运行中的动画时也会发出 stateChanged(Stopped)，
    此时 Python 包装对象已失效，不再转发。
    """
    if sip.isdeleted(animation):
        return
    if new_state == QAbstractAnimation.State.Running and old_state == QAbstractAnimation.State.Stopped:
        animation.animation_started.emit(animation)
    elif new_state == QAbstractAnimation.State.Stopped:
        animation.animation_ended.emit(animation)


class PropertyValuesHolder:
    """单个属性的关键帧集合

    只给一个值时表示“结束值”，起始值在动画器构建时取目标当前值。
    """

    def __init__(
        self,
        property_name: str,
        values: List[Any],
        evaluator: Callable[[float, Any, Any], Any],
        coerce: Callable[[Any], Any],
    ):
        if not values:
            raise AnimationConfigError("至少需要一个关键帧", property_name)
        self.property_name = property_name
        self.evaluator = evaluator
        self._coerce = coerce
        self.values = [coerce(v) for v in values]

    @classmethod
    def of_float(cls, property_name: str, *values: float) -> "PropertyValuesHolder":
        """创建浮点属性的关键帧集合"""
        return cls(property_name, list(values), evaluate_float, float)

    @classmethod
    def of_argb(cls, property_name: str, *values: Any) -> "PropertyValuesHolder":
        """创建颜色属性的关键帧集合"""
        return cls(property_name, list(values), evaluate_color, to_color)

    @property
    def start_value(self):
        return self.values[0]

    @property
    def end_value(self):
        return self.values[-1]

    def setup_start_value(self, target: QObject):
        """校验目标属性存在，并在需要时补全起始值"""
        current = target.property(self.property_name)
        if current is None:
            raise AnimationConfigError(
                f"目标对象 {type(target).__name__} 不存在属性 '{self.property_name}'",
                self.property_name
            )
        if len(self.values) == 1:
            self.values.insert(0, self._coerce(current))

    def value_at(self, fraction: float):
        """按进度计算当前值（多关键帧时均匀分段）"""
        segments = len(self.values) - 1
        index = max(0, min(int(fraction * segments), segments - 1))
        local_fraction = fraction * segments - index
        return self.evaluator(local_fraction, self.values[index], self.values[index + 1])


class PropertyAnimator(QVariantAnimation):
    """按属性名驱动的动画器

    内部的 QVariantAnimation 以线性方式从 0 跑到 (重复次数 + 1)，
    整数部分为当前迭代序号，小数部分为迭代内进度。
    迭代内进度经插值曲线映射后，再交给各属性的求值器。
    """

    # 从 Stopped 进入 Running / 进入 Stopped 时发出，参数为动画本身
    animation_started = pyqtSignal(object)
    animation_ended = pyqtSignal(object)

    def __init__(self, target: QObject, *holders: PropertyValuesHolder, parent: Optional[QObject] = None):
        super().__init__(parent)
        if not holders:
            raise AnimationConfigError("至少需要一个属性", "holders")

        self._target = target
        self._holders = list(holders)
        for holder in self._holders:
            holder.setup_start_value(target)

        self._iteration_duration = AnimationDefaults.DURATION_MS
        self._repeat_count = 0
        self._repeat_mode = RepeatMode.RESTART
        self._interpolator = QEasingCurve(AnimationDefaults.EASING)
        self._update_timing()

        self.valueChanged.connect(self._on_elapsed_changed)
        self.stateChanged.connect(self._on_state_changed)

    # ==================== 构建方法 ====================

    @classmethod
    def of_float(cls, target: QObject, property_name: str, *values: float,
                 parent: Optional[QObject] = None) -> "PropertyAnimator":
        """创建浮点属性动画"""
        return cls(target, PropertyValuesHolder.of_float(property_name, *values), parent=parent)

    @classmethod
    def of_argb(cls, target: QObject, property_name: str, *values: Any,
                parent: Optional[QObject] = None) -> "PropertyAnimator":
        """创建颜色属性动画（ARGB通道插值）"""
        return cls(target, PropertyValuesHolder.of_argb(property_name, *values), parent=parent)

    @classmethod
    def of_property_values_holder(cls, target: QObject, *holders: PropertyValuesHolder,
                                  parent: Optional[QObject] = None) -> "PropertyAnimator":
        """创建同时驱动多个属性的动画"""
        return cls(target, *holders, parent=parent)

    # ==================== 参数 ====================

    def target(self) -> QObject:
        return self._target

    def holders(self) -> List[PropertyValuesHolder]:
        return list(self._holders)

    def iteration_duration(self) -> int:
        """单次迭代时长（毫秒）"""
        return self._iteration_duration

    def set_duration(self, duration_ms: int):
        """设置单次迭代时长（毫秒）"""
        if duration_ms < 0:
            raise AnimationConfigError(f"时长不能为负数: {duration_ms}", "duration")
        self._iteration_duration = int(duration_ms)
        self._update_timing()

    def repeat_count(self) -> int:
        return self._repeat_count

    def set_repeat_count(self, count: int):
        """设置额外重复次数（0表示只播放一次）"""
        if count < 0:
            raise AnimationConfigError(f"重复次数不能为负数: {count}", "repeat_count")
        self._repeat_count = int(count)
        self._update_timing()

    def repeat_mode(self) -> RepeatMode:
        return self._repeat_mode

    def set_repeat_mode(self, mode: RepeatMode):
        self._repeat_mode = mode

    def interpolator(self) -> QEasingCurve:
        return self._interpolator

    def set_interpolator(self, curve):
        """设置插值曲线

        Args:
            curve: QEasingCurve 或 QEasingCurve.Type
        """
        self._interpolator = QEasingCurve(curve)

    def _update_timing(self):
        iterations = self._repeat_count + 1
        self.setStartValue(0.0)
        self.setEndValue(float(iterations))
        self.setDuration(self._iteration_duration * iterations)

    # ==================== 帧更新 ====================

    def animate_fraction(self, fraction: float):
        """将迭代内进度应用到所有属性"""
        progress = self._interpolator.valueForProgress(fraction)
        for holder in self._holders:
            self._target.setProperty(holder.property_name, holder.value_at(progress))

    def _on_elapsed_changed(self, elapsed):
        iterations = self._repeat_count + 1
        elapsed = float(elapsed)
        if elapsed >= iterations:
            iteration, fraction = iterations - 1, 1.0
        else:
            iteration = int(elapsed)
            fraction = elapsed - iteration

        if self._repeat_mode is RepeatMode.REVERSE and iteration % 2 == 1:
            fraction = 1.0 - fraction
        self.animate_fraction(fraction)

    def _on_state_changed(self, new_state, old_state):
        if sip.isdeleted(self):
            return
        if new_state == QAbstractAnimation.State.Running and old_state == QAbstractAnimation.State.Stopped:
            # 起始值在启动时立即生效，不等待第一帧
            self._on_elapsed_changed(self.currentValue() or 0.0)
            logger.debug(
                "动画启动: %s %s, 时长=%dms x %d",
                type(self._target).__name__,
                [h.property_name for h in self._holders],
                self._iteration_duration, self._repeat_count + 1
            )
        emit_lifecycle(self, new_state, old_state)
