"""
星星图元

可动画的星星对象：平移、旋转、缩放、透明度均通过 pyqtProperty 暴露，
供 PropertyAnimator 按属性名驱动。本身不是控件，由 StarField 统一绘制。
"""

import math

from PyQt6.QtCore import QObject, QPointF, pyqtProperty, pyqtSignal
from PyQt6.QtGui import QColor, QPainterPath

from propertyanimation.utils.constants import StarConfig


def build_star_path(width: float, height: float, points: int = StarConfig.POINTS,
                    inner_ratio: float = StarConfig.INNER_RADIUS_RATIO) -> QPainterPath:
    """生成以原点为中心的星形路径"""
    outer_x = width / 2
    outer_y = height / 2
    path = QPainterPath()
    for i in range(points * 2):
        # 从正上方开始，外角与内角交替
        angle = -math.pi / 2 + i * math.pi / points
        ratio = 1.0 if i % 2 == 0 else inner_ratio
        point = QPointF(math.cos(angle) * outer_x * ratio, math.sin(angle) * outer_y * ratio)
        if i == 0:
            path.moveTo(point)
        else:
            path.lineTo(point)
    path.closeSubpath()
    return path


class StarItem(QObject):
    """星星图元

    旋转与缩放以星星中心为轴心。
    centered 为 True 时星星布局在容器中央，否则布局在容器左上角。
    """

    # 任一可动画属性变化时发出
    changed = pyqtSignal()

    def __init__(self, width: float, height: float, centered: bool = False,
                 color: str = StarConfig.COLOR, parent=None):
        super().__init__(parent)
        self.width = float(width)
        self.height = float(height)
        self.centered = centered
        self.color = QColor(color)
        self.outline_color = QColor(StarConfig.OUTLINE_COLOR)
        self.path = build_star_path(self.width, self.height)

        self._translation_x = 0.0
        self._translation_y = 0.0
        self._rotation = 0.0
        self._scale_x = 1.0
        self._scale_y = 1.0
        self._alpha = 1.0

    def _set(self, attr: str, value: float):
        value = float(value)
        if getattr(self, attr) != value:
            setattr(self, attr, value)
            self.changed.emit()

    def get_translation_x(self) -> float:
        return self._translation_x

    def set_translation_x(self, value: float):
        self._set("_translation_x", value)

    def get_translation_y(self) -> float:
        return self._translation_y

    def set_translation_y(self, value: float):
        self._set("_translation_y", value)

    def get_rotation(self) -> float:
        return self._rotation

    def set_rotation(self, value: float):
        self._set("_rotation", value)

    def get_scale_x(self) -> float:
        return self._scale_x

    def set_scale_x(self, value: float):
        self._set("_scale_x", value)

    def get_scale_y(self) -> float:
        return self._scale_y

    def set_scale_y(self, value: float):
        self._set("_scale_y", value)

    def get_alpha(self) -> float:
        return self._alpha

    def set_alpha(self, value: float):
        self._set("_alpha", value)

    # 使用pyqtProperty定义属性用于动画
    translation_x = pyqtProperty(float, get_translation_x, set_translation_x)
    translation_y = pyqtProperty(float, get_translation_y, set_translation_y)
    rotation = pyqtProperty(float, get_rotation, set_rotation)
    scale_x = pyqtProperty(float, get_scale_x, set_scale_x)
    scale_y = pyqtProperty(float, get_scale_y, set_scale_y)
    alpha = pyqtProperty(float, get_alpha, set_alpha)
