"""
动画生命周期钩子

把“开始时做什么 / 结束时做什么”挂到 PropertyAnimator 或 AnimationJoin 上，
与具体驱动哪个属性无关。
"""

import logging
from typing import Callable, Optional

from PyQt6.QtCore import QAbstractAnimation
from PyQt6.QtWidgets import QWidget

logger = logging.getLogger(__name__)

AnimationCallback = Callable[[QAbstractAnimation], None]


def add_animation_listener(
    animation: QAbstractAnimation,
    on_start: Optional[AnimationCallback] = None,
    on_end: Optional[AnimationCallback] = None,
):
    """注册开始/结束回调

    - on_start: 从 Stopped 进入 Running 时触发
    - on_end: 进入 Stopped 时触发（自然结束或被提前停止）

    动画随宿主一起被销毁时不会触发任何回调。

    Args:
        animation: 带 animation_started / animation_ended 信号的动画
        on_start: 开始回调，参数为动画本身
        on_end: 结束回调，参数为动画本身
    """
    if on_start:
        animation.animation_started.connect(on_start)
    if on_end:
        animation.animation_ended.connect(on_end)


def disable_during_animation(animation: QAbstractAnimation, control: QWidget):
    """动画期间禁用控件，结束后恢复

    用于防止按钮在动画播放中被重复点击。

    Example:
        animator = rotater(star)
        disable_during_animation(animator, rotate_button)
        animator.start()
    """
    def _disable(_animation):
        control.setEnabled(False)

    def _enable(_animation):
        control.setEnabled(True)
        logger.debug("动画结束，恢复控件: %s", control.objectName())

    add_animation_listener(animation, on_start=_disable, on_end=_enable)
