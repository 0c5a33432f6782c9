"""
属性动画模块 - 按属性名驱动的动画、生命周期钩子与并行汇合
"""

from .animators import (
    PropertyAnimator,
    PropertyValuesHolder,
    RepeatMode,
    evaluate_argb,
    evaluate_color,
    evaluate_float,
    to_color,
)
from .join import AnimationJoin
from .listeners import add_animation_listener, disable_during_animation

__all__ = [
    'AnimationJoin',
    'PropertyAnimator',
    'PropertyValuesHolder',
    'RepeatMode',
    'add_animation_listener',
    'disable_during_animation',
    'evaluate_argb',
    'evaluate_color',
    'evaluate_float',
    'to_color',
]
