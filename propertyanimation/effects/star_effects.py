"""
单属性动画

旋转、平移、缩放、淡出、背景变色五种演示动画。
每个函数返回已配置但未启动的 PropertyAnimator，动画器挂在目标对象下。
"""

from propertyanimation.animation.animators import PropertyAnimator, PropertyValuesHolder, RepeatMode
from propertyanimation.components.star_field import StarField
from propertyanimation.components.star_item import StarItem
from propertyanimation.utils.constants import (
    ColorizeConfig,
    FadeConfig,
    RotateConfig,
    ScaleConfig,
    TranslateConfig,
)


def rotater(star: StarItem) -> PropertyAnimator:
    """整圈旋转：-360° -> 0°"""
    animator = PropertyAnimator.of_float(
        star, "rotation", RotateConfig.FROM_DEGREES, RotateConfig.TO_DEGREES, parent=star
    )
    animator.set_duration(RotateConfig.DURATION_MS)
    return animator


def translater(star: StarItem) -> PropertyAnimator:
    """向右平移后返回原位"""
    current = star.translation_x
    animator = PropertyAnimator.of_float(
        star, "translation_x", current, current + TranslateConfig.DISTANCE_PX, parent=star
    )
    animator.set_repeat_count(TranslateConfig.REPEAT_COUNT)
    animator.set_repeat_mode(RepeatMode.REVERSE)
    return animator


def scaler(star: StarItem) -> PropertyAnimator:
    """x/y同时放大后还原，避免拉伸变形"""
    scale_x = PropertyValuesHolder.of_float("scale_x", ScaleConfig.FROM_SCALE, ScaleConfig.TO_SCALE)
    scale_y = PropertyValuesHolder.of_float("scale_y", ScaleConfig.FROM_SCALE, ScaleConfig.TO_SCALE)
    animator = PropertyAnimator.of_property_values_holder(star, scale_x, scale_y, parent=star)
    animator.set_repeat_count(ScaleConfig.REPEAT_COUNT)
    animator.set_repeat_mode(RepeatMode.REVERSE)
    return animator


def fader(star: StarItem) -> PropertyAnimator:
    """淡出后恢复不透明"""
    animator = PropertyAnimator.of_float(
        star, "alpha", FadeConfig.FROM_ALPHA, FadeConfig.TO_ALPHA, parent=star
    )
    animator.set_repeat_count(FadeConfig.REPEAT_COUNT)
    animator.set_repeat_mode(RepeatMode.REVERSE)
    return animator


def colorizer(field: StarField) -> PropertyAnimator:
    """背景色 黑 -> 红 -> 黑（按ARGB通道插值）"""
    animator = PropertyAnimator.of_argb(
        field, "background_color", ColorizeConfig.FROM_COLOR, ColorizeConfig.TO_COLOR, parent=field
    )
    animator.set_duration(ColorizeConfig.DURATION_MS)
    animator.set_repeat_count(ColorizeConfig.REPEAT_COUNT)
    animator.set_repeat_mode(RepeatMode.REVERSE)
    return animator
