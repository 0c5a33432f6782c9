"""Tests for the five single-property demo animations."""
import pytest

from conftest import finish
from propertyanimation.animation.animators import RepeatMode
from propertyanimation.effects.star_effects import colorizer, fader, rotater, scaler, translater


def _holder_values(animator):
    return {h.property_name: (h.start_value, h.end_value) for h in animator.holders()}


def test_rotater(star_field):
    star = star_field.star
    animator = rotater(star)
    assert _holder_values(animator) == {"rotation": (-360.0, 0.0)}
    assert animator.iteration_duration() == 1000
    assert animator.repeat_count() == 0
    assert animator.parent() is star

    animator.start()
    assert star.rotation == pytest.approx(-360.0)
    finish(animator)
    assert star.rotation == pytest.approx(0.0)


def test_translater_moves_right_and_back(star_field):
    star = star_field.star
    star.translation_x = 15.0
    animator = translater(star)
    assert _holder_values(animator) == {"translation_x": (15.0, 215.0)}
    assert animator.repeat_count() == 1
    assert animator.repeat_mode() is RepeatMode.REVERSE

    animator.start()
    animator.setCurrentTime(animator.iteration_duration())
    assert star.translation_x == pytest.approx(215.0)
    finish(animator)
    assert star.translation_x == pytest.approx(15.0)


def test_scaler_scales_both_axes(star_field):
    star = star_field.star
    animator = scaler(star)
    assert _holder_values(animator) == {"scale_x": (1.0, 4.0), "scale_y": (1.0, 4.0)}
    assert animator.repeat_count() == 1
    assert animator.repeat_mode() is RepeatMode.REVERSE

    animator.start()
    animator.setCurrentTime(animator.iteration_duration())
    assert star.scale_x == pytest.approx(4.0)
    assert star.scale_y == pytest.approx(4.0)
    finish(animator)
    assert star.scale_x == pytest.approx(1.0)
    assert star.scale_y == pytest.approx(1.0)


def test_fader_returns_to_opaque(star_field):
    star = star_field.star
    animator = fader(star)
    assert _holder_values(animator) == {"alpha": (1.0, 0.0)}
    assert animator.iteration_duration() == 300
    assert animator.repeat_mode() is RepeatMode.REVERSE

    animator.start()
    animator.setCurrentTime(300)
    assert star.alpha == pytest.approx(0.0)
    finish(animator)
    assert star.alpha == pytest.approx(1.0)


def test_colorizer_black_to_red_and_back(star_field):
    animator = colorizer(star_field)
    (start, end), = _holder_values(animator).values()
    assert start.rgba() == 0xFF000000
    assert end.rgba() == 0xFFFF0000
    assert animator.iteration_duration() == 500
    assert animator.repeat_count() == 1
    assert animator.totalDuration() == 1000
    assert animator.parent() is star_field

    animator.start()
    animator.setCurrentTime(500)
    assert star_field.background_color.rgba() == 0xFFFF0000
    finish(animator)
    assert star_field.background_color.rgba() == 0xFF000000
