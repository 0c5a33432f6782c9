"""Tests for animation lifecycle hooks."""
import gc
import sys

import pytest
from PyQt6 import sip
from PyQt6.QtWidgets import QPushButton

from conftest import finish
from propertyanimation.animation.animators import PropertyAnimator
from propertyanimation.animation.listeners import add_animation_listener, disable_during_animation
from propertyanimation.components.star_item import StarItem


@pytest.fixture
def button(qapp):
    btn = QPushButton("go")
    btn.setObjectName("goButton")
    yield btn
    btn.deleteLater()


@pytest.fixture
def animator(star):
    return PropertyAnimator.of_float(star, "rotation", -360.0, 0.0, parent=star)


class TestAddAnimationListener:

    def test_start_and_end_fire_once(self, animator):
        events = []
        add_animation_listener(
            animator,
            on_start=lambda a: events.append(("start", a)),
            on_end=lambda a: events.append(("end", a)),
        )
        finish(animator)
        assert events == [("start", animator), ("end", animator)]

    def test_end_fires_on_early_stop(self, animator):
        ended = []
        add_animation_listener(animator, on_end=ended.append)
        animator.start()
        animator.setCurrentTime(100)
        assert ended == []
        animator.stop()
        assert ended == [animator]

    def test_callbacks_are_optional(self, animator):
        add_animation_listener(animator)
        finish(animator)

    def test_no_callbacks_when_destroyed_while_running(self, qapp, monkeypatch):
        slot_errors = []
        monkeypatch.setattr(sys, "excepthook", lambda *args: slot_errors.append(args))
        host = StarItem(100, 100)
        animator = PropertyAnimator.of_float(host, "rotation", -360.0, 0.0, parent=host)
        events = []
        add_animation_listener(
            animator,
            on_start=lambda a: events.append("start"),
            on_end=lambda a: events.append("end"),
        )
        animator.start()

        sip.delete(host)
        gc.collect()

        assert sip.isdeleted(animator)
        assert events == ["start"]
        assert slot_errors == []


class TestDisableDuringAnimation:

    def test_disables_on_start_and_enables_on_end(self, animator, button):
        disable_during_animation(animator, button)
        assert button.isEnabled()

        animator.start()
        assert not button.isEnabled()

        animator.setCurrentTime(animator.totalDuration() // 2)
        assert not button.isEnabled()

        animator.setCurrentTime(animator.totalDuration())
        assert button.isEnabled()

    def test_early_stop_never_leaves_control_disabled(self, animator, button):
        disable_during_animation(animator, button)
        animator.start()
        animator.stop()
        assert button.isEnabled()

    def test_hook_is_independent_of_property(self, star, button):
        fade = PropertyAnimator.of_float(star, "alpha", 1.0, 0.0, parent=star)
        disable_during_animation(fade, button)
        fade.start()
        assert not button.isEnabled()
        finish(fade)
        assert button.isEnabled()
