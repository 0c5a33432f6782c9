"""Pytest fixtures for property animation tests."""
import itertools
import os

# 无显示环境下运行Qt
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication


class SequenceRandom:
    """按给定序列循环返回的确定性随机源"""

    def __init__(self, *values):
        self._values = itertools.cycle(values)
        self.calls = 0

    def random(self):
        self.calls += 1
        return next(self._values)


def finish(animation):
    """启动动画并直接跳到结尾（同步触发结束回调）"""
    if animation.state() != animation.State.Running:
        animation.start()
    animation.setCurrentTime(animation.totalDuration())


@pytest.fixture(scope="session")
def qapp():
    """Session-wide QApplication."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def star_field(qapp):
    """A 400x800 StarField with a 100px main star."""
    from propertyanimation.components.star_field import StarField
    field = StarField(star_size=100)
    field.resize(400, 800)
    yield field
    field.deleteLater()


@pytest.fixture
def star(qapp):
    """A standalone 100px star."""
    from propertyanimation.components.star_item import StarItem
    return StarItem(100, 100)


@pytest.fixture
def sequence_random():
    """Factory for deterministic random sources."""
    return SequenceRandom


@pytest.fixture
def config_manager(qapp, tmp_path):
    """ConfigManager backed by a temporary INI file."""
    from propertyanimation.utils.config_manager import ConfigManager
    return ConfigManager(path=tmp_path / "settings.ini")
