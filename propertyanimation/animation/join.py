"""
并行动画组

多个轨道同时启动，全部完成后才算整体完成（只发出一次 finished）。
"""

from typing import List, Optional

from PyQt6.QtCore import QObject, QParallelAnimationGroup, pyqtSignal

from propertyanimation.animation.animators import PropertyAnimator, emit_lifecycle
from propertyanimation.exceptions import AnimationConfigError


class AnimationJoin(QParallelAnimationGroup):
    """并行汇合动画组

    统一时长对之后加入的轨道同样生效，与调用顺序无关。

    使用方法：
        join = AnimationJoin(parent=star)
        join.set_duration(1200)
        join.play_together(mover, rotator)
        join.animation_ended.connect(on_done)
        join.start()
    """

    animation_started = pyqtSignal(object)
    animation_ended = pyqtSignal(object)

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._tracks: List[PropertyAnimator] = []
        self._duration: Optional[int] = None
        self.stateChanged.connect(self._on_state_changed)

    def play_together(self, *tracks: PropertyAnimator):
        """添加同时播放的轨道"""
        for track in tracks:
            if self._duration is not None:
                track.set_duration(self._duration)
            self._tracks.append(track)
            self.addAnimation(track)

    def tracks(self) -> List[PropertyAnimator]:
        return list(self._tracks)

    def duration_override(self) -> Optional[int]:
        """统一的单次时长，未设置时为 None（取最长轨道）"""
        return self._duration

    def set_duration(self, duration_ms: int):
        """为所有轨道（包括之后加入的）设置统一的单次时长（毫秒）"""
        if duration_ms < 0:
            raise AnimationConfigError(f"时长不能为负数: {duration_ms}", "duration")
        self._duration = int(duration_ms)
        for track in self._tracks:
            track.set_duration(self._duration)

    def _on_state_changed(self, new_state, old_state):
        emit_lifecycle(self, new_state, old_state)
