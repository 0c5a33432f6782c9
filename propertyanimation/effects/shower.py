"""
流星雨特效

每次触发生成一颗临时星星：随机大小、随机水平位置，
同时播放下落（加速）与旋转（匀速）两条轨道，结束后从容器中移除。
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from PyQt6 import sip
from PyQt6.QtCore import QObject, pyqtSignal

from propertyanimation.animation.animators import PropertyAnimator
from propertyanimation.animation.join import AnimationJoin
from propertyanimation.components.star_field import StarField
from propertyanimation.components.star_item import StarItem
from propertyanimation.utils.constants import ShowerConfig

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Particle:
    """一颗下落中的星星及其随机参数"""
    item: StarItem
    scale: float
    start_x: float
    rotation_target: float
    duration_ms: int
    animation: AnimationJoin


class ParticleShowerController(QObject):
    """流星雨控制器

    随机源只需提供 random() -> [0, 1)，默认使用进程级的 random 模块；
    测试时可注入确定性的随机源。

    每颗星星在自身动画结束时被移除且只移除一次。
    星星以容器为 Qt 父对象，容器销毁时星星与动画一同销毁，不再触发移除。
    """

    # 生成 / 移除星星时发出，参数为 Particle
    particle_spawned = pyqtSignal(object)
    particle_removed = pyqtSignal(object)

    def __init__(
        self,
        container: StarField,
        star_size: Optional[Tuple[float, float]] = None,
        rng=None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._container = container
        self._star_size = star_size
        self._rng = rng if rng is not None else random
        self._active: List[Particle] = []

    def active_count(self) -> int:
        """仍在下落中的星星数量

        随容器一起销毁的星星不再计入。
        """
        self._active = [p for p in self._active if not sip.isdeleted(p.animation)]
        return len(self._active)

    def _base_size(self) -> Tuple[float, float]:
        if self._star_size is not None:
            return self._star_size
        template = self._container.star
        return template.width, template.height

    def spawn(self):
        """生成一颗下落的星星并启动动画"""
        container = self._container
        container_w = container.width()
        container_h = container.height()
        star_w, star_h = self._base_size()

        item = StarItem(star_w, star_h, parent=container)
        container.add_item(item)

        # 随机大小，x/y等比缩放
        scale = self._rng.random() * ShowerConfig.SCALE_RANGE + ShowerConfig.SCALE_MIN
        item.scale_x = scale
        item.scale_y = scale
        star_w *= scale
        star_h *= scale

        # 从左侧半出屏到右侧半出屏之间随机
        start_x = self._rng.random() * container_w - star_w / 2
        item.translation_x = start_x

        mover = PropertyAnimator.of_float(item, "translation_y", -star_h, container_h + star_h)
        mover.set_interpolator(ShowerConfig.FALL_EASING)

        rotation_target = self._rng.random() * ShowerConfig.ROTATION_MAX_DEGREES
        rotator = PropertyAnimator.of_float(item, "rotation", rotation_target)
        rotator.set_interpolator(ShowerConfig.ROTATION_EASING)

        duration = int(self._rng.random() * ShowerConfig.DURATION_RANGE_MS + ShowerConfig.DURATION_MIN_MS)

        join = AnimationJoin(parent=item)
        join.play_together(mover, rotator)
        join.set_duration(duration)

        particle = Particle(
            item=item,
            scale=scale,
            start_x=start_x,
            rotation_target=rotation_target,
            duration_ms=duration,
            animation=join,
        )
        join.animation_ended.connect(self._on_particle_ended)
        self._active.append(particle)

        logger.debug(
            "生成星星: scale=%.2f, x=%.1f, rotation=%.1f, duration=%dms",
            scale, start_x, rotation_target, duration
        )
        self.particle_spawned.emit(particle)
        join.start()

    def _on_particle_ended(self, animation: AnimationJoin):
        if sip.isdeleted(self):
            return
        for particle in self._active:
            if particle.animation is animation:
                self._remove(particle)
                return

    def _remove(self, particle: Particle):
        """动画结束后移除星星（只执行一次）"""
        if particle not in self._active:
            return
        self._active.remove(particle)

        if self._container.remove_item(particle.item):
            self.particle_removed.emit(particle)
            logger.debug("星星已移除，剩余 %d 颗", len(self._active))

        particle.item.deleteLater()
