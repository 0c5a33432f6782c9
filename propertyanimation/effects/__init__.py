"""
特效模块 - 单属性演示动画与流星雨
"""

from .shower import Particle, ParticleShowerController
from .star_effects import colorizer, fader, rotater, scaler, translater

__all__ = [
    'colorizer',
    'fader',
    'Particle',
    'ParticleShowerController',
    'rotater',
    'scaler',
    'translater',
]
