"""
组件模块 - 星星图元与星空容器
"""

from .star_item import StarItem, build_star_path
from .star_field import StarField

__all__ = ['StarField', 'StarItem', 'build_star_path']
