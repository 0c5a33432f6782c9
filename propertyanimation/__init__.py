"""
属性动画演示

单个星星的旋转、平移、缩放、淡出、背景变色，以及流星雨特效。
"""

__version__ = "1.0.0"
