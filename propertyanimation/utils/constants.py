"""
常量定义模块

集中管理项目中使用的常量，避免魔术数字散落在代码各处。

模块包含：
- AnimationDefaults: 属性动画默认参数
- RotateConfig / TranslateConfig / ScaleConfig / FadeConfig / ColorizeConfig:
  五个单属性动画的参数表
- ShowerConfig: 流星雨随机参数范围
- StarConfig: 星星外观
- UIConstants: UI布局相关常量
"""

from PyQt6.QtCore import QEasingCurve


class AnimationDefaults:
    """属性动画默认参数"""

    # 单次迭代默认时长（毫秒）
    DURATION_MS = 300

    # 默认插值曲线：先加速后减速
    EASING = QEasingCurve.Type.InOutSine


class RotateConfig:
    """旋转动画：整圈旋转回到原位"""

    FROM_DEGREES = -360.0
    TO_DEGREES = 0.0
    DURATION_MS = 1000


class TranslateConfig:
    """平移动画：向右移动后原路返回"""

    DISTANCE_PX = 200.0
    REPEAT_COUNT = 1


class ScaleConfig:
    """缩放动画：x/y同时放大后还原"""

    FROM_SCALE = 1.0
    TO_SCALE = 4.0
    REPEAT_COUNT = 1


class FadeConfig:
    """淡出动画：完全透明后恢复"""

    FROM_ALPHA = 1.0
    TO_ALPHA = 0.0
    REPEAT_COUNT = 1


class ColorizeConfig:
    """背景变色动画：黑 -> 红 -> 黑"""

    FROM_COLOR = "#FF000000"
    TO_COLOR = "#FFFF0000"
    DURATION_MS = 500
    REPEAT_COUNT = 1


class ShowerConfig:
    """流星雨配置

    每颗星星的缩放、旋转目标、下落时长独立随机。
    """

    # 缩放范围 [0.1, 1.6)
    SCALE_MIN = 0.1
    SCALE_RANGE = 1.5

    # 旋转目标范围 [0, 1080)
    ROTATION_MAX_DEGREES = 1080.0

    # 下落时长范围 [500, 2000)
    DURATION_MIN_MS = 500
    DURATION_RANGE_MS = 1500

    # 下落：加速（模拟重力）；旋转：匀速
    FALL_EASING = QEasingCurve.Type.InQuad
    ROTATION_EASING = QEasingCurve.Type.Linear


class StarConfig:
    """星星外观"""

    BASE_SIZE = 96          # 默认宽高（逻辑像素，绘制前经过dp缩放）
    COLOR = "#FFD54F"
    OUTLINE_COLOR = "#FFA000"
    POINTS = 5
    INNER_RADIUS_RATIO = 0.45  # 内角半径 / 外角半径


class UIConstants:
    """UI布局相关常量"""

    # 容器边距
    MARGIN_SM = 8
    MARGIN_MD = 12

    # 组件间距
    SPACING_SM = 8

    # 按钮尺寸
    BUTTON_HEIGHT_MD = 36

    # 窗口
    WINDOW_WIDTH = 720
    WINDOW_HEIGHT = 960
    MIN_WINDOW_WIDTH = 480
    MIN_WINDOW_HEIGHT = 600
