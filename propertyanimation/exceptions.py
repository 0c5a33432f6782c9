"""
统一异常体系

动画构建与执行过程中的异常定义。
UI入口通过 utils.error_handler.handle_errors 统一捕获并记录。
"""

from typing import Optional


class AnimationError(Exception):
    """
    动画基础异常类

    Attributes:
        message: 错误消息（面向用户）
        detail: 详细错误信息（可选，用于日志）
    """

    def __init__(self, message: str, detail: Optional[str] = None):
        self.message = message
        self.detail = detail or message
        super().__init__(self.message)


class AnimationConfigError(AnimationError, ValueError):
    """动画参数错误（时长、重复次数、关键帧、属性名）"""

    def __init__(self, message: str, parameter: Optional[str] = None):
        detail = f"参数错误: {parameter} - {message}" if parameter else message
        super().__init__(message=message, detail=detail)
        self.parameter = parameter
