"""
错误处理装饰器 - 统一的异常处理

简化按钮回调中重复的 try-except 代码块

设计原则：
1. 不捕获系统异常（SystemExit、KeyboardInterrupt等）
2. 优先处理已知的动画异常（AnimationError及其子类）
3. 对于未知异常，记录详细日志便于调试
4. 提供灵活的错误展示选项
"""

from functools import wraps
from typing import Callable, Any, Tuple, Type
import logging

from propertyanimation.exceptions import AnimationError

logger = logging.getLogger(__name__)


# 不应被装饰器捕获的系统异常
_SYSTEM_EXCEPTIONS: Tuple[Type[BaseException], ...] = (
    SystemExit,
    KeyboardInterrupt,
    GeneratorExit,
)


def handle_errors(
    operation: str,
    show_message: bool = True,
    default_return: Any = None,
    log_level: int = logging.ERROR,
    reraise_unknown: bool = False
):
    """
    处理函数中的异常

    Args:
        operation: 操作名称（用于错误消息和日志）
        show_message: 是否显示错误消息框（默认True）
        default_return: 异常时的默认返回值（默认None）
        log_level: 日志级别（默认ERROR）
        reraise_unknown: 是否重新抛出未知异常（默认False）
                        设为True时，非AnimationError的异常会被重新抛出

    Example:
        @handle_errors("旋转")
        def on_rotate_clicked(self):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)

            except _SYSTEM_EXCEPTIONS:
                raise

            except Exception as e:
                is_known_error = isinstance(e, AnimationError)

                if is_known_error:
                    logger.log(log_level, "%s失败: %s", operation, e.detail)
                else:
                    # 未知异常，总是记录完整堆栈
                    logger.error(
                        "%s发生未知错误: %s (%s)",
                        operation, str(e), type(e).__name__,
                        exc_info=True
                    )

                if show_message:
                    parent = _get_parent_widget(args)
                    if parent is not None:
                        _show_error_message(parent, e, operation)

                if reraise_unknown and not is_known_error:
                    raise

                return default_return

        return wrapper
    return decorator


def _get_parent_widget(args: tuple):
    """尝试从参数中获取父窗口widget

    Args:
        args: 函数参数元组，通常第一个是self

    Returns:
        QWidget实例或None
    """
    if not args:
        return None

    from PyQt6.QtWidgets import QWidget
    if isinstance(args[0], QWidget):
        return args[0]
    return None


def _show_error_message(parent, exception: Exception, operation: str):
    """弹出警告框"""
    from PyQt6.QtWidgets import QMessageBox

    message = exception.message if isinstance(exception, AnimationError) else str(exception)
    QMessageBox.warning(parent, f"{operation}失败", message)
