"""
工具函数模块
"""

from .config_manager import ConfigManager
from .constants import (
    AnimationDefaults,
    ColorizeConfig,
    FadeConfig,
    RotateConfig,
    ScaleConfig,
    ShowerConfig,
    StarConfig,
    TranslateConfig,
    UIConstants,
)
from .dpi_utils import dp, dpi_helper
from .error_handler import handle_errors

__all__ = [
    'AnimationDefaults',
    'ColorizeConfig',
    'ConfigManager',
    'dp',
    'dpi_helper',
    'FadeConfig',
    'handle_errors',
    'RotateConfig',
    'ScaleConfig',
    'ShowerConfig',
    'StarConfig',
    'TranslateConfig',
    'UIConstants',
]
