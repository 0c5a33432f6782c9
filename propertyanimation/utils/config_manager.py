"""
配置管理工具

用于保存和加载应用配置（窗口几何信息、日志级别）
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PyQt6.QtCore import QSettings

logger = logging.getLogger(__name__)


class ConfigManager:
    """应用配置管理器

    默认使用QSettings的本地格式保存；传入path时改用INI文件。
    """

    VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    def __init__(
        self,
        organization: str = "PropertyAnimation",
        application: str = "StarDemo",
        path: Optional[Union[str, Path]] = None,
    ):
        """初始化配置管理器

        Args:
            organization: 组织名称
            application: 应用名称
            path: INI文件路径（可选，主要用于测试和便携部署）
        """
        if path is not None:
            self.settings = QSettings(str(path), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings(organization, application)

    def get_window_geometry(self):
        """获取窗口几何信息

        Returns:
            QByteArray | None: 窗口几何信息
        """
        return self.settings.value("window/geometry", None)

    def set_window_geometry(self, geometry):
        """保存窗口几何信息

        Args:
            geometry: QByteArray 窗口几何信息
        """
        self.settings.setValue("window/geometry", geometry)
        self.settings.sync()

    def get_log_level(self) -> str:
        """获取日志级别

        Returns:
            str: 日志级别名称，默认为 'INFO'；无效值回退为 'INFO'
        """
        level = str(self.settings.value("logging/level", "INFO", type=str)).upper()
        if level not in self.VALID_LOG_LEVELS:
            logger.warning("[ConfigManager] 无效的日志级别 '%s'，使用 INFO", level)
            return "INFO"
        return level

    def set_log_level(self, level: str):
        """保存日志级别

        Args:
            level: 日志级别名称（DEBUG/INFO/WARNING/ERROR/CRITICAL）
        """
        level = level.upper()
        if level not in self.VALID_LOG_LEVELS:
            raise ValueError(f"无效的日志级别: {level}")
        logger.info("[ConfigManager] 保存日志级别: '%s'", level)
        self.settings.setValue("logging/level", level)
        self.settings.sync()
