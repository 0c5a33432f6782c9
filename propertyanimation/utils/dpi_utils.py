"""
DPI感知工具

按主屏幕逻辑DPI缩放像素尺寸
"""

import logging
from typing import Optional, Union

from PyQt6.QtGui import QScreen
from PyQt6.QtWidgets import QApplication

logger = logging.getLogger(__name__)


class DPIHelper:
    """DPI感知助手类

    首次取值时读取主屏幕信息；QApplication 尚未创建时使用标准DPI。
    """

    # 标准DPI（Windows默认）
    STANDARD_DPI = 96

    def __init__(self):
        self._screen: Optional[QScreen] = None
        self._dpi: float = self.STANDARD_DPI
        self._scale_factor: float = 1.0
        self._initialized = False

    def update_screen_info(self):
        """更新屏幕信息"""
        app = QApplication.instance()
        if not app:
            logger.warning("QApplication未初始化，使用默认DPI")
            return

        self._screen = app.primaryScreen()
        if self._screen:
            self._dpi = self._screen.logicalDotsPerInch()
            self._scale_factor = self._dpi / self.STANDARD_DPI
            logger.info("屏幕信息更新 - DPI: %.1f, 缩放: %.2f", self._dpi, self._scale_factor)
        self._initialized = True

    @property
    def scale_factor(self) -> float:
        """获取缩放因子"""
        if not self._initialized:
            self.update_screen_info()
        return self._scale_factor

    def dp(self, pixels: Union[int, float]) -> int:
        """将像素值转换为DPI感知的设备像素"""
        return int(round(pixels * self.scale_factor))


# 全局单例
dpi_helper = DPIHelper()


def dp(pixels: Union[int, float]) -> int:
    """便捷函数：DPI感知像素"""
    return dpi_helper.dp(pixels)
