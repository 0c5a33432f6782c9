"""
主程序入口

启动属性动画演示窗口
"""

import sys
import logging
import traceback
import faulthandler
from pathlib import Path
from typing import Optional

from PyQt6.QtWidgets import QApplication, QStyleFactory

from propertyanimation.utils.config_manager import ConfigManager
from propertyanimation.windows.main_window import MainWindow

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def global_exception_handler(exc_type, exc_value, exc_traceback):
    """全局异常处理器 - 捕获未处理的异常并记录"""
    logger = logging.getLogger(__name__)

    # 忽略KeyboardInterrupt
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    error_msg = ''.join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    logger.critical(f"未捕获的异常:\n{error_msg}")

    sys.__excepthook__(exc_type, exc_value, exc_traceback)


def setup_logging(level: str = "INFO", log_file: Optional[Path] = None):
    """配置日志系统 - 同时输出到控制台和文件

    Args:
        level: 日志级别名称
        log_file: 日志文件路径，默认为当前目录下的 propertyanimation_debug.log
    """
    if log_file is None:
        log_file = Path.cwd() / "propertyanimation_debug.log"

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file, encoding='utf-8', mode='a')
        ]
    )
    return log_file


def main():
    """主函数"""
    faulthandler.enable(file=sys.stderr, all_threads=True)

    # 创建应用（ConfigManager依赖QSettings的组织名，DPI计算依赖QApplication）
    app = QApplication(sys.argv)
    app.setApplicationName("StarDemo")
    app.setOrganizationName("PropertyAnimation")
    app.setStyle(QStyleFactory.create('Fusion'))

    config_manager = ConfigManager()
    log_file = setup_logging(config_manager.get_log_level())
    logger = logging.getLogger(__name__)

    sys.excepthook = global_exception_handler

    logger.info("=" * 60)
    logger.info("属性动画演示启动")
    logger.info("Python版本: %s", sys.version)
    logger.info("日志文件: %s", log_file)
    logger.info("=" * 60)

    window = MainWindow(config_manager)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
