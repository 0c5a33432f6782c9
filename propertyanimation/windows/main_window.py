"""
主窗口 - 动画演示

功能：
- 顶部六个按钮：旋转、平移、缩放、淡出、变色、流星雨
- 下方星空容器承载主星星和流星
- 单属性动画播放期间禁用对应按钮
- 窗口几何信息在启动时恢复、关闭时保存
"""

import logging
from typing import Optional

from PyQt6.QtCore import QAbstractAnimation
from PyQt6.QtWidgets import QHBoxLayout, QMainWindow, QPushButton, QVBoxLayout, QWidget

from propertyanimation.animation.animators import PropertyAnimator
from propertyanimation.animation.listeners import disable_during_animation
from propertyanimation.components.star_field import StarField
from propertyanimation.effects.shower import ParticleShowerController
from propertyanimation.effects.star_effects import colorizer, fader, rotater, scaler, translater
from propertyanimation.utils.config_manager import ConfigManager
from propertyanimation.utils.constants import UIConstants
from propertyanimation.utils.dpi_utils import dp
from propertyanimation.utils.error_handler import handle_errors

logger = logging.getLogger(__name__)


BUTTON_STYLE = """
    QPushButton {
        background-color: #3F51B5;
        color: #FFFFFF;
        border: none;
        border-radius: 4px;
        padding: 6px 12px;
        font-size: 13px;
    }
    QPushButton:hover {
        background-color: #5C6BC0;
    }
    QPushButton:disabled {
        background-color: #9E9E9E;
        color: #E0E0E0;
    }
"""


class MainWindow(QMainWindow):
    """主窗口

    按钮与动画一一对应，流星雨按钮不禁用（每次点击生成一颗独立的星星）。
    """

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        super().__init__()
        self.setWindowTitle("属性动画演示")
        self.setMinimumSize(dp(UIConstants.MIN_WINDOW_WIDTH), dp(UIConstants.MIN_WINDOW_HEIGHT))

        self.config_manager = config_manager or ConfigManager()

        self.central_widget = QWidget()
        self.central_widget.setObjectName("centralWidget")
        self.setCentralWidget(self.central_widget)

        main_layout = QVBoxLayout(self.central_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self._create_buttons(main_layout)

        self.star_field = StarField()
        main_layout.addWidget(self.star_field, stretch=1)

        self.shower_controller = ParticleShowerController(self.star_field, parent=self)

        self._restore_geometry()

    def _create_buttons(self, main_layout: QVBoxLayout):
        """创建按钮栏"""
        button_bar = QWidget()
        button_bar.setObjectName("buttonBar")
        button_bar.setStyleSheet(BUTTON_STYLE)

        layout = QHBoxLayout(button_bar)
        layout.setContentsMargins(
            dp(UIConstants.MARGIN_MD), dp(UIConstants.MARGIN_SM),
            dp(UIConstants.MARGIN_MD), dp(UIConstants.MARGIN_SM)
        )
        layout.setSpacing(dp(UIConstants.SPACING_SM))

        self.rotate_button = self._make_button("旋转", "rotateButton", self.on_rotate_clicked)
        self.translate_button = self._make_button("平移", "translateButton", self.on_translate_clicked)
        self.scale_button = self._make_button("缩放", "scaleButton", self.on_scale_clicked)
        self.fade_button = self._make_button("淡出", "fadeButton", self.on_fade_clicked)
        self.colorize_button = self._make_button("变色", "colorizeButton", self.on_colorize_clicked)
        self.shower_button = self._make_button("流星雨", "showerButton", self.on_shower_clicked)

        for button in (
            self.rotate_button, self.translate_button, self.scale_button,
            self.fade_button, self.colorize_button, self.shower_button,
        ):
            layout.addWidget(button)

        main_layout.addWidget(button_bar)

    def _make_button(self, text: str, object_name: str, slot) -> QPushButton:
        button = QPushButton(text)
        button.setObjectName(object_name)
        button.setFixedHeight(dp(UIConstants.BUTTON_HEIGHT_MD))
        button.clicked.connect(lambda _checked=False: slot())
        return button

    def _run_with_button(self, animator: PropertyAnimator, button: QPushButton):
        """动画期间禁用按钮并启动动画"""
        disable_during_animation(animator, button)
        animator.start(QAbstractAnimation.DeletionPolicy.DeleteWhenStopped)

    # ==================== 按钮回调 ====================

    @handle_errors("旋转")
    def on_rotate_clicked(self):
        self._run_with_button(rotater(self.star_field.star), self.rotate_button)

    @handle_errors("平移")
    def on_translate_clicked(self):
        self._run_with_button(translater(self.star_field.star), self.translate_button)

    @handle_errors("缩放")
    def on_scale_clicked(self):
        self._run_with_button(scaler(self.star_field.star), self.scale_button)

    @handle_errors("淡出")
    def on_fade_clicked(self):
        self._run_with_button(fader(self.star_field.star), self.fade_button)

    @handle_errors("变色")
    def on_colorize_clicked(self):
        self._run_with_button(colorizer(self.star_field), self.colorize_button)

    @handle_errors("流星雨")
    def on_shower_clicked(self):
        self.shower_controller.spawn()

    # ==================== 窗口几何 ====================

    def _restore_geometry(self):
        geometry = self.config_manager.get_window_geometry()
        if geometry is None or not self.restoreGeometry(geometry):
            self.resize(dp(UIConstants.WINDOW_WIDTH), dp(UIConstants.WINDOW_HEIGHT))

    def closeEvent(self, event):
        """关闭时保存窗口几何信息"""
        self.config_manager.set_window_geometry(self.saveGeometry())
        logger.info("窗口关闭，已保存几何信息")
        super().closeEvent(event)
