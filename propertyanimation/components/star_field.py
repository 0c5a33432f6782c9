"""
星空容器

承载主星星和流星雨中的临时星星，负责绘制背景与全部星星。
背景色通过 pyqtProperty 暴露，可直接作为颜色动画的目标。
"""

import logging
from typing import List, Optional

from PyQt6.QtCore import QPointF, pyqtProperty
from PyQt6.QtGui import QColor, QPainter, QPen
from PyQt6.QtWidgets import QSizePolicy, QWidget

from propertyanimation.components.star_item import StarItem
from propertyanimation.utils.constants import ColorizeConfig, StarConfig
from propertyanimation.utils.dpi_utils import dp

logger = logging.getLogger(__name__)


class StarField(QWidget):
    """星空容器

    特性：
    - 主星星居中布局，其他星星以左上角为原点
    - 每个星星按 平移 -> 旋转 -> 缩放 -> 透明度 绘制
    - add_item / remove_item 维护子星星列表，重复移除为空操作
    - 星星应以本容器为 Qt 父对象，随容器一起销毁
    """

    def __init__(self, parent: Optional[QWidget] = None, star_size: Optional[int] = None):
        super().__init__(parent)
        self.setObjectName("starField")
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        self._items: List[StarItem] = []
        self._background_color = QColor(ColorizeConfig.FROM_COLOR)

        size = star_size if star_size is not None else dp(StarConfig.BASE_SIZE)
        self.star = StarItem(size, size, centered=True, parent=self)
        self.add_item(self.star)

    # ==================== 背景色 ====================

    def get_background_color(self) -> QColor:
        return QColor(self._background_color)

    def set_background_color(self, color: QColor):
        self._background_color = QColor(color)
        self.update()

    background_color = pyqtProperty(QColor, get_background_color, set_background_color)

    # ==================== 子星星管理 ====================

    def add_item(self, item: StarItem):
        """添加星星"""
        self._items.append(item)
        item.changed.connect(self.update)
        self.update()

    def remove_item(self, item: StarItem) -> bool:
        """移除星星

        Returns:
            bool: 是否真的移除了（不在列表中时返回False）
        """
        if item not in self._items:
            return False
        self._items.remove(item)
        try:
            item.changed.disconnect(self.update)
        except (TypeError, RuntimeError):
            pass  # 信号可能已断开
        self.update()
        return True

    def has_item(self, item: StarItem) -> bool:
        return item in self._items

    def items(self) -> List[StarItem]:
        return list(self._items)

    def item_origin(self, item: StarItem) -> QPointF:
        """星星布局位置（未平移时的左上角）"""
        if item.centered:
            return QPointF((self.width() - item.width) / 2, (self.height() - item.height) / 2)
        return QPointF(0.0, 0.0)

    # ==================== 绘制 ====================

    def paintEvent(self, event):
        """绘制背景与星星"""
        painter = QPainter(self)
        painter.fillRect(self.rect(), self._background_color)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        for item in self._items:
            origin = self.item_origin(item)
            painter.save()
            painter.translate(
                origin.x() + item.translation_x + item.width / 2,
                origin.y() + item.translation_y + item.height / 2
            )
            painter.rotate(item.rotation)
            painter.scale(item.scale_x, item.scale_y)
            painter.setOpacity(max(0.0, min(1.0, item.alpha)))
            painter.setPen(QPen(item.outline_color, 1.5))
            painter.setBrush(item.color)
            painter.drawPath(item.path)
            painter.restore()

        painter.end()
