from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFormLayout, QGroupBox, QLabel, QVBoxLayout, QWidget

from emotionmap.app.state import Store
from emotionmap.app.ui.panels.base import BasePanel
from emotionmap.scene.interaction import DetailPayload, format_detail

PLACEHOLDER = "—"


class DetailPanel(BasePanel):
    """Point counts, dataset statistics, hovered point details and cursor position."""

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)

        box = QGroupBox(self.tr("数据概览"), self)
        form = QFormLayout(box)
        self.total_label = QLabel("0", box)
        self.visible_label = QLabel("0", box)
        self.selected_label = QLabel(PLACEHOLDER, box)
        self.cursor_label = QLabel(PLACEHOLDER, box)
        form.addRow(self.tr("总点数:"), self.total_label)
        form.addRow(self.tr("可见点数:"), self.visible_label)
        form.addRow(self.tr("选中点:"), self.selected_label)
        form.addRow(self.tr("光标位置:"), self.cursor_label)
        root.addWidget(box)

        self.stats_label = QLabel("", self)
        self.stats_label.setWordWrap(True)
        root.addWidget(self.stats_label)

        self.detail_label = QLabel("", self)
        self.detail_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self.detail_label.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
        root.addWidget(self.detail_label, 1)

    def update_counts(self) -> None:
        total, visible = self.store.counts()
        self.total_label.setText(str(total))
        self.visible_label.setText(str(visible))

    def update_stats(self) -> None:
        self.stats_label.setText(self.store.points.stats().describe())

    def show_detail(self, payload: DetailPayload) -> None:
        self.selected_label.setText(f"{payload.word} ({payload.category})")
        self.detail_label.setText(format_detail(payload))

    def clear_detail(self) -> None:
        self.selected_label.setText(PLACEHOLDER)
        self.detail_label.setText("")

    def show_cursor(self, valence: float, arousal: float) -> None:
        self.cursor_label.setText(f"[{valence:.2f}, {arousal:.2f}]")
