from __future__ import annotations

from PySide6.QtWidgets import QGroupBox, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from emotionmap.scene.palette import COLOR_MAP

SWATCH_SIZE = 14


class LegendPanel(QGroupBox):
    """Colour swatch and name for every category of the fixed colour map."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(self.tr("图例"), parent)
        layout = QVBoxLayout(self)

        for category, color in COLOR_MAP.items():
            row = QHBoxLayout()
            swatch = QLabel(self)
            swatch.setFixedSize(SWATCH_SIZE, SWATCH_SIZE)
            swatch.setStyleSheet(f"background-color: {color}; border-radius: {SWATCH_SIZE // 2}px;")
            row.addWidget(swatch)
            row.addWidget(QLabel(category, self))
            row.addStretch()
            layout.addLayout(row)

        layout.addStretch()
