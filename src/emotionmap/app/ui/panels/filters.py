from __future__ import annotations

from typing import Callable, Iterable

from PySide6.QtCore import Slot
from PySide6.QtWidgets import (
    QButtonGroup, QGridLayout, QGroupBox, QHBoxLayout, QPushButton, QVBoxLayout, QWidget,
)

from emotionmap.app.state import Store
from emotionmap.app.ui.panels.base import BasePanel
from emotionmap.model.filters import ALL, options
from emotionmap.scene.palette import category_color

ALL_LABEL = "全部"
ALL_BORDER = "#4a6fa5"
BUTTONS_PER_ROW = 6


class OptionGroup(QGroupBox):
    """An exclusive row of checkable buttons, one per option value."""

    def __init__(
        self,
        title: str,
        on_selected: Callable[[str], None],
        border_color: Callable[[str], str] = lambda _: "#ddd",
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(title, parent)
        self._on_selected = on_selected
        self._border_color = border_color
        self._grid = QGridLayout(self)
        self._group = QButtonGroup(self)
        self._group.setExclusive(True)
        self._group.buttonClicked.connect(self._on_clicked)

    def set_options(self, values: Iterable[str]) -> None:
        """Replace the buttons; the wildcard button starts checked."""
        for button in self._group.buttons():
            self._group.removeButton(button)
            self._grid.removeWidget(button)
            button.deleteLater()

        for i, value in enumerate(options(values)):
            button = QPushButton(ALL_LABEL if value == ALL else value, self)
            button.setCheckable(True)
            button.setProperty("value", value)
            color = ALL_BORDER if value == ALL else self._border_color(value)
            button.setStyleSheet(
                f"QPushButton {{ border: 2px solid {color}; border-radius: 4px; padding: 4px 10px; }}"
                f"QPushButton:checked {{ background-color: {color}; color: white; }}"
            )
            button.setChecked(value == ALL)
            self._group.addButton(button)
            self._grid.addWidget(button, i // BUTTONS_PER_ROW, i % BUTTONS_PER_ROW)

    def selected(self) -> str:
        button = self._group.checkedButton()
        return button.property("value") if button is not None else ALL

    @Slot(object)
    def _on_clicked(self, button: QPushButton) -> None:
        self._on_selected(button.property("value"))


class FilterPanel(BasePanel):
    """
    Category and intensity-level selectors.

    Options are rebuilt from the point store whenever a dataset is installed,
    so only known values can be selected.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        self.category_group = OptionGroup(
            self.tr("情绪类别"),
            on_selected=self.store.set_category,
            border_color=lambda c: category_color(c) or "#ddd",
            parent=self,
        )
        self.level_group = OptionGroup(
            self.tr("强度等级"),
            on_selected=self.store.set_level,
            parent=self,
        )

        row = QHBoxLayout()
        row.addWidget(self.category_group, 3)
        row.addWidget(self.level_group, 1)
        root.addLayout(row)

        self.store.dataset_changed.connect(lambda *_: self.rebuild())

    def rebuild(self) -> None:
        points = self.store.points
        self.category_group.set_options(points.categories())
        self.level_group.set_options(points.levels())
