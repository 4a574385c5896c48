"""
Main window: filter controls on top, chart in the centre, details on the right.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QSettings, QTimer, Slot
from PySide6.QtGui import QCursor
from PySide6.QtWidgets import (
    QHBoxLayout, QLabel, QMainWindow, QProgressBar, QPushButton, QToolTip, QVBoxLayout, QWidget,
)

from emotionmap.app.application import VISIBLE_APP_NAME
from emotionmap.app.state import Store
from emotionmap.app.ui.chart import ChartView
from emotionmap.app.ui.panels import DetailPanel, FilterPanel, LegendPanel
from emotionmap.config import ERROR_DISPLAY_MS
from emotionmap.model.points import PointKey
from emotionmap.model.state import Transition
from emotionmap.scene.chrome import draw_chrome
from emotionmap.scene.interaction import HighlightCommand, InteractionController, format_detail
from emotionmap.scene.reconciler import SceneReconciler

logger = logging.getLogger(__name__)

RETRY_LABEL = "重新加载数据"
RETRYING_LABEL = "重试中..."


class MainWindow(QMainWindow):
    def __init__(self, store: Store, source: str) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1280, 860)

        self.store = store
        self.source = source
        self._settings = QSettings()

        central = QWidget(self)
        v = QVBoxLayout(central)

        # ---- Top: filters + retry ----
        top = QHBoxLayout()
        self.filter_panel = FilterPanel(self.store, parent=central)
        top.addWidget(self.filter_panel, 1)
        self.retry_button = QPushButton(self.tr(RETRY_LABEL), central)
        self.retry_button.clicked.connect(self.reload)
        top.addWidget(self.retry_button, 0)
        v.addLayout(top, 0)

        # ---- Error banner (auto-dismissing) ----
        self.error_label = QLabel("", central)
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(
            "background-color: #fdecea; color: #b71c1c; border: 1px solid #f5c6cb; padding: 6px;"
        )
        self.error_label.hide()
        v.addWidget(self.error_label, 0)
        self._error_timer = QTimer(self)
        self._error_timer.setSingleShot(True)
        self._error_timer.setInterval(ERROR_DISPLAY_MS)
        self._error_timer.timeout.connect(self._hide_error)

        # ---- Centre: chart + side panels ----
        middle = QHBoxLayout()
        self.chart = ChartView(parent=central)
        middle.addWidget(self.chart, 1)

        side = QVBoxLayout()
        self.detail_panel = DetailPanel(self.store, parent=central)
        side.addWidget(self.detail_panel, 1)
        self.legend_panel = LegendPanel(parent=central)
        side.addWidget(self.legend_panel, 0)
        middle.addLayout(side, 0)
        v.addLayout(middle, 1)

        self.setCentralWidget(central)

        # ---- Status bar: loading indicator ----
        self.progress = QProgressBar(self)
        self.progress.setRange(0, 0)
        self.progress.setMaximumWidth(160)
        self.progress.hide()
        self.statusBar().addPermanentWidget(self.progress)

        # ---- Scene logic ----
        self.reconciler = SceneReconciler(self.chart.geometry)
        self.interaction = InteractionController(self.reconciler, self.chart)
        draw_chrome(self.chart, self.chart.geometry)

        # ---- Wiring ----
        self.store.loading_changed.connect(self._on_loading_changed)
        self.store.dataset_changed.connect(self._on_dataset_changed)
        self.store.visible_changed.connect(self._on_visible_changed)
        self.store.message_raised.connect(self._show_error)
        self.chart.marker_hovered.connect(self._on_marker_hovered)
        self.chart.marker_unhovered.connect(self._on_marker_unhovered)
        self.chart.cursor_moved.connect(self.detail_panel.show_cursor)

        geometry = self._settings.value("win/geo")
        if geometry is not None:
            self.restoreGeometry(geometry)

    # ------------------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------------------

    @Slot()
    def reload(self) -> None:
        """(Re)load the dataset; ignored while a load is in flight."""
        if not self.store.load(self.source):
            self.statusBar().showMessage(self.tr("数据正在加载中..."), ERROR_DISPLAY_MS)

    @Slot(bool)
    def _on_loading_changed(self, loading: bool) -> None:
        self.progress.setVisible(loading)
        self.retry_button.setEnabled(not loading)
        self.retry_button.setText(self.tr(RETRYING_LABEL if loading else RETRY_LABEL))
        self.filter_panel.setEnabled(not loading)
        self.chart.setEnabled(not loading)
        if loading:
            self.statusBar().showMessage(self.tr("正在加载数据..."))
        else:
            self.statusBar().clearMessage()

    # ------------------------------------------------------------------------------
    # Scene updates
    # ------------------------------------------------------------------------------

    @Slot(object)
    def _on_dataset_changed(self, transition: Transition) -> None:
        # New dataset: start from an empty scene so no marker survives with stale data
        self.interaction.reset()
        self._apply_command(HighlightCommand(clear_detail=True))
        self.reconciler.clear(self.chart)
        self.reconciler.reconcile((), transition.current, self.chart)
        self.detail_panel.update_stats()
        self.detail_panel.update_counts()

    @Slot(object)
    def _on_visible_changed(self, transition: Transition) -> None:
        self.reconciler.reconcile(transition.previous, transition.current, self.chart)
        self._apply_command(self.interaction.sync())
        self.detail_panel.update_counts()

    # ------------------------------------------------------------------------------
    # Interaction
    # ------------------------------------------------------------------------------

    @Slot(object)
    def _on_marker_hovered(self, key: PointKey) -> None:
        self._apply_command(self.interaction.on_hover(key))

    @Slot(object)
    def _on_marker_unhovered(self, key: PointKey) -> None:
        self._apply_command(self.interaction.on_unhover(key))

    def _apply_command(self, command: HighlightCommand) -> None:
        if command.detail is not None:
            self.detail_panel.show_detail(command.detail)
            QToolTip.showText(QCursor.pos(), format_detail(command.detail), self.chart)
        elif command.clear_detail:
            self.detail_panel.clear_detail()
            QToolTip.hideText()

    # ------------------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------------------

    @Slot(str)
    def _show_error(self, message: str) -> None:
        if not self.error_label.isHidden() and self.error_label.text():
            message = f"{self.error_label.text()}\n{message}"
        self.error_label.setText(message)
        self.error_label.show()
        self._error_timer.start()

    @Slot()
    def _hide_error(self) -> None:
        self.error_label.hide()
        self.error_label.clear()

    def closeEvent(self, e) -> None:
        self._settings.setValue("win/geo", self.saveGeometry())
        self.store.shutdown()
        super().closeEvent(e)
