"""
Run with: python -m emotionmap
"""
from __future__ import annotations

from emotionmap.app.application import create_app
from emotionmap.app.state import Store
from emotionmap.app.ui.main_window import MainWindow

import pyqtgraph as pg

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")
pg.setConfigOption("antialias", True)


def run(source: str) -> int:
    """Start the Qt application on the given dataset source."""
    app = create_app()
    store = Store()
    win = MainWindow(store, source)
    win.show()
    win.reload()
    return app.exec()
