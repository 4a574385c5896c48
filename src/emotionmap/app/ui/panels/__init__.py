from emotionmap.app.ui.panels.base import BasePanel
from emotionmap.app.ui.panels.details import DetailPanel
from emotionmap.app.ui.panels.filters import FilterPanel
from emotionmap.app.ui.panels.legend import LegendPanel
