"""Pytest fixtures for the emotionmap tests."""

import json
import os
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from emotionmap.model.dataset import validate


class RecordingSurface:
    """In-memory drawing surface recording every call."""

    def __init__(self):
        self.markers = {}
        self.created = []
        self.removed = []
        self.updates = []
        self.texts = []
        self.lines = []
        self._next = 0

    def create_marker(self, key, x, y, style):
        self._next += 1
        handle = self._next
        self.markers[handle] = {"key": key, "x": x, "y": y, "radius": style.radius,
                                "opacity": style.opacity, "fill": style.fill, "style": style}
        self.created.append(handle)
        return handle

    def update_marker(self, handle, *, radius=None, opacity=None, duration_ms=0):
        marker = self.markers[handle]
        if radius is not None:
            marker["radius"] = radius
        if opacity is not None:
            marker["opacity"] = opacity
        self.updates.append((marker["key"], radius, opacity, duration_ms))

    def remove_marker(self, handle):
        del self.markers[handle]
        self.removed.append(handle)

    def draw_text(self, text, x, y, **kwargs):
        self.texts.append((text, x, y, kwargs))
        return ("text", len(self.texts))

    def draw_line(self, x1, y1, x2, y2, **kwargs):
        self.lines.append((x1, y1, x2, y2, kwargs))
        return ("line", len(self.lines))

    def clear(self):
        self.markers.clear()
        self.texts.clear()
        self.lines.clear()

    def marker_for(self, key):
        return next(m for m in self.markers.values() if m["key"] == key)

    def keys(self):
        return {m["key"] for m in self.markers.values()}

    def reset_log(self):
        self.created.clear()
        self.removed.clear()
        self.updates.clear()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def raw_dataset():
    """A small valid document with two categories and two levels."""
    return [
        {
            "category": "快乐",
            "level": "高",
            "words": [
                {"word": "兴奋", "coord": [0.8, 0.9]},
                {"word": "狂喜", "coord": [0.9, 0.8]},
            ],
        },
        {
            "category": "悲伤",
            "level": "低",
            "words": [
                {"word": "失落", "coord": [-0.6, -0.5]},
            ],
        },
        {
            "category": "快乐",
            "level": "低",
            "words": [
                {"word": "满足", "coord": [0.6, -0.2]},
            ],
        },
    ]


@pytest.fixture
def groups(raw_dataset):
    result = validate(raw_dataset)
    assert result.ok
    return result.groups


@pytest.fixture
def data_file(tmp_path, raw_dataset):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(raw_dataset, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def project_root():
    return Path(__file__).parent.parent
