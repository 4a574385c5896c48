"""Emotion word valence/arousal scatter viewer."""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("emotionmap")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
