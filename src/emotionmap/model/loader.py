"""
Dataset Loading Boundary
========================
Reads the raw dataset document, decodes it and validates it.

Every acquisition failure (FetchError, ParseError, ValidationError) is caught
here, logged, and replaced by a small built-in dataset so the rest of the
application always works with a valid, non-empty point collection.

Functions:
    fetch_document: Read bytes from a file path or an http(s) URL.
    parse_document: Strict JSON decoding.
    load_dataset: fetch + parse + validate, with fallback.
"""
from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path
from typing import Any, Optional
import urllib.error
import urllib.request

from emotionmap.config import FETCH_TIMEOUT_S
from emotionmap.model.dataset import CategoryGroup, WordEntry, validate
from emotionmap.model.errors import EmotionMapError, FetchError, ParseError

logger = logging.getLogger(__name__)

FALLBACK_GROUPS: tuple[CategoryGroup, ...] = (
    CategoryGroup(
        category="示例",
        level="中等 (Medium)",
        words=(
            WordEntry(word="示例词汇", coord=(0.0, 0.0)),
            WordEntry(word="数据加载失败", coord=(-0.5, -0.5)),
        ),
    ),
)

FALLBACK_NOTICE = "正在使用备用数据模式，功能可能受限"


@dataclass(frozen=True)
class LoadOutcome:
    """Result of one load attempt. `error` is set when the fallback was used."""
    groups: tuple[CategoryGroup, ...]
    source: str
    error: Optional[EmotionMapError] = None

    @property
    def used_fallback(self) -> bool:
        return self.error is not None

    def messages(self) -> list[str]:
        """User-facing messages describing the outcome."""
        if self.error is None:
            return []
        return [
            f"数据加载失败: {self.error}。请检查数据文件是否存在或网络连接是否正常。",
            FALLBACK_NOTICE,
        ]


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_document(source: str, timeout: float = FETCH_TIMEOUT_S) -> bytes:
    """Read the raw document from an http(s) URL or a local file."""
    if _is_url(source):
        req = urllib.request.Request(source, headers={"Accept": "application/json"})
        try:
            with urllib.request.urlopen(req, timeout=timeout) as response:
                return response.read()
        except urllib.error.HTTPError as e:
            raise FetchError(f"HTTP error! status: {e.code}", source=source, status=e.code) from e
        except (urllib.error.URLError, OSError) as e:
            raise FetchError(f"无法连接数据源: {e}", source=source) from e

    try:
        return Path(source).read_bytes()
    except OSError as e:
        raise FetchError(f"无法读取数据文件: {e}", source=source) from e


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_document(payload: bytes) -> Any:
    """Decode a JSON document. NaN and Infinity are rejected."""
    try:
        return json.loads(payload, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors, deep nesting recurses
        raise ParseError(f"数据格式错误: {e}") from e


def load_dataset(source: str, timeout: float = FETCH_TIMEOUT_S) -> LoadOutcome:
    """
    Load and validate the dataset, substituting the fallback on any failure.

    Args:
        source: File path or http(s) URL of the JSON document.
        timeout: Timeout for remote requests in seconds.

    Returns:
        LoadOutcome whose groups are always valid and non-empty.
    """
    logger.info(f"Loading emotion data from: {source}")
    try:
        document = parse_document(fetch_document(source, timeout=timeout))
        result = validate(document)
        if not result.ok:
            raise result.error
    except EmotionMapError as e:
        logger.error(f"Failed to load emotion data: {e}")
        logger.warning("Using fallback dataset.")
        return LoadOutcome(groups=FALLBACK_GROUPS, source=source, error=e)

    logger.info(f"Loaded {len(result.groups)} category groups.")
    return LoadOutcome(groups=result.groups, source=source)
