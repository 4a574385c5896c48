"""
Dataset Schema & Validation
===========================
Defines the input units of the emotion dataset and checks that a decoded JSON
document conforms to them.

The expected document is a list of category groups:

    [
        {"category": "快乐", "level": "高 (High)",
         "words": [{"word": "兴奋", "coord": [0.8, 0.9]}, ...]},
        ...
    ]

validate() is total: every failure is returned as a typed ValidationError
inside the result, nothing is raised.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
import logging
import math
from numbers import Real
from typing import Any, Optional

from emotionmap.model.errors import (
    DuplicateKeyError, FieldError, RangeError, ShapeError, ValidationError,
)

logger = logging.getLogger(__name__)

COORD_MIN: float = -1.0
COORD_MAX: float = 1.0


@dataclass(frozen=True)
class WordEntry:
    word: str
    coord: tuple[float, float]


@dataclass(frozen=True)
class CategoryGroup:
    category: str
    level: str
    words: tuple[WordEntry, ...]


@dataclass(frozen=True)
class ValidationResult:
    """Either the validated groups or the first error found."""
    groups: tuple[CategoryGroup, ...] = ()
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _is_sequence(value: Any) -> bool:
    # Strings and bytes are sequences too, but never valid containers here
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _in_range(value: float) -> bool:
    # Bounds first: comparing a huge int never overflows, NaN fails both bounds
    return COORD_MIN <= value <= COORD_MAX and math.isfinite(value)


def _validate_group(index: int, item: Any) -> CategoryGroup:
    if not isinstance(item, Mapping):
        raise FieldError(f"第{index + 1}项数据结构不完整", index=index)

    category = item.get("category")
    level = item.get("level")
    words = item.get("words")
    if not _is_text(category) or not _is_text(level) or not _is_sequence(words):
        raise FieldError(f"第{index + 1}项数据结构不完整", index=index)
    if len(words) == 0:
        raise FieldError(f"第{index + 1}项不包含任何词汇", index=index)

    entries: list[WordEntry] = []
    for word_index, raw_word in enumerate(words):
        incomplete = f"第{index + 1}项第{word_index + 1}个词汇数据不完整"
        if not isinstance(raw_word, Mapping):
            raise FieldError(incomplete, index=index, word_index=word_index)

        word = raw_word.get("word")
        coord = raw_word.get("coord")
        if not _is_text(word) or not _is_sequence(coord) or len(coord) != 2:
            raise FieldError(incomplete, index=index, word_index=word_index)

        x, y = coord
        if not _is_number(x) or not _is_number(y):
            raise FieldError(incomplete, index=index, word_index=word_index)
        if not _in_range(x) or not _in_range(y):
            raise RangeError(f"词汇\"{word}\"的坐标值超出有效范围[-1, 1]", word=word)

        entries.append(WordEntry(word=word, coord=(x, y)))

    return CategoryGroup(category=category, level=level, words=tuple(entries))


def validate(raw: Any) -> ValidationResult:
    """
    Check a decoded document against the category -> words schema.

    Args:
        raw: Any value, typically the output of json.loads().

    Returns:
        ValidationResult with typed groups on success, or with the first
        ShapeError / FieldError / RangeError / DuplicateKeyError encountered.
    """
    if not _is_sequence(raw):
        return ValidationResult(error=ShapeError("数据必须是数组格式"))
    if len(raw) == 0:
        return ValidationResult(error=ShapeError("数据不能为空"))

    groups: list[CategoryGroup] = []
    seen: set[tuple[str, str, str]] = set()
    try:
        for index, item in enumerate(raw):
            group = _validate_group(index, item)
            for entry in group.words:
                key = (entry.word, group.category, group.level)
                if key in seen:
                    raise DuplicateKeyError(
                        f"词汇\"{entry.word}\"在类别\"{group.category}\"/等级\"{group.level}\"中重复出现",
                        key=key,
                    )
                seen.add(key)
            groups.append(group)
    except ValidationError as e:
        logger.debug(f"Dataset rejected: {e}")
        return ValidationResult(error=e)

    logger.debug(f"Dataset accepted: {len(groups)} groups, {len(seen)} words.")
    return ValidationResult(groups=tuple(groups))
