from __future__ import annotations

import math
import re
from collections import Counter
from collections.abc import Iterable
from datetime import date, datetime
from enum import StrEnum

from dateutil import parser as dateparser

_NAME_SEPARATORS = re.compile(r"[\s_-]")
_SEMANTIC_SUFFIX = re.compile(r"(id|pk|key|num|code|date|name|at|by)$")
_BOOLEAN_WORDS = {"true", "false"}
_DATE_SHAPE = re.compile(r"\d.*[-/.:,\s]|[-/.:,\s].*\d")


class DataType(StrEnum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    MIXED = "mixed"


def clean_name(name: str) -> str:
    """Lower-case a column name and drop whitespace, underscores and hyphens."""
    return _NAME_SEPARATORS.sub("", name.lower())


def base_name(cleaned: str) -> str:
    """Strip one trailing semantic suffix (``id``, ``key``, ``date`` ...) from a cleaned name."""
    return _SEMANTIC_SUFFIX.sub("", cleaned, count=1)


def is_empty(value: object) -> bool:
    return value is None or value == ""


def to_number(value: object) -> float | None:
    if isinstance(value, bool) or is_empty(value):
        return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def infer_value_type(value: object) -> DataType:
    """Best-effort type of a single parsed cell."""
    if is_empty(value):
        return DataType.STRING
    if isinstance(value, bool):
        return DataType.BOOLEAN
    if isinstance(value, (datetime, date)):
        return DataType.DATE
    if to_number(value) is not None:
        return DataType.NUMBER
    if not isinstance(value, str):
        return DataType.STRING

    text = value.strip()
    if text.lower() in _BOOLEAN_WORDS:
        return DataType.BOOLEAN
    # Bare month or weekday names and ordinals like "1st" stay strings.
    if not _DATE_SHAPE.search(text):
        return DataType.STRING
    try:
        dateparser.parse(text)
    except (ValueError, OverflowError):
        return DataType.STRING
    return DataType.DATE


def infer_data_type(values: Iterable[object]) -> DataType:
    """Majority vote over per-value types; ties keep the first type seen."""
    votes = Counter(infer_value_type(value) for value in values)
    if not votes:
        return DataType.STRING
    # Counter preserves first-seen order, and max() keeps the first maximum.
    return max(votes, key=lambda data_type: votes[data_type])
