"""Normalization and escaping of metric keys, dimension keys and dimension values.

None of the functions in this module raise on bad input. Invalid characters
are replaced by underscores and oversized strings are truncated, so a single
malformed dimension never prevents a metric from being serialized.
"""
import re
import unicodedata
from itertools import groupby
from typing import Iterable, List, Optional, Tuple

from .constants import (
    MAX_DIMENSION_KEY_LENGTH,
    MAX_DIMENSION_VALUE_LENGTH,
    MAX_METRIC_KEY_LENGTH,
)

# Metric keys: the first section may not start with a digit, later sections may
_MK_FIRST_SECTION_INVALID_START = re.compile(r"^[^a-zA-Z_]+")
_MK_SECTION_INVALID_START = re.compile(r"^[^a-zA-Z0-9_]+")
_MK_INVALID_CHARACTERS = re.compile(r"[^a-zA-Z0-9_\-]+")

# Dimension keys are lowercase and start with a letter or an underscore
_DK_SECTION_INVALID_START = re.compile(r"^[^a-z_]+")
_DK_INVALID_CHARACTERS = re.compile(r"[^a-z0-9_\-:]+")

_DV_CHARACTERS_TO_ESCAPE = re.compile(r'([= ,\\"])')
# {not a backslash}{any number of backslash pairs}{one backslash}{end}
_DV_ODD_TRAILING_BACKSLASHES = re.compile(r"[^\\](?:\\\\)*\\\Z")


def normalize_metric_key(key: Optional[str]) -> Optional[str]:
    """Transform a metric name into a valid metric key.

    Returns None if nothing usable is left, e.g. for an empty key or a key
    starting with a dot.
    """
    if key is None or not key.strip():
        return None

    key = key[:MAX_METRIC_KEY_LENGTH]
    sections = key.split(".")
    if not sections or not sections[0]:
        return None

    normalized_sections = []
    for section in sections:
        # consecutive dots produce empty sections, skip them
        if not section:
            continue

        if normalized_sections:
            section = _MK_SECTION_INVALID_START.sub("_", section)
        else:
            section = _MK_FIRST_SECTION_INVALID_START.sub("_", section)
        normalized_sections.append(_MK_INVALID_CHARACTERS.sub("_", section))

    return ".".join(normalized_sections)


def normalize_dimension_key(key: Optional[str]) -> str:
    """Normalize a dimension key. An empty result means the dimension must be dropped."""
    if not key:
        return ""

    key = key[:MAX_DIMENSION_KEY_LENGTH].lower()

    normalized_sections = []
    for section in key.split("."):
        if not section:
            continue
        section = _DK_SECTION_INVALID_START.sub("_", section)
        normalized_sections.append(_DK_INVALID_CHARACTERS.sub("_", section))

    return ".".join(normalized_sections)


def _is_control_character(char: str) -> bool:
    # Unicode "Other": control, format, surrogate, private use and unassigned
    return unicodedata.category(char).startswith("C")


def normalize_dimension_value(value: Optional[str]) -> str:
    """Truncate a dimension value and collapse runs of control characters to one underscore"""
    if not value:
        return ""

    value = value[:MAX_DIMENSION_VALUE_LENGTH]
    return "".join(
        "_" if is_control else "".join(chars)
        for is_control, chars in groupby(value, key=_is_control_character)
    )


def escape_dimension_value(value: str) -> str:
    """Backslash-escape ``=``, space, ``,``, ``\\`` and ``"`` in a dimension value.

    If the escaped value is too long it is truncated. A cut that falls
    between a backslash and the character it escapes drops the dangling
    backslash as well.
    """
    escaped = _DV_CHARACTERS_TO_ESCAPE.sub(r"\\\1", value)
    if len(escaped) > MAX_DIMENSION_VALUE_LENGTH:
        escaped = escaped[:MAX_DIMENSION_VALUE_LENGTH]
        if _DV_ODD_TRAILING_BACKSLASHES.search(escaped):
            escaped = escaped[:MAX_DIMENSION_VALUE_LENGTH - 1]
    return escaped


def normalize_dimension_list(dimensions: Optional[Iterable[Tuple[str, str]]]) -> List[Tuple[str, str]]:
    """Normalize keys and normalize + escape values of a list of dimensions.

    Pairs whose key normalizes to an empty string are dropped. Order and
    duplicate keys are preserved, deduplication happens when merging.
    """
    if dimensions is None:
        return []

    normalized = []
    for key, value in dimensions:
        normalized_key = normalize_dimension_key(key)
        if normalized_key:
            normalized.append((normalized_key, escape_dimension_value(normalize_dimension_value(value))))
    return normalized
