from __future__ import annotations

import re

from certificate_finder.gdrive_search.errors import ErrorClassification, SearchError

NISN_LENGTH = 10

_NISN_PATTERN = re.compile(r"[0-9]{10}")
_NON_DIGITS = re.compile(r"[^0-9]")


def validate_identifier(raw: str | None) -> str:
    """Return the trimmed NISN or raise a `SearchError` describing why it was rejected."""

    cleaned = (raw or "").strip()
    if not cleaned:
        raise SearchError(ErrorClassification.EMPTY_INPUT)
    if _NISN_PATTERN.fullmatch(cleaned) is None:
        raise SearchError(ErrorClassification.INVALID_FORMAT)
    return cleaned


def filter_identifier_input(raw: str | None) -> str:
    """Keep ASCII digits only, truncated to the NISN length."""

    return _NON_DIGITS.sub("", raw or "")[:NISN_LENGTH]


__all__ = ["NISN_LENGTH", "filter_identifier_input", "validate_identifier"]
