"""Error taxonomy shared by the validator, the Drive client and the UI."""

from __future__ import annotations

from enum import Enum


class ErrorClassification(str, Enum):
    EMPTY_INPUT = "empty_input"
    INVALID_FORMAT = "invalid_format"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    NETWORK_FAILURE = "network_failure"
    UNKNOWN = "unknown"

    @property
    def default_message(self) -> str:
        return _DEFAULT_MESSAGES[self]


_DEFAULT_MESSAGES: dict[ErrorClassification, str] = {
    ErrorClassification.EMPTY_INPUT: "NISN must not be empty",
    ErrorClassification.INVALID_FORMAT: "NISN must be exactly 10 digits",
    ErrorClassification.FORBIDDEN: "API key invalid or lacks Drive access",
    ErrorClassification.NOT_FOUND: "Folder not found",
    ErrorClassification.NETWORK_FAILURE: (
        "An error occurred while searching; check your internet connection"
    ),
    ErrorClassification.UNKNOWN: "Failed to access the Google Drive API",
}


class SearchError(RuntimeError):
    """Raised when a certificate search cannot produce a result.

    `kind` tells callers which failure happened without parsing `message`.
    """

    def __init__(
        self,
        kind: ErrorClassification,
        message: str | None = None,
        *,
        status_code: int | None = None,
    ) -> None:
        self.kind = kind
        self.message = message or kind.default_message
        self.status_code = status_code
        super().__init__(self.message)


__all__ = ["ErrorClassification", "SearchError"]
