"""Certificate lookup against the Google Drive v3 files.list endpoint."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from certificate_finder.config import AppConfig, GoogleConfig
from certificate_finder.gdrive_search.errors import ErrorClassification, SearchError
from certificate_finder.gdrive_search.models import FileRecord
from certificate_finder.gdrive_search.validation import validate_identifier

logger = logging.getLogger(__name__)

DRIVE_FILES_URL = "https://www.googleapis.com/drive/v3/files"
FILE_FIELDS = "files(id, name, mimeType, webViewLink, webContentLink, size, createdTime)"

_STATUS_CLASSIFICATION: dict[int, ErrorClassification] = {
    403: ErrorClassification.FORBIDDEN,
    404: ErrorClassification.NOT_FOUND,
}


def escape_query_value(value: str) -> str:
    """Escape a literal for use inside single quotes in a Drive query."""

    return value.replace("\\", "\\\\").replace("'", "\\'")


def build_query(identifier: str, folder_id: str) -> str:
    return (
        f"name contains '{escape_query_value(identifier)}' "
        f"and '{escape_query_value(folder_id)}' in parents "
        "and trashed = false"
    )


class DriveSearchClient:
    """Search one Drive folder for files whose name contains a NISN.

    The client owns its `httpx.Client` unless one is passed in, in which case
    closing is left to the caller.
    """

    def __init__(
        self,
        config: GoogleConfig,
        *,
        http_client: httpx.Client | None = None,
        base_url: str = DRIVE_FILES_URL,
    ) -> None:
        self._config = config
        self._base_url = base_url
        self._owns_client = http_client is None
        self._http = http_client if http_client is not None else httpx.Client()

    @classmethod
    def from_config(cls, config: AppConfig, **kwargs: Any) -> DriveSearchClient:
        return cls(config.google, **kwargs)

    def __enter__(self) -> DriveSearchClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def search(self, identifier: str) -> list[FileRecord]:
        nisn = validate_identifier(identifier)
        params = {
            "q": build_query(nisn, self._config.folder_id),
            "key": self._config.api_key,
            "fields": FILE_FIELDS,
        }

        try:
            response = self._http.get(self._base_url, params=params)
            if not response.is_success:
                raise self._classify_failure(response)
            records = _parse_files(response.json())
        except SearchError:
            raise
        except Exception as exc:
            logger.warning(
                "Drive search failed: %s",
                exc,
                exc_info=logger.isEnabledFor(logging.DEBUG),
                extra={"folder_id": self._config.folder_id, "error_type": type(exc).__name__},
            )
            raise SearchError(ErrorClassification.NETWORK_FAILURE) from exc

        logger.info(
            "Drive search completed",
            extra={"folder_id": self._config.folder_id, "matches": len(records)},
        )
        return records

    def _classify_failure(self, response: httpx.Response) -> SearchError:
        kind = _STATUS_CLASSIFICATION.get(response.status_code, ErrorClassification.UNKNOWN)
        logger.warning(
            "Drive API returned an error",
            extra={
                "status_code": response.status_code,
                "classification": kind.value,
                "provider_error": _error_detail(response),
            },
        )
        return SearchError(kind, status_code=response.status_code)


def _parse_files(payload: Any) -> list[FileRecord]:
    if not isinstance(payload, dict):
        raise ValueError(f"Unexpected Drive response payload: {type(payload).__name__}")
    files = payload.get("files") or []
    return [FileRecord.from_api(item) for item in files]


def _error_detail(response: httpx.Response) -> Any:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        return body["error"].get("message", body["error"])
    return body


__all__ = [
    "DRIVE_FILES_URL",
    "FILE_FIELDS",
    "DriveSearchClient",
    "build_query",
    "escape_query_value",
]
