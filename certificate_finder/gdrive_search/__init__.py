"""Google Drive certificate search: validation, querying and display helpers."""

from __future__ import annotations

from certificate_finder.gdrive_search.client import (
    DRIVE_FILES_URL,
    DriveSearchClient,
    build_query,
    escape_query_value,
)
from certificate_finder.gdrive_search.errors import ErrorClassification, SearchError
from certificate_finder.gdrive_search.formatting import format_created_date, format_size
from certificate_finder.gdrive_search.links import download_link, view_link
from certificate_finder.gdrive_search.models import FileRecord
from certificate_finder.gdrive_search.validation import (
    NISN_LENGTH,
    filter_identifier_input,
    validate_identifier,
)

__all__ = [
    "DRIVE_FILES_URL",
    "NISN_LENGTH",
    "DriveSearchClient",
    "ErrorClassification",
    "FileRecord",
    "SearchError",
    "build_query",
    "download_link",
    "escape_query_value",
    "filter_identifier_input",
    "format_created_date",
    "format_size",
    "validate_identifier",
    "view_link",
]
