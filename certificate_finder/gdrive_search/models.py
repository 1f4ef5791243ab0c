from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from certificate_finder.gdrive_search.links import download_link, view_link


@dataclass(slots=True, frozen=True)
class FileRecord:
    """A certificate file as listed by the Drive files endpoint."""

    id: str
    name: str
    mime_type: str | None = None
    size: int | None = None
    created_time: str | None = None
    web_view_link: str | None = None
    web_content_link: str | None = None

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> FileRecord:
        return cls(
            id=str(payload["id"]),
            name=str(payload.get("name") or ""),
            mime_type=payload.get("mimeType"),
            size=_coerce_size(payload.get("size")),
            created_time=payload.get("createdTime"),
            web_view_link=payload.get("webViewLink"),
            web_content_link=payload.get("webContentLink"),
        )

    @property
    def view_link(self) -> str:
        return view_link(self.id)

    @property
    def download_link(self) -> str:
        return download_link(self.id)


def _coerce_size(value: Any) -> int | None:
    # files.list serialises int64 fields as strings
    if value is None or value == "":
        return None
    return int(value)


__all__ = ["FileRecord"]
