"""Share links built from a Drive file ID."""

from __future__ import annotations

DOWNLOAD_LINK_TEMPLATE = "https://drive.google.com/uc?export=download&id={file_id}"
VIEW_LINK_TEMPLATE = "https://drive.google.com/file/d/{file_id}/view"


def download_link(file_id: str) -> str:
    return DOWNLOAD_LINK_TEMPLATE.format(file_id=file_id)


def view_link(file_id: str) -> str:
    return VIEW_LINK_TEMPLATE.format(file_id=file_id)


__all__ = ["download_link", "view_link"]
