from __future__ import annotations

from certificate_finder.gdrive_search.formatting import format_created_date, format_size
from certificate_finder.gdrive_search.models import FileRecord
from certificate_finder.presentation.controller import SearchViewState

RESULTS_HEADING = "Search results"


def submit_label(state: SearchViewState) -> str:
    return "Searching..." if state.loading else "Search"


def render_record(record: FileRecord) -> str:
    meta = f"{format_size(record.size)} • {format_created_date(record.created_time)}"
    return "\n".join(
        [
            record.name,
            f"  {meta}",
            f"  Preview:  {record.view_link}",
            f"  Download: {record.download_link}",
        ]
    )


def render_results(state: SearchViewState) -> str:
    """Render the error and results area; empty until a search was attempted."""

    if not state.searched:
        return ""

    blocks: list[str] = []
    if state.error:
        blocks.append(f"! {state.error}")
    if state.results:
        blocks.append(RESULTS_HEADING)
        blocks.extend(render_record(record) for record in state.results)
    return "\n\n".join(blocks)


__all__ = ["RESULTS_HEADING", "render_record", "render_results", "submit_label"]
