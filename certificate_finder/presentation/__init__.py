"""Form state and text rendering for certificate searches."""

from __future__ import annotations

from certificate_finder.presentation.controller import (
    NO_RESULTS_MESSAGE,
    SearchController,
    SearchStatus,
    SearchViewState,
)
from certificate_finder.presentation.render import render_record, render_results, submit_label

__all__ = [
    "NO_RESULTS_MESSAGE",
    "SearchController",
    "SearchStatus",
    "SearchViewState",
    "render_record",
    "render_results",
    "submit_label",
]
