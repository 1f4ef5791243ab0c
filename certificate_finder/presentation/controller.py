"""State machine behind the NISN search form."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from certificate_finder.gdrive_search.errors import ErrorClassification, SearchError
from certificate_finder.gdrive_search.models import FileRecord
from certificate_finder.gdrive_search.validation import NISN_LENGTH, filter_identifier_input

logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "No certificate found for that NISN"


class SearchClient(Protocol):
    def search(self, identifier: str) -> list[FileRecord]: ...


class SearchStatus(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    SUCCESS = "success"
    EMPTY = "empty"
    ERROR = "error"


@dataclass(slots=True)
class SearchViewState:
    identifier: str = ""
    results: list[FileRecord] = field(default_factory=list)
    loading: bool = False
    error: str = ""
    error_kind: ErrorClassification | None = None
    searched: bool = False
    status: SearchStatus = SearchStatus.IDLE


class SearchController:
    """Owns the form state and runs at most one search at a time."""

    def __init__(self, client: SearchClient) -> None:
        self._client = client
        self._state = SearchViewState()

    @property
    def state(self) -> SearchViewState:
        return self._state

    @property
    def identifier(self) -> str:
        return self._state.identifier

    @property
    def error_kind(self) -> ErrorClassification | None:
        return self._state.error_kind

    @property
    def can_submit(self) -> bool:
        return not self._state.loading and len(self._state.identifier) == NISN_LENGTH

    def update_input(self, raw: str) -> str:
        self._state.identifier = filter_identifier_input(raw)
        return self._state.identifier

    def submit(self) -> bool:
        """Run a search for the current input.

        Returns False without touching the state when the form is not
        submittable, including while another search is still running.
        """

        if not self.can_submit:
            logger.debug(
                "Ignoring submit",
                extra={"loading": self._state.loading, "length": len(self._state.identifier)},
            )
            return False

        state = self._state
        state.error = ""
        state.error_kind = None
        state.results = []
        state.loading = True
        state.searched = True
        state.status = SearchStatus.SEARCHING

        try:
            files = self._client.search(state.identifier)
        except SearchError as exc:
            state.status = SearchStatus.ERROR
            state.error = exc.message
            state.error_kind = exc.kind
        else:
            state.results = list(files)
            if state.results:
                state.status = SearchStatus.SUCCESS
            else:
                state.status = SearchStatus.EMPTY
                state.error = NO_RESULTS_MESSAGE
        finally:
            state.loading = False
        return True


__all__ = [
    "NO_RESULTS_MESSAGE",
    "SearchClient",
    "SearchController",
    "SearchStatus",
    "SearchViewState",
]
