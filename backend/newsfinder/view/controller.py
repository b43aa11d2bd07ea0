"""
View controller: pure transitions over ViewState plus a per-session orchestrator.

Each transition is a function (old state, event) -> new state. ViewController applies them
under a lock and performs the one network call of a search.
"""

import logging
from threading import Lock
from typing import Any, Optional, Protocol

from newsfinder.news.classifier import classify_response
from newsfinder.news.errors import NewsFetchError
from newsfinder.news.schemas import OutcomeKind, SearchOutcome, SearchParameters
from newsfinder.view.state import Modal, Screen, ViewState, initial_state

logger = logging.getLogger(__name__)


class SearchBackend(Protocol):
    """Anything that can turn parameters into a raw response body."""

    def get_json(self, params: SearchParameters) -> Any: ...


# ----- Pure transitions -----


def begin_search(state: ViewState, params: SearchParameters) -> ViewState:
    return state.model_copy(update={"parameters": params, "screen": Screen.LOADING})


def apply_outcome(state: ViewState, outcome: SearchOutcome) -> ViewState:
    """Apply exactly one of Empty / Success / Error."""
    if outcome.kind is OutcomeKind.SUCCESS:
        # Modal is left as it was
        return state.model_copy(update={"screen": Screen.RESULTS, "articles": tuple(outcome.articles)})
    return state.model_copy(
        update={
            "screen": Screen.SEARCH,
            "modal": Modal(message=outcome.message or ""),
            "articles": (),
        }
    )


def clear_parameters(state: ViewState) -> ViewState:
    return state.model_copy(update={"parameters": SearchParameters(), "articles": ()})


def close_modal(state: ViewState) -> ViewState:
    return state.model_copy(update={"modal": None})


def back_to_search(state: ViewState) -> ViewState:
    # Articles are kept but go unused until the next successful search
    return state.model_copy(update={"screen": Screen.SEARCH})


# ----- Orchestrator -----


class ViewController:
    """Holds one session's ViewState and runs searches against a backend."""

    def __init__(self, backend: SearchBackend, state: Optional[ViewState] = None):
        self._backend = backend
        self._state = state or initial_state()
        self._lock = Lock()

    @property
    def state(self) -> ViewState:
        return self._state

    def submit_search(self, params: SearchParameters) -> bool:
        """
        Run a search with `params` to completion.

        Returns False (state untouched) if another search for this session is still
        outstanding; the search action stays disabled until it finishes.
        """
        if not self.start_search(params):
            return False
        self.finish_search(params)
        return True

    def start_search(self, params: SearchParameters) -> bool:
        """Move to LOADING with `params`, or return False if a search is already outstanding."""
        with self._lock:
            if self._state.screen is Screen.LOADING:
                logger.info("Search already in progress; ignoring new submission")
                return False
            self._state = begin_search(self._state, params)
        return True

    def finish_search(self, params: SearchParameters) -> None:
        """Fetch, classify and apply the outcome of a search started with start_search."""
        try:
            body = self._backend.get_json(params)
        except NewsFetchError:
            outcome = SearchOutcome.error()
        except Exception:
            # Never leave the session stuck on LOADING
            with self._lock:
                self._state = apply_outcome(self._state, SearchOutcome.error())
            raise
        else:
            outcome = classify_response(body)

        logger.info("Search finished: %s (%d articles)", outcome.kind.value, len(outcome.articles))
        with self._lock:
            self._state = apply_outcome(self._state, outcome)

    def clear_parameters(self) -> ViewState:
        with self._lock:
            self._state = clear_parameters(self._state)
            return self._state

    def close_modal(self) -> ViewState:
        with self._lock:
            self._state = close_modal(self._state)
            return self._state

    def back_to_search(self) -> ViewState:
        with self._lock:
            self._state = back_to_search(self._state)
            return self._state
