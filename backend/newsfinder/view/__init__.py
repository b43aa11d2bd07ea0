"""View layer: per-session UI state, transitions and HTML rendering."""

from .controller import (
    ViewController,
    apply_outcome,
    back_to_search,
    begin_search,
    clear_parameters,
    close_modal,
)
from .render import render_page
from .sessions import SessionStore
from .state import Modal, Screen, ViewState, initial_state

__all__ = [
    "ViewController",
    "SessionStore",
    "apply_outcome",
    "back_to_search",
    "begin_search",
    "clear_parameters",
    "close_modal",
    "render_page",
    "initial_state",
    "Modal",
    "Screen",
    "ViewState",
]
