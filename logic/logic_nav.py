from enum import Enum
from typing import Any, Dict, List

import gradio as gr

from log_config import get_logger

logger = get_logger(__name__)


class Screen(str, Enum):
    LOGIN = "login"
    DASHBOARD = "dashboard"
    ADD_ENTRY = "add_entry"


# Panel order used by switch_page() and the outputs lists in app.py.
PANEL_ORDER: List[Screen] = [Screen.LOGIN, Screen.DASHBOARD, Screen.ADD_ENTRY]


class NavigationError(ValueError):
    """Raised when a navigation state is missing its screen or holds an unknown one."""


def initial_nav_state() -> Dict[str, Any]:
    return {"screen": Screen.LOGIN.value, "history": []}


def _to_screen(value) -> Screen:
    try:
        return Screen(value)
    except ValueError as exc:
        raise NavigationError(f"Unknown screen: {value!r}") from exc


def _history(nav_state: Dict[str, Any]) -> List[str]:
    return list(nav_state.get("history", []))


def current_screen(nav_state: Dict[str, Any]) -> Screen:
    if not isinstance(nav_state, dict) or "screen" not in nav_state:
        raise NavigationError(f"Navigation state has no screen: {nav_state!r}")
    return _to_screen(nav_state["screen"])


def can_go_back(nav_state: Dict[str, Any]) -> bool:
    return current_screen(nav_state) == Screen.ADD_ENTRY


def _transition(nav_state: Dict[str, Any], target: Screen, history: List[str]) -> Dict[str, Any]:
    logger.info("Screen transition: %s -> %s", current_screen(nav_state).value, target.value)
    return {"screen": target.value, "history": history}


def _ignored(nav_state: Dict[str, Any], action: str) -> Dict[str, Any]:
    screen = current_screen(nav_state)
    logger.debug("Ignoring %s on screen %s", action, screen.value)
    return {"screen": screen.value, "history": _history(nav_state)}


def login_succeeded(nav_state: Dict[str, Any]) -> Dict[str, Any]:
    """Login -> Dashboard. History is dropped so Login is never reachable by back."""
    if current_screen(nav_state) != Screen.LOGIN:
        return _ignored(nav_state, "login")
    return _transition(nav_state, Screen.DASHBOARD, [])


def open_add_entry(nav_state: Dict[str, Any]) -> Dict[str, Any]:
    """Dashboard -> AddEntry, with Dashboard pushed on the back stack."""
    if current_screen(nav_state) != Screen.DASHBOARD:
        return _ignored(nav_state, "add-entry")
    history = _history(nav_state) + [Screen.DASHBOARD.value]
    return _transition(nav_state, Screen.ADD_ENTRY, history)


def go_back(nav_state: Dict[str, Any]) -> Dict[str, Any]:
    """AddEntry -> Dashboard. Back is a no-op on every other screen."""
    if not can_go_back(nav_state):
        return _ignored(nav_state, "back")
    history = _history(nav_state)
    previous = _to_screen(history.pop()) if history else Screen.DASHBOARD
    if previous == Screen.LOGIN:
        previous = Screen.DASHBOARD
    return _transition(nav_state, previous, history)


def switch_page(screen: Screen):
    """Return visibility updates for all panels, in PANEL_ORDER."""
    screen = _to_screen(screen)
    return tuple(gr.update(visible=(panel == screen)) for panel in PANEL_ORDER)
