from typing import Any, Dict

from .logic_nav import current_screen, go_back, open_add_entry, switch_page

ADD_ENTRY_PLACEHOLDER = "Entry form coming soon. Nothing is saved yet."


def open_add_entry_action(nav_state: Dict[str, Any]):
    """Gradio callback for the dashboard "+" button.

    Returns nav_state followed by the three panel visibility updates.
    """
    new_state = open_add_entry(nav_state)
    return (new_state, *switch_page(current_screen(new_state)))


def back_action(nav_state: Dict[str, Any]):
    """Gradio callback for the add-entry "Back" button."""
    new_state = go_back(nav_state)
    return (new_state, *switch_page(current_screen(new_state)))
