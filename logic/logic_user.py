from typing import Any, Dict

import gradio as gr

from log_config import get_logger
from .logic_nav import current_screen, login_succeeded, switch_page
from .logic_validator import validate_login

logger = get_logger(__name__)

LOGIN_PROMPT = "Please sign in with your email and password."


# ================== Auth: login ==================


def login_action(email, password, show_password, nav_state: Dict[str, Any]):
    """
    Gradio callback for the login button.

    Returns:
        login_info, nav_state, email, password, show_password,
        login_panel, dashboard_panel, add_entry_panel
    """
    result = validate_login(email, password)
    if not result.valid:
        logger.info("Login rejected: %s", result.reason)
        return (
            result.reason,
            nav_state,
            gr.update(),  # email unchanged
            gr.update(),  # password unchanged
            gr.update(),  # show_password unchanged
            gr.update(),  # login_panel unchanged
            gr.update(),  # dashboard_panel unchanged
            gr.update(),  # add_entry_panel unchanged
        )

    # No account check: any well-formed input signs in.
    new_nav_state = login_succeeded(nav_state)
    logger.info("Login accepted")

    return (
        LOGIN_PROMPT,
        new_nav_state,
        gr.update(value=""),                     # discard credentials
        gr.update(value="", type="password"),
        gr.update(value=False),
        *switch_page(current_screen(new_nav_state)),
    )


def toggle_password_visibility(show_password: bool):
    """Switch the password textbox between masked and plain text."""
    return gr.update(type="text" if show_password else "password")
