import argparse
import sys

import gradio as gr

import app_config
from dash_board import DASHBOARD_CSS, DASHBOARD_TITLE, render_dashboard
from log_config import get_logger, setup_logging
from logic.logic_entry import ADD_ENTRY_PLACEHOLDER, back_action, open_add_entry_action
from logic.logic_nav import initial_nav_state
from logic.logic_user import LOGIN_PROMPT, login_action, toggle_password_visibility

logger = get_logger(__name__)


def build_demo() -> gr.Blocks:
    with gr.Blocks(title=app_config.APP_TITLE, css=DASHBOARD_CSS) as demo:
        # Per-session navigation state
        nav_state = gr.State(initial_nav_state())

        # ========== Login panel ==========
        with gr.Column(visible=True) as login_panel:
            gr.Markdown("## 🌿 Wellness Assistant Login")
            login_email = gr.Textbox(label="Email")
            login_password = gr.Textbox(label="Password", type="password")
            show_password = gr.Checkbox(label="Show password", value=False)
            login_button = gr.Button("Log in", variant="primary")
            login_info = gr.Markdown(LOGIN_PROMPT)

        # ========== Dashboard panel ==========
        with gr.Column(visible=False) as dashboard_panel:
            gr.Markdown(DASHBOARD_TITLE)
            gr.HTML(render_dashboard())
            add_entry_button = gr.Button("+", variant="primary")

        # ========== Add entry panel ==========
        with gr.Column(visible=False) as add_entry_panel:
            gr.Markdown("## ➕ Add entry")
            gr.Markdown(ADD_ENTRY_PLACEHOLDER)
            back_button = gr.Button("Back")

        panels = [login_panel, dashboard_panel, add_entry_panel]

        # ====== Event bindings ======

        login_button.click(
            login_action,
            inputs=[login_email, login_password, show_password, nav_state],
            outputs=[
                login_info,
                nav_state,
                login_email,
                login_password,
                show_password,
                *panels,
            ],
        )

        show_password.change(
            toggle_password_visibility,
            inputs=[show_password],
            outputs=[login_password],
        )

        add_entry_button.click(
            open_add_entry_action,
            inputs=[nav_state],
            outputs=[nav_state, *panels],
        )

        back_button.click(
            back_action,
            inputs=[nav_state],
            outputs=[nav_state, *panels],
        )

    return demo


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run the wellness assistant UI.")
    parser.add_argument("--host", type=str, default=app_config.SERVER_NAME)
    parser.add_argument("--port", type=int, default=app_config.SERVER_PORT)
    parser.add_argument("--share", action="store_true", default=app_config.SHARE)
    parser.add_argument("--log-level", type=str, default=app_config.LOG_LEVEL)
    args, _unknown = parser.parse_known_args(sys.argv[1:] if argv is None else argv)
    return args


def main(argv=None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_level)
    logger.info("Starting %s on %s:%s", app_config.APP_TITLE, args.host, args.port)
    demo = build_demo()
    demo.launch(server_name=args.host, server_port=args.port, share=args.share)


if __name__ == "__main__":
    main()
