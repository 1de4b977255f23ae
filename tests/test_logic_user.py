import logging

from logic.logic_nav import Screen, current_screen, initial_nav_state
from logic.logic_user import LOGIN_PROMPT, login_action, toggle_password_visibility
from logic.logic_validator import INVALID_EMAIL_MSG, SHORT_PASSWORD_MSG


def _unpack(result):
    msg, nav_state, email, password, show_password, *panels = result
    return msg, nav_state, email, password, show_password, panels


class TestLoginAction:
    """Tests for the login button callback."""

    def test_invalid_email_keeps_login_screen(self):
        state = initial_nav_state()
        msg, nav_state, email, password, show, panels = _unpack(
            login_action("not-an-email", "secret1", False, state)
        )

        assert msg == INVALID_EMAIL_MSG
        assert current_screen(nav_state) == Screen.LOGIN
        # Entered credentials are left alone so the user can correct them
        assert "value" not in email
        assert "value" not in password
        assert all("visible" not in p for p in panels)

    def test_short_password_message(self):
        msg, nav_state, *_ = login_action("user@example.com", "123", True, initial_nav_state())
        assert msg == SHORT_PASSWORD_MSG
        assert current_screen(nav_state) == Screen.LOGIN

    def test_success_switches_to_dashboard(self):
        msg, nav_state, email, password, show, panels = _unpack(
            login_action("user@example.com", "secret1", True, initial_nav_state())
        )

        assert msg == LOGIN_PROMPT
        assert current_screen(nav_state) == Screen.DASHBOARD
        assert nav_state["history"] == []
        assert [p["visible"] for p in panels] == [False, True, False]

    def test_success_discards_credentials(self):
        _, _, email, password, show, _ = _unpack(
            login_action("user@example.com", "secret1", True, initial_nav_state())
        )

        assert email["value"] == ""
        assert password["value"] == ""
        assert password["type"] == "password"
        assert show["value"] is False

    def test_does_not_mutate_incoming_state(self):
        state = initial_nav_state()
        login_action("user@example.com", "secret1", False, state)
        assert state == initial_nav_state()


class TestPasswordToggle:
    def test_show_password(self):
        assert toggle_password_visibility(True)["type"] == "text"

    def test_hide_password(self):
        assert toggle_password_visibility(False)["type"] == "password"


class TestLoginLogging:
    """Login outcomes are logged without credentials."""

    def _user_records(self, caplog):
        return [r for r in caplog.records if r.name == "logic.logic_user"]

    def test_rejection_logged_at_info_without_credentials(self, caplog):
        caplog.set_level(logging.DEBUG)
        login_action("user@example.com", "abc12", False, initial_nav_state())

        records = self._user_records(caplog)
        assert [r.levelno for r in records] == [logging.INFO]
        assert SHORT_PASSWORD_MSG in records[0].getMessage()
        assert "abc12" not in caplog.text
        assert "user@example.com" not in caplog.text

    def test_bad_email_not_logged(self, caplog):
        caplog.set_level(logging.DEBUG)
        login_action("someone-at-example", "hunter22", False, initial_nav_state())

        assert INVALID_EMAIL_MSG in caplog.text
        assert "someone-at-example" not in caplog.text
        assert "hunter22" not in caplog.text

    def test_success_logged_without_credentials(self, caplog):
        caplog.set_level(logging.DEBUG)
        login_action("user@example.com", "secret1", True, initial_nav_state())

        assert any(r.getMessage() == "Login accepted" for r in self._user_records(caplog))
        assert "secret1" not in caplog.text
        assert "user@example.com" not in caplog.text
