from dataclasses import dataclass
from typing import Optional

MIN_PASSWORD_LENGTH = 6

INVALID_EMAIL_MSG = "Please enter a valid email address."
SHORT_PASSWORD_MSG = f"Password must be at least {MIN_PASSWORD_LENGTH} characters."


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a login form check: valid, or invalid with a reason."""

    valid: bool
    reason: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def invalid(cls, reason: str) -> "ValidationResult":
        return cls(valid=False, reason=reason)


def validate_login(email: Optional[str], password: Optional[str]) -> ValidationResult:
    """
    Check a candidate (email, password) pair.

    Rules, in order (only the first failure is reported):
    - email must contain both "@" and "."
    - password must be at least MIN_PASSWORD_LENGTH characters

    Inputs are not trimmed or lower-cased.
    """
    email = email or ""
    password = password or ""

    if "@" not in email or "." not in email:
        return ValidationResult.invalid(INVALID_EMAIL_MSG)

    if len(password) < MIN_PASSWORD_LENGTH:
        return ValidationResult.invalid(SHORT_PASSWORD_MSG)

    return ValidationResult.ok()
