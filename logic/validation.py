"""
logic/validation.py
Pure logic: validates the waitlist payload before any storage work happens.
No database calls. Presence and type checks only.
"""

from typing import Any

EMAIL_REQUIRED = "Email required"


def validate_waitlist_email(payload: Any) -> str:
    """
    Pull the email out of a decoded JSON request body.

    Rules:
    - payload must be a JSON object
    - "email" must be present, non-empty and a string
    - the value is returned as received (no trimming, no lower-casing)

    Raises:
        ValueError("Email required") otherwise.
    """
    if not isinstance(payload, dict):
        raise ValueError(EMAIL_REQUIRED)

    email = payload.get("email")
    if not email or not isinstance(email, str):
        raise ValueError(EMAIL_REQUIRED)

    return email
