# client/waitlist_form.py

"""
Form model behind the landing page's waitlist box.

Holds the typed email and a four-value status and relays submissions
to POST /api/waitlist. static/index.html runs the same rules in the
browser; this module is the Python-side copy used by scripts and tests.

Status flow:
    idle -> loading -> success | error
    success | error -> loading   (on resubmission)
"""

import logging
from enum import Enum
from typing import Optional

import requests

logger = logging.getLogger(__name__)

API_URL = "/api/waitlist"
REQUEST_TIMEOUT_SECONDS = 10


class FormStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class WaitlistForm:
    def __init__(self, api_url: str = API_URL, session: Optional[requests.Session] = None):
        self.api_url = api_url
        self.session = session or requests.Session()
        self.email = ""
        self.status = FormStatus.IDLE

    @property
    def submit_disabled(self) -> bool:
        return self.status == FormStatus.LOADING

    @property
    def button_label(self) -> str:
        return "Submitting…" if self.status == FormStatus.LOADING else "Join the waitlist"

    @property
    def message(self) -> Optional[str]:
        if self.status == FormStatus.SUCCESS:
            return "You're on the list. We'll be in touch soon."
        if self.status == FormStatus.ERROR:
            return "Something went wrong. Please try again."
        return None

    def submit(self) -> FormStatus:
        """
        Send the current email. Empty input and in-flight requests are no-ops.

        A 2xx response clears the input and lands on success; anything else,
        including a network failure, lands on error with the input kept.
        There is no retry: the user resubmits by hand.
        """
        if not self.email or self.submit_disabled:
            return self.status

        self.status = FormStatus.LOADING
        try:
            res = self.session.post(
                self.api_url,
                json={"email": self.email},
                timeout=REQUEST_TIMEOUT_SECONDS,
            )
            if not (200 <= res.status_code < 300):
                raise requests.HTTPError(f"Request failed ({res.status_code})", response=res)
        except requests.RequestException as e:
            logger.warning("waitlist submission failed: %s", e)
            self.status = FormStatus.ERROR
            return self.status

        self.status = FormStatus.SUCCESS
        self.email = ""
        return self.status
