# test/conftest.py

"""
Shared fixtures for the waitlist tests.

Nothing here talks to a real database: the store is an in-memory
stand-in with the same insert-or-ignore behaviour as WaitlistStore.
"""

from typing import Dict, List

import pytest


class FakeWaitlistStore:
    """
    Unique emails, insert-or-ignore.
    With fail=True every write raises like an unreachable database.
    """

    def __init__(self, fail: bool = False):
        self.rows: Dict[str, int] = {}
        self.calls: List[str] = []
        self.fail = fail

    def add_email(self, email: str) -> bool:
        self.calls.append(email)
        if self.fail:
            raise ConnectionError("could not connect to server: Connection refused")
        if email in self.rows:
            return False
        self.rows[email] = 1
        return True

    def count_email(self, email: str) -> int:
        return self.rows.get(email, 0)


@pytest.fixture
def store() -> FakeWaitlistStore:
    return FakeWaitlistStore()


@pytest.fixture
def broken_store() -> FakeWaitlistStore:
    return FakeWaitlistStore(fail=True)
