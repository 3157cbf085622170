"""
logic/results.py
Tagged outcomes of a waitlist submission.

The service returns one of these instead of raising, and app.py maps
each tag to an HTTP status. Keeps the core free of transport concerns.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Ok:
    # False when the email was already on the list (no-op insert).
    inserted: bool = True


@dataclass(frozen=True)
class ValidationError:
    message: str


@dataclass(frozen=True)
class StorageError:
    # Server-side only. Never sent to the caller.
    detail: str


WaitlistResult = Union[Ok, ValidationError, StorageError]
