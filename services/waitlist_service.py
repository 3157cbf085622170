# services/waitlist_service.py
from __future__ import annotations

import logging
from typing import Any, Optional

from logic.results import Ok, StorageError, ValidationError, WaitlistResult
from logic.validation import validate_waitlist_email
from services.waitlist_store import WaitlistStore, get_store

logger = logging.getLogger(__name__)


def submit_waitlist(payload: Any, store: Optional[WaitlistStore] = None) -> WaitlistResult:
    """
    Validate a decoded request body and add its email to the waitlist.

    Never raises for bad input or storage trouble; the outcome comes back
    as Ok, ValidationError or StorageError.
    """
    try:
        email = validate_waitlist_email(payload)
    except ValueError as e:
        logger.debug("waitlist payload rejected: %s", e)
        return ValidationError(message=str(e))

    if store is None:
        store = get_store()
    try:
        inserted = store.add_email(email)
    except Exception as e:
        logger.exception("Error inserting email into waitlist")
        return StorageError(detail=str(e))

    if not inserted:
        logger.debug("waitlist email already present")
    return Ok(inserted=inserted)
