from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional


# PUBLIC_INTERFACE
def new_todo_id() -> str:
    """Return a fresh random identifier for a todo."""
    return str(uuid.uuid4())


# PUBLIC_INTERFACE
def utc_timestamp(now: Optional[datetime] = None) -> str:
    """
    Format a creation timestamp as an ISO8601 UTC string with a 'Z' suffix.

    Args:
        now: Moment to format. Defaults to the current time. Naive values are
            taken to be UTC already.

    Returns:
        A fixed-width string such as '2025-01-31T13:45:00.123456Z', so that
        lexicographic order matches chronological order.
    """
    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.replace(tzinfo=None).isoformat(timespec="microseconds") + "Z"
