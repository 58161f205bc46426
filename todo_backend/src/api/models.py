from __future__ import annotations

from typing import TypedDict


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A decoded row of the todos table.

    Fields:
    - id: Opaque unique identifier generated by the server (UUID text)
    - text: Trimmed, non-empty todo text
    - completed: Completion flag, already converted from the stored 0/1
    - created_at: ISO8601 UTC creation timestamp, kept as the stored string
    """

    id: str
    text: str
    completed: bool
    created_at: str
