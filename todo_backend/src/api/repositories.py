from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from .models import TodoEntity
from .settings import Settings, get_settings


# PUBLIC_INTERFACE
class Repository(ABC):
    """
    Abstract storage contract for todo rows.

    Every method is a single atomic statement. Failures of the underlying
    medium surface as StorageError.
    """

    @abstractmethod
    def init_schema(self) -> None:
        """Ensure the todos table exists. Idempotent, never drops data."""

    @abstractmethod
    def insert(self, todo_id: str, text: str, created_at: str) -> TodoEntity:
        """Insert a new, not yet completed row and return it."""

    @abstractmethod
    def get_by_id(self, todo_id: str) -> Optional[TodoEntity]:
        """Return the row with this id, or None if there is none."""

    @abstractmethod
    def list_all(self) -> List[TodoEntity]:
        """Return every row, newest createdAt first."""

    @abstractmethod
    def update_completed(self, todo_id: str, completed: bool) -> None:
        """
        Set the completed flag. Affects zero rows when the id is absent;
        callers check existence themselves to tell the two cases apart.
        """

    @abstractmethod
    def delete_by_id(self, todo_id: str) -> None:
        """Remove the row if present. Deleting an absent id is not an error."""


# PUBLIC_INTERFACE
def create_repository(settings: Optional[Settings] = None) -> Repository:
    """
    Build the configured repository. The todos table is created on
    construction, so the returned instance is ready to serve requests.
    """
    from .db import SQLiteRepository

    settings = settings or get_settings()
    return SQLiteRepository(settings.sqlite_db_path)
