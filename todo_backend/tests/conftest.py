from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.api.db import SQLiteRepository
from src.api.main import create_app
from src.api.settings import Settings


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        sqlite_db_path=str(tmp_path / "todos.db"),
        cors_allow_origins=["*"],
    )


@pytest.fixture
def repo(settings: Settings) -> SQLiteRepository:
    return SQLiteRepository(settings.sqlite_db_path)


@pytest.fixture
def client(settings: Settings, repo: SQLiteRepository) -> TestClient:
    """A client over a fresh app backed by its own database file."""
    return TestClient(create_app(settings, repository=repo))
