"""
FastAPI Todo API package.

The application is assembled by ``create_app`` so each caller (the launcher,
tests) gets its own instance wired to its own repository.
"""

from .main import create_app, run

__all__ = ["create_app", "run"]
