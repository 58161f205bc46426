"""
Run the Todo API server.

Usage:
    python -m src.api

Configuration is read from the environment (see settings.py).
"""
from .main import run

if __name__ == "__main__":
    run()
