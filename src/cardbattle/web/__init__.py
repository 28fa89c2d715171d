"""Web API for playing card battles."""

from cardbattle.web.app import create_app, run_ticker
from cardbattle.web.dependencies import get_manager, set_manager

__all__ = [
    "create_app",
    "run_ticker",
    "get_manager",
    "set_manager",
]
