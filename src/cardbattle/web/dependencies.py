"""FastAPI dependency injection."""

from __future__ import annotations

from cardbattle.audio import LoggingAudioSink
from cardbattle.config import GameConfig
from cardbattle.playtest.manager import GameManager


# Singleton manager instance
_manager: GameManager | None = None


def get_manager() -> GameManager:
    """Get the game manager singleton."""
    global _manager
    if _manager is None:
        _manager = GameManager(GameConfig.from_env(), audio=LoggingAudioSink())
    return _manager


def set_manager(manager: GameManager | None) -> None:
    """Replace the singleton (tests, embedding)."""
    global _manager
    _manager = manager
