"""Timed play of a card battle match."""

from cardbattle.playtest.clock import LogicalClock, RealtimeDriver, RepeatingTimer
from cardbattle.playtest.loop import GameLoop
from cardbattle.playtest.manager import GameManager, GameSnapshot
from cardbattle.playtest.display import StateRenderer, ResultsRenderer, format_card

__all__ = [
    "LogicalClock",
    "RealtimeDriver",
    "RepeatingTimer",
    "GameLoop",
    "GameManager",
    "GameSnapshot",
    "StateRenderer",
    "ResultsRenderer",
    "format_card",
]
