"""Scripted opponent."""

from typing import Optional

from cardbattle.model.schema import Side
from cardbattle.simulation.state import Player

AI_OPPONENT_NAME = "AI Opponent"


def create_ai_opponent(side: Side = Side.WEST, name: Optional[str] = None) -> Player:
    """Seat the scripted opponent.

    The opponent never chooses anything: it simply flips the second card
    of every round, so it only needs a name and a side.
    """
    return Player(name=name or AI_OPPONENT_NAME, side=side)


def opponent_for(human: Player, name: Optional[str] = None) -> Player:
    """Opponent on the side opposite the human."""
    return create_ai_opponent(side=human.side.opposite, name=name)
