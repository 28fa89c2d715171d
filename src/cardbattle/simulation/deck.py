"""Deck factory."""

from __future__ import annotations

import random
from typing import Callable, List, Optional

from cardbattle.model.schema import Rank, Suit
from cardbattle.simulation.state import Card

DeckFactory = Callable[[], List[Card]]


def standard_cards() -> List[Card]:
    """All 52 suit x rank combinations in suit-major order."""
    return [Card(suit=suit, rank=rank) for suit in Suit for rank in Rank]


def create_deck(rng: Optional[random.Random] = None) -> List[Card]:
    """Create a shuffled 52-card deck."""
    if rng is None:
        rng = random.Random()
    deck = standard_cards()
    rng.shuffle(deck)
    return deck
