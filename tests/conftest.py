"""Shared fixtures: forced-order decks and a recording audio sink."""

from typing import Callable, List

import pytest

from cardbattle.model.schema import Rank, Suit
from cardbattle.simulation.state import Card

RANKS = list(Rank)


class RecordingAudioSink:
    """Audio sink that remembers every event it receives."""

    def __init__(self):
        self.events: list[tuple] = []

    def game_start(self) -> None:
        self.events.append(("game_start",))

    def card_flip(self) -> None:
        self.events.append(("card_flip",))

    def round_result(self, player_won: bool, is_tie: bool) -> None:
        self.events.append(("round_result", player_won, is_tie))

    def game_end(self, player_won: bool) -> None:
        self.events.append(("game_end", player_won))

    def names(self) -> list[str]:
        return [event[0] for event in self.events]


def player1_always_wins_deck() -> List[Card]:
    """52 cards where every drawn pair favours the first card."""
    deck: List[Card] = []
    for k in range(6):
        high, low = RANKS[12 - k], RANKS[k]
        for suit in Suit:
            deck.extend([Card(suit=suit, rank=high), Card(suit=suit, rank=low)])
    deck.extend(Card(suit=suit, rank=Rank.EIGHT) for suit in Suit)
    return deck


def player2_always_wins_deck() -> List[Card]:
    deck = player1_always_wins_deck()
    swapped: List[Card] = []
    for i in range(0, 48, 2):
        swapped.extend([deck[i + 1], deck[i]])
    return swapped + deck[48:]


def all_ties_deck() -> List[Card]:
    """52 cards where every drawn pair has equal rank."""
    deck: List[Card] = []
    for rank in Rank:
        deck.extend([
            Card(suit=Suit.HEARTS, rank=rank),
            Card(suit=Suit.DIAMONDS, rank=rank),
            Card(suit=Suit.CLUBS, rank=rank),
            Card(suit=Suit.SPADES, rank=rank),
        ])
    return deck


@pytest.fixture
def recording_audio() -> RecordingAudioSink:
    return RecordingAudioSink()


@pytest.fixture
def winning_deck() -> Callable[[], List[Card]]:
    return player1_always_wins_deck


@pytest.fixture
def losing_deck() -> Callable[[], List[Card]]:
    return player2_always_wins_deck


@pytest.fixture
def tie_deck() -> Callable[[], List[Card]]:
    return all_ties_deck
