"""Core schema types and enumerations."""

from __future__ import annotations

from enum import Enum


class Suit(Enum):
    """Playing card suits.

    Suits are descriptive only; they never break a tie between ranks.
    """

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self]

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)


# Unicode card symbols
SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}


class Rank(Enum):
    """Playing card ranks, lowest to highest (ace high)."""

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "jack"
    QUEEN = "queen"
    KING = "king"
    ACE = "ace"

    @property
    def strength(self) -> int:
        """Comparison value: 2-10 face value, J=11, Q=12, K=13, A=14."""
        return RANK_STRENGTHS[self]

    @property
    def display_name(self) -> str:
        return RANK_DISPLAY.get(self, self.value)


RANK_STRENGTHS = {rank: strength for strength, rank in enumerate(Rank, start=2)}

RANK_DISPLAY = {
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}


class Side(Enum):
    """Geographic half a player fights for."""

    EAST = "East"
    WEST = "West"

    @property
    def opposite(self) -> "Side":
        return Side.WEST if self is Side.EAST else Side.EAST

    @property
    def color(self) -> str:
        return "blue" if self is Side.EAST else "red"


class GamePhase(Enum):
    """Mutually exclusive match phases."""

    SETUP = "setup"
    LOCATION_SETUP = "location_setup"
    PLAYING = "playing"
    RESULTS = "results"


class RoundOutcome(Enum):
    """Result of comparing the two cards of a round."""

    PLAYER1_WINS = "player1_wins"
    PLAYER2_WINS = "player2_wins"
    TIE = "tie"  # Ties go to the house
