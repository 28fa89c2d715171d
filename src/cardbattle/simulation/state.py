"""Card, player and round value types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING
import uuid

from cardbattle.model.schema import Rank, RoundOutcome, Side, Suit

if TYPE_CHECKING:
    from cardbattle.location import Coordinate


@dataclass(frozen=True)
class Card:
    """Immutable playing card."""

    suit: Suit
    rank: Rank

    @property
    def strength(self) -> int:
        return self.rank.strength

    @property
    def display_name(self) -> str:
        return f"{self.rank.display_name}{self.suit.symbol}"

    @property
    def image_name(self) -> str:
        """Asset key, e.g. ``queen_of_hearts``."""
        return f"{self.rank.value}_of_{self.suit.value}"

    def __str__(self) -> str:
        return self.display_name


@dataclass
class Player:
    """Score-bearing participant bound to a side."""

    name: str
    side: Side
    score: int = 0
    location: Optional["Coordinate"] = None
    player_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def increment_score(self) -> None:
        self.score += 1


@dataclass(frozen=True)
class RoundRecord:
    """One resolved round. Never mutated once appended to history."""

    round_number: int
    player1_card: Card
    player2_card: Card
    outcome: RoundOutcome

    @property
    def is_tie(self) -> bool:
        return self.outcome is RoundOutcome.TIE


@dataclass(frozen=True)
class MatchStatistics:
    """Round tallies for the results screen."""

    total_rounds: int
    ties: int
    player1_wins: int
    player2_wins: int

    @classmethod
    def from_history(cls, history: "tuple[RoundRecord, ...] | list[RoundRecord]") -> "MatchStatistics":
        outcomes = [r.outcome for r in history]
        return cls(
            total_rounds=len(outcomes),
            ties=outcomes.count(RoundOutcome.TIE),
            player1_wins=outcomes.count(RoundOutcome.PLAYER1_WINS),
            player2_wins=outcomes.count(RoundOutcome.PLAYER2_WINS),
        )
