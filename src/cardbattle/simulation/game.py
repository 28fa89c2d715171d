"""Card battle match state machine."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from cardbattle.config import DECK_SIZE, DEFAULT_MAX_ROUNDS
from cardbattle.model.schema import GamePhase, RoundOutcome
from cardbattle.simulation.deck import DeckFactory, create_deck
from cardbattle.simulation.resolver import resolve
from cardbattle.simulation.state import Card, MatchStatistics, Player, RoundRecord

logger = logging.getLogger(__name__)


class BattleGame:
    """One shared deck, two players, a fixed number of rounds.

    Sole owner of the phase, players, deck and round history. Operations
    whose preconditions fail report that nothing happened (None/False)
    and leave every field untouched.
    """

    def __init__(
        self,
        max_rounds: int = DEFAULT_MAX_ROUNDS,
        seed: Optional[int] = None,
        deck_factory: Optional[DeckFactory] = None,
    ) -> None:
        """Initialize in the setup phase with a shuffled deck."""
        if not 1 <= max_rounds <= DECK_SIZE // 2:
            raise ValueError(f"max_rounds must be between 1 and {DECK_SIZE // 2}, got {max_rounds}")
        self.max_rounds = max_rounds
        self.rng = random.Random(seed)
        self._deck_factory = deck_factory or (lambda: create_deck(self.rng))

        self.phase = GamePhase.SETUP
        self.player1: Optional[Player] = None
        self.player2: Optional[Player] = None
        self.current_round = 0
        self.rounds: List[RoundRecord] = []
        self.deck: List[Card] = []
        self.is_game_active = False
        self.current_player1_card: Optional[Card] = None
        self.current_player2_card: Optional[Card] = None

        self.reset_game()

    def reset_game(self) -> None:
        """Return to setup with no players and a fresh deck."""
        self.phase = GamePhase.SETUP
        self.player1 = None
        self.player2 = None
        self.current_round = 0
        self.rounds = []
        self.deck = list(self._deck_factory())
        self.is_game_active = False
        self.current_player1_card = None
        self.current_player2_card = None

    def begin_location_setup(self) -> bool:
        """Move from setup to location setup."""
        if self.phase is not GamePhase.SETUP:
            return False
        self.phase = GamePhase.LOCATION_SETUP
        return True

    def assign_players(self, player1: Player, player2: Player) -> bool:
        """Seat both players. Only allowed before the match starts."""
        if self.phase not in (GamePhase.SETUP, GamePhase.LOCATION_SETUP):
            logger.warning(f"Cannot assign players during {self.phase.value}")
            return False
        self.player1 = player1
        self.player2 = player2
        self.begin_location_setup()
        return True

    def seat_opponent(self, player2: Player) -> bool:
        """Seat (or replace) the second player before the match starts."""
        if self.phase not in (GamePhase.SETUP, GamePhase.LOCATION_SETUP):
            return False
        self.player2 = player2
        return True

    def start_game(self) -> bool:
        """Start the match. No-op unless both players are seated."""
        if self.player1 is None or self.player2 is None:
            return False
        if self.phase not in (GamePhase.SETUP, GamePhase.LOCATION_SETUP):
            return False

        self.deck = list(self._deck_factory())
        self.current_round = 0
        self.rounds = []
        self.current_player1_card = None
        self.current_player2_card = None
        self.player1.score = 0
        self.player2.score = 0
        self.is_game_active = True
        self.phase = GamePhase.PLAYING
        logger.info(f"Match started: {self.player1.name} ({self.player1.side.value}) "
                    f"vs {self.player2.name} ({self.player2.side.value})")
        return True

    def can_play_round(self) -> bool:
        return (
            self.is_game_active
            and self.current_round < self.max_rounds
            and len(self.deck) >= 2
        )

    def play_round(self) -> Optional[RoundRecord]:
        """Draw one card each, score the round and record it.

        Returns None when no round can be played.
        """
        if not self.can_play_round():
            return None
        assert self.player1 is not None and self.player2 is not None

        card1 = self.deck.pop(0)
        card2 = self.deck.pop(0)
        self.current_player1_card = card1
        self.current_player2_card = card2

        self.current_round += 1
        record = RoundRecord(
            round_number=self.current_round,
            player1_card=card1,
            player2_card=card2,
            outcome=resolve(card1, card2),
        )
        self.rounds.append(record)

        if record.outcome is RoundOutcome.PLAYER1_WINS:
            self.player1.increment_score()
        elif record.outcome is RoundOutcome.PLAYER2_WINS:
            self.player2.increment_score()

        logger.debug(f"Round {record.round_number}: {card1} vs {card2} -> {record.outcome.value}")

        # Round limit reached, or the shared deck cannot supply another pair
        if self.current_round >= self.max_rounds or len(self.deck) < 2:
            self._end_game()

        return record

    def _end_game(self) -> None:
        self.is_game_active = False
        self.phase = GamePhase.RESULTS
        winner = self.get_winner()
        logger.info(f"Match over after {self.current_round} rounds: "
                    f"{winner.name + ' wins' if winner else 'tie'}")

    def is_game_over(self) -> bool:
        return self.phase is GamePhase.RESULTS

    def get_winner(self) -> Optional[Player]:
        """Player with the strictly higher score, None on a tie."""
        if self.player1 is None or self.player2 is None:
            return None
        if self.player1.score > self.player2.score:
            return self.player1
        if self.player2.score > self.player1.score:
            return self.player2
        return None

    def statistics(self) -> MatchStatistics:
        return MatchStatistics.from_history(self.rounds)
