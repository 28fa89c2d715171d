"""Command surface for presentation layers."""

from __future__ import annotations

import dataclasses
import logging
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional

from cardbattle.audio import AudioSink, SafeAudio
from cardbattle.config import GameConfig
from cardbattle.location import Coordinate, LocationProvider, LocationUnavailableError, determine_side
from cardbattle.model.schema import GamePhase, Side
from cardbattle.playtest.clock import LogicalClock
from cardbattle.playtest.loop import GameLoop
from cardbattle.simulation.deck import DeckFactory
from cardbattle.simulation.game import BattleGame
from cardbattle.simulation.players import create_ai_opponent, opponent_for
from cardbattle.simulation.state import Card, MatchStatistics, Player, RoundRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of everything a presentation layer shows."""

    phase: GamePhase
    player1: Optional[Player]
    player2: Optional[Player]
    current_round: int
    max_rounds: int
    rounds: tuple[RoundRecord, ...]
    current_player1_card: Optional[Card]
    current_player2_card: Optional[Card]
    deck_remaining: int
    is_game_active: bool
    time_until_next_flip: int
    is_counting_down: bool
    is_paused: bool
    winner: Optional[Player]
    statistics: MatchStatistics

    @property
    def is_tie(self) -> bool:
        """Finished match with equal scores."""
        return self.phase is GamePhase.RESULTS and self.winner is None

    @property
    def can_resume(self) -> bool:
        return self.is_paused and self.is_game_active and self.current_round < self.max_rounds


Observer = Callable[[GameSnapshot], None]


def _copy(player: Optional[Player]) -> Optional[Player]:
    return dataclasses.replace(player) if player is not None else None


class GameManager:
    """Owns one match and its game loop.

    Every command and every clock tick runs under one lock, so callers on
    different threads (request handlers, a ticker task) never interleave
    mutations. Observers get a fresh :class:`GameSnapshot` after each
    command and after each tick that changed something.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        audio: Optional[AudioSink] = None,
        deck_factory: Optional[DeckFactory] = None,
        clock: Optional[LogicalClock] = None,
    ):
        self.config = config or GameConfig()
        self.game = BattleGame(
            max_rounds=self.config.max_rounds,
            seed=self.config.seed,
            deck_factory=deck_factory,
        )
        self.audio = SafeAudio(audio)
        self.loop = GameLoop(
            self.game,
            self.audio,
            cadence=self.config.cadence,
            tick_interval=self.config.tick_interval,
            clock=clock,
            on_change=self._mark_dirty,
        )
        self._observers: List[Observer] = []
        self._lock = threading.RLock()
        self._dirty = False

        self._setup_ai_opponent()

    def _setup_ai_opponent(self) -> None:
        self.game.seat_opponent(create_ai_opponent(Side.WEST, self.config.opponent_name))

    # Commands

    def setup_player(self, name: str, side: Side, location: Optional[Coordinate] = None) -> Optional[Player]:
        """Seat the human as player 1 and the opponent on the other side."""
        name = name.strip()
        if not name:
            raise ValueError("Player name must not be empty")

        with self._lock:
            human = Player(name=name, side=side, location=location)
            if not self.game.assign_players(human, opponent_for(human, self.config.opponent_name)):
                return None
            logger.info(f"{name} joins the {side.value} side")
            self._publish()
            return human

    def setup_player_from_coordinate(self, name: str, coordinate: Coordinate) -> Optional[Player]:
        side = determine_side(coordinate, self.config.reference_latitude)
        return self.setup_player(name, side, coordinate)

    def request_location(self, provider: LocationProvider) -> Coordinate:
        """Ask the provider for the human's coordinate.

        Raises:
            LocationUnavailableError: Provider could not supply one. The
                match is left in location setup until a retry succeeds.
        """
        with self._lock:
            if self.game.begin_location_setup():
                self._publish()
        try:
            return provider.request_location()
        except LocationUnavailableError as e:
            logger.warning(f"Location unavailable: {e}")
            raise

    def start_game(self) -> bool:
        with self._lock:
            if not self.game.start_game():
                logger.warning(f"Cannot start game during {self.game.phase.value} "
                               f"(players seated: {self.game.player1 is not None and self.game.player2 is not None})")
                return False
            self.audio.game_start()
            self.loop.start()
            self._publish()
            return True

    def pause_game(self) -> bool:
        with self._lock:
            paused = self.loop.pause()
            if paused:
                self._publish()
            return paused

    def resume_game(self) -> bool:
        with self._lock:
            resumed = self.loop.resume()
            if resumed:
                self._publish()
            return resumed

    def reset_game(self) -> None:
        with self._lock:
            self.loop.stop()
            self.loop.is_paused = False
            self.loop.last_round = None
            self.game.reset_game()
            self._setup_ai_opponent()
            logger.info("Game reset")
            self._publish()

    def tick(self, elapsed: float) -> int:
        """Advance the game clock; returns the number of timer firings."""
        with self._lock:
            fired = self.loop.tick(elapsed)
            if self._dirty:
                self._publish()
            return fired

    # Observation

    def snapshot(self) -> GameSnapshot:
        with self._lock:
            game = self.game
            player1 = _copy(game.player1)
            player2 = _copy(game.player2)
            winner = game.get_winner() if game.phase is GamePhase.RESULTS else None
            if winner is not None:
                winner = player1 if winner is game.player1 else player2
            return GameSnapshot(
                phase=game.phase,
                player1=player1,
                player2=player2,
                current_round=game.current_round,
                max_rounds=game.max_rounds,
                rounds=tuple(game.rounds),
                current_player1_card=game.current_player1_card,
                current_player2_card=game.current_player2_card,
                deck_remaining=len(game.deck),
                is_game_active=game.is_game_active,
                time_until_next_flip=self.loop.time_until_next_flip,
                is_counting_down=self.loop.is_counting_down,
                is_paused=self.loop.is_paused,
                winner=winner,
                statistics=game.statistics(),
            )

    def subscribe(self, observer: Observer) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _mark_dirty(self) -> None:
        self._dirty = True

    def _publish(self) -> None:
        self._dirty = False
        if not self._observers:
            return
        snap = self.snapshot()
        for observer in list(self._observers):
            try:
                observer(snap)
            except Exception:
                logger.exception("Snapshot observer failed")
