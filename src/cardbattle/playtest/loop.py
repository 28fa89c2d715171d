"""Timed game loop: paces rounds and keeps the flip countdown."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from cardbattle.audio import AudioSink, SafeAudio
from cardbattle.config import DEFAULT_CADENCE
from cardbattle.model.schema import RoundOutcome
from cardbattle.playtest.clock import LogicalClock, RepeatingTimer
from cardbattle.simulation.game import BattleGame
from cardbattle.simulation.state import RoundRecord

logger = logging.getLogger(__name__)


class GameLoop:
    """Plays a round every ``cadence`` time units without being polled.

    Two repeating timers share one :class:`LogicalClock`: a display timer
    that counts ``time_until_next_flip`` down every ``tick_interval`` and a
    round timer that flips cards every ``cadence``. The host advances time
    through :meth:`tick`.
    """

    def __init__(
        self,
        game: BattleGame,
        audio: Optional[AudioSink] = None,
        cadence: float = DEFAULT_CADENCE,
        tick_interval: float = 1.0,
        clock: Optional[LogicalClock] = None,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        if cadence <= 0:
            raise ValueError(f"cadence must be positive, got {cadence}")
        self.game = game
        self.audio = audio if isinstance(audio, SafeAudio) else SafeAudio(audio)
        self.cadence = cadence
        self.tick_interval = tick_interval
        self.clock = clock or LogicalClock()
        self._on_change = on_change

        # Countdown is shown in whole display ticks
        self.countdown_start = max(1, round(cadence / tick_interval))
        self.time_until_next_flip = 0
        self.is_counting_down = False
        self.is_paused = False
        self.last_round: Optional[RoundRecord] = None

        self._countdown_timer: Optional[RepeatingTimer] = None
        self._round_timer: Optional[RepeatingTimer] = None

    @property
    def is_running(self) -> bool:
        return self._round_timer is not None and self._round_timer.active

    def start(self) -> None:
        """Arm both timers and play the first round right away."""
        self.stop()

        self.time_until_next_flip = self.countdown_start
        self.is_counting_down = True
        self.is_paused = False

        self._countdown_timer = self.clock.schedule(self.tick_interval, self._update_countdown, "countdown")
        self._round_timer = self.clock.schedule(self.cadence, self._flip_cards, "flip")
        logger.debug(f"Game loop started at t={self.clock.now:.1f} (cadence {self.cadence})")

        self._flip_cards()

    def stop(self) -> None:
        """Cancel both timers. Safe to call repeatedly."""
        for timer in (self._countdown_timer, self._round_timer):
            if timer is not None:
                timer.cancel()
        self._countdown_timer = None
        self._round_timer = None
        self.is_counting_down = False
        self.time_until_next_flip = 0

    def pause(self) -> bool:
        """Stop the timers, keeping match progress."""
        if not self.is_running:
            return False
        self.stop()
        self.is_paused = True
        logger.info(f"Paused after round {self.game.current_round}")
        return True

    def resume(self) -> bool:
        """Restart the timers if the match can still advance."""
        if not (self.game.is_game_active and self.game.current_round < self.game.max_rounds):
            return False
        logger.info(f"Resuming at round {self.game.current_round}")
        self.start()
        return True

    def tick(self, elapsed: float) -> int:
        """Advance time by ``elapsed`` units, firing any due timers."""
        return self.clock.advance(elapsed)

    def _update_countdown(self) -> None:
        if self.time_until_next_flip > 0:
            self.time_until_next_flip -= 1
        else:
            self.time_until_next_flip = self.countdown_start
        self._changed()

    def _flip_cards(self) -> None:
        if not self.game.is_game_active:
            self.stop()
            self._changed()
            return

        record = self.game.play_round()
        if record is not None:
            self.last_round = record
            self._announce(record)

        if record is None or not self.game.can_play_round():
            self.stop()
        else:
            self.time_until_next_flip = self.countdown_start
        self._changed()

    def _announce(self, record: RoundRecord) -> None:
        # Player 1 is the human seat
        self.audio.card_flip()
        self.audio.round_result(
            player_won=record.outcome is RoundOutcome.PLAYER1_WINS,
            is_tie=record.is_tie,
        )
        if self.game.is_game_over():
            winner = self.game.get_winner()
            self.audio.game_end(player_won=winner is not None and winner is self.game.player1)

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()
