"""Audio notification collaborators.

The game loop reports four lifecycle events. Sinks are fire-and-forget:
nothing they do, including raising, may affect game state, so the loop
always talks to them through :class:`SafeAudio`.
"""

from __future__ import annotations

import logging
import sys
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class AudioSink(Protocol):
    """Receives game lifecycle events."""

    def game_start(self) -> None: ...

    def card_flip(self) -> None: ...

    def round_result(self, player_won: bool, is_tie: bool) -> None: ...

    def game_end(self, player_won: bool) -> None: ...


class NullAudioSink:
    """Discards every event."""

    def game_start(self) -> None:
        pass

    def card_flip(self) -> None:
        pass

    def round_result(self, player_won: bool, is_tie: bool) -> None:
        pass

    def game_end(self, player_won: bool) -> None:
        pass


def _clamp(volume: float) -> float:
    return max(0.0, min(1.0, volume))


class LoggingAudioSink:
    """Maps lifecycle events onto named sound cues and logs them.

    Keeps the mixer settings (mute, background and effects volume) and
    whether background music is running. Subclasses override
    :meth:`play_effect` to actually make noise.
    """

    FLIP = "flip_sound"
    WIN = "win_sound"
    LOSE = "lose_sound"

    def __init__(self, background_volume: float = 0.3, effects_volume: float = 0.7, muted: bool = False):
        self.background_volume = _clamp(background_volume)
        self.effects_volume = _clamp(effects_volume)
        self.is_muted = muted
        self.background_playing = False
        self.played: list[str] = []

    # Mixer

    def set_background_volume(self, volume: float) -> None:
        self.background_volume = _clamp(volume)

    def set_effects_volume(self, volume: float) -> None:
        self.effects_volume = _clamp(volume)

    def toggle_mute(self) -> None:
        self.is_muted = not self.is_muted
        logger.debug(f"Audio {'muted' if self.is_muted else 'unmuted'}")

    # Events

    def game_start(self) -> None:
        if self.is_muted:
            return
        self.background_playing = True
        logger.debug(f"Background music on (volume {self.background_volume:.1f})")

    def card_flip(self) -> None:
        self._effect(self.FLIP)

    def round_result(self, player_won: bool, is_tie: bool) -> None:
        if is_tie:
            # Neutral cue for ties
            self._effect(self.FLIP)
        elif player_won:
            self._effect(self.WIN)
        else:
            self._effect(self.LOSE)

    def game_end(self, player_won: bool) -> None:
        self.background_playing = False
        self._effect(self.WIN if player_won else self.LOSE)

    def _effect(self, name: str) -> None:
        if self.is_muted:
            return
        self.played.append(name)
        self.play_effect(name)

    def play_effect(self, name: str) -> None:
        logger.debug(f"Sound effect {name} (volume {self.effects_volume:.1f})")


class TerminalAudioSink(LoggingAudioSink):
    """Rings the terminal bell for win and lose cues."""

    def __init__(self, output_fn: Optional[Callable[[str], None]] = None, **kwargs):
        super().__init__(**kwargs)
        self._output_fn = output_fn

    def play_effect(self, name: str) -> None:
        super().play_effect(name)
        if name == self.FLIP:
            return
        if self._output_fn is not None:
            self._output_fn("\a")
        else:
            sys.stdout.write("\a")
            sys.stdout.flush()


class SafeAudio:
    """Forwards events to a sink, logging and swallowing its failures."""

    def __init__(self, sink: Optional[AudioSink] = None):
        self.sink: AudioSink = sink if sink is not None else NullAudioSink()

    def _call(self, event: str, *args) -> None:
        try:
            getattr(self.sink, event)(*args)
        except Exception:
            logger.exception(f"Audio sink failed on {event}")

    def game_start(self) -> None:
        self._call("game_start")

    def card_flip(self) -> None:
        self._call("card_flip")

    def round_result(self, player_won: bool, is_tie: bool) -> None:
        self._call("round_result", player_won, is_tie)

    def game_end(self, player_won: bool) -> None:
        self._call("game_end", player_won)


class BackgroundAudioSink:
    """Runs another sink's events on a worker thread.

    A single worker keeps cues in order while the caller returns
    immediately. Call :meth:`shutdown` when the match is over.
    """

    def __init__(self, sink: AudioSink, executor: Optional[ThreadPoolExecutor] = None):
        self.sink = sink
        self._executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="audio")

    def _submit(self, event: str, *args) -> None:
        future = self._executor.submit(getattr(self.sink, event), *args)
        future.add_done_callback(lambda f: self._report(event, f))

    @staticmethod
    def _report(event: str, future: Future) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.error(f"Background audio failed on {event}: {exc}")

    def game_start(self) -> None:
        self._submit("game_start")

    def card_flip(self) -> None:
        self._submit("card_flip")

    def round_result(self, player_won: bool, is_tie: bool) -> None:
        self._submit("round_result", player_won, is_tie)

    def game_end(self, player_won: bool) -> None:
        self._submit("game_end", player_won)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)
