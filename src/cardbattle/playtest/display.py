"""Terminal display for the battle screen and results."""

from __future__ import annotations

from typing import Optional

from cardbattle.model.schema import GamePhase, RoundOutcome
from cardbattle.playtest.manager import GameSnapshot
from cardbattle.simulation.state import Card, Player, RoundRecord

RECENT_ROUNDS = 5


def format_card(card: Optional[Card]) -> str:
    """Format card with unicode suit symbol, or a face-down placeholder."""
    if card is None:
        return "[??]"
    return f"[{card.display_name}]"


def format_player(player: Optional[Player], fallback: str) -> str:
    if player is None:
        return fallback
    return f"{player.name} ({player.side.value})"


def describe_round(record: RoundRecord, player1_name: str, player2_name: str) -> str:
    """One-line summary, e.g. ``Round 3: 7♠ (7) vs K♥ (13) - AI Opponent wins``."""
    if record.outcome is RoundOutcome.PLAYER1_WINS:
        verdict = f"{player1_name} wins"
    elif record.outcome is RoundOutcome.PLAYER2_WINS:
        verdict = f"{player2_name} wins"
    else:
        verdict = "tie (house)"
    return (
        f"Round {record.round_number}: "
        f"{record.player1_card.display_name} ({record.player1_card.strength}) vs "
        f"{record.player2_card.display_name} ({record.player2_card.strength}) - {verdict}"
    )


class StateRenderer:
    """Renders the in-match battle screen."""

    def render(self, snapshot: GameSnapshot, debug: bool = False) -> str:
        lines: list[str] = []
        p1_name = snapshot.player1.name if snapshot.player1 else "Player 1"
        p2_name = snapshot.player2.name if snapshot.player2 else "Player 2"

        # Header
        lines.append(f"=== Round {snapshot.current_round}/{snapshot.max_rounds} ===")
        if snapshot.is_counting_down and snapshot.is_game_active:
            lines.append(f"Next flip: {snapshot.time_until_next_flip}s")
        elif snapshot.is_paused:
            lines.append("Paused")
        lines.append("")

        # Scores
        p1_score = snapshot.player1.score if snapshot.player1 else 0
        p2_score = snapshot.player2.score if snapshot.player2 else 0
        lines.append(
            f"{format_player(snapshot.player1, 'Player 1')}: {p1_score}   "
            f"{format_player(snapshot.player2, 'Player 2')}: {p2_score}"
        )

        # Cards on the table
        lines.append(
            f"{p1_name} {format_card(snapshot.current_player1_card)}  vs  "
            f"{format_card(snapshot.current_player2_card)} {p2_name}"
        )

        # Recent rounds, newest first
        if snapshot.rounds:
            lines.append("")
            lines.append("Recent rounds:")
            for record in reversed(snapshot.rounds[-RECENT_ROUNDS:]):
                lines.append(f"  {describe_round(record, p1_name, p2_name)}")

        if debug:
            lines.append("")
            lines.append("--- Debug Info ---")
            lines.append(f"Phase: {snapshot.phase.value}")
            lines.append(f"Deck: {snapshot.deck_remaining} cards")

        return "\n".join(lines)


class ResultsRenderer:
    """Renders the end-of-match screen."""

    def render(self, snapshot: GameSnapshot, show_details: bool = False) -> str:
        lines: list[str] = []
        p1_name = snapshot.player1.name if snapshot.player1 else "Player 1"
        p2_name = snapshot.player2.name if snapshot.player2 else "Player 2"
        p1_score = snapshot.player1.score if snapshot.player1 else 0
        p2_score = snapshot.player2.score if snapshot.player2 else 0

        if snapshot.phase is not GamePhase.RESULTS:
            return "Match still in progress."

        if snapshot.winner is not None:
            lines.append(f"=== {snapshot.winner.name} Wins! ===")
        else:
            lines.append("=== It's a Tie! ===")
        lines.append(f"Final Score: {p1_score} - {p2_score}")
        lines.append("")

        stats = snapshot.statistics
        lines.append("Game Statistics")
        lines.append(f"  Total Rounds: {stats.total_rounds}")
        lines.append(f"  Ties: {stats.ties}")
        lines.append(f"  {p1_name} Wins: {stats.player1_wins}")
        lines.append(f"  {p2_name} Wins: {stats.player2_wins}")

        if show_details:
            lines.append("")
            lines.append("Round by Round Breakdown")
            for record in snapshot.rounds:
                lines.append(f"  {describe_round(record, p1_name, p2_name)}")

        return "\n".join(lines)
