"""Round resolution."""

from cardbattle.model.schema import RoundOutcome
from cardbattle.simulation.state import Card


def resolve(card_a: Card, card_b: Card) -> RoundOutcome:
    """Compare two cards by strength. Equal strengths tie regardless of suit."""
    if card_a.strength > card_b.strength:
        return RoundOutcome.PLAYER1_WINS
    if card_b.strength > card_a.strength:
        return RoundOutcome.PLAYER2_WINS
    return RoundOutcome.TIE
