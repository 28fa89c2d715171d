"""Property-based tests for deck, resolver and match invariants."""

import random

from hypothesis import given, settings, strategies as st
from cardbattle.model.schema import GamePhase, Rank, RoundOutcome, Side, Suit
from cardbattle.playtest.loop import GameLoop
from cardbattle.simulation.deck import create_deck
from cardbattle.simulation.game import BattleGame
from cardbattle.simulation.resolver import resolve
from cardbattle.simulation.state import Card, Player

cards = st.builds(Card, suit=st.sampled_from(list(Suit)), rank=st.sampled_from(list(Rank)))


def started_game(seed: int, max_rounds: int) -> BattleGame:
    game = BattleGame(max_rounds=max_rounds, seed=seed)
    game.assign_players(Player("Adam", Side.EAST), Player("AI Opponent", Side.WEST))
    game.start_game()
    return game


@given(seed=st.integers(min_value=0, max_value=2**32 - 1))
def test_deck_is_a_permutation(seed: int) -> None:
    """Property: every shuffled deck holds each suit/rank pair exactly once."""
    deck = create_deck(random.Random(seed))

    assert len(deck) == 52
    assert len({(c.suit, c.rank) for c in deck}) == 52
    for suit in Suit:
        assert sorted(c.rank.strength for c in deck if c.suit is suit) == list(range(2, 15))


@given(a=cards, b=cards)
def test_resolve_is_antisymmetric(a: Card, b: Card) -> None:
    """Property: swapping the cards swaps the winner."""
    forward = resolve(a, b)
    backward = resolve(b, a)

    if forward is RoundOutcome.PLAYER1_WINS:
        assert backward is RoundOutcome.PLAYER2_WINS
    elif forward is RoundOutcome.PLAYER2_WINS:
        assert backward is RoundOutcome.PLAYER1_WINS
    else:
        assert backward is RoundOutcome.TIE


@given(rank=st.sampled_from(list(Rank)), s1=st.sampled_from(list(Suit)), s2=st.sampled_from(list(Suit)))
def test_equal_strength_always_ties(rank: Rank, s1: Suit, s2: Suit) -> None:
    assert resolve(Card(s1, rank), Card(s2, rank)) is RoundOutcome.TIE


@given(
    seed=st.integers(min_value=0, max_value=10000),
    max_rounds=st.integers(min_value=1, max_value=26),
    calls=st.integers(min_value=0, max_value=40),
)
def test_round_counters_stay_consistent(seed: int, max_rounds: int, calls: int) -> None:
    """Property: round counter, history and scores always agree."""
    game = started_game(seed, max_rounds)

    for _ in range(calls):
        game.play_round()
        ties = sum(1 for r in game.rounds if r.outcome is RoundOutcome.TIE)
        assert game.current_round == len(game.rounds) <= max_rounds
        assert game.player1.score + game.player2.score + ties == game.current_round

    assert game.current_round == min(calls, max_rounds)
    assert (game.phase is GamePhase.RESULTS) == (calls >= max_rounds)


@given(seed=st.integers(min_value=0, max_value=10000))
def test_no_card_drawn_twice(seed: int) -> None:
    """Property: the shared deck never deals the same card twice in a match."""
    game = started_game(seed, 26)
    while game.play_round() is not None:
        pass

    drawn = [c for r in game.rounds for c in (r.player1_card, r.player2_card)]
    assert len(drawn) == 52
    assert len(set(drawn)) == 52
    assert game.deck == []


@settings(max_examples=50)
@given(steps=st.lists(st.floats(min_value=0.0, max_value=7.0, allow_nan=False), max_size=30))
def test_loop_never_exceeds_round_limit(steps: list[float]) -> None:
    """Property: however time is sliced, the loop plays at most one round per cadence."""
    game = started_game(1, 10)
    loop = GameLoop(game)
    loop.start()

    for elapsed in steps:
        loop.tick(elapsed)

    expected = min(10, 1 + int((sum(steps) + 1e-9) // 5.0))
    assert game.current_round == expected
    assert game.current_round == len(game.rounds)
