"""Pydantic request/response models for the web API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from cardbattle.model.schema import GamePhase, RoundOutcome, Side
from cardbattle.playtest.manager import GameSnapshot
from cardbattle.simulation.state import Card, Player, RoundRecord


class CardModel(BaseModel):
    """Card as shown to the frontend."""

    suit: str
    rank: str
    strength: int
    display_name: str
    image_name: str
    is_red: bool

    @classmethod
    def from_card(cls, card: Optional[Card]) -> Optional["CardModel"]:
        if card is None:
            return None
        return cls(
            suit=card.suit.value,
            rank=card.rank.value,
            strength=card.strength,
            display_name=card.display_name,
            image_name=card.image_name,
            is_red=card.suit.is_red,
        )


class CoordinateModel(BaseModel):
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(default=0.0, ge=-180, le=180)


class PlayerModel(BaseModel):
    player_id: str
    name: str
    side: Side
    color: str
    score: int
    location: Optional[CoordinateModel] = None

    @classmethod
    def from_player(cls, player: Optional[Player]) -> Optional["PlayerModel"]:
        if player is None:
            return None
        location = None
        if player.location is not None:
            location = CoordinateModel(lat=player.location.lat, lng=player.location.lng)
        return cls(
            player_id=player.player_id,
            name=player.name,
            side=player.side,
            color=player.side.color,
            score=player.score,
            location=location,
        )


class RoundModel(BaseModel):
    round_number: int
    player1_card: CardModel
    player2_card: CardModel
    outcome: RoundOutcome

    @classmethod
    def from_record(cls, record: RoundRecord) -> "RoundModel":
        return cls(
            round_number=record.round_number,
            player1_card=CardModel.from_card(record.player1_card),
            player2_card=CardModel.from_card(record.player2_card),
            outcome=record.outcome,
        )


class StatisticsModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_rounds: int
    ties: int
    player1_wins: int
    player2_wins: int


class GameStateResponse(BaseModel):
    """Full observable state after a command."""

    phase: GamePhase
    player1: Optional[PlayerModel]
    player2: Optional[PlayerModel]
    current_round: int
    max_rounds: int
    rounds: list[RoundModel]
    current_player1_card: Optional[CardModel]
    current_player2_card: Optional[CardModel]
    deck_remaining: int
    is_game_active: bool
    time_until_next_flip: int
    is_counting_down: bool
    is_paused: bool
    can_resume: bool
    winner: Optional[PlayerModel]
    is_tie: bool
    statistics: StatisticsModel

    @classmethod
    def from_snapshot(cls, snapshot: GameSnapshot) -> "GameStateResponse":
        return cls(
            phase=snapshot.phase,
            player1=PlayerModel.from_player(snapshot.player1),
            player2=PlayerModel.from_player(snapshot.player2),
            current_round=snapshot.current_round,
            max_rounds=snapshot.max_rounds,
            rounds=[RoundModel.from_record(r) for r in snapshot.rounds],
            current_player1_card=CardModel.from_card(snapshot.current_player1_card),
            current_player2_card=CardModel.from_card(snapshot.current_player2_card),
            deck_remaining=snapshot.deck_remaining,
            is_game_active=snapshot.is_game_active,
            time_until_next_flip=snapshot.time_until_next_flip,
            is_counting_down=snapshot.is_counting_down,
            is_paused=snapshot.is_paused,
            can_resume=snapshot.can_resume,
            winner=PlayerModel.from_player(snapshot.winner),
            is_tie=snapshot.is_tie,
            statistics=StatisticsModel.model_validate(snapshot.statistics),
        )


class SetupPlayerRequest(BaseModel):
    """Seat the human. Side comes from ``side`` or, failing that, ``location``."""

    name: str = Field(min_length=1, max_length=64)
    side: Optional[Side] = None
    location: Optional[CoordinateModel] = None


class CommandResponse(BaseModel):
    """Whether a command took effect, plus the resulting state."""

    accepted: bool
    state: GameStateResponse


class SideResponse(BaseModel):
    lat: float
    lng: float
    side: Side
