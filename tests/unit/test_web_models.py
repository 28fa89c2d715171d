"""Tests for web API response models."""

from cardbattle.config import GameConfig
from cardbattle.location import Coordinate
from cardbattle.model.schema import GamePhase, Rank, Side, Suit
from cardbattle.playtest.manager import GameManager
from cardbattle.simulation.state import Card
from cardbattle.web.models import CardModel, GameStateResponse, PlayerModel


class TestCardModel:
    def test_from_card(self):
        model = CardModel.from_card(Card(suit=Suit.DIAMONDS, rank=Rank.JACK))

        assert model.suit == "diamonds"
        assert model.rank == "jack"
        assert model.strength == 11
        assert model.display_name == "J♦"
        assert model.image_name == "jack_of_diamonds"
        assert model.is_red is True

    def test_none_passthrough(self):
        assert CardModel.from_card(None) is None


class TestPlayerModel:
    def test_includes_side_color_and_location(self):
        manager = GameManager(GameConfig(seed=1))
        player = manager.setup_player_from_coordinate("Adam", Coordinate(lat=30.0, lng=34.0))

        model = PlayerModel.from_player(player)

        assert model.side is Side.WEST
        assert model.color == "red"
        assert model.location.lat == 30.0


class TestGameStateResponse:
    def test_serializes_running_match(self):
        manager = GameManager(GameConfig(seed=1))
        manager.setup_player("Adam", Side.EAST)
        manager.start_game()

        data = GameStateResponse.from_snapshot(manager.snapshot()).model_dump(mode="json")

        assert data["phase"] == "playing"
        assert data["player1"]["side"] == "East"
        assert data["current_round"] == 1
        assert len(data["rounds"]) == 1
        assert data["rounds"][0]["round_number"] == 1
        assert data["deck_remaining"] == 50
        assert data["winner"] is None
        assert data["statistics"]["total_rounds"] == 1

    def test_serializes_setup(self):
        manager = GameManager(GameConfig(seed=1))

        data = GameStateResponse.from_snapshot(manager.snapshot()).model_dump(mode="json")

        assert data["phase"] == "setup"
        assert data["player1"] is None
        assert data["current_player1_card"] is None
        assert data["rounds"] == []
