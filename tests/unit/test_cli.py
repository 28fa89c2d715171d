"""Tests for the click CLI."""

from click.testing import CliRunner

from cardbattle.cli.play import cli


class TestSideCommand:
    def test_east(self):
        result = CliRunner().invoke(cli, ["side", "--lat", "35.0"])
        assert result.exit_code == 0
        assert result.output.strip() == "East"

    def test_west(self):
        result = CliRunner().invoke(cli, ["side", "--lat", "30.0", "--lng", "34.8"])
        assert result.output.strip() == "West"


class TestPlayCommand:
    def test_plays_full_match(self):
        result = CliRunner().invoke(cli, [
            "play", "--name", "Adam", "--lat", "35.0",
            "--rounds", "3", "--cadence", "0.01", "--seed", "5", "--mute",
        ])

        assert result.exit_code == 0, result.output
        assert "you fight for the East" in result.output
        assert "Round 3/3" in result.output
        assert "Game Statistics" in result.output
        assert "Round by Round Breakdown" in result.output

    def test_mock_location(self):
        result = CliRunner().invoke(cli, [
            "play", "--name", "Adam", "--mock", "Tel Aviv Center",
            "--rounds", "1", "--cadence", "0.01", "--mute", "--no-details",
        ])

        assert result.exit_code == 0, result.output
        assert "West" in result.output
        assert "Round by Round" not in result.output

    def test_missing_location_fails(self):
        result = CliRunner().invoke(cli, ["play", "--name", "Adam", "--mute"])

        assert result.exit_code == 1
        assert "Location unavailable" in result.output

    def test_invalid_rounds(self):
        result = CliRunner().invoke(cli, ["play", "--name", "Adam", "--lat", "35", "--rounds", "40"])

        assert result.exit_code != 0
        assert "max_rounds" in result.output

    def test_blank_name(self):
        result = CliRunner().invoke(cli, ["play", "--name", "  ", "--lat", "35", "--mute"])

        assert result.exit_code != 0
