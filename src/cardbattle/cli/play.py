"""CLI commands for playing a card battle in the terminal."""

from __future__ import annotations

import logging
import sys

import click

from cardbattle.audio import BackgroundAudioSink, TerminalAudioSink
from cardbattle.config import GameConfig
from cardbattle.location import (
    MOCK_LOCATIONS,
    Coordinate,
    FixedLocationProvider,
    LocationUnavailableError,
    determine_side,
    mock_location,
)
from cardbattle.model.schema import GamePhase
from cardbattle.playtest.clock import RealtimeDriver
from cardbattle.playtest.display import ResultsRenderer, StateRenderer
from cardbattle.playtest.manager import GameManager, GameSnapshot

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


class RoundPrinter:
    """Observer that redraws the battle screen whenever a round lands."""

    def __init__(self, debug: bool = False):
        self.renderer = StateRenderer()
        self.debug = debug
        self._shown_round = 0

    def __call__(self, snapshot: GameSnapshot) -> None:
        if snapshot.current_round == self._shown_round:
            return
        self._shown_round = snapshot.current_round
        click.echo("")
        click.echo(self.renderer.render(snapshot, debug=self.debug))


@click.group()
def cli():
    """East vs West card battles."""


@cli.command()
@click.option("-n", "--name", prompt="Your name", help="Player name")
@click.option("--lat", type=float, default=None, help="Your latitude")
@click.option("--lng", type=float, default=0.0, help="Your longitude")
@click.option(
    "--mock",
    type=click.Choice(sorted(MOCK_LOCATIONS)),
    default=None,
    help="Use a named debug location instead of --lat/--lng",
)
@click.option("--rounds", type=int, default=None, help="Rounds per match")
@click.option("--cadence", type=float, default=None, help="Seconds between card flips")
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--speed", type=click.FloatRange(min=0, min_open=True), default=1.0, help="Game clock speed multiplier")
@click.option("--mute", is_flag=True, help="Disable the terminal bell")
@click.option("--details/--no-details", default=True, help="Show round breakdown at the end")
@click.option("--debug", is_flag=True, help="Show phase and deck size")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def play(
    name: str,
    lat: float | None,
    lng: float,
    mock: str | None,
    rounds: int | None,
    cadence: float | None,
    seed: int | None,
    speed: float,
    mute: bool,
    details: bool,
    debug: bool,
    verbose: bool,
):
    """Play a match against the AI opponent.

    Your side is decided by your latitude: at or north of the reference
    line you fight for the East, south of it for the West.
    """
    setup_logging(verbose)

    try:
        config = GameConfig.from_env(max_rounds=rounds, cadence=cadence, seed=seed)
    except ValueError as e:
        raise click.BadParameter(str(e))

    provider = FixedLocationProvider(Coordinate(lat=lat, lng=lng) if lat is not None else None)
    audio = BackgroundAudioSink(TerminalAudioSink(output_fn=lambda s: click.echo(s, nl=False), muted=mute))
    manager = GameManager(config, audio=audio)

    try:
        coordinate = mock_location(mock) if mock else manager.request_location(provider)
    except LocationUnavailableError as e:
        click.echo(f"Location unavailable: {e} Use --lat or --mock.", err=True)
        audio.shutdown()
        sys.exit(1)

    try:
        player = manager.setup_player_from_coordinate(name, coordinate)
    except ValueError as e:
        audio.shutdown()
        raise click.BadParameter(str(e), param_hint="--name")

    click.echo(f"\n{player.name}, you fight for the {player.side.value} ({coordinate}).")
    click.echo(f"Seed: {config.seed} (use --seed {config.seed} to replay)")

    manager.subscribe(RoundPrinter(debug=debug))
    driver = RealtimeDriver(manager.tick, speed=speed)

    try:
        manager.start_game()
        driver.run(until=lambda: manager.snapshot().phase is not GamePhase.PLAYING or not manager.loop.is_running)
    except KeyboardInterrupt:
        manager.pause_game()
        click.echo("\n\nGame interrupted.")
    finally:
        audio.shutdown()

    snapshot = manager.snapshot()
    if snapshot.phase is GamePhase.RESULTS:
        click.echo("")
        click.echo(ResultsRenderer().render(snapshot, show_details=details))


@cli.command()
@click.option("--lat", type=float, required=True, help="Latitude")
@click.option("--lng", type=float, default=0.0, help="Longitude")
def side(lat: float, lng: float):
    """Show which side a coordinate fights for."""
    coordinate = Coordinate(lat=lat, lng=lng)
    click.echo(determine_side(coordinate).value)


@cli.command()
@click.option("--host", default="127.0.0.1", help="Host interface to bind")
@click.option("--port", type=int, default=8000, help="TCP port to listen on")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def serve(host: str, port: int, verbose: bool):
    """Serve the game API for a browser frontend."""
    import uvicorn

    setup_logging(verbose)
    uvicorn.run("cardbattle.web.app:app", host=host, port=port, reload=False)


def main():
    cli()


if __name__ == "__main__":
    main()
