"""Game API routes: the command surface over HTTP."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from cardbattle.location import Coordinate, determine_side
from cardbattle.playtest.manager import GameManager
from cardbattle.web.dependencies import get_manager
from cardbattle.web.models import (
    CommandResponse,
    GameStateResponse,
    SetupPlayerRequest,
    SideResponse,
)

router = APIRouter()


def _respond(manager: GameManager, accepted: bool) -> CommandResponse:
    return CommandResponse(
        accepted=accepted,
        state=GameStateResponse.from_snapshot(manager.snapshot()),
    )


@router.get("/game", response_model=GameStateResponse)
async def get_game(manager: GameManager = Depends(get_manager)):
    """Current observable state."""
    return GameStateResponse.from_snapshot(manager.snapshot())


@router.post("/game/player", response_model=CommandResponse)
async def setup_player(body: SetupPlayerRequest, manager: GameManager = Depends(get_manager)):
    """Seat the human player.

    The side is taken from ``side`` when given, otherwise derived from
    ``location``; one of the two is required.
    """
    location = Coordinate(lat=body.location.lat, lng=body.location.lng) if body.location else None
    try:
        if body.side is not None:
            player = manager.setup_player(body.name, body.side, location)
        elif location is not None:
            player = manager.setup_player_from_coordinate(body.name, location)
        else:
            raise HTTPException(status_code=422, detail="Either side or location is required")
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _respond(manager, player is not None)


@router.post("/game/start", response_model=CommandResponse)
async def start_game(manager: GameManager = Depends(get_manager)):
    return _respond(manager, manager.start_game())


@router.post("/game/pause", response_model=CommandResponse)
async def pause_game(manager: GameManager = Depends(get_manager)):
    return _respond(manager, manager.pause_game())


@router.post("/game/resume", response_model=CommandResponse)
async def resume_game(manager: GameManager = Depends(get_manager)):
    return _respond(manager, manager.resume_game())


@router.post("/game/reset", response_model=CommandResponse)
async def reset_game(manager: GameManager = Depends(get_manager)):
    manager.reset_game()
    return _respond(manager, True)


@router.get("/side", response_model=SideResponse)
async def get_side(
    lat: float = Query(ge=-90, le=90),
    lng: float = Query(default=0.0, ge=-180, le=180),
    manager: GameManager = Depends(get_manager),
):
    """Which side a coordinate fights for."""
    side = determine_side(Coordinate(lat=lat, lng=lng), manager.config.reference_latitude)
    return SideResponse(lat=lat, lng=lng, side=side)
