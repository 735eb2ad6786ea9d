"""Free-to-play games proxy endpoints."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from mythic.infrastructure.api.dependencies import get_f2p_client
from mythic.infrastructure.external.f2p_client import FreeToGameClient

router = APIRouter()


@router.get("")
def list_games(client: FreeToGameClient = Depends(get_f2p_client)) -> List[Dict[str, Any]]:
    return client.list_games()


@router.get("/{game_id}")
def show_game(game_id: str, client: FreeToGameClient = Depends(get_f2p_client)) -> Dict[str, Any]:
    return client.get_game(game_id)
