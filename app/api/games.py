from typing import List, Optional, Union
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app.core.db import get_db
from app.api.auth import require_admin
from app.schemas.auth import Principal
from app.schemas.game import GameRequest, GameResponse
from app.services import game_service

router = APIRouter()


@router.get("", response_model=Union[List[GameResponse], GameResponse])
def get_games(
    title: Optional[str] = Query(None, description="Exact game title (case-insensitive)"),
    db: Session = Depends(get_db),
):
    """All games, or the single game with the given title"""
    if title is not None:
        return game_service.get_game_by_title(db, title)
    return game_service.list_games(db)


@router.get("/{game_id}", response_model=GameResponse)
def get_game(game_id: int, db: Session = Depends(get_db)):
    return game_service.get_game(db, game_id)


@router.post("", response_model=GameResponse, status_code=status.HTTP_201_CREATED)
def create_game(
    request: GameRequest,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_admin),
):
    return game_service.create_game(db, request)


@router.put("/{game_id}", response_model=GameResponse)
def update_game(
    game_id: int,
    request: GameRequest,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_admin),
):
    return game_service.update_game(db, game_id, request)


@router.delete("/{game_id}", response_model=GameResponse)
def delete_game(
    game_id: int,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_admin),
):
    return game_service.delete_game(db, game_id)
