import logging
from typing import List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, ConflictError
from app.models.game import Game
from app.repositories.game_repository import GameRepository
from app.repositories.schedule_repository import ScheduleRepository
from app.schemas.game import GameRequest

logger = logging.getLogger(__name__)


def create_game(db: Session, data: GameRequest) -> Game:
    if GameRepository.get_by_title(db, data.title) is not None:
        logger.warning(f"Game title already taken: {data.title}")
        raise ConflictError(f"Game with title {data.title} already exists.")

    game = Game(
        title=data.title,
        description=data.description,
        genre=data.genre,
        platforms=data.platforms,
        amount_of_players=data.amount_of_players,
    )
    db.add(game)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(f"Game with title {data.title} already exists.")
    db.refresh(game)

    logger.info(f"Game {game.id} created: {game.title}")
    return game


def list_games(db: Session) -> List[Game]:
    return GameRepository.get_all(db)


def get_game(db: Session, game_id: int) -> Game:
    game = GameRepository.get_by_id(db, game_id)
    if game is None:
        raise NotFoundError(f"Game not found. Game id: {game_id}")
    return game


def get_game_by_title(db: Session, title: str) -> Game:
    game = GameRepository.get_by_title(db, title)
    if game is None:
        raise NotFoundError(f"Game not found. Game title: {title}")
    return game


def update_game(db: Session, game_id: int, data: GameRequest) -> Game:
    """Full replace of every game field"""
    game = get_game(db, game_id)

    other = GameRepository.get_by_title(db, data.title)
    if other is not None and other.id != game.id:
        raise ConflictError(f"Game with title {data.title} already exists.")

    game.title = data.title
    game.description = data.description
    game.genre = data.genre
    game.platforms = data.platforms
    game.amount_of_players = data.amount_of_players

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(f"Game with title {data.title} already exists.")
    db.refresh(game)
    logger.info(f"Game {game.id} updated")
    return game


def delete_game(db: Session, game_id: int) -> Game:
    game = get_game(db, game_id)

    scheduled = ScheduleRepository.count_by_game(db, game_id)
    if scheduled:
        raise ConflictError(f"Game {game_id} is used by {scheduled} schedule(s) and cannot be deleted")

    db.delete(game)
    db.commit()
    logger.info(f"Game {game_id} deleted")
    return game
