import logging
from datetime import datetime, timezone
from typing import List, Optional, Set
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from app.core.exceptions import NotFoundError, ConflictError, DuplicateEntityError
from app.models.game import Game
from app.models.schedule import Schedule
from app.models.user import User
from app.repositories.game_repository import GameRepository
from app.repositories.schedule_repository import ScheduleRepository
from app.repositories.user_repository import UserRepository
from app.schemas.auth import Principal
from app.schemas.schedule import GameRef, UserRef, ScheduleRequest

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _commit(db: Session, schedule_id: Optional[int] = None):
    """Commit, turning a stale version counter into a conflict"""
    try:
        db.commit()
    except StaleDataError:
        db.rollback()
        logger.warning(f"Concurrent modification of schedule {schedule_id}")
        raise ConflictError(f"Schedule {schedule_id} was modified concurrently, retry the request")


def resolve_game(db: Session, ref: GameRef) -> Game:
    if ref.id is not None:
        game = GameRepository.get_by_id(db, ref.id)
        if game is None:
            raise NotFoundError(f"Game with ID {ref.id} not found")
        return game
    game = GameRepository.get_by_title(db, ref.title)
    if game is None:
        raise NotFoundError(f"Game with title {ref.title} not found")
    return game


def resolve_user(db: Session, ref: UserRef) -> User:
    if ref.id is not None:
        user = UserRepository.get_by_id(db, ref.id)
        if user is None:
            raise NotFoundError(f"User with ID {ref.id} not found")
        return user
    user = UserRepository.get_by_name(db, ref.name)
    if user is None:
        raise NotFoundError(f"User with name {ref.name} not found")
    return user


def resolve_participants(db: Session, refs: Optional[List[UserRef]]) -> Set[User]:
    """
    Load every referenced participant. One unknown reference rejects the
    whole batch: the number of users found has to match the number asked for.
    """
    if not refs:
        return set()

    ids = {ref.id for ref in refs if ref.id is not None}
    names = {ref.name.strip().lower() for ref in refs if ref.id is None}

    by_id = UserRepository.get_many_by_ids(db, ids)
    by_name = UserRepository.get_many_by_names(db, names)
    if len(by_id) != len(ids) or len(by_name) != len(names):
        raise NotFoundError("One or more participants not found")

    return set(by_id) | set(by_name)


def _ensure_name_free(db: Session, schedule_name: str, exclude_id: Optional[int] = None):
    other = ScheduleRepository.get_by_name(db, schedule_name)
    if other is not None and other.id != exclude_id:
        raise DuplicateEntityError(f"Schedule with name {schedule_name} already exists.")


def create_schedule(db: Session, principal: Principal, data: ScheduleRequest) -> Schedule:
    """
    Create a schedule. Every reference is resolved before anything is written,
    so a failed lookup leaves the database untouched.
    The owner defaults to the calling user.
    """
    game = resolve_game(db, data.game)
    owner = resolve_user(db, data.owner or UserRef(id=principal.user_id))
    participants = resolve_participants(db, data.participants)
    _ensure_name_free(db, data.schedule_name)

    schedule = Schedule(
        schedule_name=data.schedule_name,
        game=game,
        owner=owner,
        start_time=data.start_time,
        end_time=data.end_time,
        amount_of_players=data.amount_of_players,
        participants=participants,
    )
    db.add(schedule)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateEntityError(f"Schedule with name {data.schedule_name} already exists.")
    db.refresh(schedule)

    logger.info(f"Schedule {schedule.id} created by user {principal.user_id} for game {game.id}")
    return schedule


def list_schedules(db: Session) -> List[Schedule]:
    return ScheduleRepository.get_all(db)


def get_schedule(db: Session, schedule_id: int) -> Schedule:
    schedule = ScheduleRepository.get_by_id(db, schedule_id)
    if schedule is None:
        raise NotFoundError(f"Schedule not found with ID: {schedule_id}")
    return schedule


def list_by_start_time(db: Session, start_time: datetime) -> List[Schedule]:
    return ScheduleRepository.get_by_start_time(db, start_time)


def list_by_game(db: Session, game_id: int) -> List[Schedule]:
    if GameRepository.get_by_id(db, game_id) is None:
        raise NotFoundError(f"Game not found with ID: {game_id}")
    return ScheduleRepository.get_by_game(db, game_id)


def update_schedule(db: Session, schedule_id: int, data: ScheduleRequest) -> Schedule:
    """Replace the schedule fields. The participant set is replaced, not merged."""
    schedule = get_schedule(db, schedule_id)
    game = resolve_game(db, data.game)
    owner = resolve_user(db, data.owner) if data.owner is not None else schedule.owner
    participants = resolve_participants(db, data.participants)
    _ensure_name_free(db, data.schedule_name, exclude_id=schedule.id)

    schedule.schedule_name = data.schedule_name
    schedule.game = game
    schedule.owner = owner
    schedule.start_time = data.start_time
    schedule.end_time = data.end_time
    schedule.amount_of_players = data.amount_of_players
    schedule.participants = participants
    schedule.updated_at = _utcnow()

    _commit(db, schedule_id)
    db.refresh(schedule)
    logger.info(f"Schedule {schedule_id} updated")
    return schedule


def delete_schedule(db: Session, schedule_id: int) -> None:
    schedule = get_schedule(db, schedule_id)
    db.delete(schedule)
    _commit(db, schedule_id)


def add_participant(db: Session, schedule_id: int, user_id: int) -> Schedule:
    """A repeated add is rejected, not ignored."""
    schedule = get_schedule(db, schedule_id)
    user = resolve_user(db, UserRef(id=user_id))

    if user in schedule.participants:
        raise ConflictError(f"User {user_id} is already a participant in schedule {schedule_id}")

    schedule.participants.add(user)
    # Touch the row so the version counter moves with the participant set
    schedule.updated_at = _utcnow()

    _commit(db, schedule_id)
    db.refresh(schedule)
    logger.info(f"User {user_id} joined schedule {schedule_id}")
    return schedule


def remove_participant(db: Session, schedule_id: int, user_id: int) -> Schedule:
    schedule = get_schedule(db, schedule_id)
    user = resolve_user(db, UserRef(id=user_id))

    if user not in schedule.participants:
        raise ConflictError(f"User {user_id} is not a participant in schedule {schedule_id}")

    schedule.participants.remove(user)
    schedule.updated_at = _utcnow()

    _commit(db, schedule_id)
    db.refresh(schedule)
    logger.info(f"User {user_id} left schedule {schedule_id}")
    return schedule
