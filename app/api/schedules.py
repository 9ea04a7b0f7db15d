from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session
from app.core.db import get_db
from app.api.auth import require_user
from app.schemas.auth import Principal
from app.schemas.schedule import ScheduleRequest, ScheduleResponse, to_naive_utc
from app.services import schedule_service

router = APIRouter()


@router.get("", response_model=List[ScheduleResponse])
def get_schedules(
    start_time: Optional[datetime] = Query(None, alias="startTime"),
    game_id: Optional[int] = Query(None, alias="gameId"),
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_user),
):
    """
    All schedules, optionally filtered by exact start time and/or game.
    """
    start_time = to_naive_utc(start_time)
    if game_id is not None:
        schedules = schedule_service.list_by_game(db, game_id)
        if start_time is not None:
            schedules = [s for s in schedules if s.start_time == start_time]
        return schedules
    if start_time is not None:
        return schedule_service.list_by_start_time(db, start_time)
    return schedule_service.list_schedules(db)


@router.get("/{schedule_id}", response_model=ScheduleResponse)
def get_schedule(
    schedule_id: int,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_user),
):
    return schedule_service.get_schedule(db, schedule_id)


@router.post("", response_model=ScheduleResponse, status_code=status.HTTP_201_CREATED)
def create_schedule(
    request: ScheduleRequest,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_user),
):
    return schedule_service.create_schedule(db, principal, request)


@router.put("/{schedule_id}", response_model=ScheduleResponse)
def update_schedule(
    schedule_id: int,
    request: ScheduleRequest,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_user),
):
    return schedule_service.update_schedule(db, schedule_id, request)


@router.delete("/{schedule_id}", response_class=PlainTextResponse)
def delete_schedule(
    schedule_id: int,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_user),
):
    schedule_service.delete_schedule(db, schedule_id)
    return f"Schedule {schedule_id} deleted"


@router.post("/{schedule_id}/participants/{user_id}", response_model=ScheduleResponse)
def add_participant(
    schedule_id: int,
    user_id: int,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_user),
):
    return schedule_service.add_participant(db, schedule_id, user_id)


@router.delete("/{schedule_id}/participants/{user_id}", response_model=ScheduleResponse)
def remove_participant(
    schedule_id: int,
    user_id: int,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_user),
):
    return schedule_service.remove_participant(db, schedule_id, user_id)
