from datetime import datetime, timezone
from typing import List, Optional
from pydantic import Field, field_validator, model_validator

from app.schemas.base import CamelModel
from app.schemas.game import GameSummary
from app.schemas.user import UserSummary


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Times are stored as naive UTC"""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class GameRef(CamelModel):
    id: Optional[int] = None
    title: Optional[str] = None

    @model_validator(mode="after")
    def id_or_title(self):
        if self.id is None and not self.title:
            raise ValueError("game reference needs an id or a title")
        return self


class UserRef(CamelModel):
    id: Optional[int] = None
    name: Optional[str] = None

    @model_validator(mode="after")
    def id_or_name(self):
        if self.id is None and not self.name:
            raise ValueError("user reference needs an id or a name")
        return self


class ScheduleRequest(CamelModel):
    schedule_name: str
    game: GameRef
    owner: Optional[UserRef] = None
    participants: Optional[List[UserRef]] = None
    start_time: datetime
    end_time: Optional[datetime] = None
    amount_of_players: int = Field(..., gt=0)

    @field_validator("schedule_name")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("start_time", "end_time")
    @classmethod
    def naive_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(value)

    @model_validator(mode="after")
    def end_after_start(self):
        if self.end_time is not None and self.end_time < self.start_time:
            raise ValueError("endTime must not be before startTime")
        return self


class ScheduleResponse(CamelModel):
    id: int
    schedule_name: str
    game: GameSummary
    owner: UserSummary
    start_time: datetime
    end_time: Optional[datetime] = None
    amount_of_players: int
    participants: List[UserSummary]
    version: int

    @field_validator("participants", mode="before")
    @classmethod
    def sorted_participants(cls, value):
        if not value:
            return []
        return sorted(value, key=lambda u: u["id"] if isinstance(u, dict) else u.id)
