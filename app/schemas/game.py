from typing import List, Optional
from pydantic import Field, field_validator

from app.schemas.base import CamelModel


class GameRequest(CamelModel):
    title: str
    description: Optional[str] = None
    genre: str
    platforms: List[str] = Field(..., min_length=1)
    amount_of_players: int = Field(..., gt=0)

    @field_validator("title", "genre")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("platforms")
    @classmethod
    def clean_platforms(cls, value: List[str]) -> List[str]:
        cleaned = [p.strip() for p in value if p.strip()]
        if not cleaned:
            raise ValueError("at least one platform is required")
        return list(dict.fromkeys(cleaned))


class GameResponse(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    genre: str
    platforms: List[str]
    amount_of_players: int


class GameSummary(CamelModel):
    id: int
    title: str
