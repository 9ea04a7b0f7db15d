from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.models.game import Game


class GameRepository:
    @staticmethod
    def get_by_id(db: Session, game_id: int) -> Optional[Game]:
        return db.query(Game).filter(Game.id == game_id).first()

    @staticmethod
    def get_by_title(db: Session, title: str) -> Optional[Game]:
        """Case-insensitive lookup"""
        return db.query(Game).filter(func.lower(Game.title) == title.strip().lower()).first()

    @staticmethod
    def get_all(db: Session) -> List[Game]:
        return db.query(Game).order_by(Game.id).all()
