from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from app.models.schedule import Schedule


class ScheduleRepository:
    @staticmethod
    def get_by_id(db: Session, schedule_id: int) -> Optional[Schedule]:
        return db.query(Schedule).filter(Schedule.id == schedule_id).first()

    @staticmethod
    def get_by_name(db: Session, schedule_name: str) -> Optional[Schedule]:
        return db.query(Schedule).filter(Schedule.schedule_name == schedule_name).first()

    @staticmethod
    def get_all(db: Session) -> List[Schedule]:
        return db.query(Schedule).order_by(Schedule.start_time, Schedule.id).all()

    @staticmethod
    def get_by_start_time(db: Session, start_time: datetime) -> List[Schedule]:
        return db.query(Schedule).filter(Schedule.start_time == start_time).order_by(Schedule.id).all()

    @staticmethod
    def get_by_game(db: Session, game_id: int) -> List[Schedule]:
        return (
            db.query(Schedule)
            .filter(Schedule.game_id == game_id)
            .order_by(Schedule.start_time, Schedule.id)
            .all()
        )

    @staticmethod
    def count_by_game(db: Session, game_id: int) -> int:
        return db.query(Schedule).filter(Schedule.game_id == game_id).count()

    @staticmethod
    def count_by_owner(db: Session, user_id: int) -> int:
        return db.query(Schedule).filter(Schedule.user_id == user_id).count()
