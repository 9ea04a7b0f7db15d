from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.models.user import User


class UserRepository:
    @staticmethod
    def get_by_id(db: Session, user_id: int) -> Optional[User]:
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def get_by_email(db: Session, email: str) -> Optional[User]:
        """Case-insensitive lookup"""
        return db.query(User).filter(func.lower(User.email) == email.strip().lower()).first()

    @staticmethod
    def get_by_name(db: Session, name: str) -> Optional[User]:
        """Case-insensitive lookup"""
        return db.query(User).filter(func.lower(User.name) == name.strip().lower()).first()

    @staticmethod
    def get_all(db: Session) -> List[User]:
        return db.query(User).order_by(User.id).all()

    @staticmethod
    def get_many_by_ids(db: Session, user_ids) -> List[User]:
        if not user_ids:
            return []
        return db.query(User).filter(User.id.in_(list(user_ids))).all()

    @staticmethod
    def get_many_by_names(db: Session, names) -> List[User]:
        if not names:
            return []
        lowered = [name.strip().lower() for name in names]
        return db.query(User).filter(func.lower(User.name).in_(lowered)).all()
