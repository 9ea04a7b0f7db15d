from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Table, func
from sqlalchemy.orm import relationship
from app.core.db import Base

# A user appears at most once per schedule (composite primary key)
schedule_participants = Table(
    "schedule_participants",
    Base.metadata,
    Column("schedule_id", Integer, ForeignKey("schedules.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


class Schedule(Base):
    __tablename__ = "schedules"

    id = Column(Integer, primary_key=True, index=True)
    schedule_name = Column(String, unique=True, nullable=False)
    game_id = Column(Integer, ForeignKey("games.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    start_time = Column(DateTime, nullable=False, index=True)
    end_time = Column(DateTime, nullable=True)
    amount_of_players = Column(Integer, nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Optimistic locking: a flush based on a stale read raises StaleDataError
    version = Column(Integer, nullable=False)

    game = relationship("Game", back_populates="schedules")
    owner = relationship("User", back_populates="schedules")
    participants = relationship(
        "User",
        secondary=schedule_participants,
        back_populates="participations",
        collection_class=set,
    )

    __mapper_args__ = {"version_id_col": version}
