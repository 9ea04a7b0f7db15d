import enum
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.core.db import Base


class Role(str, enum.Enum):
    USER = "ROLE_USER"
    ADMIN = "ROLE_ADMIN"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    email = Column(String, unique=True, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False, default=Role.USER.value)
    extra_info = Column(String, nullable=True)

    # Schedules this user owns
    schedules = relationship("Schedule", back_populates="owner")

    # Many-to-many with schedules the user takes part in
    participations = relationship(
        "Schedule", secondary="schedule_participants", back_populates="participants"
    )

    @property
    def roles(self) -> list[str]:
        return [self.role]

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value
