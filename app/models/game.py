from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.core.db import Base


class Game(Base):
    __tablename__ = "games"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, unique=True, nullable=False)
    description = Column(String, nullable=True)
    genre = Column(String, nullable=False)
    amount_of_players = Column(Integer, nullable=False)

    platform_entries = relationship(
        "GamePlatform", back_populates="game", cascade="all, delete-orphan", lazy="selectin"
    )

    # Schedules only reference a game, they are never deleted with it
    schedules = relationship("Schedule", back_populates="game")

    @property
    def platforms(self) -> list[str]:
        return [p.name for p in self.platform_entries]

    @platforms.setter
    def platforms(self, names):
        # Platforms are a set of labels, keep the first spelling of each
        self.platform_entries = [GamePlatform(name=name) for name in dict.fromkeys(names)]


class GamePlatform(Base):
    __tablename__ = "game_platforms"

    id = Column(Integer, primary_key=True, index=True)
    game_id = Column(Integer, ForeignKey("games.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)

    game = relationship("Game", back_populates="platform_entries")
