from sqlalchemy import event
from app.models.user import User
from app.models.game import Game
from app.models.schedule import Schedule
import logging

logger = logging.getLogger(__name__)


# Emails are compared case-insensitively, store them in canonical form
@event.listens_for(User, "before_insert")
@event.listens_for(User, "before_update")
def normalize_user(mapper, connection, target):
    if target.email:
        target.email = target.email.strip().lower()
    if target.name:
        target.name = target.name.strip()


@event.listens_for(Game, "before_insert")
@event.listens_for(Game, "before_update")
def normalize_game(mapper, connection, target):
    if target.title:
        target.title = target.title.strip()


@event.listens_for(Schedule, "after_delete")
def log_deleted_schedule(mapper, connection, target):
    # Game, owner and participants stay in place
    logger.info(f"Schedule {target.id} deleted, game {target.game_id} and users kept")
