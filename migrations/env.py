from alembic import context
from sqlalchemy import create_engine, pool
from logging.config import fileConfig
from app.core.db import Base  # Model metadata
from app.models.user import User  # Import every model
from app.models.game import Game, GamePlatform
from app.models.schedule import Schedule
from app.core.config import DATABASE_URL

# Alembic setup
config = context.config
fileConfig(config.config_file_name)

target_metadata = Base.metadata

config.set_main_option("sqlalchemy.url", DATABASE_URL)


def run_migrations_online():
    """Run migrations against a live connection"""
    connectable = create_engine(DATABASE_URL, poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    raise NotImplementedError("Offline migrations are not supported.")
else:
    run_migrations_online()
