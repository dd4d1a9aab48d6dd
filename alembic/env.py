from alembic import context
from sqlmodel import SQLModel
from teachmi.core.database import engine

# Import all models here so Alembic can detect them
from teachmi.models import StorageSlot  # noqa: F401

# Import metadata for autogenerate
target_metadata = SQLModel.metadata


def run_migrations_online() -> None:
    """Run migrations against the engine configured from DATABASE_URL."""
    with engine.connect() as connection:
        context.configure(
            connection=connection, target_metadata=target_metadata
        )

        with context.begin_transaction():
            context.run_migrations()


run_migrations_online()
