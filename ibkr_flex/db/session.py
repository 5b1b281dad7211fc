# ibkr_flex/db/session.py
"""Database session factory and initialization."""

from pathlib import Path

from sqlmodel import Session, SQLModel, create_engine

from ibkr_flex.config import DATABASE_URL

# Make sure the directory of a local SQLite file exists
if DATABASE_URL.startswith("sqlite:///") and ":memory:" not in DATABASE_URL:
    db_path = DATABASE_URL.replace("sqlite:///", "")
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False} if "sqlite" in DATABASE_URL else {},
    echo=False,
)


def create_db_and_tables():
    """Create all tables if they don't exist."""
    # Register the table classes on the shared metadata
    import ibkr_flex.db.models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session() -> Session:
    """Get a new database session."""
    return Session(engine)
