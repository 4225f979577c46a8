"""Database session management"""
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from fasttruck.config.settings import settings
from fasttruck.models import Base


def create_db_engine(database_url: str) -> Engine:
    """
    Create an engine for the given URL.

    SQLite needs check_same_thread disabled because FastAPI serves sync
    routes from a thread pool.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        database_url,
        pool_pre_ping=True,  # Verify connections before using
        pool_recycle=3600,   # Recycle connections after 1 hour
    )


def init_db(bind: Engine) -> None:
    """Create any missing tables."""
    Base.metadata.create_all(bind=bind)


engine = create_db_engine(settings.DATABASE_URL)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function to get database session.

    Usage in FastAPI:
        from fastapi import Depends
        from fasttruck.db.session import get_db

        @app.get("/jobs")
        def read_jobs(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
