from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from .config import settings

DATABASE_URL = settings.database_url


def build_engine(url: str = DATABASE_URL) -> Engine:
    # One shared connection, so every session sees the same in-memory database.
    return create_engine(
        url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


engine = build_engine()

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()
