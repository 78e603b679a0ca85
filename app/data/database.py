# app/data/database.py
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from app.utils.settings import DATABASE_URL, DB_POOL_SIZE, DB_MAX_OVERFLOW


def build_engine(url: str = DATABASE_URL):
    """
    Engine z pulą połączeń.
    Sqlite nie ma puli z rozmiarem, a in-memory musi dzielić jedno połączenie.
    """
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if parsed.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)

    return create_engine(
        url,
        pool_size=DB_POOL_SIZE,
        max_overflow=DB_MAX_OVERFLOW,
        pool_pre_ping=True,
    )


engine = build_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
Base = declarative_base()


def get_db():
    # jedno połączenie z puli na request, zawsze oddawane
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
