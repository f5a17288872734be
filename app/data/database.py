# app/data/database.py
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

Base = declarative_base()


def make_engine(url: str, **kwargs) -> Engine:
    # sqlite (testy / dev) wymaga check_same_thread=False przy TestClient
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True, **kwargs)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def session_scope(factory: sessionmaker) -> Iterator[Session]:
    """Jedna sesja na request, zamykana zawsze."""
    db = factory()
    try:
        yield db
    finally:
        db.close()
