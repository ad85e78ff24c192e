from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from order_service.core.config import settings


class Base(DeclarativeBase):
    pass


def build_engine(dsn: str, **kwargs) -> Engine:
    """Engine for ``dsn``; SQLite connections are shared with the request threadpool."""
    if dsn.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(dsn, pool_pre_ping=True, **kwargs)


engine = build_engine(settings.POSTGRES_DSN)
SessionLocal = sessionmaker(bind=engine, autoflush=False)
