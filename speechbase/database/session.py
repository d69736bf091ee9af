"""Database session management."""

from collections.abc import Generator
from typing import Any

from sqlalchemy import Engine, event
from sqlmodel import Session, create_engine

from speechbase.database.settings import settings


def _unicode_lower(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


def register_unicode_lower(engine: Engine) -> None:
    """Replace SQLite's ASCII-only lower() with Python's str.lower.

    Case-insensitive search compiles to ``lower(column) LIKE lower(query)``,
    so without this "Émile" never matches "émile". Must be called before the
    engine opens its first connection. Other dialects are left alone.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def set_unicode_lower(dbapi_connection: Any, connection_record: Any) -> None:
        dbapi_connection.create_function(
            "lower", 1, _unicode_lower, deterministic=True
        )


engine = create_engine(
    settings.database_url,
    echo=settings.echo,
    # SQLite connections are shared across FastAPI's threadpool
    connect_args={"check_same_thread": False} if settings.is_sqlite else {},
)
register_unicode_lower(engine)


def get_session() -> Generator[Session, None, None]:
    """Get a database session.

    Yields:
        SQLModel Session instance.
    """
    with Session(engine) as session:
        yield session
