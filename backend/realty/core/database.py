from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

# Create Base class for SQLAlchemy models
Base = declarative_base()


def _unicode_lower(value):
    return value.lower() if value is not None else None


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create a SQLAlchemy engine for the given URL.

    In-memory SQLite URLs share a single connection so every session sees
    the same database.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(database_url, echo=echo, **kwargs)

        # SQLite's built-in lower() only folds ASCII
        @event.listens_for(engine, "connect")
        def register_unicode_lower(dbapi_connection, connection_record):
            dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)

        return engine

    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_recycle=300,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create all tables that do not exist yet"""
    # Import models so they register on Base.metadata
    from realty.db import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
