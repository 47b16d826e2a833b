# catalog/database.py
from typing import Iterator

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlalchemy import text
from sqlmodel import SQLModel, Session, create_engine

# ---------------------------------------------------------
# Document store connection
#
# One engine per process, created by the app lifespan and kept on
# app.state. Routes never reach for a module-level handle; they get
# a Session through the get_session dependency.
#
# - sqlite://           : in-memory store, one shared connection
# - sqlite:///file.db   : local file store
# - postgresql://...    : managed store, sslmode=require if asked
# ---------------------------------------------------------


def _with_sslmode(url: str) -> str:
    # Append sslmode=require if it is not already present
    if "sslmode=" in url:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}sslmode=require"


def make_engine(url: str, ssl_require: bool = False) -> Engine:
    """
    Build the engine for the given connection string.
    """
    if url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=False, **kwargs)

    if ssl_require and url.startswith("postgresql"):
        url = _with_sslmode(url)

    return create_engine(
        url,
        echo=False,        # set to True if you want to debug SQL queries
        pool_pre_ping=True,
    )


def create_db_and_tables(engine: Engine) -> None:
    """
    Verify connectivity, then create the products table if it does not exist.

    This is called once on application startup.
    """
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    SQLModel.metadata.create_all(engine)


def get_session(request: Request) -> Iterator[Session]:
    """
    FastAPI dependency that yields a SQLModel Session bound to the
    engine owned by the running app.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(request.app.state.engine) as session:
        yield session
