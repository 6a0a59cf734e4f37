from typing import Optional

from loguru import logger
from sqlalchemy import Engine, create_engine, text

from config import settings

CREATE_BOOKS_TABLE = """
CREATE TABLE IF NOT EXISTS books (
    isbn TEXT PRIMARY KEY,
    amazon_url TEXT,
    author TEXT,
    language TEXT,
    pages INTEGER,
    publisher TEXT,
    title TEXT,
    year INTEGER
)
"""

_engine: Optional[Engine] = None


def create_db_engine(url: str) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # the pool hands connections to whichever worker thread serves the request
        connect_args["check_same_thread"] = False
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


def configure_engine(url: str) -> Engine:
    global _engine
    if _engine is not None:
        _engine.dispose()
    _engine = create_db_engine(url)
    return _engine


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = create_db_engine(settings.database_url)
    return _engine


def init_database():
    engine = get_engine()
    with engine.begin() as conn:
        conn.execute(text(CREATE_BOOKS_TABLE))
    logger.info(f"Database initialized at {engine.url.render_as_string(hide_password=True)}")


def close_database():
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None
    logger.info("Database connections closed")
