from contextlib import contextmanager
from typing import Iterator, List

from sqlalchemy import Connection, text
from sqlalchemy.exc import DBAPIError, IntegrityError

from db.database import get_engine
from exceptions.exceptions import ErrorBookAlreadyExists, ErrorDatabaseConnection
from models.book import Book, BookUpdate

from loguru import logger

BOOK_COLUMNS = "isbn, amazon_url, author, language, pages, publisher, title, year"


@contextmanager
def _connection(write: bool = False) -> Iterator[Connection]:
    engine = get_engine()
    try:
        with (engine.begin() if write else engine.connect()) as conn:
            yield conn
    except IntegrityError:
        raise
    except DBAPIError as e:
        logger.error(f"Database error ---> {e.orig}")
        raise ErrorDatabaseConnection() from e


def create_book(book: Book) -> Book:
    try:
        with _connection(write=True) as conn:
            row = conn.execute(
                text(
                    f"INSERT INTO books ({BOOK_COLUMNS}) "
                    "VALUES (:isbn, :amazon_url, :author, :language, :pages, :publisher, :title, :year) "
                    f"RETURNING {BOOK_COLUMNS}"
                ),
                book.model_dump(),
            ).mappings().one()
    except IntegrityError as e:
        raise ErrorBookAlreadyExists(f"Book with isbn {book.isbn} already exists") from e
    return Book.model_validate(dict(row))


def read_book_by_isbn(isbn: str) -> Book | None:
    with _connection() as conn:
        row = conn.execute(
            text(f"SELECT {BOOK_COLUMNS} FROM books WHERE isbn = :isbn"),
            {"isbn": isbn},
        ).mappings().one_or_none()
    if row is None:
        return None
    return Book.model_validate(dict(row))


def read_all_books() -> List[Book]:
    with _connection() as conn:
        rows = conn.execute(text(f"SELECT {BOOK_COLUMNS} FROM books ORDER BY title")).mappings().all()
    return [Book.model_validate(dict(row)) for row in rows]


def update_book_by_isbn(isbn: str, fields: BookUpdate) -> Book | None:
    with _connection(write=True) as conn:
        row = conn.execute(
            text(
                "UPDATE books SET amazon_url = :amazon_url, author = :author, language = :language, "
                "pages = :pages, publisher = :publisher, title = :title, year = :year "
                f"WHERE isbn = :isbn RETURNING {BOOK_COLUMNS}"
            ),
            {**fields.model_dump(), "isbn": isbn},
        ).mappings().one_or_none()
    if row is None:
        return None
    return Book.model_validate(dict(row))


def delete_book_by_isbn(isbn: str) -> bool:
    with _connection(write=True) as conn:
        result = conn.execute(text("DELETE FROM books WHERE isbn = :isbn"), {"isbn": isbn})
        return result.rowcount > 0


def delete_all_books():
    with _connection(write=True) as conn:
        conn.execute(text("DELETE FROM books"))
