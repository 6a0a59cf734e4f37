from typing import Any, List

from exceptions.exceptions import ErrorBookAlreadyExists, ErrorBookNotFound, ErrorBookValidation
from models.book import Book, ValidationMode
from repositories import repository_books
from validators.validator_books import validate_book

from loguru import logger


def create_book(payload: Any) -> Book:
    result = validate_book(payload, ValidationMode.CREATE)
    if not result.is_valid:
        logger.warning(f"Rejected book creation ---> {result.errors}")
        raise ErrorBookValidation(result.errors)
    try:
        book = repository_books.create_book(result.book)
    except ErrorBookAlreadyExists as e:
        logger.error(f"Failed create book with details: {result.book} ---> Error: {str(e)}")
        raise
    logger.info(f"Book created with details: {book}")
    return book


def read_book_by_isbn(isbn: str) -> Book:
    book = repository_books.read_book_by_isbn(isbn)
    if book is None:
        msg = f"There is no book with an isbn of {isbn}"
        logger.error(msg)
        raise ErrorBookNotFound(msg)
    logger.info(f"Book with isbn {isbn} found")
    return book


def read_all_books() -> List[Book]:
    books = repository_books.read_all_books()
    logger.info(f"Found {len(books)} books")
    return books


def update_book_by_isbn(isbn: str, payload: Any) -> Book:
    result = validate_book(payload, ValidationMode.UPDATE)
    if not result.is_valid:
        logger.warning(f"Rejected update of book {isbn} ---> {result.errors}")
        raise ErrorBookValidation(result.errors)
    book = repository_books.update_book_by_isbn(isbn, result.book)
    if book is None:
        msg = f"There is no book with an isbn of {isbn}"
        logger.error(msg)
        raise ErrorBookNotFound(msg)
    logger.info(f"Book successfully updated with details: {book}")
    return book


def delete_book_by_isbn(isbn: str):
    read_book_by_isbn(isbn)
    if not repository_books.delete_book_by_isbn(isbn):
        # removed by a concurrent request between the check and the delete
        msg = f"There is no book with an isbn of {isbn}"
        logger.error(msg)
        raise ErrorBookNotFound(msg)
    logger.info(f"Book with isbn {isbn} successfully deleted")
