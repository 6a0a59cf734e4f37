from typing import Any

from fastapi import APIRouter, Body, status

from services import service_books

router = APIRouter(
    prefix="/books",
    tags=["Books"],
)


@router.get("")
def read_all_books():
    books = service_books.read_all_books()
    return {"books": books}


@router.get("/{isbn}")
def read_book(isbn: str):
    book = service_books.read_book_by_isbn(isbn)
    return {"book": book}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_book(payload: Any = Body(...)):
    book = service_books.create_book(payload)
    return {"book": book}


@router.put("/{isbn}")
def update_book(isbn: str, payload: Any = Body(...)):
    book = service_books.update_book_by_isbn(isbn, payload)
    return {"book": book}


@router.delete("/{isbn}")
def delete_book(isbn: str):
    service_books.delete_book_by_isbn(isbn)
    return {"message": "Book deleted"}
