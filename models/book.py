from enum import Enum

from pydantic import BaseModel, ConfigDict


class ValidationMode(str, Enum):
    CREATE = "create"
    UPDATE = "update"


class BookUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int


class Book(BookUpdate):
    isbn: str
