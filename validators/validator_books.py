from typing import Any, List, Optional

from pydantic import BaseModel, ValidationError

from models.book import Book, BookUpdate, ValidationMode

_SCHEMAS = {
    ValidationMode.CREATE: Book,
    ValidationMode.UPDATE: BookUpdate,
}


class BookValidationResult(BaseModel):
    book: Optional[BookUpdate] = None
    errors: List[str] = []

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _format_error(error: dict) -> str:
    field = ".".join(str(part) for part in error["loc"])
    if not field:
        return error["msg"]
    return f"{field}: {error['msg']}"


def validate_book(payload: Any, mode: ValidationMode) -> BookValidationResult:
    """Check a request body against the book schema for the given mode.

    Violations come back in the result instead of being raised. Update mode
    accepts exactly the mutable fields, so an ``isbn`` key is a violation there.
    """
    if not isinstance(payload, dict):
        return BookValidationResult(errors=["Request body must be a JSON object"])

    try:
        schema = _SCHEMAS[ValidationMode(mode)]
    except ValueError:
        return BookValidationResult(errors=[f"Unknown validation mode: {mode}"])
    try:
        book = schema.model_validate(payload)
    except ValidationError as e:
        return BookValidationResult(errors=[_format_error(error) for error in e.errors()])
    return BookValidationResult(book=book)
