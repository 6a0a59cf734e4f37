from typing import List, Union

from fastapi import status


class BaseServiceException(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Internal server error"

    def __init__(self, detail: Union[str, List[str], None] = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class ErrorBookValidation(BaseServiceException):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid book data"


class ErrorBookNotFound(BaseServiceException):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Book not found"


class ErrorBookAlreadyExists(BaseServiceException):
    status_code = status.HTTP_409_CONFLICT
    detail = "Book already exists"


class ErrorDatabaseConnection(BaseServiceException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Database unavailable"
