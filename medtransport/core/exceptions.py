from enum import Enum

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ForbiddenError(HTTPException):
    def __init__(self, detail: str = "Forbidden"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class ConflictError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BadRequestError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class RangeErrorCode(str, Enum):
    INVALID_FROM = "INVALID_FROM"
    INVALID_TO = "INVALID_TO"
    INVALID_RANGE = "INVALID_RANGE"
    RANGE_TOO_LARGE = "RANGE_TOO_LARGE"


class RangeValidationError(Exception):
    """A rejected schedule window. ``code`` tells the caller which rule failed."""

    def __init__(self, code: RangeErrorCode):
        super().__init__(code.value)
        self.code = code
