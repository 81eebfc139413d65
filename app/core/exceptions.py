"""
Domain errors.

Services raise these directly; being ``HTTPException`` subclasses, FastAPI
turns them into responses without any extra handler.
"""

from typing import Optional

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """A user, session or profile the request depends on does not exist."""

    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class AlreadyExistsError(HTTPException):
    """A unique record (e.g. an account email) is already taken."""

    def __init__(self, detail: str = "Already exists"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class InvalidCredentialsError(HTTPException):
    """Password does not match the stored hash."""

    def __init__(self, detail: str = "Invalid password"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail,
                         headers={ "WWW-Authenticate": "Bearer" }, )


class ValidationFailureError(HTTPException):
    """Input rejected by a service-level check."""

    def __init__(self, detail: str = "Validation failed", field: Optional[str] = None):
        if field:
            detail = f"{field}: {detail}"
        super().__init__(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=detail)
