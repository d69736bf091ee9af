"""Exception handlers mapping domain outcomes to HTTP responses."""

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from speechbase.database.exceptions import SpeechValidationError
from speechbase.domain_service import SpeechNotFoundError


async def not_found_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert SpeechNotFoundError to a 404 response."""
    assert isinstance(exc, SpeechNotFoundError)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


async def speech_validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Convert SpeechValidationError (missing text or author) to a 400 response."""
    assert isinstance(exc, SpeechValidationError)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


async def request_validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Report unparsable ids, dates and payloads as 400 instead of 422."""
    assert isinstance(exc, RequestValidationError)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )
