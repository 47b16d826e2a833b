# catalog/core/errors.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError, SQLAlchemyError

logger = logging.getLogger(__name__)


async def store_unavailable_handler(request: Request, exc: OperationalError) -> JSONResponse:
    """
    The store connection dropped or refused us mid-request.
    """
    logger.error(
        "Document store unavailable during %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Document store unavailable"},
    )


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """
    Any other store fault becomes a generic server error. No retries.
    """
    logger.error(
        "Store error during %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Install store error handlers on the app.

    404 and 422 responses come from HTTPException and FastAPI's own
    validation handler.
    """
    app.add_exception_handler(OperationalError, store_unavailable_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
