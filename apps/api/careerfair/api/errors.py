import structlog
from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from careerfair.services.error_codes import ErrorCode
from careerfair.services.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ServiceError,
    UnauthenticatedError,
    ValidationError,
)

logger = structlog.get_logger()


def http_error_from_service(err: ServiceError) -> HTTPException:
    headers = None
    if isinstance(err, NotFoundError):
        status = 404
    elif isinstance(err, UnauthenticatedError):
        status = 401
        headers = {"WWW-Authenticate": "Bearer"}
    elif isinstance(err, AuthorizationError):
        status = 403
    elif isinstance(err, ConflictError):
        status = 409
    elif isinstance(err, ValidationError):
        status = 400
    else:
        status = 500

    return HTTPException(
        status_code=status,
        detail={"code": err.code, "message": err.message},
        headers=headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(p) for p in e.get('loc', ()))}: {e.get('msg', 'invalid')}" for e in errors
    )
    return JSONResponse(
        status_code=400,
        content={
            "detail": {
                "code": ErrorCode.VALIDATION_ERROR.value,
                "message": message or "invalid request",
            }
        },
    )


async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    # Database failures that escaped a service call, typically on reads.
    logger.error("storage_error", path=request.url.path, error=type(exc).__name__)
    return JSONResponse(
        status_code=500,
        content={
            "detail": {"code": ErrorCode.STORAGE_ERROR.value, "message": "storage failure"}
        },
    )
