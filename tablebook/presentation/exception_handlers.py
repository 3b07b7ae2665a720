from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tablebook.core.exceptions import ConflictError, NotFoundError, ReservationError, ValidationError
from tablebook.infrastructure.logger_config import logger

STATUS_CODES: dict[type[ReservationError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={'error': message})


async def reservation_error_handler(request: Request, exc: ReservationError) -> JSONResponse:
    status_code = STATUS_CODES.get(type(exc), status.HTTP_400_BAD_REQUEST)
    logger.warning(f'{request.method} {request.url.path} rejected ({status_code}): {exc.message}')
    return error_response(status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f'{request.method} {request.url.path} malformed body: {exc.errors()}')
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = '.'.join(str(part) for part in first.get('loc', ()) if part != 'body')
        message = f"Invalid {field}: {first.get('msg')}" if field else str(first.get('msg'))
    else:
        message = 'Invalid request body'
    return error_response(status.HTTP_400_BAD_REQUEST, message)


# Exception handler mapping
EXCEPTION_HANDLERS = {
    ReservationError: reservation_error_handler,
    RequestValidationError: validation_error_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
