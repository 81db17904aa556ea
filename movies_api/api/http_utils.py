import logging
from functools import wraps
from http import HTTPStatus
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse, Response

from movies_api.core.exceptions import (
    MoviesApiError, NotFound, ValidationError,
)

logger = logging.getLogger(__name__)


def handle_runtime_errors(mapping: dict[str, HTTPStatus]):
    """
    Переводит RuntimeError с «текстовыми кодами» в HTTPException.
    Пример mapping: {"mongo_review_create_error": 503}
    """
    def decorator(fn):
        @wraps(fn)
        async def wrapper(*args, **kwargs):
            try:
                return await fn(*args, **kwargs)
            except RuntimeError as e:
                msg = str(e)
                for key, status in mapping.items():
                    if key in msg:
                        raise HTTPException(status_code=status, detail=key)
                logger.error("runtime_error", extra={"err": msg})
                # нераспознанное — 500
                raise HTTPException(
                    status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                    detail="internal_error")
        return wrapper
    return decorator


def not_found_if_none(value, detail: str = "movie_info_not_found"):
    """Удобный helper: если результат None — бросаем 404."""
    if value is None:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=detail)
    return value


async def movies_api_error_handler(request: Request,
                                   exc: MoviesApiError) -> Response:
    if isinstance(exc, NotFound):
        logger.info("not_found", extra={"err": exc.message,
                                        "path": request.url.path})
        return Response(status_code=HTTPStatus.NOT_FOUND)
    logger.error("request_failed",
                 extra={"err": exc.message,
                        "error_type": type(exc).__name__,
                        "status": int(exc.status_code),
                        "path": request.url.path})
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def request_violations(exc: RequestValidationError) -> list[str]:
    """Ошибки pydantic в виде "<поле>: <сообщение>", без body/query."""
    violations = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        field = ".".join(loc[1:]) or ".".join(loc) or "request"
        violations.append(f"{field}: {error.get('msg', 'invalid value')}")
    return violations


async def request_validation_error_handler(
        request: Request, exc: RequestValidationError) -> Response:
    # неверный тип или форма входа отвечают тем же 400
    return await movies_api_error_handler(
        request, ValidationError(request_violations(exc)))


async def unhandled_error_handler(request: Request,
                                  exc: Exception) -> Response:
    # трейс только в лог, наружу ничего внутреннего не отдаём
    logger.exception("unhandled_error", extra={"path": request.url.path})
    return PlainTextResponse("internal_error",
                             status_code=HTTPStatus.INTERNAL_SERVER_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MoviesApiError, movies_api_error_handler)
    app.add_exception_handler(RequestValidationError,
                              request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
