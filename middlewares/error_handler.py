import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse

from config.settings import settings
from schemas.common import ErrorDetail, ErrorResponse
from services.errors import (
    Forbidden, NotFound, ServiceError, StoreFailure, Unauthenticated, ValidationError,
)

logger = logging.getLogger(__name__)

NO_STORE = {"Cache-Control": "private, no-store"}


def _error_response(status_code: int, code: str, message: str, field: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(code=code, message=message, field=field))
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json"),
        headers=NO_STORE,
    )


def add_error_handlers(app: FastAPI):
    # ✅ 세션 없음 → 로그인 화면으로 (데이터 오류로 보고하지 않음)
    @app.exception_handler(Unauthenticated)
    async def unauthenticated_handler(request: Request, exc: Unauthenticated):
        return RedirectResponse(url=settings.LOGIN_PATH, status_code=303, headers=NO_STORE)

    @app.exception_handler(Forbidden)
    async def forbidden_handler(request: Request, exc: Forbidden):
        return _error_response(403, exc.code, exc.message)

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError):
        return _error_response(422, exc.code, exc.message, field=exc.field)

    @app.exception_handler(NotFound)
    async def not_found_handler(request: Request, exc: NotFound):
        return _error_response(404, exc.code, exc.message)

    @app.exception_handler(StoreFailure)
    async def store_failure_handler(request: Request, exc: StoreFailure):
        logger.error(f"저장소 오류: {request.method} {request.url.path}: {exc.message}")
        return _error_response(500, exc.code, "The operation could not be completed")

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        return _error_response(exc.status_code, exc.code, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"처리되지 않은 오류: {request.method} {request.url.path}")
        return _error_response(500, "INTERNAL_ERROR", "Internal server error")
