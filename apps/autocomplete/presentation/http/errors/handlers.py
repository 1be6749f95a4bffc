"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from autocomplete.application.common.exceptions.base import ApplicationError
from autocomplete.application.common.exceptions.screen import (
    ScreenNotFoundError,
    SuggestionIndexError,
    UnknownFieldError,
)
from autocomplete.domain.exceptions.base import DomainError
from autocomplete.domain.exceptions.validation import AdValidationError


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # 입력값은 응답에 포함하지 않음 (인코딩 불가 문자열일 수 있음)
        errors = exc.errors()
        first_error = errors[0] if errors else {}
        field = ".".join(str(loc) for loc in first_error.get("loc", ())) or None
        return JSONResponse(
            status_code=422,
            content={
                "detail": first_error.get("msg", "Validation error"),
                "field": field,
                "code": "VALIDATION_ERROR",
            },
        )

    @app.exception_handler(AdValidationError)
    async def ad_validation_handler(request: Request, exc: AdValidationError):
        return JSONResponse(
            status_code=422,
            content={"title": exc.title, "detail": exc.message, "code": exc.code},
        )

    @app.exception_handler(ScreenNotFoundError)
    async def screen_not_found_handler(request: Request, exc: ScreenNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message, "code": "SCREEN_NOT_FOUND"},
        )

    @app.exception_handler(SuggestionIndexError)
    async def suggestion_index_handler(request: Request, exc: SuggestionIndexError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_SUGGESTION_INDEX"},
        )

    @app.exception_handler(UnknownFieldError)
    async def unknown_field_handler(request: Request, exc: UnknownFieldError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "UNKNOWN_FIELD"},
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "DOMAIN_ERROR"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
