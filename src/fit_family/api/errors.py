"""Exception handlers rendering errors as JSON bodies."""

import logging
import uuid
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fit_family.errors import FitFamilyError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain, validation and fallback handlers on the app."""

    @app.exception_handler(FitFamilyError)
    async def handle_domain_error(
        request: Request, exc: FitFamilyError
    ) -> JSONResponse:
        return _error_response(exc.status_code, exc.title, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        title = HTTPStatus(exc.status_code).phrase
        message = exc.detail if isinstance(exc.detail, str) else title
        return _error_response(exc.status_code, title, message)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors: dict[str, str] = {}
        for error in exc.errors():
            location = error.get("loc") or ("request",)
            errors.setdefault(str(location[-1]), _validation_message(error))
        return JSONResponse(status_code=HTTPStatus.BAD_REQUEST, content=errors)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        error_id = str(uuid.uuid4())
        logger.exception(
            "Unhandled exception [errorId=%s] on %s %s",
            error_id,
            request.method,
            request.url.path,
        )
        if request.app.state.container.settings.is_production:
            message = (
                "An unexpected error occurred. "
                f"Please contact support with error ID: {error_id}"
            )
        else:
            message = f"An unexpected error occurred: {exc} [errorId={error_id}]"
        return _error_response(
            HTTPStatus.INTERNAL_SERVER_ERROR, "Internal Server Error", message
        )


def _error_response(status_code: int, title: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": int(status_code), "error": title, "message": message},
    )


def _validation_message(error: dict) -> str:
    context = error.get("ctx") or {}
    if error.get("type") == "value_error" and "error" in context:
        return str(context["error"])
    return str(error.get("msg", "Invalid value"))
