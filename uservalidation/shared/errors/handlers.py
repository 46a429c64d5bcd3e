"""
Centralized error handlers for FastAPI.

Maps framework and unexpected errors to problem-detail responses.
Expected domain failures are values returned by use cases and are
mapped in the routers; what reaches these handlers is everything else.
No stack traces or internal details are exposed to clients.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from uservalidation.shared.errors.problem_details import ProblemDetailMapper, problem_response
from uservalidation.shared.i18n.request import request_locale
from uservalidation.shared.security.rate_limiting import rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


def _mapper(request: Request) -> ProblemDetailMapper:
    return request.app.state.problem_mapper


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance. ``app.state`` must hold
            ``catalog`` and ``problem_mapper``.
    """
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    @app.exception_handler(RequestValidationError)
    async def handle_malformed_request(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle bodies that do not parse into the request schema."""
        logger.warning(
            "Malformed request on %s: %d error(s)", request.url.path, len(exc.errors())
        )
        locale = request_locale(request)
        problem = _mapper(request).from_message(
            HTTPStatus.BAD_REQUEST,
            "request.malformed",
            locale,
            fallback="Request body could not be read",
            instance=request.url.path,
        )
        return problem_response(problem, locale)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle routing errors such as unknown paths or methods."""
        locale = request_locale(request)
        mapper = _mapper(request)
        problem = mapper.from_message(
            exc.status_code,
            f"http.{exc.status_code}",
            locale,
            fallback=str(exc.detail),
            instance=request.url.path,
        )
        response = problem_response(problem, locale)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        locale = request_locale(request)
        problem = _mapper(request).from_message(
            HTTPStatus.INTERNAL_SERVER_ERROR,
            "server.error",
            locale,
            fallback="Internal server error",
            instance=request.url.path,
        )
        return problem_response(problem, locale)
