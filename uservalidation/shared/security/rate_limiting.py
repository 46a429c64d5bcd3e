"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-endpoint rate limits on write endpoints.
Each application gets its own limiter built from its settings, so the
enabled flag and the limit string follow the ``Settings`` handed to
``create_app``. Exceeded limits are answered with a localized problem
detail.
"""

import functools
import logging
from http import HTTPStatus
from typing import Any, Callable, List

from fastapi import FastAPI
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import Response

from uservalidation.core.config import Settings
from uservalidation.shared.errors.problem_details import ProblemDetailMapper, problem_response
from uservalidation.shared.i18n.request import request_locale

logger = logging.getLogger(__name__)

# Endpoints marked with ``write_limit``, guarded per app at install time.
_WRITE_ENDPOINTS: List[Callable[..., Any]] = []


def write_limit(func: Callable[..., Any]) -> Callable[..., Any]:
    """Mark a synchronous endpoint as a rate-limited write.

    The endpoint must take ``request: Request``. The actual limit is
    looked up on ``request.app.state.write_guards`` at call time.
    """
    _WRITE_ENDPOINTS.append(func)

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        request: Request = kwargs["request"]
        return request.app.state.write_guards[func](*args, **kwargs)

    return wrapper


def build_limiter(settings: Settings) -> Limiter:
    """Create a limiter with its own in-memory storage."""
    return Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def install_rate_limiting(app: FastAPI, settings: Settings) -> Limiter:
    """Attach a limiter and the guarded write endpoints to ``app.state``.

    Args:
        app: The application being assembled.
        settings: Source of ``rate_limit_enabled`` and ``rate_limit_default``.

    Returns:
        The limiter now stored on ``app.state.limiter``.
    """
    limiter = build_limiter(settings)
    limit = limiter.limit(settings.rate_limit_default)
    app.state.limiter = limiter
    app.state.write_guards = {func: limit(func) for func in _WRITE_ENDPOINTS}
    logger.info(
        "Rate limiting %s (%s on write endpoints)",
        "enabled" if settings.rate_limit_enabled else "disabled",
        settings.rate_limit_default,
    )
    return limiter


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> Response:
    """Answer a throttled request with a 429 problem detail.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.
    """
    logger.warning("Rate limit exceeded: %s %s", request.method, request.url.path)
    mapper: ProblemDetailMapper = request.app.state.problem_mapper
    locale = request_locale(request)
    problem = mapper.from_message(
        HTTPStatus.TOO_MANY_REQUESTS,
        "rate.limit.exceeded",
        locale,
        (exc.detail,),
        fallback=f"Too many requests: {exc.detail}",
        instance=request.url.path,
    )
    return problem_response(problem, locale)
