"""
Application entry point.

Creates the FastAPI application and wires together:
- Message catalog and problem-detail mapper (built once, read-only)
- Routers (one per bounded context, under /api/v1)
- Error handlers (centralized error-to-HTTP mapping)
- Rate limiting
- Logging configuration

No business logic belongs here.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from uservalidation.api.v1.router import api_router
from uservalidation.core.config import Settings, settings as default_settings
from uservalidation.domain.users.constraints import CREATE_USER_CONSTRAINTS
from uservalidation.shared.errors.handlers import register_error_handlers
from uservalidation.shared.errors.problem_details import ProblemDetailMapper
from uservalidation.shared.i18n.catalog import MessageCatalog
from uservalidation.shared.logging import configure_logging
from uservalidation.shared.security.rate_limiting import install_rate_limiting

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root: the message catalog, the problem
    mapper and the constraint table are constructed here and handed to
    request handlers through ``app.state``.

    Args:
        settings: Explicit settings. Defaults to the environment-loaded
            module settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Shared read-only collaborators ---
    catalog = MessageCatalog.from_directory(
        settings.get_messages_dir(), default_locale=settings.default_locale
    )
    app.state.catalog = catalog
    app.state.problem_mapper = ProblemDetailMapper(catalog, settings.error_uri)
    app.state.create_user_constraints = CREATE_USER_CONSTRAINTS

    # --- Rate Limiting ---
    install_rate_limiting(app, settings)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(api_router)

    logger.info(
        "Application created: %s %s (error type %s)",
        settings.project_name,
        settings.version,
        settings.error_uri,
    )
    return app


app = create_app()
