"""
Per-request locale lookup.

Reads ``Accept-Language`` and negotiates it against the catalog stored
on ``app.state`` by ``create_app``. The result is cached on
``request.state`` so handlers and routes agree on one locale.
"""

from starlette.requests import Request

from uservalidation.shared.i18n.catalog import MessageCatalog
from uservalidation.shared.i18n.locale import negotiate_locale

ACCEPT_LANGUAGE = "accept-language"


def request_locale(request: Request) -> str:
    """Return the negotiated locale for ``request``."""
    cached = getattr(request.state, "locale", None)
    if cached is not None:
        return cached
    catalog: MessageCatalog = request.app.state.catalog
    locale = negotiate_locale(
        request.headers.get(ACCEPT_LANGUAGE),
        catalog.supported_locales,
        catalog.default_locale,
    )
    request.state.locale = locale
    return locale
