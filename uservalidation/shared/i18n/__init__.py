"""
Internationalized messages.

- catalog: MessageCatalog, locale-keyed templates with positional placeholders
- locale: Accept-Language parsing and negotiation
- errors: catalog configuration errors
"""

from uservalidation.shared.i18n.catalog import MessageCatalog
from uservalidation.shared.i18n.errors import (
    CatalogError,
    MessageFormatError,
    MessageNotFoundError,
)
from uservalidation.shared.i18n.locale import negotiate_locale, normalize_locale

__all__ = [
    "CatalogError",
    "MessageCatalog",
    "MessageFormatError",
    "MessageNotFoundError",
    "negotiate_locale",
    "normalize_locale",
]
