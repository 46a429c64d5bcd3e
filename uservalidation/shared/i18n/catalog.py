"""
Locale-keyed message catalog.

Templates are flat mappings from message id to text with positional
placeholders (``{0}``, ``{1}``). One JSON file per locale,
``messages_<locale>.json``, holds the client-facing messages; a single
``log_messages.json`` holds the operator-facing namespace, which is
never returned to clients.

The catalog is built once at startup and is read-only afterwards.
"""

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Optional

from uservalidation.shared.i18n.errors import (
    CatalogError,
    MessageFormatError,
    MessageNotFoundError,
)
from uservalidation.shared.i18n.locale import normalize_locale, primary_language

logger = logging.getLogger(__name__)

MESSAGES_PREFIX = "messages_"
LOG_MESSAGES_FILE = "log_messages.json"


def _format(message_id: str, template: str, args: Sequence[object]) -> str:
    values = tuple(str(a) for a in args)
    try:
        return template.format(*values)
    except (IndexError, KeyError, ValueError) as exc:
        raise MessageFormatError(message_id, template, values) from exc


def _load_json(path: Path) -> dict[str, str]:
    with path.open(encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise CatalogError(f"{path.name} must be a flat JSON object of strings")
    return data


class MessageCatalog:
    """Resolves message ids to localized text.

    Lookup order for a locale such as ``de-at``: ``de-at``, then ``de``,
    then the default locale.
    """

    def __init__(
        self,
        templates: Mapping[str, Mapping[str, str]],
        log_templates: Optional[Mapping[str, str]] = None,
        default_locale: str = "en",
    ) -> None:
        self._templates = {
            normalize_locale(locale): dict(messages)
            for locale, messages in templates.items()
        }
        self._log_templates = dict(log_templates or {})
        self._default_locale = normalize_locale(default_locale)
        if self._default_locale not in self._templates:
            raise CatalogError(
                f"Default locale {self._default_locale!r} has no message templates"
            )

    @classmethod
    def from_directory(cls, directory: Path, default_locale: str = "en") -> "MessageCatalog":
        """Load every ``messages_<locale>.json`` and ``log_messages.json``.

        Args:
            directory: Folder containing the template files.
            default_locale: Locale used as the last fallback.

        Raises:
            CatalogError: If a file is malformed or the default locale
                has no template file.
        """
        templates = {
            path.stem[len(MESSAGES_PREFIX):]: _load_json(path)
            for path in sorted(directory.glob(f"{MESSAGES_PREFIX}*.json"))
        }
        log_path = directory / LOG_MESSAGES_FILE
        log_templates = _load_json(log_path) if log_path.is_file() else {}
        catalog = cls(templates, log_templates, default_locale)
        logger.info(
            "Loaded message catalog from %s: locales=%s, default=%s",
            directory,
            ",".join(catalog.supported_locales),
            catalog.default_locale,
        )
        return catalog

    @property
    def default_locale(self) -> str:
        return self._default_locale

    @property
    def supported_locales(self) -> tuple[str, ...]:
        return tuple(self._templates)

    def _lookup_chain(self, locale: str) -> list[str]:
        tag = normalize_locale(locale)
        chain = [tag, primary_language(tag), self._default_locale]
        return list(dict.fromkeys(chain))

    def resolve(self, message_id: str, locale: str, args: Sequence[object] = ()) -> str:
        """Resolve a message id to text in the given locale.

        Args:
            message_id: Key of the template.
            locale: Requested locale tag.
            args: Values for ``{0}``, ``{1}``, ... in order.

        Returns:
            The formatted message.

        Raises:
            MessageNotFoundError: No locale in the chain has the id.
            MessageFormatError: The template references a missing argument.
        """
        for candidate in self._lookup_chain(locale):
            template = self._templates.get(candidate, {}).get(message_id)
            if template is not None:
                return _format(message_id, template, args)
        raise MessageNotFoundError(message_id, locale)

    def get_message(
        self,
        message_id: str,
        locale: str,
        args: Sequence[object] = (),
        default: Optional[str] = None,
    ) -> str:
        """Like ``resolve`` but returns ``default`` (or the id) on a missing id."""
        try:
            return self.resolve(message_id, locale, args)
        except MessageNotFoundError:
            logger.warning("Message catalog has no entry for %r", message_id)
            return default if default is not None else message_id

    def has(self, message_id: str, locale: Optional[str] = None) -> bool:
        """Return True if the id resolves for ``locale`` (default locale if None)."""
        chain = self._lookup_chain(locale or self._default_locale)
        return any(message_id in self._templates.get(c, {}) for c in chain)

    def log_message(self, message_id: str, *args: object) -> str:
        """Return operator-facing text for a log entry.

        A missing id yields the id followed by the arguments so that the
        log line still carries the data.
        """
        template = self._log_templates.get(message_id)
        if template is None:
            logger.warning("Log message catalog has no entry for %r", message_id)
            return " ".join([message_id, *(str(a) for a in args)])
        return _format(message_id, template, args)
