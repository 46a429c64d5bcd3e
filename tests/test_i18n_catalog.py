"""
Tests for the message catalog and locale negotiation.

Catalogs are built from in-memory dicts unless the test is about the
bundled template files.
"""

import json
from pathlib import Path

import pytest

from uservalidation.core.config import Settings
from uservalidation.shared.i18n.catalog import MessageCatalog
from uservalidation.shared.i18n.errors import (
    CatalogError,
    MessageFormatError,
    MessageNotFoundError,
)
from uservalidation.shared.i18n.locale import negotiate_locale, parse_accept_language

TEMPLATES = {
    "en": {
        "greeting": "Hello {0}",
        "pair": "{0} and {1}",
        "english.only": "Only in English",
    },
    "de": {
        "greeting": "Hallo {0}",
        "pair": "{0} und {1}",
    },
}
LOG_TEMPLATES = {"user.not.found.log": "User with username {0} not found"}

REQUIRED_IDS = (
    "validation.username.notNull",
    "validation.username.size",
    "validation.email.notNull",
    "validation.email.invalid",
    "user.not.found",
    "user.already.exists",
    "request.malformed",
    "rate.limit.exceeded",
    "server.error",
)


@pytest.fixture
def catalog() -> MessageCatalog:
    return MessageCatalog(TEMPLATES, LOG_TEMPLATES, default_locale="en")


class TestResolve:
    """Tests for MessageCatalog.resolve."""

    def test_resolves_requested_locale(self, catalog: MessageCatalog) -> None:
        """A template present in the requested locale is used."""
        assert catalog.resolve("greeting", "de", ["Ada"]) == "Hallo Ada"

    def test_positional_arguments_in_order(self, catalog: MessageCatalog) -> None:
        """Placeholders are filled left-to-right."""
        assert catalog.resolve("pair", "en", ("a", "b")) == "a and b"

    def test_region_falls_back_to_language(self, catalog: MessageCatalog) -> None:
        """de-AT resolves through the de templates."""
        assert catalog.resolve("greeting", "de-AT", ["Ada"]) == "Hallo Ada"

    def test_missing_locale_entry_falls_back_to_default(
        self, catalog: MessageCatalog
    ) -> None:
        """An id absent in de is taken from the default locale."""
        assert catalog.resolve("english.only", "de") == "Only in English"

    def test_unknown_id_raises(self, catalog: MessageCatalog) -> None:
        """An id absent everywhere is an explicit error, not empty text."""
        with pytest.raises(MessageNotFoundError) as exc_info:
            catalog.resolve("no.such.id", "de")
        assert exc_info.value.message_id == "no.such.id"

    def test_missing_argument_raises(self, catalog: MessageCatalog) -> None:
        """A referenced placeholder without an argument is an error."""
        with pytest.raises(MessageFormatError):
            catalog.resolve("pair", "en", ["only-one"])

    def test_non_string_arguments_are_stringified(self, catalog: MessageCatalog) -> None:
        """Numbers can be passed as arguments."""
        assert catalog.resolve("pair", "en", (2, 50)) == "2 and 50"


class TestGetMessage:
    """Tests for the non-raising lookup."""

    def test_returns_default_on_miss(self, catalog: MessageCatalog) -> None:
        assert catalog.get_message("no.such.id", "en", default="fallback") == "fallback"

    def test_returns_id_without_default(self, catalog: MessageCatalog) -> None:
        assert catalog.get_message("no.such.id", "en") == "no.such.id"

    def test_has(self, catalog: MessageCatalog) -> None:
        assert catalog.has("english.only", "de")
        assert not catalog.has("no.such.id")


class TestLogMessages:
    """Tests for the operator-facing namespace."""

    def test_log_message_formats_arguments(self, catalog: MessageCatalog) -> None:
        text = catalog.log_message("user.not.found.log", "john-doet")
        assert text == "User with username john-doet not found"

    def test_log_namespace_is_separate(self, catalog: MessageCatalog) -> None:
        """Log ids are not resolvable as client messages."""
        with pytest.raises(MessageNotFoundError):
            catalog.resolve("user.not.found.log", "en", ["x"])

    def test_missing_log_message_keeps_arguments(self, catalog: MessageCatalog) -> None:
        assert catalog.log_message("unknown.log", "key") == "unknown.log key"


class TestCatalogConstruction:
    """Tests for building catalogs."""

    def test_default_locale_must_have_templates(self) -> None:
        with pytest.raises(CatalogError):
            MessageCatalog(TEMPLATES, default_locale="fr")

    def test_locales_are_normalized(self) -> None:
        catalog = MessageCatalog({"en": {"a": "b"}, "de_AT": {"a": "c"}})
        assert catalog.supported_locales == ("en", "de-at")

    def test_from_directory(self, tmp_path: Path) -> None:
        (tmp_path / "messages_en.json").write_text(json.dumps({"k": "v {0}"}), encoding="utf-8")
        (tmp_path / "messages_it.json").write_text(json.dumps({"k": "w {0}"}), encoding="utf-8")
        (tmp_path / "log_messages.json").write_text(json.dumps({"k.log": "l {0}"}), encoding="utf-8")

        catalog = MessageCatalog.from_directory(tmp_path, default_locale="en")

        assert set(catalog.supported_locales) == {"en", "it"}
        assert catalog.resolve("k", "it", ["x"]) == "w x"
        assert catalog.log_message("k.log", "y") == "l y"

    def test_from_directory_rejects_nested_json(self, tmp_path: Path) -> None:
        (tmp_path / "messages_en.json").write_text(json.dumps({"k": {"nested": "v"}}), encoding="utf-8")
        with pytest.raises(CatalogError):
            MessageCatalog.from_directory(tmp_path)


class TestBundledTemplates:
    """The shipped template files cover every message the service emits."""

    @pytest.fixture
    def bundled(self) -> MessageCatalog:
        return MessageCatalog.from_directory(Settings().get_messages_dir(), "en")

    def test_supported_locales(self, bundled: MessageCatalog) -> None:
        assert set(bundled.supported_locales) == {"en", "de", "fr"}

    @pytest.mark.parametrize("locale", ["en", "de", "fr"])
    def test_every_locale_defines_required_ids(
        self, bundled: MessageCatalog, locale: str
    ) -> None:
        directory = Settings().get_messages_dir()
        data = json.loads((directory / f"messages_{locale}.json").read_text(encoding="utf-8"))
        missing = [mid for mid in REQUIRED_IDS if mid not in data]
        assert missing == []

    def test_operator_log_message_present(self, bundled: MessageCatalog) -> None:
        assert "john-doet" in bundled.log_message("user.not.found.log", "john-doet")

    def test_size_message_takes_bounds(self, bundled: MessageCatalog) -> None:
        text = bundled.resolve("validation.username.size", "en", ("2", "50"))
        assert "2" in text and "50" in text


class TestNegotiateLocale:
    """Tests for Accept-Language negotiation."""

    SUPPORTED = ("en", "de", "fr")

    @pytest.mark.parametrize(
        "header, expected",
        [
            ("de", "de"),
            ("DE", "de"),
            ("de-DE", "de"),
            ("fr-CA,fr;q=0.9", "fr"),
            ("xx", "en"),
            ("xx, de;q=0.5", "de"),
            ("en;q=0.2, de;q=0.8", "de"),
            ("de;q=0, fr", "fr"),
            ("*", "en"),
            ("", "en"),
            (None, "en"),
            ("!!!", "en"),
            ("de;q=abc", "en"),
        ],
    )
    def test_negotiation(self, header, expected: str) -> None:
        assert negotiate_locale(header, self.SUPPORTED, "en") == expected

    def test_ties_keep_header_order(self) -> None:
        assert parse_accept_language("fr, de") == ["fr", "de"]
