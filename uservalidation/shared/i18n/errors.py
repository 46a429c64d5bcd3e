"""
Message catalog errors.

A catalog error is a configuration defect, never a request failure.
Callers on the response path catch it and fall back to default text.
"""


class CatalogError(Exception):
    """Base error for the message catalog."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class MessageNotFoundError(CatalogError):
    """Raised when no locale has a template for a message id."""

    def __init__(self, message_id: str, locale: str) -> None:
        super().__init__(f"No template for message id {message_id!r} (locale {locale})")
        self.message_id = message_id
        self.locale = locale


class MessageFormatError(CatalogError):
    """Raised when a template references a placeholder without an argument."""

    def __init__(self, message_id: str, template: str, args: tuple[str, ...]) -> None:
        super().__init__(
            f"Cannot format message id {message_id!r}: "
            f"template {template!r} with {len(args)} argument(s)"
        )
        self.message_id = message_id
        self.template = template
        self.args_given = args
