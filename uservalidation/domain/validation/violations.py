"""
Validation results.

A ``Violation`` records one failed constraint. ``ValidationFailure`` is
the outcome returned by a use case whose input did not validate.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Violation:
    """One constraint failing for one field.

    Attributes:
        field: The offending field.
        message_id: Catalog id to localize.
        args: Positional template arguments for the message.
        fallback_text: Formatted default text for catalog misses.
    """

    field: str
    message_id: str
    args: tuple[str, ...]
    fallback_text: str


@dataclass(frozen=True)
class ValidationFailure:
    """Outcome of a request whose input violated one or more constraints."""

    violations: tuple[Violation, ...]

    @property
    def fields(self) -> tuple[str, ...]:
        """Offending field names, first occurrence order, no duplicates."""
        return tuple(dict.fromkeys(v.field for v in self.violations))
