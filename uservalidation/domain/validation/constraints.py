"""
Constraint declarations.

A schema is a tuple of ``FieldConstraint`` rows. Rows are pure data:
the executor in ``executor.py`` interprets them.
"""

import string
from dataclasses import dataclass
from enum import Enum


class ConstraintKind(Enum):
    """Supported constraint kinds."""

    REQUIRED = "required"
    LENGTH = "length"
    EMAIL = "email"


@dataclass(frozen=True)
class FieldConstraint:
    """One rule applied to one field.

    Attributes:
        field: Name of the attribute (or mapping key) to check.
        kind: Which check to run.
        message_id: Catalog id used to localize a failure.
        fallback: Default text, with the same ``{n}`` placeholders as the
            catalog template, used when the catalog has no entry. Every
            placeholder must index into ``params``.
        params: Positional parameters of the check. They double as the
            template arguments, e.g. ``(min, max)`` for ``LENGTH``.
    """

    field: str
    kind: ConstraintKind
    message_id: str
    fallback: str
    params: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        for _, name, _, _ in string.Formatter().parse(self.fallback):
            if name is None:
                continue
            if not name.isdigit():
                raise ValueError(
                    f"Fallback for {self.message_id!r} uses {{{name}}}; "
                    "only positional {n} placeholders are allowed"
                )
            if int(name) >= len(self.params):
                raise ValueError(
                    f"Fallback for {self.message_id!r} references {{{name}}} "
                    f"but the constraint has {len(self.params)} parameter(s)"
                )


def required(field: str, message_id: str, fallback: str) -> FieldConstraint:
    return FieldConstraint(field, ConstraintKind.REQUIRED, message_id, fallback)


def length(
    field: str, min_length: int, max_length: int, message_id: str, fallback: str
) -> FieldConstraint:
    if min_length > max_length:
        raise ValueError(f"min_length {min_length} exceeds max_length {max_length}")
    return FieldConstraint(
        field, ConstraintKind.LENGTH, message_id, fallback, (min_length, max_length)
    )


def email(field: str, message_id: str, fallback: str) -> FieldConstraint:
    return FieldConstraint(field, ConstraintKind.EMAIL, message_id, fallback)
