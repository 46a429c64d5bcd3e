"""
Validation executor.

Runs a constraint table against an input object and collects every
violation. Every constraint is evaluated independently; a failure never
stops the remaining checks. Only ``REQUIRED`` looks at absent values:
all other kinds treat ``None`` and ``""`` as satisfied, so an empty
field reports a single "required" violation.

The default email policy is the syntax check of ``email-validator``
(no DNS lookups). Callers may pass their own predicate.

No locale resolution happens here; violations carry message ids.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from email_validator import EmailNotValidError, validate_email

from uservalidation.domain.validation.constraints import ConstraintKind, FieldConstraint
from uservalidation.domain.validation.violations import Violation

EmailPolicy = Callable[[str], bool]


def is_email(value: str) -> bool:
    """Default email-shape policy."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _is_absent(value: Any) -> bool:
    return value is None or value == ""


def _field_value(target: Any, field: str) -> Any:
    if isinstance(target, Mapping):
        return target.get(field)
    return getattr(target, field, None)


def _satisfies(
    constraint: FieldConstraint, value: Any, email_policy: EmailPolicy
) -> bool:
    if constraint.kind is ConstraintKind.REQUIRED:
        return not _is_absent(value)

    if _is_absent(value):
        return True

    if constraint.kind is ConstraintKind.LENGTH:
        min_length, max_length = constraint.params
        # len() counts code points
        return min_length <= len(str(value)) <= max_length

    if constraint.kind is ConstraintKind.EMAIL:
        return isinstance(value, str) and email_policy(value)

    raise ValueError(f"Unsupported constraint kind: {constraint.kind}")


def validate(
    target: Any,
    constraints: Iterable[FieldConstraint],
    email_policy: EmailPolicy = is_email,
) -> tuple[Violation, ...]:
    """Check ``target`` against every constraint.

    Args:
        target: An object with the constrained attributes, or a mapping.
        constraints: The constraint table, evaluated in order.
        email_policy: Predicate deciding whether a string is an email.

    Returns:
        The violations in declaration order. Empty means valid.
    """
    violations: list[Violation] = []
    for constraint in constraints:
        value = _field_value(target, constraint.field)
        if _satisfies(constraint, value, email_policy):
            continue
        args = tuple(str(p) for p in constraint.params)
        violations.append(
            Violation(
                field=constraint.field,
                message_id=constraint.message_id,
                args=args,
                fallback_text=constraint.fallback.format(*args),
            )
        )
    return tuple(violations)
