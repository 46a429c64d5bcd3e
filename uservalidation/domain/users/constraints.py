"""
Constraint table for the create-user input.
"""

from uservalidation.domain.validation.constraints import (
    FieldConstraint,
    email,
    length,
    required,
)

USERNAME_MIN_LEN = 2
USERNAME_MAX_LEN = 50

CREATE_USER_CONSTRAINTS: tuple[FieldConstraint, ...] = (
    required(
        "username",
        "validation.username.notNull",
        "Username must not be empty",
    ),
    length(
        "username",
        USERNAME_MIN_LEN,
        USERNAME_MAX_LEN,
        "validation.username.size",
        "Username must be between {0} and {1} characters",
    ),
    required(
        "email",
        "validation.email.notNull",
        "Email must not be empty",
    ),
    email(
        "email",
        "validation.email.invalid",
        "Email address is invalid",
    ),
)
