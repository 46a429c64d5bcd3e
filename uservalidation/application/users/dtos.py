"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for creating a user.

    Fields are optional here; presence is one of the validated
    constraints, not a parsing concern.

    Attributes:
        username: Requested username, 2-50 characters.
        email: Email address in ``local@domain.tld`` shape.
    """

    username: Optional[str]
    email: Optional[str]


@dataclass(frozen=True)
class GetUserQuery:
    """Input DTO for looking up a single user.

    Attributes:
        username: Exact username to look up.
    """

    username: str


@dataclass(frozen=True)
class UserResult:
    """Output DTO for a user record."""

    username: str
    email: str
