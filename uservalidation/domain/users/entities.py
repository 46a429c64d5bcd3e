"""
Domain entities for the users bounded context.

Entities contain no framework imports and no IO operations.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A user record.

    ``username`` is unique within one collection and is used as the
    lookup key.
    """

    username: str
    email: str
