"""
Adapter: In-memory user collection.

Implements the UserRepository port with a plain list. Each instance is
seeded on construction and nothing outlives the instance; the interface
layer builds a fresh one per request.
"""

from collections.abc import Iterable
from typing import Optional

from uservalidation.domain.users.entities import User
from uservalidation.domain.users.ports import UserRepository

SEED_USERS: tuple[User, ...] = (
    User(username="john-doe", email="john@test.com"),
    User(username="jane-doe", email="jane@test.com"),
)


class InMemoryUserRepository(UserRepository):
    """List-backed user repository. Lookups are linear scans."""

    def __init__(self, seed: Iterable[User] = SEED_USERS) -> None:
        self._users: list[User] = list(seed)

    def get_all(self) -> list[User]:
        return list(self._users)

    def find_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._users if u.username == username), None)

    def add(self, user: User) -> User:
        self._users.append(user)
        return user
