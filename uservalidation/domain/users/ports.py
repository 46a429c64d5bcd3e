"""
Port interfaces (ABCs) for the users bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from uservalidation.domain.users.entities import User


class UserRepository(ABC):
    """Port for reading and storing users."""

    @abstractmethod
    def get_all(self) -> list[User]:
        """Return every user in the collection, in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[User]:
        """Return the user with the given username, or None if absent.

        Args:
            username: Exact, case-sensitive username to look up.
        """
        raise NotImplementedError

    @abstractmethod
    def add(self, user: User) -> User:
        """Append a user to the collection and return it.

        Args:
            user: The user to store. Uniqueness is checked by the caller.
        """
        raise NotImplementedError
