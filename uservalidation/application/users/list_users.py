"""
Use case: List every user in the collection.

Input: none
Output: list[UserResult]
Side effects: None (read-only query).
Failure cases: None.
"""

import logging

from uservalidation.application.users.dtos import UserResult
from uservalidation.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class ListUsersUseCase:
    """Returns all users known to the repository."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self) -> list[UserResult]:
        """Run the list users use case."""
        users = self._user_repo.get_all()
        logger.info("Listing users: count=%d", len(users))
        return [UserResult(username=u.username, email=u.email) for u in users]
