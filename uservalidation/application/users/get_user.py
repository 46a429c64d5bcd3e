"""
Use case: Look up a user by username.

Input: GetUserQuery (username)
Output: UserResult, or ResourceNotFound carrying the username
Side effects: None.
Failure cases: unknown username (returned, not raised).
"""

import logging
from typing import Union

from uservalidation.application.users.dtos import GetUserQuery, UserResult
from uservalidation.domain.users.errors import ResourceNotFound, user_not_found
from uservalidation.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Orchestrates a single-user lookup."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, query: GetUserQuery) -> Union[UserResult, ResourceNotFound]:
        """Run the lookup.

        Args:
            query: The username to look up.

        Returns:
            The matching user, or a ResourceNotFound outcome whose
            arguments hold the requested username.
        """
        logger.debug("Looking up user username=%s", query.username)
        user = self._user_repo.find_by_username(query.username)
        if user is None:
            return user_not_found(query.username)
        return UserResult(username=user.username, email=user.email)
