"""
Use case: Create a user from validated input.

Input: CreateUserCommand (username, email)
Output: UserResult
Side effects: Appends the user to the repository.
Failure cases (returned, not raised):
    - ValidationFailure when the command violates the constraint table.
    - ResourceConflict when the username is already taken.
"""

import logging
from collections.abc import Sequence
from typing import Union

from uservalidation.application.users.dtos import CreateUserCommand, UserResult
from uservalidation.domain.users.constraints import CREATE_USER_CONSTRAINTS
from uservalidation.domain.users.entities import User
from uservalidation.domain.users.errors import ResourceConflict, user_already_exists
from uservalidation.domain.users.ports import UserRepository
from uservalidation.domain.validation.constraints import FieldConstraint
from uservalidation.domain.validation.executor import validate
from uservalidation.domain.validation.violations import ValidationFailure

logger = logging.getLogger(__name__)

CreateUserOutcome = Union[UserResult, ValidationFailure, ResourceConflict]


class CreateUserUseCase:
    """Validates a create-user command and stores the new user.

    The constraint table is injected so callers decide the schema;
    it defaults to the create-user table.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        constraints: Sequence[FieldConstraint] = CREATE_USER_CONSTRAINTS,
    ) -> None:
        self._user_repo = user_repo
        self._constraints = tuple(constraints)

    def execute(self, command: CreateUserCommand) -> CreateUserOutcome:
        """Run the create user use case.

        Args:
            command: Raw, unvalidated input.

        Returns:
            The created user, or the outcome describing why it was not
            created.
        """
        violations = validate(command, self._constraints)
        if violations:
            failure = ValidationFailure(violations)
            logger.info(
                "Create user rejected: fields=%s", ",".join(failure.fields)
            )
            return failure

        # validate() guarantees both fields are non-empty strings here
        username, email = str(command.username), str(command.email)
        if self._user_repo.find_by_username(username) is not None:
            return user_already_exists(username)

        user = self._user_repo.add(User(username=username, email=email))
        logger.info("Created user username=%s", user.username)
        return UserResult(username=user.username, email=user.email)
