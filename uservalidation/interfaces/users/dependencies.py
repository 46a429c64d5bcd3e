"""
Dependency injection for the users bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection. Shared,
read-only collaborators (catalog, problem mapper) are built once by
``create_app`` and read from ``app.state``.
"""

from fastapi import Depends, Request

from uservalidation.application.users.create_user import CreateUserUseCase
from uservalidation.application.users.get_user import GetUserUseCase
from uservalidation.application.users.list_users import ListUsersUseCase
from uservalidation.domain.users.ports import UserRepository
from uservalidation.infrastructure.users.in_memory_repository import (
    InMemoryUserRepository,
)
from uservalidation.shared.errors.problem_details import ProblemDetailMapper
from uservalidation.shared.i18n.request import request_locale


def get_user_repository() -> UserRepository:
    """Build a freshly seeded collection for this request."""
    return InMemoryUserRepository()


def get_locale(request: Request) -> str:
    """Negotiated locale of the current request."""
    return request_locale(request)


def get_problem_mapper(request: Request) -> ProblemDetailMapper:
    """Problem-detail mapper built once by create_app."""
    return request.app.state.problem_mapper


def get_list_users_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> ListUsersUseCase:
    """Build ListUsersUseCase with its infrastructure dependencies."""
    return ListUsersUseCase(user_repo=user_repo)


def get_get_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> GetUserUseCase:
    """Build GetUserUseCase with its infrastructure dependencies."""
    return GetUserUseCase(user_repo=user_repo)


def get_create_user_use_case(
    request: Request,
    user_repo: UserRepository = Depends(get_user_repository),
) -> CreateUserUseCase:
    """Build CreateUserUseCase with the constraint table from app state."""
    return CreateUserUseCase(
        user_repo=user_repo,
        constraints=request.app.state.create_user_constraints,
    )
