"""
FastAPI router for the users bounded context.

All routes delegate to use cases. No business logic here.
Expected failures come back from use cases as outcome values and are
mapped to problem details here; everything else goes through the
centralized error handlers.
"""

from typing import Union

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from uservalidation.application.users.create_user import CreateUserUseCase
from uservalidation.application.users.dtos import CreateUserCommand, GetUserQuery, UserResult
from uservalidation.application.users.get_user import GetUserUseCase
from uservalidation.application.users.list_users import ListUsersUseCase
from uservalidation.domain.users.errors import ResourceConflict, ResourceNotFound
from uservalidation.domain.validation.violations import ValidationFailure
from uservalidation.interfaces.users.dependencies import (
    get_create_user_use_case,
    get_get_user_use_case,
    get_list_users_use_case,
    get_locale,
    get_problem_mapper,
)
from uservalidation.interfaces.users.schemas import (
    CreateUserRequest,
    ProblemDetailResponse,
    UserResponse,
)
from uservalidation.shared.errors.problem_details import ProblemDetailMapper, problem_response
from uservalidation.shared.security.rate_limiting import write_limit

router = APIRouter(prefix="/users", tags=["users"])


def _to_response(result: UserResult) -> UserResponse:
    return UserResponse(username=result.username, email=result.email)


@router.get(
    "",
    response_model=list[UserResponse],
    summary="List users",
    description="Return every user in the collection.",
)
def list_users(
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
) -> list[UserResponse]:
    """List all users."""
    return [_to_response(r) for r in use_case.execute()]


@router.get(
    "/{username}",
    response_model=UserResponse,
    responses={404: {"model": ProblemDetailResponse}},
    summary="Get a user",
    description="Look up a user by username.",
)
def get_user(
    username: str,
    request: Request,
    locale: str = Depends(get_locale),
    mapper: ProblemDetailMapper = Depends(get_problem_mapper),
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
) -> Union[UserResponse, JSONResponse]:
    """Get a single user or a localized 404 problem detail."""
    outcome = use_case.execute(GetUserQuery(username=username))
    if isinstance(outcome, ResourceNotFound):
        problem = mapper.from_not_found(outcome, locale, instance=request.url.path)
        return problem_response(problem, locale)
    return _to_response(outcome)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ProblemDetailResponse},
        409: {"model": ProblemDetailResponse},
        429: {"model": ProblemDetailResponse},
    },
    summary="Create a user",
    description="Validate the input and add the user to the collection.",
)
@write_limit
def create_user(
    body: CreateUserRequest,
    request: Request,
    locale: str = Depends(get_locale),
    mapper: ProblemDetailMapper = Depends(get_problem_mapper),
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> Union[UserResponse, JSONResponse]:
    """Create a user or return a localized 400/409 problem detail."""
    outcome = use_case.execute(
        CreateUserCommand(username=body.username, email=body.email)
    )
    if isinstance(outcome, ValidationFailure):
        problem = mapper.from_violations(outcome.violations, locale, instance=request.url.path)
        return problem_response(problem, locale)
    if isinstance(outcome, ResourceConflict):
        problem = mapper.from_conflict(outcome, locale, instance=request.url.path)
        return problem_response(problem, locale)
    return _to_response(outcome)
