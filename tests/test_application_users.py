"""
Tests for the users application layer (use cases).

Use cases run against the in-memory adapter; no HTTP involved.
"""

from uservalidation.application.users.create_user import CreateUserUseCase
from uservalidation.application.users.dtos import CreateUserCommand, GetUserQuery, UserResult
from uservalidation.application.users.get_user import GetUserUseCase
from uservalidation.application.users.list_users import ListUsersUseCase
from uservalidation.domain.users.entities import User
from uservalidation.domain.users.errors import ResourceConflict, ResourceNotFound
from uservalidation.domain.validation.constraints import required
from uservalidation.domain.validation.violations import ValidationFailure
from uservalidation.infrastructure.users.in_memory_repository import (
    SEED_USERS,
    InMemoryUserRepository,
)


class TestInMemoryUserRepository:
    """Tests for the in-memory adapter."""

    def test_seeded_on_construction(self) -> None:
        assert InMemoryUserRepository().get_all() == list(SEED_USERS)

    def test_instances_do_not_share_state(self) -> None:
        first = InMemoryUserRepository()
        first.add(User("someone", "someone@test.com"))
        assert len(InMemoryUserRepository().get_all()) == len(SEED_USERS)

    def test_get_all_returns_a_copy(self) -> None:
        repo = InMemoryUserRepository()
        repo.get_all().clear()
        assert len(repo.get_all()) == len(SEED_USERS)


class TestListUsersUseCase:
    """Tests for ListUsersUseCase."""

    def test_lists_seed_users(self) -> None:
        results = ListUsersUseCase(InMemoryUserRepository()).execute()
        assert results == [
            UserResult("john-doe", "john@test.com"),
            UserResult("jane-doe", "jane@test.com"),
        ]


class TestGetUserUseCase:
    """Tests for GetUserUseCase."""

    def test_present_user_returned_unchanged(self) -> None:
        result = GetUserUseCase(InMemoryUserRepository()).execute(GetUserQuery("john-doe"))
        assert result == UserResult("john-doe", "john@test.com")

    def test_absent_user_returns_not_found_with_key(self) -> None:
        result = GetUserUseCase(InMemoryUserRepository()).execute(GetUserQuery("john-doet"))
        assert isinstance(result, ResourceNotFound)
        assert result.message_id == "user.not.found"
        assert result.args == ("john-doet",)
        assert result.log_message_id == "user.not.found.log"

    def test_lookup_is_case_sensitive(self) -> None:
        result = GetUserUseCase(InMemoryUserRepository()).execute(GetUserQuery("John-Doe"))
        assert isinstance(result, ResourceNotFound)


class TestCreateUserUseCase:
    """Tests for CreateUserUseCase."""

    def test_created_user_is_listed(self) -> None:
        """Round trip within one collection lifetime."""
        repo = InMemoryUserRepository()
        result = CreateUserUseCase(repo).execute(
            CreateUserCommand(username="yourusername", email="your@email.com")
        )
        assert result == UserResult("yourusername", "your@email.com")
        listed = ListUsersUseCase(repo).execute()
        assert listed[-1] == result

    def test_invalid_input_returns_failure_and_stores_nothing(self) -> None:
        repo = InMemoryUserRepository()
        result = CreateUserUseCase(repo).execute(CreateUserCommand(username="", email="your.com"))
        assert isinstance(result, ValidationFailure)
        assert [v.message_id for v in result.violations] == [
            "validation.username.notNull",
            "validation.email.invalid",
        ]
        assert repo.get_all() == list(SEED_USERS)

    def test_duplicate_username_returns_conflict(self) -> None:
        result = CreateUserUseCase(InMemoryUserRepository()).execute(
            CreateUserCommand(username="john-doe", email="other@test.com")
        )
        assert isinstance(result, ResourceConflict)
        assert result.args == ("john-doe",)

    def test_constraint_table_is_injectable(self) -> None:
        """Only the injected table applies."""
        table = (required("username", "req", "required"),)
        result = CreateUserUseCase(InMemoryUserRepository(), constraints=table).execute(
            CreateUserCommand(username="x", email="not-an-email")
        )
        assert result == UserResult("x", "not-an-email")
