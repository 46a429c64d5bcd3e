"""
Expected failure outcomes for the users bounded context.

Use cases return these values instead of raising, and the interface
layer maps them to problem-detail responses. Each value names a
message id from the catalog plus the positional arguments for it.
No framework imports allowed.
"""

from dataclasses import dataclass

LOG_SUFFIX = ".log"


@dataclass(frozen=True)
class DomainSignal:
    """Base outcome carrying a catalog message id and its arguments."""

    message_id: str
    args: tuple[str, ...] = ()

    @property
    def log_message_id(self) -> str:
        """Message id of the operator-facing log entry for this outcome."""
        return self.message_id + LOG_SUFFIX


@dataclass(frozen=True)
class ResourceNotFound(DomainSignal):
    """A lookup key has no matching record. ``args`` holds the key."""


@dataclass(frozen=True)
class ResourceConflict(DomainSignal):
    """A record with the same key already exists."""


def user_not_found(username: str) -> ResourceNotFound:
    return ResourceNotFound("user.not.found", (username,))


def user_already_exists(username: str) -> ResourceConflict:
    return ResourceConflict("user.already.exists", (username,))
