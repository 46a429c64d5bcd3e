"""
Pydantic schemas for the users API.

The create request only checks types: every field is optional so that
presence, length and shape are reported by the domain validator as
localized violations rather than as framework errors.
No business logic belongs here.
"""

from typing import Optional

from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    """Request schema for the create user endpoint.

    Attributes:
        username: Requested username (2-50 characters).
        email: Email address.
    """

    username: Optional[str] = Field(default=None, description="Unique username")
    email: Optional[str] = Field(default=None, description="Email address")


class UserResponse(BaseModel):
    """A single user in the response."""

    username: str
    email: str


class ProblemDetailResponse(BaseModel):
    """Problem-detail error body (application/problem+json)."""

    type: str
    title: str
    status: int
    detail: str
    instance: Optional[str] = None


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
