"""Pydantic models for authentication request bodies.

Fields are optional so missing values reach validation and produce the
portal's own 400 messages.
"""

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Email and password login payload."""

    email: str | None = None
    password: str | None = None


class SignupRequest(BaseModel):
    """New account payload."""

    name: str | None = None
    email: str | None = None
    password: str | None = None


class CustomerLoginRequest(BaseModel):
    """Customer access-code login payload."""

    model_config = ConfigDict(populate_by_name=True)

    email: str | None = None
    access_code: str | None = Field(default=None, alias="accessCode")
