# ---------------------------------------------------------------------------
# Author  : eSports Hub team
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""Pydantic request / response models for the auth endpoints."""

from typing import Optional

from pydantic import BaseModel, Field


# -- Requests --------------------------------------------------------------
# Every field is optional at the schema level so that a missing field is
# reported by the service with its own message ("Email is required"), not
# as a generic body-validation failure.


class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = Field(default=None, alias="confirmPassword")

    model_config = {"populate_by_name": True}


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


# -- Responses -------------------------------------------------------------
# The password hash never leaves the service: UserView is the only user
# shape that responses are built from.


class UserView(BaseModel):
    id: int
    name: str
    email: str
    role: str

    model_config = {"from_attributes": True}


class AuthResponse(BaseModel):
    success: bool = True
    message: str
    user: UserView


class MeResponse(BaseModel):
    success: bool = True
    user: UserView


class MessageResponse(BaseModel):
    success: bool = True
    message: str
