"""
Admin authentication I/O models.
"""

from __future__ import annotations

from pydantic import Field

from .common import CamelModel


class LoginRequest(CamelModel):
    password: str = Field(min_length=1, description="Admin password")


class AdminUser(CamelModel):
    id: str


class LoginResponse(CamelModel):
    success: bool = True
    user: AdminUser


class VerifyResponse(CamelModel):
    user: AdminUser
