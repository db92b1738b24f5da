# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication schemas."""

from pydantic import BaseModel, Field

from freightops_hq.schemas.principal import HQPrincipal


class LoginRequest(BaseModel):
    """Login request schema."""

    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)


class AuthResponse(BaseModel):
    """Authentication response with the signed-in principal."""

    user: HQPrincipal
