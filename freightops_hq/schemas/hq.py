# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Responses for the HQ staff area."""

from datetime import datetime

from pydantic import BaseModel


class AccessGrantResponse(BaseModel):
    """Returned by a protected HQ area once every guard has passed."""

    area: str
    access_level: str
    available_actions: list[str]


class ProfileSchema(BaseModel):
    employee_id: str | None
    name: str
    email: str
    department: str | None
    position: str | None
    role: str
    permissions: list[str]
    last_login: datetime | None


class ProfileResponse(BaseModel):
    """The caller's own HQ profile."""

    profile: ProfileSchema
    senior_roles: list[str]
