# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""HQ employee schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class EmployeeCreate(BaseModel):
    """Schema for creating an HQ employee account."""

    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=8)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone: str | None = None
    role: str
    department: str
    position: str | None = None


class EmployeeResponse(BaseModel):
    """HQ employee as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    employee_id: str
    email: str
    first_name: str
    last_name: str
    phone: str | None
    role: str
    department: str | None
    position: str | None
    is_active: bool
    last_login_at: datetime | None
    created_at: datetime
