# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pydantic schemas package."""

from freightops_hq.schemas.auth import AuthResponse, LoginRequest
from freightops_hq.schemas.common import HealthResponse, MessageResponse
from freightops_hq.schemas.employee import EmployeeCreate, EmployeeResponse
from freightops_hq.schemas.hq import AccessGrantResponse, ProfileResponse, ProfileSchema
from freightops_hq.schemas.principal import HQPrincipal
from freightops_hq.schemas.rbac import (
    AccessCheckRequest,
    AccessCheckResponse,
    PermissionSchema,
    RoleAccessResponse,
    RoleSchema,
    RoleWithPermissionsSchema,
)

__all__ = [
    "AccessCheckRequest",
    "AccessCheckResponse",
    "AccessGrantResponse",
    "AuthResponse",
    "EmployeeCreate",
    "EmployeeResponse",
    "HQPrincipal",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "PermissionSchema",
    "ProfileResponse",
    "ProfileSchema",
    "RoleAccessResponse",
    "RoleSchema",
    "RoleWithPermissionsSchema",
]
