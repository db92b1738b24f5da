# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""RBAC introspection schemas."""

from pydantic import BaseModel


class PermissionSchema(BaseModel):
    """Schema representing a permission."""

    code: str
    area: str
    description: str | None
    sensitive: bool = False
    read_only: bool = False


class RoleSchema(BaseModel):
    """Schema representing a role."""

    name: str
    senior_roles: list[str]


class RoleWithPermissionsSchema(RoleSchema):
    """Schema representing a role along with its permissions."""

    permissions: list[PermissionSchema]


class AccessCheckRequest(BaseModel):
    """Ask whether a role holds a set of permissions."""

    role: str
    permissions: list[str]


class AccessCheckResponse(BaseModel):
    """Outcome of an access check."""

    role: str
    allowed: bool
    missing: list[str]
    unknown_permissions: list[str] = []


class RoleAccessResponse(BaseModel):
    """Outcome of a role seniority check."""

    acting_role: str
    target_role: str
    allowed: bool
