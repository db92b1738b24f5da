# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""HQ role-based access control tables and registry."""

from freightops_hq.rbac.checker import PermissionChecker, permission_checker
from freightops_hq.rbac.permissions import HQ_PERMISSIONS, Permission
from freightops_hq.rbac.registry import (
    PolicyRegistry,
    as_code,
    as_codes,
    build_default_registry,
    get_registry,
)
from freightops_hq.rbac.roles import (
    ROLE_HIERARCHY,
    ROLE_PERMISSIONS,
    Department,
    Role,
)

__all__ = [
    "HQ_PERMISSIONS",
    "ROLE_HIERARCHY",
    "ROLE_PERMISSIONS",
    "Department",
    "Permission",
    "PermissionChecker",
    "PolicyRegistry",
    "Role",
    "as_code",
    "as_codes",
    "build_default_registry",
    "get_registry",
    "permission_checker",
]
