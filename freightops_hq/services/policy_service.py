# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authorization decisions over an HQ principal.

Every function here is a pure lookup against the registry and returns a
boolean (or a boolean plus what is missing). Permissions are always
derived from the registry by role; the permission list carried on the
principal is never consulted.
"""

from collections.abc import Iterable
from enum import Enum

from freightops_hq.rbac import PolicyRegistry, as_code, as_codes, permission_checker
from freightops_hq.schemas.principal import HQPrincipal


def has_role(principal: HQPrincipal, role: str | Enum) -> bool:
    """Exact role match. Seniority is not taken into account."""
    return principal.role == as_code(role)


def has_any_role(principal: HQPrincipal, roles: Iterable[str | Enum]) -> bool:
    """Check whether the principal's role is one of the given roles."""
    return principal.role in as_codes(roles)


def get_user_permissions(registry: PolicyRegistry, role: str | Enum | None) -> list[str]:
    """Sorted permission codes for a role; empty for unknown roles."""
    return sorted(registry.permissions_for_role(role))


def has_permission(
    registry: PolicyRegistry, principal: HQPrincipal, permission: str | Enum
) -> bool:
    """Check a single permission against the principal's role."""
    return as_code(permission) in registry.permissions_for_role(principal.role)


def has_all_permissions(
    registry: PolicyRegistry,
    principal: HQPrincipal,
    permissions: str | Enum | Iterable[str | Enum],
) -> tuple[bool, set[str]]:
    """Check that the principal's role holds every listed permission.

    Returns:
        Tuple of (all_granted, missing_permissions)
    """
    return permission_checker.check_permissions_subset(
        set(as_codes(permissions)),
        registry.permissions_for_role(principal.role),
    )


def can_access_role(
    registry: PolicyRegistry, acting_role: str | Enum, target_role: str | Enum
) -> bool:
    """Check whether acting_role may act for target_role.

    True when both are the same role or target_role is listed above
    acting_role in the hierarchy.
    """
    acting, target = as_code(acting_role), as_code(target_role)
    if acting == target:
        return True
    return target in registry.roles_senior_to(acting)


def is_senior_to(registry: PolicyRegistry, role: str | Enum, other: str | Enum) -> bool:
    """True when `role` ranks above `other`."""
    return as_code(role) in registry.roles_senior_to(other)


def satisfies_role(
    registry: PolicyRegistry,
    principal: HQPrincipal,
    allowed_roles: str | Enum | Iterable[str | Enum],
) -> bool:
    """Hierarchy-aware role check.

    The principal passes when it holds one of the allowed roles or a role
    ranked above any of them.
    """
    allowed = as_codes(allowed_roles)
    if principal.role in allowed:
        return True
    return any(is_senior_to(registry, principal.role, role) for role in allowed)


def in_department(
    principal: HQPrincipal, departments: str | Enum | Iterable[str | Enum]
) -> bool:
    """Exact department match; a principal without a department never matches."""
    if principal.department is None:
        return False
    return principal.department in as_codes(departments)
