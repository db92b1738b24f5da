# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Read-only view of the HQ role/permission registry."""

from collections.abc import Iterable

from fastapi import APIRouter, Depends, HTTPException, status

from freightops_hq.api.deps import require_permission
from freightops_hq.rbac import (
    Permission,
    PolicyRegistry,
    get_registry,
    permission_checker,
)
from freightops_hq.schemas.principal import HQPrincipal
from freightops_hq.schemas.rbac import (
    AccessCheckRequest,
    AccessCheckResponse,
    PermissionSchema,
    RoleAccessResponse,
    RoleSchema,
    RoleWithPermissionsSchema,
)
from freightops_hq.services import policy_service

router = APIRouter()

view_users = require_permission(Permission.USER_VIEW)


def _permission_schemas(
    registry: PolicyRegistry, codes: Iterable[str]
) -> list[PermissionSchema]:
    return [
        PermissionSchema(**entry)
        for entry in permission_checker.format_permissions_for_display(registry, codes)
    ]


def _ensure_role(registry: PolicyRegistry, role: str) -> None:
    if not registry.is_role(role):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Role '{role}' not found"
        )


@router.get("/permissions", response_model=list[PermissionSchema], summary="List all permissions")
def list_permissions(
    registry: PolicyRegistry = Depends(get_registry),
    current: HQPrincipal = Depends(view_users),
) -> list[PermissionSchema]:
    """Retrieve the permission catalog. Requires user:view."""
    return _permission_schemas(registry, registry.all_permissions())


@router.get("/roles", response_model=list[RoleSchema], summary="List all roles")
def list_roles(
    registry: PolicyRegistry = Depends(get_registry),
    current: HQPrincipal = Depends(view_users),
) -> list[RoleSchema]:
    """Retrieve every HQ role with the roles ranked above it. Requires user:view."""
    return [
        RoleSchema(name=role, senior_roles=sorted(registry.roles_senior_to(role)))
        for role in sorted(registry.all_roles())
    ]


@router.get(
    "/roles/{role}",
    response_model=RoleWithPermissionsSchema,
    summary="Get a role with its permissions",
)
def get_role(
    role: str,
    registry: PolicyRegistry = Depends(get_registry),
    current: HQPrincipal = Depends(view_users),
) -> RoleWithPermissionsSchema:
    """Retrieve one role, including its permissions. Requires user:view."""
    _ensure_role(registry, role)
    return RoleWithPermissionsSchema(
        name=role,
        senior_roles=sorted(registry.roles_senior_to(role)),
        permissions=_permission_schemas(
            registry, policy_service.get_user_permissions(registry, role)
        ),
    )


@router.get("/departments", response_model=list[str], summary="List all departments")
def list_departments(
    registry: PolicyRegistry = Depends(get_registry),
    current: HQPrincipal = Depends(view_users),
) -> list[str]:
    """Retrieve the HQ departments. Requires user:view."""
    return sorted(registry.all_departments())


@router.post("/check", response_model=AccessCheckResponse, summary="Check a role against permissions")
def check_access(
    data: AccessCheckRequest,
    registry: PolicyRegistry = Depends(get_registry),
    current: HQPrincipal = Depends(view_users),
) -> AccessCheckResponse:
    """Report whether a role holds all of the given permissions.

    Codes outside the permission vocabulary are reported back and count as missing.
    """
    _, invalid = permission_checker.parse_permissions(registry, data.permissions)
    granted = registry.permissions_for_role(data.role)
    all_granted, missing = permission_checker.check_permissions_subset(
        set(data.permissions), granted
    )
    return AccessCheckResponse(
        role=data.role,
        allowed=all_granted,
        missing=sorted(missing),
        unknown_permissions=invalid,
    )


@router.get(
    "/roles/{acting_role}/can-access/{target_role}",
    response_model=RoleAccessResponse,
    summary="Check role seniority",
)
def can_access_role(
    acting_role: str,
    target_role: str,
    registry: PolicyRegistry = Depends(get_registry),
    current: HQPrincipal = Depends(view_users),
) -> RoleAccessResponse:
    """Report whether acting_role may act for target_role. Requires user:view."""
    _ensure_role(registry, acting_role)
    _ensure_role(registry, target_role)
    return RoleAccessResponse(
        acting_role=acting_role,
        target_role=target_role,
        allowed=policy_service.can_access_role(registry, acting_role, target_role),
    )
