# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""HQ staff areas, each behind one or more access guards."""

from fastapi import APIRouter, Depends

from freightops_hq.api.deps import (
    require_department,
    require_permission,
    require_role,
    require_senior_role,
)
from freightops_hq.rbac import Department, Permission, PolicyRegistry, Role, get_registry
from freightops_hq.schemas.hq import AccessGrantResponse, ProfileResponse, ProfileSchema
from freightops_hq.schemas.principal import HQPrincipal

router = APIRouter()


@router.get(
    "/platform",
    response_model=AccessGrantResponse,
    dependencies=[Depends(require_role(Role.PLATFORM_OWNER))],
)
def platform_area() -> AccessGrantResponse:
    """Platform owner console."""
    return AccessGrantResponse(
        area="platform",
        access_level="platform_owner",
        available_actions=[
            "Manage all tenants",
            "Configure platform settings",
            "Access all financial data",
            "Manage HQ employees",
            "Deploy system updates",
        ],
    )


@router.get(
    "/admin",
    response_model=AccessGrantResponse,
    dependencies=[Depends(require_role([Role.PLATFORM_OWNER, Role.HQ_ADMIN]))],
)
def admin_area() -> AccessGrantResponse:
    """HQ administration console."""
    return AccessGrantResponse(
        area="admin",
        access_level="admin",
        available_actions=[
            "Manage tenants",
            "View financial reports",
            "Handle support tickets",
            "Access system monitoring",
        ],
    )


@router.get(
    "/tenants/manage",
    response_model=AccessGrantResponse,
    dependencies=[Depends(require_permission(Permission.TENANT_EDIT))],
)
def tenant_management() -> AccessGrantResponse:
    """Tenant account management."""
    return AccessGrantResponse(
        area="tenant_management",
        access_level=Permission.TENANT_EDIT.value,
        available_actions=[
            "Edit tenant information",
            "Review tenant subscriptions",
            "View tenant analytics",
        ],
    )


@router.get(
    "/financials",
    response_model=AccessGrantResponse,
    dependencies=[
        Depends(
            require_permission(
                [Permission.FINANCIAL_VIEW, Permission.FINANCIAL_REPORTS]
            )
        )
    ],
)
def financial_area() -> AccessGrantResponse:
    """Financial dashboards and reports."""
    return AccessGrantResponse(
        area="financials",
        access_level="financial_reporting",
        available_actions=[
            "View financial dashboards",
            "Generate financial reports",
            "Access revenue analytics",
        ],
    )


@router.get(
    "/administration",
    response_model=AccessGrantResponse,
    dependencies=[Depends(require_department(Department.ADMINISTRATION))],
)
def administration_area() -> AccessGrantResponse:
    """Administration department tools."""
    return AccessGrantResponse(
        area="administration",
        access_level=Department.ADMINISTRATION.value,
        available_actions=[
            "Manage company policies",
            "Access administrative tools",
        ],
    )


@router.get(
    "/finance",
    response_model=AccessGrantResponse,
    dependencies=[Depends(require_department(Department.FINANCE))],
)
def finance_department_area() -> AccessGrantResponse:
    """Finance department tools."""
    return AccessGrantResponse(
        area="finance",
        access_level=Department.FINANCE.value,
        available_actions=[
            "Process financial transactions",
            "Manage accounting systems",
            "Handle audit procedures",
        ],
    )


@router.get(
    "/operations/senior",
    response_model=AccessGrantResponse,
    dependencies=[
        Depends(
            require_role(
                [Role.PLATFORM_OWNER, Role.HQ_ADMIN, Role.OPERATIONS_MANAGER]
            )
        ),
        Depends(require_permission([Permission.TENANT_VIEW, Permission.SYSTEM_MONITOR])),
        Depends(require_department([Department.ADMINISTRATION, Department.OPERATIONS])),
    ],
)
def senior_operations_area() -> AccessGrantResponse:
    """Senior operations, guarded by role, permission and department together."""
    return AccessGrantResponse(
        area="senior_operations",
        access_level="senior_operations",
        available_actions=[
            "Cross-department coordination",
            "Advanced system monitoring",
        ],
    )


@router.get(
    "/oversight",
    response_model=AccessGrantResponse,
    dependencies=[Depends(require_senior_role(Role.OPERATIONS_MANAGER))],
)
def operations_oversight() -> AccessGrantResponse:
    """Operations oversight, open to operations managers and everyone above them."""
    return AccessGrantResponse(
        area="oversight",
        access_level="operations_manager_or_senior",
        available_actions=[
            "Review customer success queues",
            "Review financial analyst work",
        ],
    )


@router.get("/profile", response_model=ProfileResponse)
def my_profile(
    principal: HQPrincipal = Depends(require_role(list(Role))),
    registry: PolicyRegistry = Depends(get_registry),
) -> ProfileResponse:
    """The caller's HQ profile."""
    return ProfileResponse(
        profile=ProfileSchema(
            employee_id=principal.employee_id,
            name=principal.full_name,
            email=principal.email,
            department=principal.department,
            position=principal.position,
            role=principal.role,
            permissions=principal.permissions,
            last_login=principal.last_login,
        ),
        senior_roles=sorted(registry.roles_senior_to(principal.role)),
    )
