# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection.

The `require_*` factories build access guards. Each takes the allowed
roles, permissions or departments (a single value or a list), captures
them, and returns a dependency that either hands back the principal or
raises an `AuthorizationDenied` subclass. Guards can be stacked on a route
and all of them must pass.
"""

import logging
from collections.abc import Callable, Iterable
from enum import Enum

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from freightops_hq.config import settings
from freightops_hq.database import get_db
from freightops_hq.exceptions import (
    DepartmentDenied,
    NotHQPrincipal,
    PermissionDenied,
    RoleDenied,
    Unauthenticated,
)
from freightops_hq.rbac import PolicyRegistry, as_codes, get_registry
from freightops_hq.schemas.principal import HQPrincipal
from freightops_hq.services import auth_service, policy_service

logger = logging.getLogger(__name__)

Guard = Callable[..., HQPrincipal]


def get_session_token(request: Request) -> str | None:
    """Read the session token from the session cookie."""
    return request.cookies.get(settings.session_cookie_name)


def get_current_principal(
    db: Session = Depends(get_db),
    registry: PolicyRegistry = Depends(get_registry),
    token: str | None = Depends(get_session_token),
) -> HQPrincipal | None:
    """Resolve the session cookie to a principal, or None when there is no valid session."""
    if not token:
        return None

    session_obj = auth_service.get_session(db, token)
    if not session_obj:
        return None

    user = auth_service.get_user_by_id(db, session_obj.user_id)
    if not user or not user.is_active:
        return None

    return auth_service.build_principal(registry, user)


def get_authenticated_principal(
    principal: HQPrincipal | None = Depends(get_current_principal),
) -> HQPrincipal:
    """Any signed-in principal, HQ staff or tenant user."""
    if principal is None:
        raise Unauthenticated()
    return principal


def get_hq_principal(
    principal: HQPrincipal | None = Depends(get_current_principal),
) -> HQPrincipal:
    """Signed-in HQ staff member."""
    if principal is None:
        raise Unauthenticated()
    if not principal.is_hq_employee:
        logger.warning(f"Non-HQ principal {principal.id} attempted HQ access")
        raise NotHQPrincipal()
    return principal


def require_role(allowed_roles: str | Enum | Iterable[str | Enum]) -> Guard:
    """Guard that admits only the listed roles (exact match)."""
    roles = as_codes(allowed_roles)

    def dependency(principal: HQPrincipal = Depends(get_hq_principal)) -> HQPrincipal:
        if not policy_service.has_any_role(principal, roles):
            logger.warning(
                f"Role denied for employee {principal.employee_id}: "
                f"has {principal.role}, needs one of {roles}"
            )
            raise RoleDenied(required=roles, details={"current": principal.role})
        return principal

    return dependency


def require_senior_role(allowed_roles: str | Enum | Iterable[str | Enum]) -> Guard:
    """Guard that admits the listed roles and every role ranked above them."""
    roles = as_codes(allowed_roles)

    def dependency(
        principal: HQPrincipal = Depends(get_hq_principal),
        registry: PolicyRegistry = Depends(get_registry),
    ) -> HQPrincipal:
        if not policy_service.satisfies_role(registry, principal, roles):
            logger.warning(
                f"Role denied for employee {principal.employee_id}: "
                f"{principal.role} is not at or above {roles}"
            )
            raise RoleDenied(required=roles, details={"current": principal.role})
        return principal

    return dependency


def require_permission(
    required_permissions: str | Enum | Iterable[str | Enum],
) -> Guard:
    """Guard that admits roles holding every listed permission."""
    permissions = as_codes(required_permissions)

    def dependency(
        principal: HQPrincipal = Depends(get_hq_principal),
        registry: PolicyRegistry = Depends(get_registry),
    ) -> HQPrincipal:
        granted, missing = policy_service.has_all_permissions(
            registry, principal, permissions
        )
        if not granted:
            logger.warning(
                f"Permission denied for employee {principal.employee_id} "
                f"({principal.role}): missing {sorted(missing)}"
            )
            raise PermissionDenied(
                required=permissions,
                details={
                    "available": policy_service.get_user_permissions(
                        registry, principal.role
                    ),
                    "missing": sorted(missing),
                },
            )
        return principal

    return dependency


def require_department(
    allowed_departments: str | Enum | Iterable[str | Enum],
) -> Guard:
    """Guard that admits principals from the listed departments (exact match)."""
    departments = as_codes(allowed_departments)

    def dependency(principal: HQPrincipal = Depends(get_hq_principal)) -> HQPrincipal:
        if not policy_service.in_department(principal, departments):
            logger.warning(
                f"Department denied for employee {principal.employee_id}: "
                f"in {principal.department}, needs one of {departments}"
            )
            raise DepartmentDenied(
                required=departments, details={"current": principal.department}
            )
        return principal

    return dependency
