# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""HQ employee management API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from freightops_hq.api.deps import get_db, require_permission
from freightops_hq.rbac import Permission, PolicyRegistry, get_registry
from freightops_hq.schemas.employee import EmployeeCreate, EmployeeResponse
from freightops_hq.schemas.principal import HQPrincipal
from freightops_hq.services import auth_service, employee_service

router = APIRouter()


@router.get("", response_model=list[EmployeeResponse], summary="List HQ employees")
def list_employees(
    department: str | None = None,
    db: Session = Depends(get_db),
    current: HQPrincipal = Depends(require_permission(Permission.USER_VIEW)),
) -> list[EmployeeResponse]:
    """Retrieve HQ employees, optionally filtered by department.

    Requires user:view permission.
    """
    return [
        EmployeeResponse.model_validate(user)
        for user in employee_service.list_employees(db, department)
    ]


@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an HQ employee",
)
def create_employee(
    data: EmployeeCreate,
    db: Session = Depends(get_db),
    registry: PolicyRegistry = Depends(get_registry),
    current: HQPrincipal = Depends(require_permission(Permission.USER_CREATE)),
) -> EmployeeResponse:
    """Create an HQ employee with a freshly generated employee ID.

    Requires user:create permission.
    """
    if auth_service.get_user_by_email(db, data.email):
        raise HTTPException(status_code=400, detail="Email already in use")

    try:
        user = employee_service.create_employee(db, registry, data)
    except employee_service.EmployeeIdExhaustedError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e)
        ) from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return EmployeeResponse.model_validate(user)


@router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
    summary="Get an HQ employee",
)
def get_employee(
    employee_id: str,
    db: Session = Depends(get_db),
    current: HQPrincipal = Depends(require_permission(Permission.USER_VIEW)),
) -> EmployeeResponse:
    """Retrieve one HQ employee by employee ID.

    Requires user:view permission.
    """
    user = employee_service.get_employee_by_employee_id(db, employee_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found"
        )
    return EmployeeResponse.model_validate(user)
