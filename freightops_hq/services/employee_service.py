# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""HQ employee accounts."""

import logging
import secrets

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from freightops_hq.models import User
from freightops_hq.rbac import PolicyRegistry
from freightops_hq.schemas.employee import EmployeeCreate
from freightops_hq.security import get_password_hash

logger = logging.getLogger(__name__)

EMPLOYEE_ID_MIN = 100000
EMPLOYEE_ID_MAX = 999999
MAX_ID_ATTEMPTS = 100


class EmployeeIdExhaustedError(RuntimeError):
    """No free employee identifier was found within the allowed attempts."""


class EmployeeExistsError(ValueError):
    """The email or employee identifier is already taken."""


def _random_employee_id() -> str:
    return str(EMPLOYEE_ID_MIN + secrets.randbelow(EMPLOYEE_ID_MAX - EMPLOYEE_ID_MIN + 1))


def employee_id_exists(db: Session, employee_id: str) -> bool:
    return db.query(User.id).filter(User.employee_id == employee_id).first() is not None


def generate_employee_id(db: Session, max_attempts: int = MAX_ID_ATTEMPTS) -> str:
    """Generate an unused 6-digit employee identifier.

    Raises:
        EmployeeIdExhaustedError: every attempt collided with an existing id
    """
    for _ in range(max_attempts):
        candidate = _random_employee_id()
        if not employee_id_exists(db, candidate):
            return candidate
    raise EmployeeIdExhaustedError(
        f"Unable to generate a unique employee ID after {max_attempts} attempts"
    )


def create_employee(db: Session, registry: PolicyRegistry, data: EmployeeCreate) -> User:
    """Create an HQ employee account.

    Raises:
        ValueError: role or department is not part of the registry
        EmployeeExistsError: email or employee ID collided on insert
        EmployeeIdExhaustedError: no free employee ID could be generated
    """
    if not registry.is_role(data.role):
        raise ValueError(f"Unknown HQ role: {data.role}")
    if not registry.is_department(data.department):
        raise ValueError(f"Unknown HQ department: {data.department}")

    user = User(
        employee_id=generate_employee_id(db),
        email=data.email,
        hashed_password=get_password_hash(data.password),
        first_name=data.first_name,
        last_name=data.last_name,
        phone=data.phone,
        role=data.role,
        department=data.department,
        position=data.position,
        is_active=True,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Could not create HQ employee {data.email}: {e.orig}")
        raise EmployeeExistsError(
            f"Email or employee ID already in use: {data.email}"
        ) from e
    db.refresh(user)
    logger.info(f"Created HQ employee {user.employee_id} with role {user.role}")
    return user


def get_employee_by_employee_id(db: Session, employee_id: str) -> User | None:
    """Get an HQ employee by employee identifier."""
    return db.query(User).filter(User.employee_id == employee_id).first()


def list_employees(db: Session, department: str | None = None) -> list[User]:
    """List HQ employees, optionally restricted to one department."""
    query = db.query(User).filter(User.employee_id.is_not(None))
    if department:
        query = query.filter(User.department == department)
    return query.order_by(User.last_name, User.first_name).all()
