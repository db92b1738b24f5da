# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication service."""

import logging
import uuid
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from freightops_hq.config import settings
from freightops_hq.models import User
from freightops_hq.models.session import Session as SessionModel
from freightops_hq.rbac import PolicyRegistry
from freightops_hq.schemas.principal import HQPrincipal
from freightops_hq.security import verify_password
from freightops_hq.services import policy_service

logger = logging.getLogger(__name__)


def authenticate(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    if not user.is_active:
        return None
    return user


def record_login(db: Session, user: User) -> None:
    """Stamp the user's last login time."""
    user.last_login_at = datetime.utcnow()
    db.commit()


def create_session(db: Session, user_id: uuid.UUID) -> str:
    """Create a new session for a user."""
    token = str(uuid.uuid4())
    expires_at = datetime.utcnow() + timedelta(days=settings.session_expiry_days)

    session = SessionModel(
        user_id=user_id,
        token=token,
        expires_at=expires_at,
    )
    db.add(session)
    db.commit()
    logger.info(f"Session created for user {user_id}")

    return token


def get_session(db: Session, token: str) -> SessionModel | None:
    """Get a valid session by token."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if not session:
        return None
    if session.expires_at < datetime.utcnow():
        db.delete(session)
        db.commit()
        return None
    return session


def delete_session(db: Session, token: str) -> bool:
    """Delete a session by token."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if session:
        user_id = session.user_id
        db.delete(session)
        db.commit()
        logger.info(f"Session closed for user {user_id}")
        return True
    return False


def cleanup_expired_sessions(db: Session) -> int:
    """Delete all expired sessions. Returns count of deleted sessions."""
    count = (
        db.query(SessionModel)
        .filter(SessionModel.expires_at < datetime.utcnow())
        .delete()
    )
    db.commit()
    return count


def get_user_by_id(db: Session, user_id: uuid.UUID) -> User | None:
    """Get a user by ID."""
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def build_principal(registry: PolicyRegistry, user: User) -> HQPrincipal:
    """Build the request principal for a user.

    The permission list is a snapshot taken from the registry for display;
    authorization checks recompute it from the role.
    """
    return HQPrincipal(
        id=str(user.id),
        employee_id=user.employee_id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        role=user.role,
        department=user.department,
        position=user.position,
        permissions=policy_service.get_user_permissions(registry, user.role),
        last_login=user.last_login_at,
    )
