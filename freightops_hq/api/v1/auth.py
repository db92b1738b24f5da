# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from freightops_hq.api.deps import get_authenticated_principal, get_db
from freightops_hq.config import settings
from freightops_hq.rbac import PolicyRegistry, get_registry
from freightops_hq.schemas.auth import AuthResponse, LoginRequest
from freightops_hq.schemas.common import MessageResponse
from freightops_hq.schemas.principal import HQPrincipal
from freightops_hq.services import auth_service

router = APIRouter()


@router.post("/login", response_model=AuthResponse)
def login(
    data: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
    registry: PolicyRegistry = Depends(get_registry),
) -> AuthResponse:
    """Login with email and password."""
    user = auth_service.authenticate(db, data.email, data.password)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    auth_service.record_login(db, user)
    token = auth_service.create_session(db, user.id)

    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        max_age=86400 * settings.session_expiry_days,
    )

    return AuthResponse(user=auth_service.build_principal(registry, user))


@router.post("/logout", response_model=MessageResponse)
def logout(
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
) -> MessageResponse:
    """Logout and invalidate session."""
    token = request.cookies.get(settings.session_cookie_name)
    if token:
        auth_service.delete_session(db, token)

    response.delete_cookie(key=settings.session_cookie_name)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=AuthResponse)
def get_me(
    principal: HQPrincipal = Depends(get_authenticated_principal),
) -> AuthResponse:
    """Get the signed-in principal."""
    return AuthResponse(user=principal)
