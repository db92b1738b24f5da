# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from freightops_hq.api.v1 import auth, employees, hq, rbac

api_router = APIRouter()

# Auth routes
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# HQ staff areas
api_router.include_router(hq.router, prefix="/hq", tags=["hq"])

# RBAC registry routes
api_router.include_router(rbac.router, prefix="/rbac", tags=["rbac"])

# HQ employee management
api_router.include_router(employees.router, prefix="/employees", tags=["employees"])
