# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from freightops_hq import __version__
from freightops_hq.config import settings
from freightops_hq.database import SessionLocal
from freightops_hq.exceptions import AuthorizationDenied
from freightops_hq.rbac import get_registry
from freightops_hq.schemas.common import HealthResponse
from freightops_hq.services import auth_service

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    # Startup: build the policy registry once; a malformed table fails here
    registry = get_registry()
    logger.info(
        f"Loaded RBAC registry with {len(registry.all_roles())} roles, "
        f"{len(registry.all_permissions())} permissions and "
        f"{len(registry.all_departments())} departments"
    )

    db = SessionLocal()
    try:
        removed = auth_service.cleanup_expired_sessions(db)
        if removed:
            logger.info(f"Removed {removed} expired sessions")
    except Exception as e:
        logger.error(f"Error cleaning up expired sessions: {e}")
    finally:
        db.close()

    yield

    logger.info("Shutting down FreightOps HQ...")


app = FastAPI(
    title="FreightOps HQ",
    description="Access control for FreightOps platform staff",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AuthorizationDenied)
async def authorization_denied_handler(
    request: Request, exc: AuthorizationDenied
) -> JSONResponse:
    """Turn a guard denial into its terminal JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_payload(include_details=settings.expose_denial_details),
    )


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


# Import and include API router after it's created
from freightops_hq.api.v1.router import api_router  # noqa: E402

app.include_router(api_router, prefix="/api/v1")
