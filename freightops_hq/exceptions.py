# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authorization errors raised by the HQ access guards."""

from typing import Any

from fastapi import status


class RegistryError(ValueError):
    """Raised when the role/permission tables are inconsistent."""


class AuthorizationDenied(Exception):
    """Base class for requests rejected by an access guard.

    Every denial is terminal for the request; the registered exception
    handler turns it into a JSON response via `to_payload`.
    """

    status_code: int = status.HTTP_403_FORBIDDEN
    code: str = "access_denied"
    message: str = "Access denied"

    def __init__(
        self,
        required: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(self.message)
        self.required = required
        # Describes what the caller actually holds; may be withheld from the response
        self.details = details or {}

    def to_payload(self, include_details: bool = True) -> dict[str, Any]:
        """Build the response body for this denial."""
        payload: dict[str, Any] = {"error": self.message, "code": self.code}
        if self.required is not None:
            payload["required"] = self.required
        if include_details:
            payload.update(self.details)
        return payload


class Unauthenticated(AuthorizationDenied):
    """No authenticated principal is attached to the request."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "unauthenticated"
    message = "Authentication required"


class NotHQPrincipal(AuthorizationDenied):
    """The principal is authenticated but is not HQ staff."""

    code = "not_hq_principal"
    message = "HQ employee access required"


class RoleDenied(AuthorizationDenied):
    code = "role_denied"
    message = "Insufficient permissions"


class PermissionDenied(AuthorizationDenied):
    code = "permission_denied"
    message = "Insufficient permissions"


class DepartmentDenied(AuthorizationDenied):
    code = "department_denied"
    message = "Department access required"
