"""Services package."""
from freightops_hq.services import (
    auth_service,
    employee_service,
    policy_service,
)

__all__ = [
    "auth_service",
    "employee_service",
    "policy_service",
]
