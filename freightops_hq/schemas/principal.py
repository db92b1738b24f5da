# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""The authenticated subject of an authorization decision."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class HQPrincipal(BaseModel):
    """Principal attached to a request by the session lookup.

    `role` and `department` are kept as plain strings so that tenant users
    and stale roles still load; the registry treats unknown values as
    holding nothing. `permissions` is filled from the registry when the
    principal is built and is only used for display. Guards always derive
    permissions from the registry by role.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    employee_id: str | None = None
    email: str
    first_name: str
    last_name: str
    role: str
    department: str | None = None
    position: str | None = None
    permissions: list[str] = []
    last_login: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_hq_employee(self) -> bool:
        return bool(self.employee_id)
