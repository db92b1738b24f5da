# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from freightops_hq.models.base import Base, TimestampMixin
from freightops_hq.models.session import Session
from freightops_hq.models.user import User

__all__ = [
    "Base",
    "Session",
    "TimestampMixin",
    "User",
]
