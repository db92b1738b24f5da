# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission parsing, set checks and catalog formatting."""

from collections.abc import Iterable

from .permissions import Permission
from .registry import PolicyRegistry

# Grants whose misuse is hard to undo; flagged in the catalog
SENSITIVE_PERMISSIONS: frozenset[str] = frozenset(
    p.value
    for p in (
        Permission.PLATFORM_ADMIN,
        Permission.PLATFORM_DEPLOY,
        Permission.TENANT_DELETE,
        Permission.FINANCIAL_EDIT,
        Permission.SYSTEM_BACKUP,
        Permission.SYSTEM_DEPLOY,
        Permission.USER_DELETE,
        Permission.HR_EMPLOYEE_DELETE,
        Permission.HR_PAYROLL_EDIT,
    )
)

# Grants that only expose data
READ_ONLY_PERMISSIONS: frozenset[str] = frozenset(
    p.value
    for p in (
        Permission.TENANT_VIEW,
        Permission.FINANCIAL_VIEW,
        Permission.SUPPORT_VIEW,
        Permission.SYSTEM_MONITOR,
        Permission.USER_VIEW,
        Permission.ANALYTICS_VIEW,
        Permission.SALES_VIEW,
        Permission.MARKETING_VIEW,
        Permission.HR_EMPLOYEE_VIEW,
        Permission.HR_PAYROLL_VIEW,
    )
)


class PermissionChecker:
    """Validates permission codes against a registry and compares grant sets."""

    def parse_permissions(
        self,
        registry: PolicyRegistry,
        codes: Iterable[str],
    ) -> tuple[set[str], list[str]]:
        """Split codes into those in the registry vocabulary and the rest.

        Returns:
            Tuple of (known codes, unknown codes in input order)
        """
        vocabulary = registry.all_permissions()
        known: set[str] = set()
        unknown: list[str] = []

        for code in codes:
            if code in vocabulary:
                known.add(code)
            elif code not in unknown:
                unknown.append(code)

        return known, unknown

    def check_permissions_subset(
        self,
        required: Iterable[str],
        granted: Iterable[str],
    ) -> tuple[bool, set[str]]:
        """Check that every required code is granted.

        Returns:
            Tuple of (all_granted, missing codes)
        """
        missing = set(required) - set(granted)
        return not missing, missing

    def format_permissions_for_display(
        self,
        registry: PolicyRegistry,
        codes: Iterable[str],
    ) -> list[dict[str, str | bool | None]]:
        """Catalog entries for the given codes, sorted by code.

        Codes outside the registry vocabulary are skipped.
        """
        result = []
        for code in sorted(set(codes)):
            entry = registry.describe_permission(code)
            if entry is None:
                continue
            result.append({
                **entry,
                "sensitive": code in SENSITIVE_PERMISSIONS,
                "read_only": code in READ_ONLY_PERMISSIONS,
            })
        return result


permission_checker = PermissionChecker()
