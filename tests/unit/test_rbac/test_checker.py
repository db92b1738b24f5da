# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for permission parsing, set checks and catalog formatting."""

import pytest

from freightops_hq.rbac import PolicyRegistry
from freightops_hq.rbac.checker import (
    READ_ONLY_PERMISSIONS,
    SENSITIVE_PERMISSIONS,
    PermissionChecker,
)


class TestPermissionConstants:
    """Tests for permission flag sets."""

    def test_sensitive_permissions_contain_destructive_actions(self):
        assert "tenant:delete" in SENSITIVE_PERMISSIONS
        assert "platform:admin" in SENSITIVE_PERMISSIONS
        assert "hr:payroll:edit" in SENSITIVE_PERMISSIONS

    def test_no_overlap_between_sensitive_and_read_only(self):
        overlap = SENSITIVE_PERMISSIONS & READ_ONLY_PERMISSIONS
        assert len(overlap) == 0, f"Overlapping permissions: {overlap}"

    def test_flags_stay_in_vocabulary(self, registry):
        assert SENSITIVE_PERMISSIONS <= registry.all_permissions()
        assert READ_ONLY_PERMISSIONS <= registry.all_permissions()


class TestPermissionChecker:
    """Tests for PermissionChecker class."""

    @pytest.fixture
    def checker(self):
        return PermissionChecker()

    def test_parse_valid_permissions(self, checker, registry):
        known, unknown = checker.parse_permissions(
            registry, ["tenant:view", "financial:reports", "hr:payroll:view"]
        )
        assert known == {"tenant:view", "financial:reports", "hr:payroll:view"}
        assert unknown == []

    def test_parse_invalid_permissions(self, checker, registry):
        known, unknown = checker.parse_permissions(
            registry, ["tenant:view", "tenant.view", "TENANT:VIEW", "tenant.view"]
        )
        assert known == {"tenant:view"}
        assert unknown == ["tenant.view", "TENANT:VIEW"]

    def test_parse_uses_registry_vocabulary(self, checker):
        registry = PolicyRegistry.from_tables(
            role_permissions={"clerk": ["ledger:read"]},
            role_hierarchy={},
            permissions=["ledger:read"],
            departments=[],
        )
        known, unknown = checker.parse_permissions(registry, ["ledger:read", "tenant:view"])
        assert known == {"ledger:read"}
        assert unknown == ["tenant:view"]

    def test_parse_empty_list(self, checker, registry):
        known, unknown = checker.parse_permissions(registry, [])
        assert len(known) == 0
        assert len(unknown) == 0

    def test_check_permissions_subset_all_granted(self, checker):
        all_granted, missing = checker.check_permissions_subset(
            {"support:view", "support:respond"},
            frozenset({"support:view", "support:respond", "tenant:view"}),
        )
        assert all_granted is True
        assert missing == set()

    def test_check_permissions_subset_missing(self, checker):
        all_granted, missing = checker.check_permissions_subset(
            ["support:view", "support:respond"],
            {"support:view"},
        )
        assert all_granted is False
        assert missing == {"support:respond"}

    def test_check_empty_requirement_is_granted(self, checker):
        all_granted, missing = checker.check_permissions_subset(set(), set())
        assert all_granted is True
        assert missing == set()

    def test_format_permissions_for_display(self, checker, registry):
        formatted = checker.format_permissions_for_display(
            registry, ["tenant:view", "tenant:delete", "tenant:fly"]
        )

        assert formatted == [
            {
                "code": "tenant:delete",
                "area": "tenant",
                "description": registry.describe_permission("tenant:delete")["description"],
                "sensitive": True,
                "read_only": False,
            },
            {
                "code": "tenant:view",
                "area": "tenant",
                "description": "View tenant accounts",
                "sensitive": False,
                "read_only": True,
            },
        ]
