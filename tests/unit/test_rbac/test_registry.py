# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the HQ policy registry."""

import dataclasses

import pytest

from freightops_hq.exceptions import RegistryError
from freightops_hq.rbac import (
    ROLE_HIERARCHY,
    ROLE_PERMISSIONS,
    Department,
    Permission,
    PolicyRegistry,
    Role,
    get_registry,
)


class TestDefaultRegistry:
    """Tests for the registry built from the HQ tables."""

    def test_every_role_has_an_entry(self, registry):
        assert registry.all_roles() == {r.value for r in Role}

    @pytest.mark.parametrize("role", list(Role))
    def test_role_permissions_stay_in_vocabulary(self, registry, role):
        assert registry.permissions_for_role(role) <= registry.all_permissions()

    def test_vocabularies(self, registry):
        assert registry.all_permissions() == {p.value for p in Permission}
        assert registry.all_departments() == {d.value for d in Department}

    def test_platform_owner_has_financial_view(self, registry):
        assert "financial:view" in registry.permissions_for_role("platform_owner")

    def test_platform_owner_has_no_hr_records(self, registry):
        owner = registry.permissions_for_role(Role.PLATFORM_OWNER)
        assert not any(code.startswith("hr:") for code in owner)

    def test_hr_coordinator_cannot_edit_tenants(self, registry):
        assert "tenant:edit" not in registry.permissions_for_role("hr_coordinator")

    def test_support_specialist_can_view_and_respond(self, registry):
        granted = registry.permissions_for_role(Role.SUPPORT_SPECIALIST)
        assert {"support:view", "support:respond"} <= granted

    def test_unknown_role_gets_nothing(self, registry):
        assert registry.permissions_for_role("dispatcher") == frozenset()
        assert registry.roles_senior_to("dispatcher") == frozenset()
        assert registry.permissions_for_role(None) == frozenset()

    def test_identifiers_are_matched_exactly(self, registry):
        assert registry.permissions_for_role("Platform_Owner") == frozenset()
        assert registry.permissions_for_role("platform-owner") == frozenset()

    def test_hierarchy_matches_table(self, registry):
        for role, seniors in ROLE_HIERARCHY.items():
            assert registry.roles_senior_to(role) == {s.value for s in seniors}

    def test_platform_owner_is_top(self, registry):
        assert registry.roles_senior_to(Role.PLATFORM_OWNER) == frozenset()

    def test_describe_permission(self, registry):
        assert registry.describe_permission(Permission.TENANT_EDIT) == {
            "code": "tenant:edit",
            "area": "tenant",
            "description": "Edit tenant accounts",
        }
        assert registry.describe_permission("hr:payroll:view")["area"] == "hr"
        assert registry.describe_permission("tenant:fly") is None

    def test_registry_is_immutable(self, registry):
        with pytest.raises(dataclasses.FrozenInstanceError):
            registry.permissions = frozenset()
        with pytest.raises(TypeError):
            registry.role_permissions["intruder"] = frozenset({"platform:admin"})

    def test_get_registry_is_shared(self):
        assert get_registry() is get_registry()


class TestRegistryValidation:
    """Tests for PolicyRegistry.from_tables."""

    def build(self, **overrides):
        tables = {
            "role_permissions": {"lead": ["a:view", "a:edit"], "member": ["a:view"]},
            "role_hierarchy": {"lead": [], "member": ["lead"]},
            "permissions": ["a:view", "a:edit"],
            "departments": ["ops"],
        }
        tables.update(overrides)
        return PolicyRegistry.from_tables(**tables)

    def test_valid_tables(self):
        registry = self.build()
        assert registry.permissions_for_role("member") == {"a:view"}
        assert registry.roles_senior_to("member") == {"lead"}

    def test_rejects_unknown_permission(self):
        with pytest.raises(RegistryError, match="unknown permissions"):
            self.build(role_permissions={"lead": ["a:delete"], "member": []})

    def test_rejects_role_without_entry(self):
        with pytest.raises(RegistryError, match="without a permission entry"):
            self.build(roles=["lead", "member", "guest"])

    def test_empty_entry_is_allowed(self):
        registry = self.build(
            role_permissions={"lead": [], "member": []},
            roles=["lead", "member"],
        )
        assert registry.permissions_for_role("lead") == frozenset()

    def test_rejects_unknown_role_in_hierarchy(self):
        with pytest.raises(RegistryError, match="unknown roles"):
            self.build(role_hierarchy={"member": ["boss"]})

    def test_rejects_direct_cycle(self):
        with pytest.raises(RegistryError, match="cycle"):
            self.build(role_hierarchy={"lead": ["member"], "member": ["lead"]})

    def test_rejects_self_reference(self):
        with pytest.raises(RegistryError, match="cycle"):
            self.build(role_hierarchy={"lead": ["lead"]})

    def test_rejects_longer_cycle(self):
        with pytest.raises(RegistryError, match="cycle"):
            PolicyRegistry.from_tables(
                role_permissions={"a": [], "b": [], "c": []},
                role_hierarchy={"a": ["b"], "b": ["c"], "c": ["a"]},
                permissions=[],
                departments=[],
            )

    def test_default_tables_cover_every_role(self):
        assert set(ROLE_PERMISSIONS) == set(Role)
        assert set(ROLE_HIERARCHY) == set(Role)


def test_membership_checks(registry):
    assert registry.is_role(Role.HR_MANAGER)
    assert registry.is_role("qa_engineer")
    assert not registry.is_role("QA_Engineer")
    assert not registry.is_role(None)
    assert registry.is_department("engineering")
    assert not registry.is_department("Engineering")
    assert not registry.is_department(None)
