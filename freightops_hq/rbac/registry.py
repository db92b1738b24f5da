# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Immutable role/permission registry.

The registry is built once at startup and handed to the policy evaluator
and the request guards. Lookups never fail: a role that is not part of the
registry simply has no permissions and no seniors, so callers must read an
empty set as "deny".
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from types import MappingProxyType

from freightops_hq.exceptions import RegistryError

from .permissions import HQ_PERMISSIONS, Permission, permission_area
from .roles import ROLE_HIERARCHY, ROLE_PERMISSIONS, Department, Role


def as_code(value: str | Enum) -> str:
    """Return the plain string identifier for a role, permission or department."""
    if isinstance(value, Enum):
        return value.value
    return value


def as_codes(values: str | Enum | Iterable[str | Enum]) -> list[str]:
    """Normalize a single identifier or a collection of them to a list of strings."""
    if isinstance(values, (str, Enum)):
        return [as_code(values)]
    return [as_code(v) for v in values]


def _find_cycle(hierarchy: Mapping[str, frozenset[str]]) -> list[str] | None:
    """Return one seniority cycle as a path of roles, or None if the graph is acyclic."""
    visiting: set[str] = set()
    done: set[str] = set()
    path: list[str] = []

    def visit(role: str) -> list[str] | None:
        visiting.add(role)
        path.append(role)
        for senior in sorted(hierarchy.get(role, ())):
            if senior in visiting:
                return path[path.index(senior):] + [senior]
            if senior not in done:
                cycle = visit(senior)
                if cycle:
                    return cycle
        visiting.discard(role)
        done.add(role)
        path.pop()
        return None

    for role in sorted(hierarchy):
        if role not in done:
            cycle = visit(role)
            if cycle:
                return cycle
    return None


@dataclass(frozen=True)
class PolicyRegistry:
    """Closed vocabularies plus the role->permission and role->seniors tables."""

    role_permissions: Mapping[str, frozenset[str]]
    role_hierarchy: Mapping[str, frozenset[str]]
    permissions: frozenset[str]
    departments: frozenset[str]
    descriptions: Mapping[str, str]

    @classmethod
    def from_tables(
        cls,
        role_permissions: Mapping[str | Enum, Iterable[str | Enum]],
        role_hierarchy: Mapping[str | Enum, Iterable[str | Enum]],
        permissions: Iterable[str | Enum],
        departments: Iterable[str | Enum],
        descriptions: Mapping[str, str] | None = None,
        roles: Iterable[str | Enum] | None = None,
    ) -> "PolicyRegistry":
        """Validate the raw tables and freeze them into a registry.

        Raises:
            RegistryError: a declared role has no permission entry, a
                permission outside the vocabulary is granted, the hierarchy
                names an unknown role, or the hierarchy has a cycle.
        """
        vocabulary = frozenset(as_codes(permissions))
        grants = {
            as_code(role): frozenset(as_codes(granted))
            for role, granted in role_permissions.items()
        }
        roles = frozenset(as_codes(roles)) if roles is not None else frozenset(grants)

        missing = roles - frozenset(grants)
        if missing:
            raise RegistryError(f"Roles without a permission entry: {sorted(missing)}")

        for role, granted in grants.items():
            unknown = granted - vocabulary
            if unknown:
                raise RegistryError(
                    f"Role '{role}' grants unknown permissions: {sorted(unknown)}"
                )

        seniors: dict[str, frozenset[str]] = {}
        for role, above in role_hierarchy.items():
            role_code = as_code(role)
            above_codes = frozenset(as_codes(above))
            unknown = ({role_code} | above_codes) - frozenset(grants)
            if unknown:
                raise RegistryError(
                    f"Role hierarchy references unknown roles: {sorted(unknown)}"
                )
            seniors[role_code] = above_codes

        cycle = _find_cycle(seniors)
        if cycle:
            raise RegistryError(f"Role hierarchy contains a cycle: {' -> '.join(cycle)}")

        return cls(
            role_permissions=MappingProxyType(grants),
            role_hierarchy=MappingProxyType(seniors),
            permissions=vocabulary,
            departments=frozenset(as_codes(departments)),
            descriptions=MappingProxyType(dict(descriptions or {})),
        )

    def permissions_for_role(self, role: str | Enum | None) -> frozenset[str]:
        """Permissions granted to a role; empty for unknown roles."""
        if role is None:
            return frozenset()
        return self.role_permissions.get(as_code(role), frozenset())

    def roles_senior_to(self, role: str | Enum | None) -> frozenset[str]:
        """Roles ranked above the given role; empty for unknown roles."""
        if role is None:
            return frozenset()
        return self.role_hierarchy.get(as_code(role), frozenset())

    def all_roles(self) -> frozenset[str]:
        return frozenset(self.role_permissions)

    def all_permissions(self) -> frozenset[str]:
        return self.permissions

    def all_departments(self) -> frozenset[str]:
        return self.departments

    def is_role(self, value: str | Enum | None) -> bool:
        return value is not None and as_code(value) in self.role_permissions

    def is_department(self, value: str | Enum | None) -> bool:
        return value is not None and as_code(value) in self.departments

    def describe_permission(self, code: str | Enum) -> dict[str, str | None] | None:
        """Catalog entry (code, area, description) for a permission.

        Returns None for codes outside the vocabulary.
        """
        code = as_code(code)
        if code not in self.permissions:
            return None
        return {
            "code": code,
            "area": permission_area(code),
            "description": self.descriptions.get(code),
        }


def build_default_registry() -> PolicyRegistry:
    """Build the registry from the HQ role tables."""
    return PolicyRegistry.from_tables(
        role_permissions=ROLE_PERMISSIONS,
        role_hierarchy=ROLE_HIERARCHY,
        permissions=Permission,
        departments=Department,
        descriptions={p["code"]: p["description"] for p in HQ_PERMISSIONS},
        roles=Role,
    )


@lru_cache
def get_registry() -> PolicyRegistry:
    """Return the registry shared by the running application."""
    return build_default_registry()
