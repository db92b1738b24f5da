# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for the RBAC registry endpoints."""

import pytest

from freightops_hq.rbac import Department, Permission, Role


@pytest.fixture
def admin_client(login, make_user):
    """Client signed in as an HQ admin (holds user:view)."""
    return login(make_user(role="hq_admin", department="administration"))


def test_requires_user_view(login, make_user):
    client = login(make_user(role="qa_engineer", department="qa"))
    response = client.get("/api/v1/rbac/roles")
    assert response.status_code == 403
    assert response.json()["code"] == "permission_denied"
    assert response.json()["missing"] == ["user:view"]


def test_list_roles(admin_client):
    response = admin_client.get("/api/v1/rbac/roles")
    assert response.status_code == 200
    roles = {r["name"]: r["senior_roles"] for r in response.json()}
    assert set(roles) == {r.value for r in Role}
    assert roles["hq_admin"] == ["platform_owner"]


def test_get_role(admin_client):
    response = admin_client.get("/api/v1/rbac/roles/qa_engineer")
    assert response.status_code == 200
    data = response.json()
    codes = [p["code"] for p in data["permissions"]]
    assert codes == ["analytics:view", "qa:access", "qa:manage", "system:monitor", "tenant:view"]
    assert data["senior_roles"] == ["developer", "hq_admin", "platform_owner"]


def test_get_unknown_role(admin_client):
    assert admin_client.get("/api/v1/rbac/roles/dispatcher").status_code == 404


def test_list_permissions(admin_client):
    response = admin_client.get("/api/v1/rbac/permissions")
    assert response.status_code == 200
    catalog = {p["code"]: p for p in response.json()}
    assert set(catalog) == {p.value for p in Permission}
    assert catalog["hr:payroll:edit"]["area"] == "hr"
    assert catalog["hr:payroll:edit"]["sensitive"] is True
    assert catalog["tenant:view"]["sensitive"] is False
    assert catalog["tenant:view"]["read_only"] is True
    assert catalog["hr:payroll:edit"]["read_only"] is False
    assert catalog["tenant:edit"]["description"] == "Edit tenant accounts"


def test_list_departments(admin_client):
    response = admin_client.get("/api/v1/rbac/departments")
    assert response.json() == sorted(d.value for d in Department)


class TestAccessCheck:
    def test_allowed(self, admin_client):
        response = admin_client.post(
            "/api/v1/rbac/check",
            json={"role": "support_specialist", "permissions": ["support:view", "support:respond"]},
        )
        assert response.json() == {
            "role": "support_specialist",
            "allowed": True,
            "missing": [],
            "unknown_permissions": [],
        }

    def test_denied(self, admin_client):
        response = admin_client.post(
            "/api/v1/rbac/check",
            json={"role": "marketing_coordinator", "permissions": ["support:view", "support:respond"]},
        )
        data = response.json()
        assert data["allowed"] is False
        assert data["missing"] == ["support:respond", "support:view"]

    def test_unknown_permission_is_missing(self, admin_client):
        response = admin_client.post(
            "/api/v1/rbac/check",
            json={"role": "platform_owner", "permissions": ["tenant:view", "tenant:fly"]},
        )
        data = response.json()
        assert data["allowed"] is False
        assert data["missing"] == ["tenant:fly"]
        assert data["unknown_permissions"] == ["tenant:fly"]


class TestCanAccessRole:
    def test_senior_target(self, admin_client):
        response = admin_client.get(
            "/api/v1/rbac/roles/support_specialist/can-access/operations_manager"
        )
        assert response.json()["allowed"] is True

    def test_junior_target(self, admin_client):
        response = admin_client.get(
            "/api/v1/rbac/roles/platform_owner/can-access/support_specialist"
        )
        assert response.json()["allowed"] is False

    def test_unknown_role(self, admin_client):
        response = admin_client.get("/api/v1/rbac/roles/dispatcher/can-access/hq_admin")
        assert response.status_code == 404
