# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""HQ roles, departments and their static policy tables."""

from enum import Enum

from .permissions import Permission


class Role(str, Enum):
    """Roles held by HQ employees."""

    PLATFORM_OWNER = "platform_owner"
    HQ_ADMIN = "hq_admin"
    OPERATIONS_MANAGER = "operations_manager"
    CUSTOMER_SUCCESS = "customer_success"
    FINANCIAL_ANALYST = "financial_analyst"
    SUPPORT_SPECIALIST = "support_specialist"
    DEVELOPER = "developer"
    QA_ENGINEER = "qa_engineer"
    SALES_MANAGER = "sales_manager"
    MARKETING_COORDINATOR = "marketing_coordinator"
    HR_MANAGER = "hr_manager"
    HR_COORDINATOR = "hr_coordinator"


class Department(str, Enum):
    """Departments an HQ employee can belong to."""

    EXECUTIVE = "executive"
    ADMINISTRATION = "administration"
    OPERATIONS = "operations"
    CUSTOMER_SUCCESS = "customer_success"
    FINANCE = "finance"
    SUPPORT = "support"
    HR = "hr"
    ENGINEERING = "engineering"
    QA = "qa"
    SALES = "sales"
    MARKETING = "marketing"


_HR_PERMISSIONS = {
    Permission.HR_EMPLOYEE_VIEW,
    Permission.HR_EMPLOYEE_CREATE,
    Permission.HR_EMPLOYEE_EDIT,
    Permission.HR_EMPLOYEE_DELETE,
    Permission.HR_PAYROLL_VIEW,
    Permission.HR_PAYROLL_EDIT,
    Permission.HR_BENEFITS_MANAGE,
    Permission.HR_PERFORMANCE_REVIEW,
}

# The platform owner holds everything except the HR records, which stay with HR
PLATFORM_OWNER_PERMISSIONS = [p for p in Permission if p not in _HR_PERMISSIONS]

ROLE_PERMISSIONS: dict[Role, list[Permission]] = {
    Role.PLATFORM_OWNER: PLATFORM_OWNER_PERMISSIONS,
    Role.HQ_ADMIN: [
        Permission.PLATFORM_CONFIG,
        Permission.TENANT_VIEW,
        Permission.TENANT_CREATE,
        Permission.TENANT_EDIT,
        Permission.TENANT_BILLING,
        Permission.FINANCIAL_VIEW,
        Permission.FINANCIAL_EDIT,
        Permission.FINANCIAL_REPORTS,
        Permission.SUPPORT_VIEW,
        Permission.SUPPORT_RESPOND,
        Permission.SUPPORT_ESCALATE,
        Permission.SUPPORT_ADMIN,
        Permission.SYSTEM_MONITOR,
        Permission.SYSTEM_LOGS,
        Permission.USER_VIEW,
        Permission.USER_CREATE,
        Permission.USER_EDIT,
        Permission.ANALYTICS_VIEW,
        Permission.ANALYTICS_ADVANCED,
        Permission.ANALYTICS_EXPORT,
    ],
    Role.OPERATIONS_MANAGER: [
        Permission.TENANT_VIEW,
        Permission.TENANT_EDIT,
        Permission.FINANCIAL_VIEW,
        Permission.FINANCIAL_REPORTS,
        Permission.SUPPORT_VIEW,
        Permission.SUPPORT_RESPOND,
        Permission.SUPPORT_ESCALATE,
        Permission.SYSTEM_MONITOR,
        Permission.USER_VIEW,
        Permission.ANALYTICS_VIEW,
        Permission.ANALYTICS_ADVANCED,
    ],
    Role.CUSTOMER_SUCCESS: [
        Permission.TENANT_VIEW,
        Permission.SUPPORT_VIEW,
        Permission.SUPPORT_RESPOND,
        Permission.SUPPORT_ESCALATE,
        Permission.USER_VIEW,
        Permission.ANALYTICS_VIEW,
        Permission.SALES_VIEW,
    ],
    Role.FINANCIAL_ANALYST: [
        Permission.TENANT_VIEW,
        Permission.TENANT_BILLING,
        Permission.FINANCIAL_VIEW,
        Permission.FINANCIAL_EDIT,
        Permission.FINANCIAL_REPORTS,
        Permission.FINANCIAL_AUDIT,
        Permission.ANALYTICS_VIEW,
        Permission.ANALYTICS_ADVANCED,
        Permission.ANALYTICS_EXPORT,
    ],
    Role.SUPPORT_SPECIALIST: [
        Permission.TENANT_VIEW,
        Permission.SUPPORT_VIEW,
        Permission.SUPPORT_RESPOND,
        Permission.USER_VIEW,
        Permission.ANALYTICS_VIEW,
    ],
    Role.DEVELOPER: [
        Permission.TENANT_VIEW,
        Permission.SYSTEM_MONITOR,
        Permission.SYSTEM_LOGS,
        Permission.DEV_ACCESS,
        Permission.DEV_DEPLOY,
        Permission.QA_ACCESS,
        Permission.ANALYTICS_VIEW,
    ],
    Role.QA_ENGINEER: [
        Permission.TENANT_VIEW,
        Permission.SYSTEM_MONITOR,
        Permission.QA_ACCESS,
        Permission.QA_MANAGE,
        Permission.ANALYTICS_VIEW,
    ],
    Role.SALES_MANAGER: [
        Permission.TENANT_VIEW,
        Permission.FINANCIAL_VIEW,
        Permission.FINANCIAL_REPORTS,
        Permission.ANALYTICS_VIEW,
        Permission.ANALYTICS_ADVANCED,
        Permission.SALES_VIEW,
        Permission.SALES_MANAGE,
    ],
    Role.MARKETING_COORDINATOR: [
        Permission.TENANT_VIEW,
        Permission.ANALYTICS_VIEW,
        Permission.MARKETING_VIEW,
        Permission.MARKETING_MANAGE,
    ],
    Role.HR_MANAGER: [
        *sorted(_HR_PERMISSIONS, key=lambda p: p.value),
        Permission.USER_VIEW,
        Permission.USER_EDIT,
    ],
    Role.HR_COORDINATOR: [
        Permission.HR_EMPLOYEE_VIEW,
        Permission.HR_EMPLOYEE_EDIT,
        Permission.HR_PAYROLL_VIEW,
        Permission.HR_BENEFITS_MANAGE,
        Permission.HR_PERFORMANCE_REVIEW,
    ],
}

# Each role maps to the roles above it
ROLE_HIERARCHY: dict[Role, list[Role]] = {
    Role.PLATFORM_OWNER: [],
    Role.HQ_ADMIN: [Role.PLATFORM_OWNER],
    Role.OPERATIONS_MANAGER: [Role.HQ_ADMIN, Role.PLATFORM_OWNER],
    Role.CUSTOMER_SUCCESS: [
        Role.OPERATIONS_MANAGER,
        Role.HQ_ADMIN,
        Role.PLATFORM_OWNER,
    ],
    Role.FINANCIAL_ANALYST: [
        Role.OPERATIONS_MANAGER,
        Role.HQ_ADMIN,
        Role.PLATFORM_OWNER,
    ],
    Role.SUPPORT_SPECIALIST: [
        Role.CUSTOMER_SUCCESS,
        Role.OPERATIONS_MANAGER,
        Role.HQ_ADMIN,
        Role.PLATFORM_OWNER,
    ],
    Role.DEVELOPER: [Role.HQ_ADMIN, Role.PLATFORM_OWNER],
    Role.QA_ENGINEER: [Role.DEVELOPER, Role.HQ_ADMIN, Role.PLATFORM_OWNER],
    Role.SALES_MANAGER: [
        Role.OPERATIONS_MANAGER,
        Role.HQ_ADMIN,
        Role.PLATFORM_OWNER,
    ],
    Role.MARKETING_COORDINATOR: [
        Role.SALES_MANAGER,
        Role.OPERATIONS_MANAGER,
        Role.HQ_ADMIN,
        Role.PLATFORM_OWNER,
    ],
    Role.HR_MANAGER: [Role.HQ_ADMIN, Role.PLATFORM_OWNER],
    Role.HR_COORDINATOR: [Role.HR_MANAGER, Role.HQ_ADMIN, Role.PLATFORM_OWNER],
}
