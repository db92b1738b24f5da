# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission vocabulary for HQ staff."""

from enum import Enum


class Permission(str, Enum):
    """Permissions that can be attached to HQ roles."""

    # Platform management
    PLATFORM_ADMIN = "platform:admin"
    PLATFORM_CONFIG = "platform:config"
    PLATFORM_DEPLOY = "platform:deploy"

    # Tenant management
    TENANT_VIEW = "tenant:view"
    TENANT_CREATE = "tenant:create"
    TENANT_EDIT = "tenant:edit"
    TENANT_DELETE = "tenant:delete"
    TENANT_BILLING = "tenant:billing"

    # Financial operations
    FINANCIAL_VIEW = "financial:view"
    FINANCIAL_EDIT = "financial:edit"
    FINANCIAL_REPORTS = "financial:reports"
    FINANCIAL_AUDIT = "financial:audit"

    # Customer support
    SUPPORT_VIEW = "support:view"
    SUPPORT_RESPOND = "support:respond"
    SUPPORT_ESCALATE = "support:escalate"
    SUPPORT_ADMIN = "support:admin"

    # System operations
    SYSTEM_MONITOR = "system:monitor"
    SYSTEM_LOGS = "system:logs"
    SYSTEM_BACKUP = "system:backup"
    SYSTEM_DEPLOY = "system:deploy"

    # User management
    USER_VIEW = "user:view"
    USER_CREATE = "user:create"
    USER_EDIT = "user:edit"
    USER_DELETE = "user:delete"

    # Analytics & reporting
    ANALYTICS_VIEW = "analytics:view"
    ANALYTICS_ADVANCED = "analytics:advanced"
    ANALYTICS_EXPORT = "analytics:export"

    # Development & QA
    DEV_ACCESS = "dev:access"
    DEV_DEPLOY = "dev:deploy"
    QA_ACCESS = "qa:access"
    QA_MANAGE = "qa:manage"

    # Sales & marketing
    SALES_VIEW = "sales:view"
    SALES_MANAGE = "sales:manage"
    MARKETING_VIEW = "marketing:view"
    MARKETING_MANAGE = "marketing:manage"

    # HR management
    HR_EMPLOYEE_VIEW = "hr:employee:view"
    HR_EMPLOYEE_CREATE = "hr:employee:create"
    HR_EMPLOYEE_EDIT = "hr:employee:edit"
    HR_EMPLOYEE_DELETE = "hr:employee:delete"
    HR_PAYROLL_VIEW = "hr:payroll:view"
    HR_PAYROLL_EDIT = "hr:payroll:edit"
    HR_BENEFITS_MANAGE = "hr:benefits:manage"
    HR_PERFORMANCE_REVIEW = "hr:performance:review"


PERMISSION_DESCRIPTIONS: dict[Permission, str] = {
    Permission.PLATFORM_ADMIN: "Full platform administration",
    Permission.PLATFORM_CONFIG: "Change platform configuration",
    Permission.PLATFORM_DEPLOY: "Deploy platform releases",
    Permission.TENANT_VIEW: "View tenant accounts",
    Permission.TENANT_CREATE: "Onboard new tenants",
    Permission.TENANT_EDIT: "Edit tenant accounts",
    Permission.TENANT_DELETE: "Delete tenant accounts",
    Permission.TENANT_BILLING: "Manage tenant billing and subscriptions",
    Permission.FINANCIAL_VIEW: "View financial dashboards",
    Permission.FINANCIAL_EDIT: "Edit financial records",
    Permission.FINANCIAL_REPORTS: "Generate financial reports",
    Permission.FINANCIAL_AUDIT: "Run financial audits",
    Permission.SUPPORT_VIEW: "View support tickets",
    Permission.SUPPORT_RESPOND: "Respond to support tickets",
    Permission.SUPPORT_ESCALATE: "Escalate support tickets",
    Permission.SUPPORT_ADMIN: "Administer the support desk",
    Permission.SYSTEM_MONITOR: "View system monitoring",
    Permission.SYSTEM_LOGS: "Read system logs",
    Permission.SYSTEM_BACKUP: "Run and restore backups",
    Permission.SYSTEM_DEPLOY: "Deploy system updates",
    Permission.USER_VIEW: "View HQ staff accounts",
    Permission.USER_CREATE: "Create HQ staff accounts",
    Permission.USER_EDIT: "Edit HQ staff accounts",
    Permission.USER_DELETE: "Delete HQ staff accounts",
    Permission.ANALYTICS_VIEW: "View analytics",
    Permission.ANALYTICS_ADVANCED: "Use advanced analytics",
    Permission.ANALYTICS_EXPORT: "Export analytics data",
    Permission.DEV_ACCESS: "Access development tooling",
    Permission.DEV_DEPLOY: "Deploy from development tooling",
    Permission.QA_ACCESS: "Access QA environments",
    Permission.QA_MANAGE: "Manage QA environments",
    Permission.SALES_VIEW: "View sales pipeline",
    Permission.SALES_MANAGE: "Manage sales pipeline",
    Permission.MARKETING_VIEW: "View marketing campaigns",
    Permission.MARKETING_MANAGE: "Manage marketing campaigns",
    Permission.HR_EMPLOYEE_VIEW: "View employee records",
    Permission.HR_EMPLOYEE_CREATE: "Create employee records",
    Permission.HR_EMPLOYEE_EDIT: "Edit employee records",
    Permission.HR_EMPLOYEE_DELETE: "Delete employee records",
    Permission.HR_PAYROLL_VIEW: "View payroll",
    Permission.HR_PAYROLL_EDIT: "Edit payroll",
    Permission.HR_BENEFITS_MANAGE: "Manage employee benefits",
    Permission.HR_PERFORMANCE_REVIEW: "Conduct performance reviews",
}


def permission_area(code: str) -> str:
    """Return the resource area a permission code belongs to ("hr:payroll:view" -> "hr")."""
    return code.split(":", 1)[0]


# Catalog entries, one per permission
HQ_PERMISSIONS = [
    {
        "code": permission.value,
        "area": permission_area(permission.value),
        "description": PERMISSION_DESCRIPTIONS[permission],
    }
    for permission in Permission
]
