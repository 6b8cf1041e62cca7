# dashboard/role_permissions.py

from .access_control import (
    ALL_BUSINESS_TYPES,
    BUSINESS_TYPE_CHOICES,
    ROLE_ACCOUNTANT,
    ROLE_CHOICES,
    ROLE_CO_FOUNDER,
    ROLE_DELIVERY_STAFF,
    ROLE_HR,
    ROLE_INVENTORY_MANAGER,
    ROLE_MANAGER,
    ROLE_OWNER,
    ROLE_PRODUCTION,
    ROLE_SALES_EXECUTIVE,
    ROLE_SALES_STAFF,
    ROLE_STAFF,
    ROLE_STORE_STAFF,
)

# Tags that gate quick actions and KPIs
PERM_VIEW_DASHBOARD = "view_dashboard"
PERM_VIEW_BASIC_ANALYTICS = "view_basic_analytics"
PERM_VIEW_INVENTORY = "view_inventory"
PERM_VIEW_ORDERS = "view_orders"
PERM_VIEW_FINANCIAL_DATA = "view_financial_data"
PERM_MANAGE_TEAM = "manage_team"
PERM_MANAGE_CUSTOMERS = "manage_customers"
PERM_CREATE_SALES = "create_sales"
PERM_CREATE_FINANCIAL = "create_financial"
PERM_ORDERS = "viewAddEditOrders"
PERM_PRODUCTS = "addEditDeleteProducts"
PERM_TASKS_ROUTES = "assignTasksOrRoutes"
PERM_QR_SCANNER = "qrCodeScanner"

BASE_PERMISSIONS = (
    PERM_VIEW_DASHBOARD,
    PERM_VIEW_BASIC_ANALYTICS,
    PERM_VIEW_INVENTORY,
    PERM_VIEW_ORDERS,
)

# Feature checkmarks shared by the management roles
_FEATURE_FLAGS = (
    "addEditDeleteProducts",
    "viewAddEditOrders",
    "financialReports",
    "assignTasksOrRoutes",
    "hrAndStaffAttendance",
    "manageAssetsLiabilities",
    "aiAssistantAccess",
    "businessProfileSetup",
    "qrCodeScanner",
    "assetTracker",
    "performanceDashboard",
    "taskAndTodoManager",
    "internalTeamChat",
    "leaveAndAttendance",
    "activityLogs",
    "multiBranchSupport",
    "settingsArea",
    "dataImportExport",
)

ROLE_DEFAULT_PERMISSIONS = {
    ROLE_OWNER: (
        "view_all_modules",
        "create_all",
        "edit_all",
        "delete_all",
        "view_advanced_analytics",
        "view_financial_data",
        "manage_users",
        "manage_settings",
        "export_reports",
        "view_ai_assistant",
        "manage_business_settings",
        *_FEATURE_FLAGS,
        "autoBackupRestore",
        "manage_team",
        "create_basic",
        "edit_assigned",
        "view_own_data",
    ),
    ROLE_CO_FOUNDER: (
        "view_most_modules",
        "create_most",
        "edit_most",
        "view_advanced_analytics",
        "view_financial_data",
        "manage_users",
        "export_reports",
        "view_ai_assistant",
        *_FEATURE_FLAGS,
        "manage_team",
    ),
    ROLE_MANAGER: (
        "view_department_modules",
        "create_department",
        "edit_department",
        "view_team_analytics",
        "manage_team",
        "export_team_reports",
        "view_ai_assistant",
        "addEditDeleteProducts",
        "viewAddEditOrders",
        "assignTasksOrRoutes",
        "hrAndStaffAttendance",
        "aiAssistantAccess",
        "businessProfileSetup",
        "qrCodeScanner",
        "performanceDashboard",
        "taskAndTodoManager",
        "internalTeamChat",
        "leaveAndAttendance",
        "activityLogs",
        "manage_settings",
    ),
    ROLE_STAFF: (
        "view_assigned_modules",
        "create_basic",
        "edit_assigned",
        "view_own_data",
        "viewAddEditOrders",
        "assignTasksOrRoutes",
        "qrCodeScanner",
        "taskAndTodoManager",
        "internalTeamChat",
    ),
    ROLE_ACCOUNTANT: (
        "view_financial_modules",
        "create_financial",
        "edit_financial",
        "view_financial_analytics",
        "export_financial_reports",
        "view_ai_assistant",
        "view_financial_data",
        "financialReports",
        "aiAssistantAccess",
        "businessProfileSetup",
        "qrCodeScanner",
        "taskAndTodoManager",
        "internalTeamChat",
        "dataImportExport",
    ),
    ROLE_SALES_EXECUTIVE: (
        "view_sales_modules",
        "create_sales",
        "edit_sales",
        "view_sales_analytics",
        "manage_customers",
        "export_sales_reports",
        "view_ai_assistant",
        "viewAddEditOrders",
        "assignTasksOrRoutes",
        "aiAssistantAccess",
        "businessProfileSetup",
        "qrCodeScanner",
        "taskAndTodoManager",
        "internalTeamChat",
    ),
    ROLE_INVENTORY_MANAGER: (
        "view_inventory_modules",
        "addEditDeleteProducts",
        "view_inventory_analytics",
        "manage_stock",
        "export_inventory_reports",
        "qrCodeScanner",
        "taskAndTodoManager",
        "internalTeamChat",
        "assignTasksOrRoutes",
    ),
    ROLE_DELIVERY_STAFF: (
        "view_delivery_modules",
        "viewAddEditOrders",
        "update_delivery_status",
        "qrCodeScanner",
        "taskAndTodoManager",
        "internalTeamChat",
    ),
    ROLE_HR: (
        "view_hr_modules",
        "hrAndStaffAttendance",
        "manage_staff",
        "view_staff_analytics",
        "taskAndTodoManager",
        "internalTeamChat",
        "performanceDashboard",
        "leaveAndAttendance",
    ),
    ROLE_PRODUCTION: (
        "view_production_modules",
        "manage_production",
        "view_production_analytics",
        "taskAndTodoManager",
        "internalTeamChat",
        "rawMaterialInventory",
        "recipeManagement",
        "productionWorkflow",
        "productionLogs",
    ),
    ROLE_STORE_STAFF: (
        "view_store_modules",
        "viewAddEditOrders",
        "basic_inventory_access",
        "qrCodeScanner",
        "taskAndTodoManager",
        "internalTeamChat",
    ),
    ROLE_SALES_STAFF: (
        "view_sales_modules",
        "viewAddEditOrders",
        "manage_customers",
        "view_commission",
        "qrCodeScanner",
        "taskAndTodoManager",
        "internalTeamChat",
    ),
}

PERMISSIONS = frozenset(BASE_PERMISSIONS).union(
    *ROLE_DEFAULT_PERMISSIONS.values()
)


def get_permissions_for_role(role):
    """
    Default permission tags for a role: the base tags plus the
    role's own. Unknown roles only get the base tags.
    """
    extra = ROLE_DEFAULT_PERMISSIONS.get(role, ())
    out = list(BASE_PERMISSIONS)
    for tag in extra:
        if tag not in out:
            out.append(tag)
    return out


def unknown_permissions(tags):
    return sorted({t for t in tags if t not in PERMISSIONS})


# Rank used to compare roles; unranked roles never pass a level check
ROLE_HIERARCHY = {
    ROLE_OWNER: 100,
    ROLE_CO_FOUNDER: 90,
    ROLE_MANAGER: 70,
    ROLE_ACCOUNTANT: 60,
    ROLE_SALES_EXECUTIVE: 50,
    ROLE_STAFF: 10,
}


def has_role_level(role, required_role) -> bool:
    if role not in ROLE_HIERARCHY or required_role not in ROLE_HIERARCHY:
        return False
    return ROLE_HIERARCHY[role] >= ROLE_HIERARCHY[required_role]


_ROLE_NAMES = dict(ROLE_CHOICES)
_BUSINESS_TYPE_NAMES = dict(BUSINESS_TYPE_CHOICES)


def get_role_name(role):
    return _ROLE_NAMES.get(role, "Staff Member")


def get_business_type_name(business_type):
    return _BUSINESS_TYPE_NAMES.get(business_type, "Business")


def is_business_type(value) -> bool:
    return value in ALL_BUSINESS_TYPES


def is_role(value) -> bool:
    return value in _ROLE_NAMES
