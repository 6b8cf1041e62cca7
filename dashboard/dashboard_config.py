# dashboard/dashboard_config.py

from dataclasses import asdict, dataclass, field
from typing import List

from .access_control import (
    ALL_BUSINESS_TYPES,
    CATEGORY_ANALYTICS,
    CATEGORY_COMMUNICATION,
    CATEGORY_CUSTOMER,
    CATEGORY_FINANCE,
    CATEGORY_HR,
    CATEGORY_INVENTORY,
    CATEGORY_OPERATIONS,
    CATEGORY_SALES,
    CATEGORY_SETTINGS,
    DISTRIBUTOR,
    ECOMMERCE,
    MANUFACTURER,
    MODULE_CATEGORIES,
    RETAILER,
    SERVICE,
    TRADER,
    WHOLESALER,
)
from .business_modules import get_business_modules
from .role_permissions import (
    PERM_CREATE_FINANCIAL,
    PERM_CREATE_SALES,
    PERM_MANAGE_CUSTOMERS,
    PERM_MANAGE_TEAM,
    PERM_ORDERS,
    PERM_PRODUCTS,
    PERM_QR_SCANNER,
    PERM_TASKS_ROUTES,
    PERM_VIEW_BASIC_ANALYTICS,
    PERM_VIEW_FINANCIAL_DATA,
    PERM_VIEW_INVENTORY,
    PERM_VIEW_ORDERS,
    unknown_permissions,
)

# Layout buckets
BUCKET_PRIMARY = "primary"
BUCKET_SECONDARY = "secondary"
BUCKET_ANALYTICS = "analytics"
BUCKET_SETTINGS = "settings"

CATEGORY_BUCKETS = {
    CATEGORY_SALES: BUCKET_PRIMARY,
    CATEGORY_INVENTORY: BUCKET_PRIMARY,
    CATEGORY_CUSTOMER: BUCKET_SECONDARY,
    CATEGORY_OPERATIONS: BUCKET_SECONDARY,
    CATEGORY_ANALYTICS: BUCKET_ANALYTICS,
    CATEGORY_FINANCE: BUCKET_ANALYTICS,
    CATEGORY_SETTINGS: BUCKET_SETTINGS,
    CATEGORY_HR: BUCKET_SECONDARY,
    CATEGORY_COMMUNICATION: BUCKET_SECONDARY,
}

if set(CATEGORY_BUCKETS) != set(MODULE_CATEGORIES):
    raise ValueError("CATEGORY_BUCKETS must map every module category")

BUCKET_LIMITS = {
    BUCKET_PRIMARY: 6,
    BUCKET_SECONDARY: 8,
    BUCKET_ANALYTICS: 4,
    BUCKET_SETTINGS: 4,
}

SIDEBAR_LIMIT = 8

# KPI categories
KPI_SALES = "sales"
KPI_INVENTORY = "inventory"
KPI_FINANCE = "finance"
KPI_PERFORMANCE = "performance"
KPI_OPERATIONS = "operations"

KPI_CATEGORIES = (KPI_SALES, KPI_INVENTORY, KPI_FINANCE, KPI_PERFORMANCE, KPI_OPERATIONS)


@dataclass(frozen=True)
class DashboardWidget:
    id: str
    title: str
    description: str
    icon: str
    path: str
    category: str
    priority: int
    permissions: tuple = ()


@dataclass(frozen=True)
class KPIConfig:
    id: str
    title: str
    icon: str
    category: str
    permissions: tuple
    business_types: tuple

    def __post_init__(self):
        if self.category not in KPI_CATEGORIES:
            raise ValueError(f"KPI {self.id}: unknown category {self.category!r}")
        bad_types = sorted(set(self.business_types) - set(ALL_BUSINESS_TYPES))
        if bad_types:
            raise ValueError(f"KPI {self.id}: unknown business types {bad_types}")
        bad_perms = unknown_permissions(self.permissions)
        if bad_perms:
            raise ValueError(f"KPI {self.id}: unknown permissions {bad_perms}")


@dataclass
class DashboardLayout:
    sidebar: List[DashboardWidget] = field(default_factory=list)
    quick_actions: List[DashboardWidget] = field(default_factory=list)
    widgets: List[DashboardWidget] = field(default_factory=list)


@dataclass
class DashboardConfig:
    business_type: str
    user_role: str
    modules: List[DashboardWidget]
    layout: DashboardLayout
    kpis: List[KPIConfig]
    primary_widgets: List[DashboardWidget] = field(default_factory=list)
    secondary_widgets: List[DashboardWidget] = field(default_factory=list)
    analytics_widgets: List[DashboardWidget] = field(default_factory=list)
    settings_widgets: List[DashboardWidget] = field(default_factory=list)

    def as_dict(self):
        # JSON callers expect lists, not tuples
        return _listify(asdict(self))


def _listify(value):
    if isinstance(value, dict):
        return {k: _listify(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_listify(v) for v in value]
    return value


KPI_CONFIGS = (
    # Common KPIs
    KPIConfig("total_revenue", "Total Revenue", "DollarSign", KPI_FINANCE,
              (PERM_VIEW_BASIC_ANALYTICS,), ALL_BUSINESS_TYPES),
    KPIConfig("active_orders", "Active Orders", "ShoppingCart", KPI_SALES,
              (PERM_VIEW_ORDERS,), ALL_BUSINESS_TYPES),
    KPIConfig("inventory_value", "Inventory Value", "Package", KPI_INVENTORY,
              (PERM_VIEW_INVENTORY,), (RETAILER, ECOMMERCE, MANUFACTURER, WHOLESALER, DISTRIBUTOR, TRADER)),
    KPIConfig("staff_performance", "Staff Performance", "Users", KPI_PERFORMANCE,
              (PERM_MANAGE_TEAM,), ALL_BUSINESS_TYPES),

    # Retailer
    KPIConfig("daily_sales", "Daily Sales", "TrendingUp", KPI_SALES,
              (PERM_VIEW_BASIC_ANALYTICS,), (RETAILER,)),
    KPIConfig("customer_count", "Customer Count", "Users", KPI_SALES,
              (PERM_MANAGE_CUSTOMERS,), (RETAILER, ECOMMERCE, SERVICE)),

    # E-commerce
    KPIConfig("conversion_rate", "Conversion Rate", "Target", KPI_SALES,
              (PERM_VIEW_BASIC_ANALYTICS,), (ECOMMERCE,)),
    KPIConfig("pending_orders", "Pending Orders", "Clock", KPI_OPERATIONS,
              (PERM_VIEW_ORDERS,), (ECOMMERCE, MANUFACTURER, WHOLESALER)),

    # Service
    KPIConfig("service_bookings", "Service Bookings", "Calendar", KPI_OPERATIONS,
              (PERM_VIEW_BASIC_ANALYTICS,), (SERVICE,)),
    KPIConfig("service_completion_rate", "Completion Rate", "CheckCircle", KPI_PERFORMANCE,
              (PERM_VIEW_BASIC_ANALYTICS,), (SERVICE,)),

    # Manufacturer
    KPIConfig("production_efficiency", "Production Efficiency", "Zap", KPI_OPERATIONS,
              (PERM_VIEW_BASIC_ANALYTICS,), (MANUFACTURER,)),
    KPIConfig("raw_material_stock", "Raw Material Stock", "Package2", KPI_INVENTORY,
              (PERM_VIEW_INVENTORY,), (MANUFACTURER,)),

    # Wholesaler / distributor
    KPIConfig("bulk_orders_value", "Bulk Orders Value", "Truck", KPI_SALES,
              (PERM_VIEW_BASIC_ANALYTICS,), (WHOLESALER, DISTRIBUTOR)),
    KPIConfig("commission_earned", "Commission Earned", "Award", KPI_FINANCE,
              (PERM_VIEW_FINANCIAL_DATA,), (WHOLESALER, DISTRIBUTOR)),

    # Trader
    KPIConfig("profit_margin", "Profit Margin", "TrendingUp", KPI_FINANCE,
              (PERM_VIEW_FINANCIAL_DATA,), (TRADER,)),
    KPIConfig("inventory_turnover", "Inventory Turnover", "RefreshCw", KPI_OPERATIONS,
              (PERM_VIEW_BASIC_ANALYTICS,), (TRADER, RETAILER, WHOLESALER)),
)


def _action(action_id, title, description, icon, path, category, priority, *permissions):
    bad = unknown_permissions(permissions)
    if bad:
        raise ValueError(f"Quick action {action_id}: unknown permissions {bad}")
    return DashboardWidget(action_id, title, description, icon, path, category, priority, tuple(permissions))


QUICK_ACTIONS = {
    RETAILER: (
        _action("new_sale", "New Sale", "Create a new sale transaction", "Plus",
                "/dashboard/retailer/pos", BUCKET_PRIMARY, 1, PERM_ORDERS),
        _action("add_sale_invoice", "Add Sale & Invoice", "Create sale and generate invoice", "FileText",
                "/dashboard/add-sale", BUCKET_PRIMARY, 2, PERM_ORDERS),
        _action("add_customer", "Add Customer", "Add new customer to database", "UserPlus",
                "/dashboard/retailer/customers", BUCKET_PRIMARY, 2, PERM_MANAGE_CUSTOMERS),
        _action("check_inventory", "Check Inventory", "View current stock levels", "Package",
                "/dashboard/retailer/inventory", BUCKET_PRIMARY, 3, PERM_VIEW_INVENTORY),
        _action("scan_qr", "Scan QR Code", "Quick product lookup", "QrCode",
                "/dashboard/qr-scanner", BUCKET_SECONDARY, 4, PERM_QR_SCANNER),
    ),
    ECOMMERCE: (
        _action("new_product", "Add Product", "Add new product to catalog", "Plus",
                "/dashboard/ecommerce/product-catalog", BUCKET_PRIMARY, 1, PERM_PRODUCTS),
        _action("process_orders", "Process Orders", "Manage pending orders", "ShoppingCart",
                "/dashboard/ecommerce/orders", BUCKET_PRIMARY, 2, PERM_ORDERS),
        _action("track_payments", "Track Payments", "Monitor payment status", "CreditCard",
                "/dashboard/ecommerce/payments", BUCKET_PRIMARY, 3, PERM_VIEW_FINANCIAL_DATA),
    ),
    SERVICE: (
        _action("new_booking", "New Booking", "Schedule new service", "Calendar",
                "/dashboard/service/bookings", BUCKET_PRIMARY, 1, PERM_TASKS_ROUTES),
        _action("manage_slots", "Manage Slots", "Configure time slots", "Clock",
                "/dashboard/service/time-slots", BUCKET_PRIMARY, 2, PERM_TASKS_ROUTES),
        _action("generate_quote", "Generate Quote", "Create service quotation", "FileText",
                "/dashboard/service/quotations", BUCKET_PRIMARY, 3, PERM_CREATE_SALES),
    ),
    MANUFACTURER: (
        _action("start_production", "Start Production", "Initiate production order", "Play",
                "/dashboard/manufacturer/production-planning", BUCKET_PRIMARY, 1, PERM_PRODUCTS),
        _action("check_materials", "Check Materials", "View raw material stock", "Package2",
                "/dashboard/manufacturer/raw-material-inventory", BUCKET_PRIMARY, 2, PERM_VIEW_INVENTORY),
        _action("calculate_cost", "Calculate Cost", "Calculate unit costs", "Calculator",
                "/dashboard/manufacturer/cost-per-unit", BUCKET_PRIMARY, 3, PERM_VIEW_FINANCIAL_DATA),
    ),
    WHOLESALER: (
        _action("bulk_order", "Bulk Order", "Create bulk order", "Truck",
                "/dashboard/wholesaler/bulk-inventory", BUCKET_PRIMARY, 1, PERM_ORDERS),
        _action("party_ledger", "Party Ledger", "View party accounts", "BookOpen",
                "/dashboard/wholesaler/party-ledger", BUCKET_PRIMARY, 2, PERM_VIEW_FINANCIAL_DATA),
        _action("generate_invoice", "Generate Invoice", "Create new invoice", "FileText",
                "/dashboard/wholesaler/invoices", BUCKET_PRIMARY, 3, PERM_CREATE_FINANCIAL),
    ),
    DISTRIBUTOR: (
        _action("territory_map", "Territory Map", "View territory assignments", "MapPin",
                "/dashboard/distributor/territory-management", BUCKET_PRIMARY, 1, PERM_VIEW_BASIC_ANALYTICS),
        _action("assign_salesman", "Assign Salesman", "Assign salesman to area", "UserCheck",
                "/dashboard/distributor/salesman-assignment", BUCKET_PRIMARY, 2, PERM_MANAGE_TEAM),
        _action("route_plan", "Plan Route", "Optimize delivery routes", "Route",
                "/dashboard/distributor/route-planning", BUCKET_PRIMARY, 3, PERM_TASKS_ROUTES),
    ),
    TRADER: (
        _action("buy_sell", "Buy/Sell", "Record transaction", "TrendingUp",
                "/dashboard/trader/buy-sell-tracking", BUCKET_PRIMARY, 1, PERM_ORDERS),
        _action("calculate_margin", "Calculate Margin", "Calculate profit margin", "Calculator",
                "/dashboard/trader/margin-calculator", BUCKET_PRIMARY, 2, PERM_VIEW_FINANCIAL_DATA),
        _action("party_management", "Manage Parties", "Manage trading partners", "Users",
                "/dashboard/trader/parties", BUCKET_PRIMARY, 3, PERM_MANAGE_CUSTOMERS),
    ),
}


def get_primary_category(module_category):
    return CATEGORY_BUCKETS[module_category]


def _to_widget(module):
    return DashboardWidget(
        id=module.id,
        title=module.title,
        description=module.description,
        icon=module.icon,
        path=module.path,
        category=get_primary_category(module.category),
        priority=module.priority,
    )


def _any_permission(required, granted):
    return any(p in granted for p in required)


def generate_quick_actions(business_type, permissions):
    # Business types without an action table get no quick actions
    granted = set(permissions or ())
    actions = QUICK_ACTIONS.get(business_type, ())
    return [a for a in actions if _any_permission(a.permissions, granted)]


def get_kpis(business_type, permissions):
    granted = set(permissions or ())
    return [
        kpi for kpi in KPI_CONFIGS
        if business_type in kpi.business_types and _any_permission(kpi.permissions, granted)
    ]


def _bucket(widgets, name):
    picked = sorted((w for w in widgets if w.category == name), key=lambda w: w.priority)
    return picked[:BUCKET_LIMITS[name]]


def generate_dashboard_config(business_type, role, permissions):
    """
    Build the dashboard for one user.

    Modules are resolved by business type and role, then grouped into
    layout buckets. Quick actions and KPIs are picked by permission
    (any listed permission is enough).
    """
    widgets = [_to_widget(m) for m in get_business_modules(business_type, role)]

    primary = _bucket(widgets, BUCKET_PRIMARY)
    secondary = _bucket(widgets, BUCKET_SECONDARY)
    analytics = _bucket(widgets, BUCKET_ANALYTICS)
    settings_widgets = _bucket(widgets, BUCKET_SETTINGS)

    quick_actions = generate_quick_actions(business_type, permissions)

    layout = DashboardLayout(
        sidebar=(primary + secondary)[:SIDEBAR_LIMIT],
        quick_actions=quick_actions,
        widgets=analytics + settings_widgets,
    )

    return DashboardConfig(
        business_type=business_type,
        user_role=role,
        modules=widgets,
        layout=layout,
        kpis=get_kpis(business_type, permissions),
        primary_widgets=primary,
        secondary_widgets=secondary,
        analytics_widgets=analytics,
        settings_widgets=settings_widgets,
    )
