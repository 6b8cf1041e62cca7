# dashboard/business_modules.py

from types import MappingProxyType

from .access_control import (
    DISTRIBUTOR,
    ECOMMERCE,
    MANUFACTURER,
    RETAILER,
    SERVICE,
    TRADER,
    WHOLESALER,
)
from .module_catalog import ALL_MODULES, BUSINESS_MODULES, COMMON_MODULES, MODULES_BY_ID


def _by_priority(modules):
    # sorted() is stable, so equal priorities keep catalog order
    return sorted(modules, key=lambda m: m.priority)


def get_business_modules(business_type, role):
    """
    Every module (common and specialized) visible to this role
    in this business type, lowest priority first.
    """
    return _by_priority(m for m in ALL_MODULES if m.allows(business_type, role))


def get_common_modules(role):
    """
    Common modules for a role. Common modules are shared by all
    business types, so no business type is needed here.
    """
    return _by_priority(m for m in COMMON_MODULES if role in m.allowed_roles)


def get_specialized_modules(business_type, role):
    return _by_priority(m for m in BUSINESS_MODULES if m.allows(business_type, role))


def get_module(module_id):
    return MODULES_BY_ID.get(module_id)


def has_module_access(module_id, business_type, role) -> bool:
    module = get_module(module_id)
    if module is None:
        return False
    return module.allows(business_type, role)


BUSINESS_TYPE_CONFIGS = MappingProxyType({
    RETAILER: MappingProxyType({
        "name": "Retailer",
        "description": "Point of sale and retail operations",
        "primary_color": "blue",
        "features": ("POS System", "Inventory Management", "Customer Database", "GST Reports"),
        "main_modules": ("customer-database", "offers-promotions", "daily-sales-analytics", "gst-reports"),
    }),
    ECOMMERCE: MappingProxyType({
        "name": "E-commerce",
        "description": "Online store and digital sales",
        "primary_color": "purple",
        "features": ("Product Catalog", "Order Management", "Payment Tracking", "Customer Reviews"),
        "main_modules": ("product-catalog-mgmt", "in-app-ordering", "order-tracking-fulfillment", "payment-tracking"),
    }),
    SERVICE: MappingProxyType({
        "name": "Service Provider",
        "description": "Service booking and management",
        "primary_color": "green",
        "features": ("Service Listing", "Booking System", "Time Slots", "Quotation Generator"),
        "main_modules": ("service-listing", "booking-scheduling", "quotation-generator", "post-service-reviews"),
    }),
    MANUFACTURER: MappingProxyType({
        "name": "Manufacturer",
        "description": "Production and manufacturing operations",
        "primary_color": "orange",
        "features": ("Raw Materials", "Cost Calculator", "Production Planning", "Quality Control"),
        "main_modules": ("raw-material-inventory", "cost-per-unit", "production", "waste-tracking"),
    }),
    WHOLESALER: MappingProxyType({
        "name": "Wholesaler",
        "description": "Bulk sales and distribution",
        "primary_color": "indigo",
        "features": ("Bulk Orders", "Commission Management", "Client Relations", "Profit Analysis"),
        "main_modules": ("bulk-inventory-management", "party-ledger", "invoice-generator", "salesman-commission-tracking"),
    }),
    DISTRIBUTOR: MappingProxyType({
        "name": "Distributor",
        "description": "Distribution and logistics",
        "primary_color": "teal",
        "features": ("Territory Management", "Brand Products", "Commission Tracking", "Route Planning"),
        "main_modules": ("brand-product-management", "area-client-tracking", "target-achievement", "route-planning"),
    }),
    TRADER: MappingProxyType({
        "name": "Trader / Reseller",
        "description": "Buy-sell trading operations",
        "primary_color": "yellow",
        "features": ("Buy-Sell Tracking", "Margin Calculator", "P&L Statements", "Inventory Valuation"),
        "main_modules": ("buy-sell-tracking", "margin-calculator", "profit-loss-statements", "party-list"),
    }),
})


def get_business_type_config(business_type):
    # Unknown types fall back to the retail layout; entries are read only
    return BUSINESS_TYPE_CONFIGS.get(business_type, BUSINESS_TYPE_CONFIGS[RETAILER])
