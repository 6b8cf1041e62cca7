from dataclasses import dataclass

# Business types
RETAILER = "retailer"
ECOMMERCE = "ecommerce"
SERVICE = "service"
MANUFACTURER = "manufacturer"
WHOLESALER = "wholesaler"
DISTRIBUTOR = "distributor"
TRADER = "trader"

ALL_BUSINESS_TYPES = (
    RETAILER,
    ECOMMERCE,
    SERVICE,
    MANUFACTURER,
    WHOLESALER,
    DISTRIBUTOR,
    TRADER,
)

BUSINESS_TYPE_CHOICES = [
    (RETAILER, "Retail Store"),
    (ECOMMERCE, "E-commerce"),
    (SERVICE, "Service Business"),
    (MANUFACTURER, "Manufacturing"),
    (WHOLESALER, "Wholesale Distribution"),
    (DISTRIBUTOR, "Distribution"),
    (TRADER, "Trading Business"),
]

# Roles
ROLE_OWNER = "owner"
ROLE_CO_FOUNDER = "co_founder"
ROLE_MANAGER = "manager"
ROLE_STAFF = "staff"
ROLE_ACCOUNTANT = "accountant"
ROLE_SALES_EXECUTIVE = "sales_executive"
ROLE_INVENTORY_MANAGER = "inventory_manager"
ROLE_DELIVERY_STAFF = "delivery_staff"
ROLE_HR = "hr"
ROLE_PRODUCTION = "production"
ROLE_STORE_STAFF = "store_staff"
ROLE_SALES_STAFF = "sales_staff"

ROLE_CHOICES = [
    (ROLE_OWNER, "Business Owner"),
    (ROLE_CO_FOUNDER, "Co-Founder"),
    (ROLE_MANAGER, "Manager"),
    (ROLE_STAFF, "Staff Member"),
    (ROLE_ACCOUNTANT, "Accountant"),
    (ROLE_SALES_EXECUTIVE, "Sales Executive"),
    (ROLE_INVENTORY_MANAGER, "Inventory Manager"),
    (ROLE_DELIVERY_STAFF, "Delivery Staff"),
    (ROLE_HR, "HR"),
    (ROLE_PRODUCTION, "Production"),
    (ROLE_STORE_STAFF, "Store Staff"),
    (ROLE_SALES_STAFF, "Sales Staff"),
]

ALL_ROLES = tuple(key for key, _ in ROLE_CHOICES)

# Module categories
CATEGORY_SALES = "sales"
CATEGORY_INVENTORY = "inventory"
CATEGORY_CUSTOMER = "customer"
CATEGORY_ANALYTICS = "analytics"
CATEGORY_OPERATIONS = "operations"
CATEGORY_FINANCE = "finance"
CATEGORY_COMMUNICATION = "communication"
CATEGORY_HR = "hr"
CATEGORY_SETTINGS = "settings"

MODULE_CATEGORIES = (
    CATEGORY_SALES,
    CATEGORY_INVENTORY,
    CATEGORY_CUSTOMER,
    CATEGORY_ANALYTICS,
    CATEGORY_OPERATIONS,
    CATEGORY_FINANCE,
    CATEGORY_COMMUNICATION,
    CATEGORY_HR,
    CATEGORY_SETTINGS,
)


def _unknown(values, allowed):
    return sorted(set(values) - set(allowed))


@dataclass(frozen=True)
class ModuleDescriptor:
    """
    One feature page of the app, gated by business type and role.

    business_types and allowed_roles are stored as frozensets so a
    descriptor can never be changed after the catalog is loaded.
    """
    id: str
    title: str
    description: str
    icon: str
    path: str
    business_types: frozenset
    allowed_roles: frozenset
    category: str
    priority: int
    is_specialized: bool

    def __post_init__(self):
        object.__setattr__(self, "business_types", frozenset(self.business_types))
        object.__setattr__(self, "allowed_roles", frozenset(self.allowed_roles))

        if self.category not in MODULE_CATEGORIES:
            raise ValueError(f"Module {self.id}: unknown category {self.category!r}")

        bad_types = _unknown(self.business_types, ALL_BUSINESS_TYPES)
        if bad_types:
            raise ValueError(f"Module {self.id}: unknown business types {bad_types}")

        bad_roles = _unknown(self.allowed_roles, ALL_ROLES)
        if bad_roles:
            raise ValueError(f"Module {self.id}: unknown roles {bad_roles}")

    def allows(self, business_type, role) -> bool:
        return business_type in self.business_types and role in self.allowed_roles
