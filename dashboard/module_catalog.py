# dashboard/module_catalog.py

from types import MappingProxyType

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
    RETAILER,
    ROLE_ACCOUNTANT,
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
    SERVICE,
    TRADER,
    WHOLESALER,
    ModuleDescriptor,
)

# Available to every business type
COMMON_MODULES = (
    ModuleDescriptor(
        id="business-profile",
        title="Business Profile",
        description="Manage business information, GST, currency, and settings",
        icon="Building2",
        path="/dashboard/settings",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_SETTINGS,
        priority=1,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="main-dashboard",
        title="Dashboard",
        description="Overview of business KPIs and performance metrics",
        icon="BarChart3",
        path="/dashboard",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_STAFF, ROLE_ACCOUNTANT, ROLE_SALES_EXECUTIVE),
        category=CATEGORY_ANALYTICS,
        priority=1,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="add-sale-invoice",
        title="Add Sale & Invoice",
        description="Create sales and generate professional invoices",
        icon="FileText",
        path="/dashboard/add-sale",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT, ROLE_SALES_EXECUTIVE),
        category=CATEGORY_SALES,
        priority=2,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="sales-documents",
        title="Sales Documents",
        description="Manage invoices, receipts, and sales documents",
        icon="FolderOpen",
        path="/dashboard/sales-documents",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT, ROLE_SALES_EXECUTIVE),
        category=CATEGORY_SALES,
        priority=3,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="basic-inventory",
        title="Inventory Management",
        description="View, add, edit products with low-stock alerts",
        icon="Package",
        path="/dashboard/inventory",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_STAFF),
        category=CATEGORY_INVENTORY,
        priority=2,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="analytics-reports",
        title="Analytics & Reports",
        description="Sales, revenue, expenses, profitability, and valuation metrics",
        icon="TrendingUp",
        path="/dashboard/analytics",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT),
        category=CATEGORY_ANALYTICS,
        priority=3,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="ai-assistant",
        title="AI Business Assistant",
        description="AI-powered suggestions, Q&A, trends, and growth tips",
        icon="Bot",
        path="/dashboard/ai-assistant",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT, ROLE_SALES_EXECUTIVE),
        category=CATEGORY_OPERATIONS,
        priority=4,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="task-manager",
        title="Task & To-Do Manager",
        description="Assign, track, and complete tasks for staff",
        icon="CheckSquare",
        path="/dashboard/tasks",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_STAFF),
        category=CATEGORY_OPERATIONS,
        priority=5,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="team-chat",
        title="Team Chat",
        description="In-app team communication and notifications",
        icon="MessageSquare",
        path="/dashboard/team-chat",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_STAFF, ROLE_ACCOUNTANT, ROLE_SALES_EXECUTIVE),
        category=CATEGORY_COMMUNICATION,
        priority=6,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="attendance-tracker",
        title="Leave & Attendance",
        description="Staff availability logs and leave management",
        icon="Calendar",
        path="/dashboard/attendance",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_HR,
        priority=7,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="activity-logs",
        title="Activity Logs",
        description="Audit trail of actions taken by all roles",
        icon="FileText",
        path="/dashboard/activity-logs",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_OPERATIONS,
        priority=8,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="multi-branch",
        title="Multi-Branch Management",
        description="Centralized control over multiple branches/locations",
        icon="MapPin",
        path="/dashboard/branches",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER),
        category=CATEGORY_OPERATIONS,
        priority=9,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="backup-restore",
        title="Backup & Restore",
        description="Manual and scheduled backups, import/export data",
        icon="Download",
        path="/dashboard/backup",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER),
        category=CATEGORY_SETTINGS,
        priority=10,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="performance-dashboard",
        title="Performance Dashboard",
        description="Staff, sales, and task performance tracking",
        icon="Users",
        path="/dashboard/performance",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_HR,
        priority=11,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="qr-scanner",
        title="QR Code Scanner",
        description="Scan QR codes for products, payments, or quick actions",
        icon="QrCode",
        path="/dashboard/qr-scanner",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_STAFF, ROLE_SALES_EXECUTIVE),
        category=CATEGORY_OPERATIONS,
        priority=12,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="settings",
        title="Settings",
        description="GST, currency, language, permissions, and branch settings",
        icon="Settings",
        path="/dashboard/settings",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_SETTINGS,
        priority=13,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="staff-management",
        title="Staff Management",
        description="Add, edit, and manage staff members with roles and permissions",
        icon="Users",
        path="/dashboard/staff",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_HR,
        priority=14,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="staff-attendance",
        title="Staff Attendance",
        description="Track daily attendance, check-in/out, and working hours",
        icon="Clock",
        path="/dashboard/staff/attendance",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_HR, ROLE_STAFF, ROLE_SALES_STAFF, ROLE_INVENTORY_MANAGER, ROLE_DELIVERY_STAFF, ROLE_PRODUCTION, ROLE_STORE_STAFF),
        category=CATEGORY_HR,
        priority=15,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="staff-performance",
        title="Staff Performance",
        description="Track and analyze staff performance, productivity, and KPIs",
        icon="TrendingUp",
        path="/dashboard/staff/performance",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_HR),
        category=CATEGORY_HR,
        priority=16,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="internal-chat",
        title="Internal Chat",
        description="Team communication with 1-on-1, group chats, and announcements",
        icon="MessageCircle",
        path="/dashboard/chat",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_STAFF, ROLE_ACCOUNTANT, ROLE_SALES_EXECUTIVE, ROLE_HR, ROLE_SALES_STAFF, ROLE_INVENTORY_MANAGER, ROLE_DELIVERY_STAFF, ROLE_PRODUCTION, ROLE_STORE_STAFF),
        category=CATEGORY_COMMUNICATION,
        priority=17,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="task-assignment",
        title="Task Assignment",
        description="Assign, track, and manage tasks for staff and teams",
        icon="CheckSquare",
        path="/dashboard/tasks/assignment",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_HR),
        category=CATEGORY_OPERATIONS,
        priority=18,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="sales-commission",
        title="Sales Commission",
        description="Track and manage sales staff commission earnings and payments",
        icon="DollarSign",
        path="/dashboard/staff/commission",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT, ROLE_SALES_STAFF),
        category=CATEGORY_FINANCE,
        priority=19,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="staff-leaderboard",
        title="Staff Leaderboard",
        description="Performance rankings and staff achievements",
        icon="Trophy",
        path="/dashboard/staff/leaderboard",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_HR),
        category=CATEGORY_HR,
        priority=20,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="support-tickets",
        title="Support Tickets",
        description="Submit and track support requests with management",
        icon="HelpCircle",
        path="/dashboard/staff/support",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_STAFF, ROLE_ACCOUNTANT, ROLE_SALES_EXECUTIVE, ROLE_HR, ROLE_SALES_STAFF, ROLE_INVENTORY_MANAGER, ROLE_DELIVERY_STAFF, ROLE_PRODUCTION, ROLE_STORE_STAFF),
        category=CATEGORY_COMMUNICATION,
        priority=21,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="whatsapp-integration",
        title="WhatsApp Integration",
        description="Send invoices, catalogs, and quotations via WhatsApp",
        icon="MessageCircle",
        path="/dashboard/whatsapp",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_SALES_EXECUTIVE, ROLE_SALES_STAFF),
        category=CATEGORY_COMMUNICATION,
        priority=22,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="payment-reminders",
        title="Payment Reminders",
        description="Automated payment reminders for due and overdue invoices",
        icon="Bell",
        path="/dashboard/payment-reminders",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT),
        category=CATEGORY_FINANCE,
        priority=23,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="inventory-batches",
        title="Batch & Expiry Tracking",
        description="Track inventory batches, expiry dates, and stock movements",
        icon="Package",
        path="/dashboard/inventory-batches",
        business_types=(RETAILER, MANUFACTURER, WHOLESALER, DISTRIBUTOR),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_INVENTORY_MANAGER, ROLE_STAFF),
        category=CATEGORY_INVENTORY,
        priority=24,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="customer-relationship-management",
        title="Customer Relationship Management",
        description="Manage customer relationships, purchase history, follow-ups, and loyalty",
        icon="Users",
        path="/dashboard/crm",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_SALES_EXECUTIVE, ROLE_ACCOUNTANT),
        category=CATEGORY_CUSTOMER,
        priority=25,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="document-vault",
        title="Document Vault",
        description="Centralized storage for invoices, contracts, and business documents with role-based access",
        icon="FileText",
        path="/dashboard/document-vault",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT, ROLE_SALES_EXECUTIVE),
        category=CATEGORY_OPERATIONS,
        priority=26,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="owner-analytics",
        title="Owner Analytics Dashboard",
        description="Advanced business analytics, PAT calculations, valuation calculator, and performance insights",
        icon="Crown",
        path="/dashboard/owner-analytics",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER,),
        category=CATEGORY_ANALYTICS,
        priority=27,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="vendor-management",
        title="Vendor Management",
        description="Manage suppliers, track vendor performance, orders, and relationship management",
        icon="Building",
        path="/dashboard/vendor-management",
        business_types=(MANUFACTURER, WHOLESALER, DISTRIBUTOR, RETAILER, TRADER),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_INVENTORY_MANAGER),
        category=CATEGORY_OPERATIONS,
        priority=28,
        is_specialized=False,
    ),
    ModuleDescriptor(
        id="branch-management",
        title="Branch Management",
        description="Manage multiple business locations, assign staff, and configure branch settings",
        icon="Building",
        path="/dashboard/branch-management",
        business_types=ALL_BUSINESS_TYPES,
        allowed_roles=(ROLE_OWNER,),
        category=CATEGORY_SETTINGS,
        priority=29,
        is_specialized=False,
    ),
)

# Business-type specific modules
BUSINESS_MODULES = (
    # Retailer
    ModuleDescriptor(
        id="customer-database",
        title="Customer Database",
        description="Manage customer information, history, and purchases",
        icon="Users",
        path="/dashboard/retailer/customers",
        business_types=(RETAILER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_SALES_EXECUTIVE),
        category=CATEGORY_CUSTOMER,
        priority=2,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="offers-promotions",
        title="Offers & Promotions",
        description="Create time-limited discounts and combo offers",
        icon="Tag",
        path="/dashboard/retailer/offers",
        business_types=(RETAILER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_SALES,
        priority=3,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="expense-tracking",
        title="Expense Tracking",
        description="Track daily and monthly business expenses",
        icon="Receipt",
        path="/dashboard/retailer/expenses",
        business_types=(RETAILER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT),
        category=CATEGORY_FINANCE,
        priority=4,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="daily-sales-analytics",
        title="Daily/Monthly/Yearly Sales Analytics",
        description="Visual reports for sales trends and patterns",
        icon="TrendingUp",
        path="/dashboard/retailer/sales-analytics",
        business_types=(RETAILER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT),
        category=CATEGORY_ANALYTICS,
        priority=5,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="gst-reports",
        title="GST Reports",
        description="Generate and download GST filing data",
        icon="FileText",
        path="/dashboard/retailer/gst-reports",
        business_types=(RETAILER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_ACCOUNTANT),
        category=CATEGORY_FINANCE,
        priority=6,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="catalog-sharing",
        title="Catalog Sharing",
        description="Share product catalogs via PDF/WhatsApp",
        icon="Share",
        path="/dashboard/retailer/catalog-sharing",
        business_types=(RETAILER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_SALES_EXECUTIVE),
        category=CATEGORY_SALES,
        priority=7,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="multi-branch-inventory-sync",
        title="Multi-Branch Inventory Sync",
        description="Synchronize inventory across multiple retail locations",
        icon="RefreshCw",
        path="/dashboard/retailer/inventory-sync",
        business_types=(RETAILER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_INVENTORY,
        priority=8,
        is_specialized=True,
    ),

    # E-commerce
    ModuleDescriptor(
        id="product-catalog-mgmt",
        title="Product Catalog Management",
        description="Comprehensive product catalog with variants and categories",
        icon="Grid3x3",
        path="/dashboard/ecommerce/product-catalog",
        business_types=(ECOMMERCE,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_INVENTORY,
        priority=1,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="in-app-ordering",
        title="In-App Ordering System",
        description="Customer ordering system with cart and checkout",
        icon="ShoppingCart",
        path="/dashboard/ecommerce/orders",
        business_types=(ECOMMERCE,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_SALES_EXECUTIVE),
        category=CATEGORY_SALES,
        priority=2,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="order-tracking-fulfillment",
        title="Order Tracking & Fulfillment Analytics",
        description="Track orders from placement to delivery with analytics",
        icon="Package",
        path="/dashboard/ecommerce/order-tracking",
        business_types=(ECOMMERCE,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_SALES_EXECUTIVE),
        category=CATEGORY_OPERATIONS,
        priority=3,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="customer-reviews",
        title="Customer Feedback/Reviews",
        description="Manage customer reviews and feedback",
        icon="Star",
        path="/dashboard/ecommerce/reviews",
        business_types=(ECOMMERCE,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_CUSTOMER,
        priority=4,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="payment-tracking",
        title="Payment Tracking",
        description="UPI, COD, Card payment tracking and reconciliation",
        icon="CreditCard",
        path="/dashboard/ecommerce/payments",
        business_types=(ECOMMERCE,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT),
        category=CATEGORY_FINANCE,
        priority=5,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="auto-invoice-generator",
        title="Auto-Invoice Generator",
        description="Automated invoice generation for orders",
        icon="FileText",
        path="/dashboard/ecommerce/invoices",
        business_types=(ECOMMERCE,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT),
        category=CATEGORY_FINANCE,
        priority=6,
        is_specialized=True,
    ),

    # Service
    ModuleDescriptor(
        id="service-listing",
        title="Service Listing with Prices",
        description="Manage service offerings and pricing",
        icon="List",
        path="/dashboard/service/services",
        business_types=(SERVICE,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_INVENTORY,
        priority=1,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="booking-scheduling",
        title="Booking & Scheduling",
        description="Customer booking system with appointment management",
        icon="Calendar",
        path="/dashboard/service/bookings",
        business_types=(SERVICE,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_STAFF),
        category=CATEGORY_OPERATIONS,
        priority=2,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="time-slot-management",
        title="Time Slot Management",
        description="Configure and manage available time slots",
        icon="Clock",
        path="/dashboard/service/time-slots",
        business_types=(SERVICE,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_OPERATIONS,
        priority=3,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="post-service-reviews",
        title="Post-Service Reviews",
        description="Collect and manage customer service reviews",
        icon="Star",
        path="/dashboard/service/reviews",
        business_types=(SERVICE,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_CUSTOMER,
        priority=4,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="online-payment-tracker",
        title="Online Payment Tracker",
        description="Track digital payments for services",
        icon="CreditCard",
        path="/dashboard/service/payments",
        business_types=(SERVICE,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT),
        category=CATEGORY_FINANCE,
        priority=5,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="income-expense-overview",
        title="Income & Expense Overview",
        description="Financial overview specific to service business",
        icon="DollarSign",
        path="/dashboard/service/financials",
        business_types=(SERVICE,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT),
        category=CATEGORY_FINANCE,
        priority=6,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="staff-service-assignment",
        title="Staff-to-Service Assignment",
        description="Assign staff members to specific services",
        icon="UserCheck",
        path="/dashboard/service/staff-assignment",
        business_types=(SERVICE,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_HR,
        priority=7,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="quotation-generator",
        title="Quotation Generator",
        description="Generate professional service quotations",
        icon="FileText",
        path="/dashboard/service/quotations",
        business_types=(SERVICE,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_SALES_EXECUTIVE),
        category=CATEGORY_SALES,
        priority=8,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="service-usage-analytics",
        title="Service Usage Analytics",
        description="Analytics on service performance and usage",
        icon="BarChart3",
        path="/dashboard/service/analytics",
        business_types=(SERVICE,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_ANALYTICS,
        priority=9,
        is_specialized=True,
    ),

    # Manufacturer
    ModuleDescriptor(
        id="raw-material-inventory",
        title="Raw Material Stock Tracking",
        description="Track raw materials with suppliers and costs",
        icon="Package2",
        path="/dashboard/manufacturer/raw-material-inventory",
        business_types=(MANUFACTURER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_STAFF, ROLE_INVENTORY_MANAGER, ROLE_PRODUCTION),
        category=CATEGORY_INVENTORY,
        priority=1,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="recipe",
        title="Recipe",
        description="Manage product recipes and material requirements",
        icon="FileText",
        path="/dashboard/manufacturer/recipe",
        business_types=(MANUFACTURER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_PRODUCTION),
        category=CATEGORY_OPERATIONS,
        priority=2,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="production",
        title="Production",
        description="Plan and schedule production runs",
        icon="Calendar",
        path="/dashboard/manufacturer/production",
        business_types=(MANUFACTURER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_PRODUCTION),
        category=CATEGORY_OPERATIONS,
        priority=3,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="waste-tracking",
        title="Waste Tracking",
        description="Monitor and analyze production waste and loss",
        icon="AlertTriangle",
        path="/dashboard/manufacturer/waste-tracking",
        business_types=(MANUFACTURER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_PRODUCTION),
        category=CATEGORY_OPERATIONS,
        priority=4,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="cost-per-unit",
        title="Cost per Unit Calculation",
        description="Calculate precise manufacturing costs per unit",
        icon="Calculator",
        path="/dashboard/manufacturer/cost-per-unit",
        business_types=(MANUFACTURER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT),
        category=CATEGORY_FINANCE,
        priority=5,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="dispatch-management",
        title="Dispatch Management",
        description="Manage finished goods dispatch and delivery",
        icon="Truck",
        path="/dashboard/manufacturer/dispatch",
        business_types=(MANUFACTURER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_STAFF, ROLE_DELIVERY_STAFF, ROLE_SALES_STAFF),
        category=CATEGORY_OPERATIONS,
        priority=6,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="purchase-orders",
        title="Purchase Order Management",
        description="Manage supplier purchase orders and procurement",
        icon="ShoppingCart",
        path="/dashboard/manufacturer/purchase-orders",
        business_types=(MANUFACTURER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_INVENTORY_MANAGER),
        category=CATEGORY_OPERATIONS,
        priority=7,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="staff-productivity",
        title="Staff Productivity Tracker",
        description="Track and analyze staff productivity metrics",
        icon="Users",
        path="/dashboard/manufacturer/staff-productivity",
        business_types=(MANUFACTURER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_HR,
        priority=8,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="manufacturer-vendor-management",
        title="Vendor Management",
        description="Manage supplier relationships and performance",
        icon="Building",
        path="/dashboard/manufacturer/vendor-management",
        business_types=(MANUFACTURER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_OPERATIONS,
        priority=9,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="manufacturer-sales-commission",
        title="Sales Commission Management",
        description="Track sales staff commissions on manufactured products",
        icon="DollarSign",
        path="/dashboard/manufacturer/sales-commission",
        business_types=(MANUFACTURER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_SALES_STAFF, ROLE_ACCOUNTANT),
        category=CATEGORY_FINANCE,
        priority=10,
        is_specialized=True,
    ),

    # Wholesaler
    ModuleDescriptor(
        id="bulk-inventory-management",
        title="Bulk Inventory Management",
        description="Manage large-scale inventory with bulk operations",
        icon="Package",
        path="/dashboard/wholesaler/bulk-inventory",
        business_types=(WHOLESALER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_STAFF),
        category=CATEGORY_INVENTORY,
        priority=1,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="party-ledger",
        title="Party Ledger & Receivables",
        description="Track party accounts and outstanding amounts",
        icon="BookOpen",
        path="/dashboard/wholesaler/party-ledger",
        business_types=(WHOLESALER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT),
        category=CATEGORY_FINANCE,
        priority=2,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="invoice-generator",
        title="Invoice Generator",
        description="Generate professional invoices for wholesale orders",
        icon="FileText",
        path="/dashboard/wholesaler/invoices",
        business_types=(WHOLESALER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT),
        category=CATEGORY_FINANCE,
        priority=3,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="purchase-order-system",
        title="Purchase Order System",
        description="Manage wholesale purchase orders",
        icon="ShoppingCart",
        path="/dashboard/wholesaler/purchase-orders",
        business_types=(WHOLESALER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_OPERATIONS,
        priority=4,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="sales-performance-charts",
        title="Sales Performance Charts",
        description="Visual analytics for wholesale sales performance",
        icon="BarChart3",
        path="/dashboard/wholesaler/sales-performance",
        business_types=(WHOLESALER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT),
        category=CATEGORY_ANALYTICS,
        priority=5,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="salesman-commission-tracking",
        title="Salesman Commission Tracking",
        description="Track and calculate sales commissions",
        icon="DollarSign",
        path="/dashboard/wholesaler/commission-management",
        business_types=(WHOLESALER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT),
        category=CATEGORY_FINANCE,
        priority=6,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="transport-logs",
        title="Transport Logs",
        description="Track transportation and delivery logistics",
        icon="Truck",
        path="/dashboard/wholesaler/transport-logs",
        business_types=(WHOLESALER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_STAFF),
        category=CATEGORY_OPERATIONS,
        priority=7,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="distributor-wise-sales",
        title="Distributor-wise Sales View",
        description="Analyze sales performance by distributor",
        icon="PieChart",
        path="/dashboard/wholesaler/distributor-sales",
        business_types=(WHOLESALER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_ANALYTICS,
        priority=8,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="gst-auto-reports",
        title="GST Auto-Reports",
        description="Automated GST reporting for wholesale operations",
        icon="FileText",
        path="/dashboard/wholesaler/gst-reports",
        business_types=(WHOLESALER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_ACCOUNTANT),
        category=CATEGORY_FINANCE,
        priority=9,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="multi-branch-transfer",
        title="Multi-Branch Transfer",
        description="Transfer inventory between wholesale branches",
        icon="RefreshCw",
        path="/dashboard/wholesaler/branch-transfer",
        business_types=(WHOLESALER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_OPERATIONS,
        priority=10,
        is_specialized=True,
    ),

    # Distributor
    ModuleDescriptor(
        id="brand-product-management",
        title="Brand-wise Product Management",
        description="Manage products organized by brands with full CRUD operations",
        icon="Tags",
        path="/dashboard/distributor/brand-products",
        business_types=(DISTRIBUTOR,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_INVENTORY,
        priority=1,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="area-client-tracking",
        title="Area-wise Client Tracking",
        description="Track clients by geographical areas",
        icon="MapPin",
        path="/dashboard/distributor/territory-management",
        business_types=(DISTRIBUTOR,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_SALES_EXECUTIVE),
        category=CATEGORY_CUSTOMER,
        priority=2,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="salesman-assignment",
        title="Salesman Assignment",
        description="Assign salesmen to territories and clients",
        icon="UserCheck",
        path="/dashboard/distributor/salesman-assignment",
        business_types=(DISTRIBUTOR,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_HR,
        priority=3,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="target-achievement",
        title="Target vs Achievement Reports",
        description="Track sales targets against achievements",
        icon="Target",
        path="/dashboard/distributor/target-achievement",
        business_types=(DISTRIBUTOR,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_SALES_EXECUTIVE),
        category=CATEGORY_ANALYTICS,
        priority=4,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="scheme-offer-management",
        title="Scheme/Offer Management",
        description="Manage promotional schemes and offers",
        icon="Gift",
        path="/dashboard/distributor/schemes",
        business_types=(DISTRIBUTOR,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_SALES,
        priority=5,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="route-planning",
        title="Route Planning",
        description="Plan and optimize delivery routes",
        icon="Route",
        path="/dashboard/distributor/route-planning",
        business_types=(DISTRIBUTOR,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_STAFF),
        category=CATEGORY_OPERATIONS,
        priority=6,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="credit-followups",
        title="Credit Follow-ups",
        description="Track and follow up on credit accounts",
        icon="Phone",
        path="/dashboard/distributor/credit-followups",
        business_types=(DISTRIBUTOR,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_SALES_EXECUTIVE),
        category=CATEGORY_FINANCE,
        priority=7,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="stock-ledger",
        title="Stock Ledger",
        description="Detailed stock movement tracking",
        icon="BookOpen",
        path="/dashboard/distributor/stock-ledger",
        business_types=(DISTRIBUTOR,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_STAFF),
        category=CATEGORY_INVENTORY,
        priority=8,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="return-replacement",
        title="Return/Replacement Control",
        description="Manage product returns and replacements",
        icon="RotateCcw",
        path="/dashboard/distributor/returns",
        business_types=(DISTRIBUTOR,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_STAFF),
        category=CATEGORY_OPERATIONS,
        priority=9,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="client-invoicing",
        title="Client Invoicing",
        description="Generate invoices for distributor clients",
        icon="FileText",
        path="/dashboard/distributor/invoicing",
        business_types=(DISTRIBUTOR,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT),
        category=CATEGORY_FINANCE,
        priority=10,
        is_specialized=True,
    ),

    # Trader
    ModuleDescriptor(
        id="buy-sell-tracking",
        title="Buy-Sell Inventory Tracking",
        description="Track purchase and sale transactions",
        icon="TrendingUp",
        path="/dashboard/trader/buy-sell-tracking",
        business_types=(TRADER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_STAFF),
        category=CATEGORY_INVENTORY,
        priority=1,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="margin-calculator",
        title="Margin Calculator",
        description="Calculate profit margins on trading transactions",
        icon="Calculator",
        path="/dashboard/trader/margin-calculator",
        business_types=(TRADER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT),
        category=CATEGORY_FINANCE,
        priority=2,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="profit-loss-statements",
        title="Profit & Loss Statements",
        description="Generate P&L reports for trading activities",
        icon="FileText",
        path="/dashboard/trader/profit-loss",
        business_types=(TRADER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT),
        category=CATEGORY_FINANCE,
        priority=3,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="manual-stock-adjustments",
        title="Manual Stock Adjustments",
        description="Make manual adjustments to stock levels",
        icon="Edit",
        path="/dashboard/trader/stock-adjustments",
        business_types=(TRADER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_INVENTORY,
        priority=4,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="party-list",
        title="Party List",
        description="Manage trading partners and suppliers",
        icon="Users",
        path="/dashboard/trader/parties",
        business_types=(TRADER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_SALES_EXECUTIVE),
        category=CATEGORY_CUSTOMER,
        priority=5,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="trader-invoice-generator",
        title="Invoice Generator",
        description="Generate invoices for trading transactions",
        icon="FileText",
        path="/dashboard/trader/invoices",
        business_types=(TRADER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT),
        category=CATEGORY_FINANCE,
        priority=6,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="delivery-tracking",
        title="Delivery Tracking",
        description="Track deliveries and shipments",
        icon="Truck",
        path="/dashboard/trader/delivery-tracking",
        business_types=(TRADER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_STAFF),
        category=CATEGORY_OPERATIONS,
        priority=7,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="scheme-handling",
        title="Scheme Handling",
        description="Manage trading schemes and promotional offers",
        icon="Gift",
        path="/dashboard/trader/schemes",
        business_types=(TRADER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER),
        category=CATEGORY_SALES,
        priority=8,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="inventory-valuation",
        title="Inventory Valuation",
        description="Calculate current value of trading inventory",
        icon="DollarSign",
        path="/dashboard/trader/inventory-valuation",
        business_types=(TRADER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_ACCOUNTANT),
        category=CATEGORY_FINANCE,
        priority=9,
        is_specialized=True,
    ),
    ModuleDescriptor(
        id="return-refund-logs",
        title="Return & Refund Logs",
        description="Track returns and refunds in trading",
        icon="RotateCcw",
        path="/dashboard/trader/returns-refunds",
        business_types=(TRADER,),
        allowed_roles=(ROLE_OWNER, ROLE_CO_FOUNDER, ROLE_MANAGER, ROLE_STAFF),
        category=CATEGORY_OPERATIONS,
        priority=10,
        is_specialized=True,
    ),
)

ALL_MODULES = COMMON_MODULES + BUSINESS_MODULES


def _index_by_id(modules):
    index = {}
    for m in modules:
        if m.id in index:
            raise ValueError(f"Duplicate module id in catalog: {m.id}")
        index[m.id] = m
    return MappingProxyType(index)


MODULES_BY_ID = _index_by_id(ALL_MODULES)
