import json

from django.test import SimpleTestCase

from dashboard.access_control import (
    ALL_BUSINESS_TYPES,
    ALL_ROLES,
    MODULE_CATEGORIES,
    RETAILER,
    ROLE_OWNER,
    ROLE_STAFF,
    SERVICE,
)
from dashboard.business_modules import get_business_modules
from dashboard.dashboard_config import (
    BUCKET_ANALYTICS,
    BUCKET_PRIMARY,
    BUCKET_SECONDARY,
    BUCKET_SETTINGS,
    CATEGORY_BUCKETS,
    KPI_CATEGORIES,
    KPI_CONFIGS,
    KPIConfig,
    generate_dashboard_config,
    generate_quick_actions,
    get_kpis,
    get_primary_category,
)
from dashboard.role_permissions import get_permissions_for_role


class CategoryBucketTests(SimpleTestCase):
    def test_every_category_has_a_bucket(self):
        self.assertEqual(set(CATEGORY_BUCKETS), set(MODULE_CATEGORIES))

    def test_bucket_mapping(self):
        self.assertEqual(get_primary_category("sales"), BUCKET_PRIMARY)
        self.assertEqual(get_primary_category("inventory"), BUCKET_PRIMARY)
        self.assertEqual(get_primary_category("customer"), BUCKET_SECONDARY)
        self.assertEqual(get_primary_category("hr"), BUCKET_SECONDARY)
        self.assertEqual(get_primary_category("finance"), BUCKET_ANALYTICS)
        self.assertEqual(get_primary_category("analytics"), BUCKET_ANALYTICS)
        self.assertEqual(get_primary_category("settings"), BUCKET_SETTINGS)


class DashboardLayoutTests(SimpleTestCase):
    def setUp(self):
        self.owner_perms = get_permissions_for_role(ROLE_OWNER)
        self.config = generate_dashboard_config(RETAILER, ROLE_OWNER, self.owner_perms)

    def test_modules_cover_every_resolved_module(self):
        resolved = [m.id for m in get_business_modules(RETAILER, ROLE_OWNER)]
        self.assertEqual([w.id for w in self.config.modules], resolved)
        self.assertTrue(all(w.permissions == () for w in self.config.modules))

    def test_primary_bucket_is_truncated(self):
        primary_modules = [w for w in self.config.modules if w.category == BUCKET_PRIMARY]
        self.assertGreater(len(primary_modules), 6)
        self.assertEqual(len(self.config.primary_widgets), 6)
        self.assertEqual(
            {w.id for w in self.config.primary_widgets},
            {
                "add-sale-invoice",
                "basic-inventory",
                "offers-promotions",
                "sales-documents",
                "catalog-sharing",
                "multi-branch-inventory-sync",
            },
        )

    def test_sidebar_is_primary_then_secondary(self):
        sidebar = self.config.layout.sidebar
        self.assertEqual(len(sidebar), 8)
        self.assertEqual(sidebar[:6], self.config.primary_widgets)
        self.assertEqual(sidebar[6:], self.config.secondary_widgets[:2])

    def test_widgets_are_analytics_then_settings(self):
        widgets = self.config.layout.widgets
        self.assertEqual(widgets, self.config.analytics_widgets + self.config.settings_widgets)
        self.assertEqual(
            [w.id for w in self.config.analytics_widgets],
            ["main-dashboard", "analytics-reports", "expense-tracking", "daily-sales-analytics"],
        )
        self.assertEqual(len(self.config.settings_widgets), 4)

    def test_bucket_limits_hold_everywhere(self):
        for bt in ALL_BUSINESS_TYPES:
            for role in ALL_ROLES:
                config = generate_dashboard_config(bt, role, get_permissions_for_role(role))
                self.assertLessEqual(len(config.primary_widgets), 6)
                self.assertLessEqual(len(config.secondary_widgets), 8)
                self.assertLessEqual(len(config.analytics_widgets), 4)
                self.assertLessEqual(len(config.settings_widgets), 4)
                self.assertLessEqual(len(config.layout.sidebar), 8)
                for bucket in (
                    config.primary_widgets,
                    config.secondary_widgets,
                    config.analytics_widgets,
                    config.settings_widgets,
                ):
                    priorities = [w.priority for w in bucket]
                    self.assertEqual(priorities, sorted(priorities))

    def test_same_inputs_same_config(self):
        again = generate_dashboard_config(RETAILER, ROLE_OWNER, self.owner_perms)
        self.assertEqual(again, self.config)

    def test_unknown_inputs_give_empty_layout(self):
        config = generate_dashboard_config("bakery", "intern", [])
        self.assertEqual(config.modules, [])
        self.assertEqual(config.layout.sidebar, [])
        self.assertEqual(config.layout.quick_actions, [])
        self.assertEqual(config.layout.widgets, [])
        self.assertEqual(config.kpis, [])

    def test_as_dict_is_json_ready(self):
        data = self.config.as_dict()
        json.dumps(data)
        self.assertEqual(data["business_type"], RETAILER)
        self.assertEqual(data["user_role"], ROLE_OWNER)
        self.assertEqual(len(data["layout"]["sidebar"]), 8)
        self.assertIsInstance(data["layout"]["quick_actions"][0]["permissions"], list)
        self.assertIsInstance(data["kpis"][0]["business_types"], list)


class QuickActionTests(SimpleTestCase):
    def test_actions_filtered_by_permission(self):
        actions = generate_quick_actions(RETAILER, get_permissions_for_role(ROLE_STAFF))
        self.assertEqual(
            [a.id for a in actions],
            ["new_sale", "add_sale_invoice", "check_inventory", "scan_qr"],
        )

    def test_any_permission_is_enough(self):
        actions = generate_quick_actions(SERVICE, ["create_sales"])
        self.assertEqual([a.id for a in actions], ["generate_quote"])

    def test_no_permissions_no_actions(self):
        self.assertEqual(generate_quick_actions(RETAILER, []), [])
        self.assertEqual(generate_quick_actions(RETAILER, None), [])

    def test_unknown_business_type_has_no_actions(self):
        self.assertEqual(generate_quick_actions("bakery", get_permissions_for_role(ROLE_OWNER)), [])


class KPITests(SimpleTestCase):
    def test_kpis_filtered_by_type_and_permission(self):
        kpis = get_kpis(RETAILER, get_permissions_for_role(ROLE_STAFF))
        self.assertEqual(
            [k.id for k in kpis],
            ["total_revenue", "active_orders", "inventory_value", "daily_sales", "inventory_turnover"],
        )

    def test_kpi_business_types_are_known(self):
        for kpi in KPI_CONFIGS:
            self.assertTrue(set(kpi.business_types) <= set(ALL_BUSINESS_TYPES), kpi.id)

    def test_service_has_no_inventory_value(self):
        ids = {k.id for k in get_kpis(SERVICE, ["view_inventory"])}
        self.assertNotIn("inventory_value", ids)

    def test_kpi_with_unknown_permission_is_rejected(self):
        with self.assertRaises(ValueError):
            KPIConfig("x", "X", "Package", "sales", ("see_everything",), (RETAILER,))

    def test_kpi_with_unknown_category_is_rejected(self):
        with self.assertRaises(ValueError):
            KPIConfig("x", "X", "Package", "marketing", ("view_orders",), (RETAILER,))

    def test_kpi_categories_are_known(self):
        for kpi in KPI_CONFIGS:
            self.assertIn(kpi.category, KPI_CATEGORIES)
