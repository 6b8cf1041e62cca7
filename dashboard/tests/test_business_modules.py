from django.test import SimpleTestCase

from dashboard.access_control import (
    ALL_BUSINESS_TYPES,
    ALL_ROLES,
    MANUFACTURER,
    RETAILER,
    ROLE_MANAGER,
    ROLE_OWNER,
    ROLE_STAFF,
    SERVICE,
    ModuleDescriptor,
)
from dashboard.business_modules import (
    BUSINESS_TYPE_CONFIGS,
    get_business_modules,
    get_business_type_config,
    get_common_modules,
    get_module,
    get_specialized_modules,
    has_module_access,
)
from dashboard.module_catalog import ALL_MODULES, BUSINESS_MODULES, COMMON_MODULES, MODULES_BY_ID


class ModuleCatalogTests(SimpleTestCase):
    def test_ids_are_unique(self):
        ids = [m.id for m in ALL_MODULES]
        self.assertEqual(len(ids), len(set(ids)))
        self.assertEqual(len(MODULES_BY_ID), len(ALL_MODULES))

    def test_common_and_specialized_split(self):
        self.assertTrue(all(not m.is_specialized for m in COMMON_MODULES))
        self.assertTrue(all(m.is_specialized for m in BUSINESS_MODULES))
        self.assertEqual(len(ALL_MODULES), len(COMMON_MODULES) + len(BUSINESS_MODULES))

    def test_catalog_is_read_only(self):
        with self.assertRaises(TypeError):
            MODULES_BY_ID["new"] = ALL_MODULES[0]
        with self.assertRaises(AttributeError):
            ALL_MODULES[0].priority = 99

    def test_manufacturer_vendor_module_has_its_own_id(self):
        common = get_module("vendor-management")
        manufacturer = get_module("manufacturer-vendor-management")
        self.assertFalse(common.is_specialized)
        self.assertTrue(manufacturer.is_specialized)
        self.assertEqual(manufacturer.business_types, frozenset({MANUFACTURER}))

    def test_bad_descriptor_is_rejected(self):
        with self.assertRaises(ValueError):
            ModuleDescriptor(
                id="broken",
                title="Broken",
                description="",
                icon="Package",
                path="/dashboard/broken",
                business_types=(RETAILER,),
                allowed_roles=(ROLE_OWNER,),
                category="marketing",
                priority=1,
                is_specialized=True,
            )
        with self.assertRaises(ValueError):
            ModuleDescriptor(
                id="broken",
                title="Broken",
                description="",
                icon="Package",
                path="/dashboard/broken",
                business_types=(RETAILER,),
                allowed_roles=("intern",),
                category="sales",
                priority=1,
                is_specialized=True,
            )


class ResolverTests(SimpleTestCase):
    def test_results_match_membership_sets(self):
        for bt in ALL_BUSINESS_TYPES:
            for role in ALL_ROLES:
                for m in get_business_modules(bt, role):
                    self.assertIn(bt, m.business_types)
                    self.assertIn(role, m.allowed_roles)

    def test_results_sorted_by_priority(self):
        for bt in ALL_BUSINESS_TYPES:
            for role in ALL_ROLES:
                priorities = [m.priority for m in get_business_modules(bt, role)]
                self.assertEqual(priorities, sorted(priorities))
                priorities = [m.priority for m in get_specialized_modules(bt, role)]
                self.assertEqual(priorities, sorted(priorities))

    def test_equal_priorities_keep_catalog_order(self):
        order = {m.id: i for i, m in enumerate(ALL_MODULES)}
        modules = get_business_modules(RETAILER, ROLE_OWNER)
        for a, b in zip(modules, modules[1:]):
            if a.priority == b.priority:
                self.assertLess(order[a.id], order[b.id])

    def test_has_module_access_matches_resolved_ids(self):
        for bt in ALL_BUSINESS_TYPES:
            for role in ALL_ROLES:
                visible = {m.id for m in get_business_modules(bt, role)}
                for m in ALL_MODULES:
                    self.assertEqual(has_module_access(m.id, bt, role), m.id in visible)

    def test_repeat_calls_are_equal(self):
        self.assertEqual(
            get_business_modules(MANUFACTURER, ROLE_MANAGER),
            get_business_modules(MANUFACTURER, ROLE_MANAGER),
        )
        self.assertEqual(get_common_modules(ROLE_STAFF), get_common_modules(ROLE_STAFF))

    def test_common_modules_only_take_a_role(self):
        modules = get_common_modules(ROLE_STAFF)
        self.assertTrue(modules)
        self.assertTrue(all(not m.is_specialized for m in modules))
        self.assertTrue(all(ROLE_STAFF in m.allowed_roles for m in modules))
        with self.assertRaises(TypeError):
            get_common_modules(RETAILER, ROLE_STAFF)

    def test_specialized_modules_are_subset_of_all(self):
        all_ids = {m.id for m in get_business_modules(SERVICE, ROLE_OWNER)}
        spec_ids = {m.id for m in get_specialized_modules(SERVICE, ROLE_OWNER)}
        self.assertTrue(spec_ids)
        self.assertTrue(spec_ids <= all_ids)

    def test_unknown_role_gives_empty_results(self):
        self.assertEqual(get_business_modules(RETAILER, "intern"), [])
        self.assertEqual(get_common_modules("intern"), [])
        self.assertEqual(get_specialized_modules(RETAILER, "intern"), [])
        self.assertEqual(get_business_modules(RETAILER, ""), [])

    def test_unknown_business_type_gives_empty_results(self):
        self.assertEqual(get_business_modules("bakery", ROLE_OWNER), [])
        self.assertEqual(get_specialized_modules("bakery", ROLE_OWNER), [])
        self.assertFalse(has_module_access("main-dashboard", "bakery", ROLE_OWNER))

    def test_unknown_module_id(self):
        self.assertIsNone(get_module("does-not-exist"))
        self.assertFalse(has_module_access("does-not-exist", RETAILER, ROLE_OWNER))

    def test_owner_analytics_is_owner_only(self):
        manager_ids = {m.id for m in get_business_modules(RETAILER, ROLE_MANAGER)}
        owner_ids = {m.id for m in get_business_modules(RETAILER, ROLE_OWNER)}
        self.assertNotIn("owner-analytics", manager_ids)
        self.assertIn("owner-analytics", owner_ids)

    def test_inventory_batches_hidden_for_service(self):
        for role in ALL_ROLES:
            ids = {m.id for m in get_business_modules(SERVICE, role)}
            self.assertNotIn("inventory-batches", ids)
            self.assertFalse(has_module_access("inventory-batches", SERVICE, role))
        self.assertTrue(has_module_access("inventory-batches", RETAILER, ROLE_STAFF))


class BusinessTypeConfigTests(SimpleTestCase):
    def test_every_type_has_a_config(self):
        for bt in ALL_BUSINESS_TYPES:
            self.assertIn(bt, BUSINESS_TYPE_CONFIGS)

    def test_main_modules_exist_for_their_type(self):
        for bt, config in BUSINESS_TYPE_CONFIGS.items():
            for module_id in config["main_modules"]:
                module = get_module(module_id)
                self.assertIsNotNone(module, module_id)
                self.assertIn(bt, module.business_types)

    def test_unknown_type_falls_back_to_retailer(self):
        self.assertEqual(get_business_type_config("bakery"), BUSINESS_TYPE_CONFIGS[RETAILER])

    def test_configs_are_read_only(self):
        config = get_business_type_config("bakery")
        with self.assertRaises(TypeError):
            config["name"] = "Bakery"
        with self.assertRaises(AttributeError):
            config["main_modules"].append("x")
        with self.assertRaises(TypeError):
            BUSINESS_TYPE_CONFIGS["bakery"] = config

        self.assertEqual(BUSINESS_TYPE_CONFIGS[RETAILER]["main_modules"][-1], "gst-reports")
