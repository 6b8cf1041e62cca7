from django.test import SimpleTestCase

from dashboard.access_control import ALL_ROLES
from dashboard.role_permissions import (
    BASE_PERMISSIONS,
    PERMISSIONS,
    get_business_type_name,
    get_permissions_for_role,
    get_role_name,
    has_role_level,
    unknown_permissions,
)


class RolePermissionTests(SimpleTestCase):
    def test_every_role_gets_base_permissions(self):
        for role in ALL_ROLES:
            perms = get_permissions_for_role(role)
            for tag in BASE_PERMISSIONS:
                self.assertIn(tag, perms)
            self.assertEqual(len(perms), len(set(perms)))

    def test_unknown_role_only_gets_base(self):
        self.assertEqual(get_permissions_for_role("intern"), list(BASE_PERMISSIONS))

    def test_role_specific_tags(self):
        self.assertIn("manage_users", get_permissions_for_role("owner"))
        self.assertNotIn("manage_users", get_permissions_for_role("staff"))
        self.assertIn("create_financial", get_permissions_for_role("accountant"))
        self.assertIn("productionWorkflow", get_permissions_for_role("production"))

    def test_unknown_permissions(self):
        self.assertEqual(unknown_permissions(["view_orders", "fly", "swim"]), ["fly", "swim"])
        self.assertEqual(unknown_permissions(PERMISSIONS), [])


class RoleDisplayTests(SimpleTestCase):
    def test_role_level(self):
        self.assertTrue(has_role_level("owner", "manager"))
        self.assertTrue(has_role_level("manager", "manager"))
        self.assertFalse(has_role_level("staff", "accountant"))
        self.assertFalse(has_role_level("hr", "staff"))

    def test_unranked_roles_never_pass_a_level_check(self):
        self.assertFalse(has_role_level("staff", "hr"))
        self.assertFalse(has_role_level("hr", "hr"))
        self.assertFalse(has_role_level("hr", "inventory_manager"))
        self.assertFalse(has_role_level("intern", "delivery_staff"))
        self.assertFalse(has_role_level("owner", "intern"))

    def test_names(self):
        self.assertEqual(get_role_name("co_founder"), "Co-Founder")
        self.assertEqual(get_role_name("intern"), "Staff Member")
        self.assertEqual(get_business_type_name("wholesaler"), "Wholesale Distribution")
        self.assertEqual(get_business_type_name("bakery"), "Business")
