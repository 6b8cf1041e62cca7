import os
import tempfile

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.core.management.base import CommandError
from django.http import HttpResponse
from django.test import RequestFactory, TestCase
from openpyxl import load_workbook

from dashboard.forms_access import BusinessAccessForm
from dashboard.models_access import BusinessAccess
from dashboard.permissions import (
    get_access,
    peek_access,
    require_any_permission,
    require_module,
    require_role_level,
    user_has_module,
    user_has_permission,
)
from dashboard.templatetags.dashboard_access import has_module, has_perm_tag, role_name

User = get_user_model()


def ok_view(request):
    return HttpResponse("ok")


class BusinessAccessModelTests(TestCase):
    def test_access_row_created_with_user(self):
        user = User.objects.create_user(username="asha", password="pw")
        access = BusinessAccess.objects.get(user=user)
        self.assertEqual(access.business_type, "retailer")
        self.assertEqual(access.role, "staff")

    def test_permissions_are_role_defaults_plus_extra(self):
        user = User.objects.create_user(username="ravi", password="pw")
        access = get_access(user)
        access.extra_permissions = " manage_customers, ,view_orders "
        access.save()
        access.refresh_from_db()

        self.assertEqual(access.extra_permissions, "manage_customers,view_orders")
        self.assertIn("manage_customers", access.permissions)
        self.assertEqual(access.permissions.count("view_orders"), 1)

    def test_owner_flag_forces_owner_role(self):
        user = User.objects.create_user(username="meera", password="pw")
        access = get_access(user)
        access.is_owner = True
        access.role = "manager"
        access.save()
        access.refresh_from_db()
        self.assertEqual(access.role, "owner")


class BusinessAccessFormTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username="kiran", password="pw")
        self.access = get_access(self.user)

    def _data(self, **overrides):
        data = {
            "business_name": "Kiran Traders",
            "business_type": "trader",
            "role": "accountant",
            "is_owner": False,
            "extra_permissions": "",
        }
        data.update(overrides)
        return data

    def test_valid_form(self):
        form = BusinessAccessForm(self._data(extra_permissions="manage_customers"), instance=self.access)
        self.assertTrue(form.is_valid(), form.errors)
        obj = form.save()
        self.assertEqual(obj.business_type, "trader")
        self.assertIn("manage_customers", obj.permissions)

    def test_unknown_permission_rejected(self):
        form = BusinessAccessForm(self._data(extra_permissions="fly_drones"), instance=self.access)
        self.assertFalse(form.is_valid())
        self.assertIn("extra_permissions", form.errors)

    def test_unknown_business_type_rejected(self):
        form = BusinessAccessForm(self._data(business_type="bakery"), instance=self.access)
        self.assertFalse(form.is_valid())
        self.assertIn("business_type", form.errors)

    def test_owner_checkbox_sets_owner_role(self):
        form = BusinessAccessForm(self._data(is_owner=True), instance=self.access)
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.save().role, "owner")


class PermissionHelperTests(TestCase):
    def setUp(self):
        self.factory = RequestFactory()
        self.staff = User.objects.create_user(username="staff1", password="pw")
        self.owner = User.objects.create_user(username="owner1", password="pw")
        owner_access = get_access(self.owner)
        owner_access.is_owner = True
        owner_access.save()

    def _request(self, user):
        request = self.factory.get("/")
        request.user = user
        return request

    def test_user_has_module(self):
        self.assertTrue(user_has_module(self.owner, "owner-analytics"))
        self.assertFalse(user_has_module(self.staff, "owner-analytics"))
        self.assertTrue(user_has_module(self.staff, "main-dashboard"))

    def test_owner_passes_any_permission(self):
        self.assertTrue(user_has_permission(self.owner, "manage_production"))
        self.assertFalse(user_has_permission(self.staff, "manage_users"))
        self.assertTrue(user_has_permission(self.staff, "qrCodeScanner"))

    def test_require_module(self):
        view = require_module("owner-analytics")(ok_view)
        self.assertEqual(view(self._request(self.owner)).status_code, 200)
        self.assertEqual(view(self._request(self.staff)).status_code, 403)

    def test_require_any_permission(self):
        view = require_any_permission("manage_users", "qrCodeScanner")(ok_view)
        self.assertEqual(view(self._request(self.staff)).status_code, 200)

        view = require_any_permission("manage_users", "export_reports")(ok_view)
        self.assertEqual(view(self._request(self.staff)).status_code, 403)

    def test_require_role_level(self):
        view = require_role_level("manager")(ok_view)
        self.assertEqual(view(self._request(self.owner)).status_code, 200)
        self.assertEqual(view(self._request(self.staff)).status_code, 403)

        access = get_access(self.staff)
        access.role = "hr"
        access.save()
        view = require_role_level("hr")(ok_view)
        self.assertEqual(view(self._request(self.staff)).status_code, 403)

    def test_checks_do_not_create_access_rows(self):
        BusinessAccess.objects.filter(user=self.staff).delete()

        self.assertTrue(user_has_module(self.staff, "main-dashboard"))
        self.assertFalse(has_perm_tag(self.staff, "manage_users"))
        self.assertIsNone(peek_access(self.staff).pk)
        self.assertFalse(BusinessAccess.objects.filter(user=self.staff).exists())

    def test_anonymous_user_blocked(self):
        from django.contrib.auth.models import AnonymousUser

        view = require_module("main-dashboard")(ok_view)
        response = view(self._request(AnonymousUser()))
        self.assertEqual(response.status_code, 403)
        self.assertFalse(user_has_permission(AnonymousUser(), "view_orders"))

    def test_template_filters(self):
        self.assertTrue(has_module(self.owner, "owner-analytics"))
        self.assertFalse(has_perm_tag(self.staff, "manage_users"))
        self.assertEqual(role_name("sales_executive"), "Sales Executive")


class ExportModuleMatrixCommandTests(TestCase):
    def test_writes_one_sheet_per_type(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "matrix.xlsx")
            call_command("export_module_matrix", path, "--business-type", "service", "--business-type", "trader")

            wb = load_workbook(path)
            self.assertEqual(wb.sheetnames, ["service", "trader"])
            ids = [row[0] for row in wb["service"].iter_rows(min_row=3, values_only=True)]
            self.assertIn("main-dashboard", ids)
            self.assertNotIn("inventory-batches", ids)

    def test_rejects_non_xlsx_path(self):
        with self.assertRaises(CommandError):
            call_command("export_module_matrix", "matrix.csv")
