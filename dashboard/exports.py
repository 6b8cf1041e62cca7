# dashboard/exports.py

from openpyxl import Workbook
from openpyxl.styles import Font

from .access_control import ALL_ROLES
from .module_catalog import ALL_MODULES
from .role_permissions import get_business_type_name, get_role_name


def build_module_matrix(business_types):
    """
    One sheet per business type.
    Rows are the modules that apply to that type, columns are roles,
    cells are "yes" where the role can open the module.
    """
    wb = Workbook()
    wb.remove(wb.active)

    for business_type in business_types:
        ws = wb.create_sheet(title=business_type[:31])
        ws.append([get_business_type_name(business_type)])
        ws["A1"].font = Font(bold=True)

        ws.append(["Module", "Category", "Priority", "Specialized"] + [get_role_name(r) for r in ALL_ROLES])

        modules = sorted(
            (m for m in ALL_MODULES if business_type in m.business_types),
            key=lambda m: m.priority,
        )
        for m in modules:
            ws.append(
                [m.id, m.category, m.priority, "yes" if m.is_specialized else "no"]
                + ["yes" if role in m.allowed_roles else "" for role in ALL_ROLES]
            )

    return wb
