# dashboard/views_dashboard.py

import logging

from django.contrib.auth.decorators import login_required, user_passes_test
from django.http import HttpResponse, JsonResponse
from django.views.decorators.http import require_GET

from .access_control import ALL_BUSINESS_TYPES
from .business_modules import (
    get_business_modules,
    get_business_type_config,
    get_common_modules,
    get_module,
    get_specialized_modules,
    has_module_access,
)
from .dashboard_config import generate_dashboard_config
from .exports import build_module_matrix
from .models_access import split_tags
from .permissions import get_access
from .role_permissions import (
    get_business_type_name,
    get_role_name,
    is_business_type,
    is_role,
    unknown_permissions,
)

logger = logging.getLogger(__name__)


def is_admin_user(user):
    return user.is_authenticated and (user.is_superuser or user.is_staff)


def module_as_dict(module):
    return {
        "id": module.id,
        "title": module.title,
        "description": module.description,
        "icon": module.icon,
        "path": module.path,
        "business_types": sorted(module.business_types),
        "allowed_roles": sorted(module.allowed_roles),
        "category": module.category,
        "priority": module.priority,
        "is_specialized": module.is_specialized,
    }


@login_required
@require_GET
def dashboard_config(request):
    access = get_access(request.user)
    config = generate_dashboard_config(access.business_type, access.role, access.permissions)

    return JsonResponse({
        "ok": True,
        "business_name": access.business_name,
        "business_type_name": get_business_type_name(access.business_type),
        "role_name": get_role_name(access.role),
        "business_type_config": dict(get_business_type_config(access.business_type)),
        "config": config.as_dict(),
    })


@login_required
@require_GET
def module_list(request):
    access = get_access(request.user)
    scope = (request.GET.get("scope") or "all").strip().lower()

    if scope == "common":
        modules = get_common_modules(access.role)
    elif scope == "specialized":
        modules = get_specialized_modules(access.business_type, access.role)
    elif scope == "all":
        modules = get_business_modules(access.business_type, access.role)
    else:
        return JsonResponse({"ok": False, "error": f"Unknown scope: {scope}"}, status=400)

    return JsonResponse({"ok": True, "scope": scope, "modules": [module_as_dict(m) for m in modules]})


@login_required
@require_GET
def module_access(request, module_id):
    access = get_access(request.user)
    return JsonResponse({
        "ok": True,
        "module": module_id,
        "known": get_module(module_id) is not None,
        "allowed": has_module_access(module_id, access.business_type, access.role),
    })


@login_required
@user_passes_test(is_admin_user, login_url="/accounts/login/", redirect_field_name="next")
@require_GET
def dashboard_preview(request):
    business_type = (request.GET.get("business_type") or "").strip()
    role = (request.GET.get("role") or "").strip()
    permissions = split_tags(request.GET.get("permissions"))

    errors = []
    if not is_business_type(business_type):
        errors.append(f"Unknown business type: {business_type or '(empty)'}")
    if not is_role(role):
        errors.append(f"Unknown role: {role or '(empty)'}")
    bad = unknown_permissions(permissions)
    if bad:
        errors.append(f"Unknown permissions: {', '.join(bad)}")

    if errors:
        logger.warning("Dashboard preview rejected", extra={"errors": errors})
        return JsonResponse({"ok": False, "error": "; ".join(errors)}, status=400)

    config = generate_dashboard_config(business_type, role, permissions)
    return JsonResponse({"ok": True, "config": config.as_dict()})


@login_required
@user_passes_test(is_admin_user, login_url="/accounts/login/", redirect_field_name="next")
@require_GET
def module_matrix_export(request):
    business_type = (request.GET.get("business_type") or "").strip()
    if business_type and not is_business_type(business_type):
        return HttpResponse(f"Unknown business type: {business_type}", status=400)

    types = [business_type] if business_type else list(ALL_BUSINESS_TYPES)
    wb = build_module_matrix(types)

    resp = HttpResponse(
        content_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    resp["Content-Disposition"] = 'attachment; filename="module_access_matrix.xlsx"'
    wb.save(resp)
    return resp
