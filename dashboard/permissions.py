# dashboard/permissions.py

import logging
from functools import wraps

from django.http import HttpResponseForbidden

from .business_modules import has_module_access
from .models_access import BusinessAccess
from .role_permissions import has_role_level

logger = logging.getLogger(__name__)


def get_access(user):
    access, _ = BusinessAccess.objects.get_or_create(user=user)
    return access


def peek_access(user):
    # Read only: an unsaved row with the defaults when none exists yet
    return BusinessAccess.objects.filter(user=user).first() or BusinessAccess(user=user)


def user_has_permission(user, tag) -> bool:
    if not user or not getattr(user, "is_authenticated", False):
        return False
    if getattr(user, "is_superuser", False):
        return True

    access = peek_access(user)
    if access.is_owner:
        return True
    return tag in access.permissions


def user_has_module(user, module_id) -> bool:
    if not user or not getattr(user, "is_authenticated", False):
        return False
    if getattr(user, "is_superuser", False):
        return True

    access = peek_access(user)
    return has_module_access(module_id, access.business_type, access.role)


def require_module(module_id):
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            user = request.user

            if not user.is_authenticated:
                return HttpResponseForbidden("Login required")

            if not user_has_module(user, module_id):
                logger.info("Module access denied", extra={"user_id": user.id, "module": module_id})
                return HttpResponseForbidden("No access")

            return view_func(request, *args, **kwargs)

        return wrapper

    return decorator


def require_any_permission(*tags):
    """
    OR permission check.
    Pass if the user holds any tag in tags.
    Owners and superusers always pass.
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            user = request.user

            if not user.is_authenticated:
                return HttpResponseForbidden("Login required")

            for tag in tags:
                if user_has_permission(user, tag):
                    return view_func(request, *args, **kwargs)

            logger.info("Permission denied", extra={"user_id": user.id, "tags": list(tags)})
            return HttpResponseForbidden("No access")

        return wrapper

    return decorator


def require_role_level(required_role):
    """
    Pass if the user's role ranks at least as high as required_role.
    Superusers always pass.
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            user = request.user

            if not user.is_authenticated:
                return HttpResponseForbidden("Login required")

            if user.is_superuser or has_role_level(peek_access(user).role, required_role):
                return view_func(request, *args, **kwargs)

            logger.info("Role level denied", extra={"user_id": user.id, "required_role": required_role})
            return HttpResponseForbidden("No access")

        return wrapper

    return decorator
