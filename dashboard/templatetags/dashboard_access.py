from django import template

from ..permissions import user_has_module, user_has_permission
from ..role_permissions import get_role_name

register = template.Library()


# -------------------------
# Filters (so templates can do: request.user|has_module:"owner-analytics")
# -------------------------
@register.filter
def has_module(user, module_id):
    return user_has_module(user, module_id)


@register.filter
def has_perm_tag(user, tag):
    return user_has_permission(user, tag)


@register.filter
def role_name(role):
    return get_role_name(role)
