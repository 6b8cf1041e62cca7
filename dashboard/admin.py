# dashboard/admin.py

from django.contrib import admin

from .forms_access import BusinessAccessForm
from .models_access import BusinessAccess


@admin.register(BusinessAccess)
class BusinessAccessAdmin(admin.ModelAdmin):
    form = BusinessAccessForm
    list_display = ("user", "business_name", "business_type", "role", "is_owner", "updated_at")
    list_filter = ("business_type", "role", "is_owner")
    search_fields = ("user__username", "user__email", "business_name")
    readonly_fields = ("updated_at",)
