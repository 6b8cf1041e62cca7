# dashboard/forms_access.py

from django import forms

from .access_control import ROLE_OWNER
from .models_access import BusinessAccess, split_tags
from .role_permissions import unknown_permissions


class BusinessAccessForm(forms.ModelForm):
    class Meta:
        model = BusinessAccess
        fields = [
            "business_name",
            "business_type",
            "role",
            "is_owner",
            "extra_permissions",
        ]
        widgets = {
            "business_type": forms.Select(attrs={"class": "form-select"}),
            "role": forms.Select(attrs={"class": "form-select"}),
            "extra_permissions": forms.Textarea(attrs={"rows": 2}),
        }
        labels = {
            "business_type": "Business type",
            "is_owner": "Business owner",
            "extra_permissions": "Extra permissions",
        }
        help_texts = {
            "extra_permissions": "Comma separated tags added on top of the role defaults.",
            "is_owner": "Owners always get the owner role.",
        }

    def clean_extra_permissions(self):
        tags = split_tags(self.cleaned_data.get("extra_permissions"))
        bad = unknown_permissions(tags)
        if bad:
            raise forms.ValidationError(f"Unknown permissions: {', '.join(bad)}")
        return ",".join(tags)

    def clean(self):
        cleaned = super().clean()

        if cleaned.get("is_owner"):
            cleaned["role"] = ROLE_OWNER

        return cleaned
