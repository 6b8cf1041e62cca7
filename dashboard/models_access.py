# dashboard/models_access.py

from django.conf import settings
from django.db import models
from django.db.models.signals import post_save
from django.dispatch import receiver

from .access_control import (
    BUSINESS_TYPE_CHOICES,
    RETAILER,
    ROLE_CHOICES,
    ROLE_OWNER,
    ROLE_STAFF,
)
from .role_permissions import get_permissions_for_role


def _default_business_type():
    return getattr(settings, "HISAAB_DEFAULT_BUSINESS_TYPE", RETAILER)


def _default_role():
    return getattr(settings, "HISAAB_DEFAULT_ROLE", ROLE_STAFF)


def split_tags(value):
    return [t.strip() for t in (value or "").split(",") if t.strip()]


class BusinessAccess(models.Model):
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="business_access",
    )

    business_name = models.CharField(max_length=200, blank=True, default="")
    business_type = models.CharField(
        max_length=20,
        choices=BUSINESS_TYPE_CHOICES,
        default=_default_business_type,
    )
    role = models.CharField(max_length=30, choices=ROLE_CHOICES, default=_default_role)
    is_owner = models.BooleanField(default=False)

    # Comma separated tags granted on top of the role defaults
    extra_permissions = models.TextField(blank=True, default="")
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Business Access"
        verbose_name_plural = "Business Access"

    def __str__(self):
        return f"Access: {self.user.username} ({self.business_type}/{self.role})"

    @property
    def extra_permission_list(self):
        return split_tags(self.extra_permissions)

    @property
    def permissions(self):
        out = get_permissions_for_role(self.role)
        for tag in self.extra_permission_list:
            if tag not in out:
                out.append(tag)
        return out

    def clean(self):
        # Hard rule: the owner flag always means the owner role
        if self.is_owner:
            self.role = ROLE_OWNER
        self.extra_permissions = ",".join(self.extra_permission_list)

    def save(self, *args, **kwargs):
        self.clean()
        super().save(*args, **kwargs)


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def ensure_business_access(sender, instance, created, **kwargs):
    # Auto create access row for every new user
    if created:
        BusinessAccess.objects.get_or_create(user=instance)
