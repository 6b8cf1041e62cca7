from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion

import dashboard.models_access


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="BusinessAccess",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("business_name", models.CharField(blank=True, default="", max_length=200)),
                (
                    "business_type",
                    models.CharField(
                        choices=[
                            ("retailer", "Retail Store"),
                            ("ecommerce", "E-commerce"),
                            ("service", "Service Business"),
                            ("manufacturer", "Manufacturing"),
                            ("wholesaler", "Wholesale Distribution"),
                            ("distributor", "Distribution"),
                            ("trader", "Trading Business"),
                        ],
                        default=dashboard.models_access._default_business_type,
                        max_length=20,
                    ),
                ),
                (
                    "role",
                    models.CharField(
                        choices=[
                            ("owner", "Business Owner"),
                            ("co_founder", "Co-Founder"),
                            ("manager", "Manager"),
                            ("staff", "Staff Member"),
                            ("accountant", "Accountant"),
                            ("sales_executive", "Sales Executive"),
                            ("inventory_manager", "Inventory Manager"),
                            ("delivery_staff", "Delivery Staff"),
                            ("hr", "HR"),
                            ("production", "Production"),
                            ("store_staff", "Store Staff"),
                            ("sales_staff", "Sales Staff"),
                        ],
                        default=dashboard.models_access._default_role,
                        max_length=30,
                    ),
                ),
                ("is_owner", models.BooleanField(default=False)),
                ("extra_permissions", models.TextField(blank=True, default="")),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="business_access",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Business Access",
                "verbose_name_plural": "Business Access",
            },
        ),
    ]
