# dashboard/models.py

from .models_access import BusinessAccess  # noqa: F401
