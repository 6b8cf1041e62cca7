# dashboard/urls.py

from django.urls import path

from . import views_dashboard as views

urlpatterns = [
    path("config/", views.dashboard_config, name="dashboard_config"),
    path("modules/", views.module_list, name="dashboard_modules"),
    path("modules/<slug:module_id>/access/", views.module_access, name="dashboard_module_access"),
    path("preview/", views.dashboard_preview, name="dashboard_preview"),
    path("module-matrix.xlsx", views.module_matrix_export, name="dashboard_module_matrix"),
]
