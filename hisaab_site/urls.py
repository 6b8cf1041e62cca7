from django.contrib import admin
from django.shortcuts import redirect
from django.urls import include, path


def home_redirect(request):
    if request.user.is_authenticated:
        return redirect("dashboard_config")
    return redirect("login")


urlpatterns = [
    path("", home_redirect, name="home"),

    # Admin
    path("admin/", admin.site.urls),

    # Django built in auth urls (login, logout, password reset, etc)
    path("accounts/", include("django.contrib.auth.urls")),

    # Dashboard access
    path("dashboard/", include("dashboard.urls")),
]
