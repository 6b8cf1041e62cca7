# hisaab_site/settings.py
import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")

# ======================
# Core Django settings
# ======================

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "change_this_in_env")
DEBUG = os.getenv("DJANGO_DEBUG", "1") == "1"

# ======================
# Hosts
# ======================

ALLOWED_HOSTS = [
    h.strip()
    for h in os.getenv("DJANGO_ALLOWED_HOSTS", "127.0.0.1,localhost,testserver").split(",")
    if h.strip()
]

# ======================
# Applications
# ======================

INSTALLED_APPS = [
    "jazzmin",
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "dashboard.apps.DashboardAppConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "hisaab_site.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "hisaab_site.wsgi.application"

# ======================
# Database
# ======================

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# ======================
# Password validation
# ======================

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

# ======================
# Internationalization
# ======================

LANGUAGE_CODE = "en-us"
TIME_ZONE = os.getenv("DJANGO_TIME_ZONE", "Asia/Kolkata")
USE_I18N = True
USE_TZ = True

# ======================
# Static files
# ======================

STATIC_URL = "/static/"

STATIC_DIR = BASE_DIR / "static"
STATICFILES_DIRS = [STATIC_DIR] if STATIC_DIR.exists() else []

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ======================
# Login redirects
# ======================

LOGIN_URL = "/accounts/login/"
LOGIN_REDIRECT_URL = "/dashboard/config/"
LOGOUT_REDIRECT_URL = "/accounts/login/"

# ======================
# Business access defaults
# Used for the access row created with each new user
# ======================

HISAAB_DEFAULT_BUSINESS_TYPE = os.getenv("HISAAB_DEFAULT_BUSINESS_TYPE", "retailer")
HISAAB_DEFAULT_ROLE = os.getenv("HISAAB_DEFAULT_ROLE", "staff")

# ======================
# Jazzmin
# ======================

JAZZMIN_SETTINGS = {
    "site_title": "Hisaabb Admin",
    "site_header": "Hisaabb Admin",
    "welcome_sign": "Welcome to Hisaabb",
    "show_sidebar": True,
    "navigation_expanded": True,
    "icons": {
        "auth.user": "fas fa-user",
        "auth.group": "fas fa-users",
        "dashboard.businessaccess": "fas fa-user-shield",
    },
}
