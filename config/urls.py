from django.urls import path, include
from rest_framework import permissions

from drf_spectacular.views import (
    SpectacularSwaggerView,
    SpectacularRedocView,
)
from config.schema_view import ProductSchemaView

from productmanager.catalog.products.admin_views import home

# ================================
# URL PATTERNS
# ================================
urlpatterns = [

    # -------------------------
    # Admin UI (session login)
    # -------------------------
    path("", home, name="home"),
    path("products/", include("productmanager.catalog.products.admin_urls")),
    path("account/", include("productmanager.platform.accounts.urls")),

    # -------------------------
    # JSON API
    # Base: /api/
    # -------------------------
    path("api/", include("productmanager.catalog.products.urls")),

    # -------------------------
    # OpenAPI / Swagger / Redoc
    # -------------------------
    path("api/schema/", ProductSchemaView.as_view(), name="schema"),
    path(
        "api/schema/swagger-ui/",
        SpectacularSwaggerView.as_view(url_name="schema", permission_classes=[permissions.AllowAny]),
        name="swagger-ui",
    ),
    path(
        "api/schema/redoc/",
        SpectacularRedocView.as_view(url_name="schema", permission_classes=[permissions.AllowAny]),
        name="redoc",
    ),
]
