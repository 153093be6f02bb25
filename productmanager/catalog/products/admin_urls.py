from django.urls import path

from . import admin_views

app_name = "products"

urlpatterns = [
    path("", admin_views.product_list, name="index"),
    path("create/", admin_views.product_create, name="create"),
    path("<uuid:product_id>/edit/", admin_views.product_edit, name="edit"),
    path("<uuid:product_id>/delete/", admin_views.product_delete, name="delete"),
    path("<uuid:product_id>/toggle-status/", admin_views.product_toggle_status, name="toggle_status"),
]
