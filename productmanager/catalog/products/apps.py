from django.apps import AppConfig


class ProductsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'productmanager.catalog.products'
    label = 'products'
    verbose_name = 'Product Catalog'
