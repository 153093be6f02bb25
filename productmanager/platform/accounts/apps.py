from django.apps import AppConfig


class AccountsConfig(AppConfig):
    name = 'productmanager.platform.accounts'
    label = 'accounts'
    verbose_name = 'Admin Accounts'
