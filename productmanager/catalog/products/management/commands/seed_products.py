"""
Management command to fill the catalog with demo products.
Run: python manage.py seed_products
"""

from django.core.management.base import BaseCommand

from productmanager.catalog.products.repositories import get_product_repository
from productmanager.catalog.products.seed import DEMO_PRODUCTS, seed_products


class Command(BaseCommand):
    help = 'Seed the product catalog with demo products'

    def add_arguments(self, parser):
        parser.add_argument(
            '--force',
            action='store_true',
            help='Insert the demo products even if the catalog is not empty',
        )
        parser.add_argument(
            '--backend',
            choices=['orm', 'sql'],
            help='Repository backend to write with (defaults to PRODUCT_REPOSITORY_BACKEND)',
        )

    def handle(self, *args, **options):
        repository = get_product_repository(options.get('backend'))
        self.stdout.write(f'Seeding products with the {repository.backend_name} backend...')

        added = seed_products(repository, force=options['force'])
        if added is None:
            self.stdout.write(self.style.WARNING('Catalog already has products, nothing to do (use --force).'))
            return

        for product in added:
            self.stdout.write(f'  Created product: {product.name} ({product.price})')

        skipped = len(DEMO_PRODUCTS) - len(added)
        if skipped:
            self.stdout.write(self.style.ERROR(f'{skipped} product(s) could not be created, see the logs.'))
        self.stdout.write(self.style.SUCCESS(f'Seeded {len(added)} products.'))
