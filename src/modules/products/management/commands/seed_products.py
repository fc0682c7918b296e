from __future__ import annotations

import random
from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.dtos import CreateProductDTO
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

SEED_PRODUCTS = [
    ("Widget", "Standard widget for everyday use."),
    ("Gadget", "Compact gadget with a rechargeable battery."),
    ("Sprocket", None),
    ("Gizmo", "Multi-purpose gizmo."),
    ("Doohickey", "Replacement doohickey, pack of two."),
    ("Thingamajig", None),
    ("Whatsit", "Limited edition whatsit."),
    ("Contraption", "Heavy-duty contraption for workshops."),
]


class Command(BaseCommand):
    help = "Seed the catalog with sample products for local development."

    def add_arguments(self, parser):
        parser.add_argument(
            "--count",
            type=int,
            default=len(SEED_PRODUCTS),
            help="Number of products to create (default: %(default)s).",
        )
        parser.add_argument(
            "--force",
            action="store_true",
            help="Seed even when the catalog already has products.",
        )

    def handle(self, *args, **options):
        random.seed(42)
        repository = ProductDjangoRepository()

        existing = len(repository.list())
        if existing and not options["force"]:
            self.stdout.write(
                self.style.WARNING(
                    f"Catalog already has {existing} products; use --force to add more."
                )
            )
            return

        service = ProductService(repository=repository)
        count = max(options["count"], 0)
        self.stdout.write(f"Creating {count} products...")

        for index in range(count):
            name, description = SEED_PRODUCTS[index % len(SEED_PRODUCTS)]
            if index >= len(SEED_PRODUCTS):
                name = f"{name} {index // len(SEED_PRODUCTS) + 1}"
            price = Decimal(random.randint(199, 99999)) / 100
            service.create_product(
                CreateProductDTO(name=name, price=price, description=description)
            )

        self.stdout.write(self.style.SUCCESS(f"Seed completed: products={count}"))
