"""Application service: Seed Catalog use case.

Loads the default grocery catalogue into an empty store.  A catalogue
that already holds products is left alone.
"""

from __future__ import annotations

import structlog

from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)

# (name, price, category, description, image)
DEFAULT_CATALOG: list[tuple[str, str, Category, str, str]] = [
    ("Fresh Tomatoes", "40", Category.VEGETABLES, "Organic red tomatoes", "veg1.jpg"),
    ("Green Lettuce", "25", Category.VEGETABLES, "Crisp green lettuce", "veg2.jpg"),
    ("Carrots", "30", Category.VEGETABLES, "Fresh orange carrots", "veg3.jpg"),
    ("Fresh Milk", "60", Category.DAIRY, "Pure cow milk", "d1.jpg"),
    ("Cheese Block", "120", Category.DAIRY, "Cheddar cheese", "d2.jpg"),
    ("Butter", "80", Category.DAIRY, "Fresh butter", "d3.jpg"),
    ("Vanilla Ice Cream", "150", Category.ICECREAM, "Creamy vanilla flavor", "ice1.jpg"),
    ("Chocolate Ice Cream", "160", Category.ICECREAM, "Rich chocolate flavor", "ice2.jpg"),
    ("Strawberry Ice Cream", "155", Category.ICECREAM, "Fresh strawberry flavor", "ice3.jpg"),
    ("Organic Honey", "200", Category.GENERAL, "Pure organic honey", "pic1.jpg"),
    ("Green Tea", "180", Category.GENERAL, "Premium green tea", "pic2.jpg"),
    ("Herbal Oil", "250", Category.GENERAL, "Natural herbal oil", "pic3.jpg"),
]


class SeedCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> int:
        """Insert the default products; returns how many were added."""
        if self._product_repo.list_all():
            logger.info("catalog_seed_skipped", reason="catalog not empty")
            return 0

        for name, price, category, description, image in DEFAULT_CATALOG:
            self._product_repo.save(
                Product(
                    id=self._product_repo.next_id(),
                    name=name,
                    price=Money.of(price),
                    category=category,
                    description=description,
                    image=image,
                )
            )
        logger.info("catalog_seeded", products=len(DEFAULT_CATALOG))
        return len(DEFAULT_CATALOG)
