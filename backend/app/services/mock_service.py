"""
Mock Service
Seeds a store with demo catalog data

Purpose:
- Give a fresh install something to render (themes, plugins, filters)
- Provide realistic-looking data for manual admin panel testing

Every mock_* method clears its table first, so seeding is repeatable.
Pass a seeded random.Random for reproducible data.

Author: TM3
Date: 2025-12-02
"""
import logging
import random
from typing import Dict, List, Optional

from app.domain.catalog import (
    Category,
    DemoProduct,
    ProductTemplate,
    DEMO_ATTRIBUTES,
    DEMO_CATEGORIES_COUNT,
    DEMO_DESCRIPTION,
    DEMO_GALLERY_SIZE,
    DEMO_IMAGES,
    DEMO_MAX_SUBCATEGORIES,
    DEMO_PRODUCTS,
    DEMO_REVIEWS,
    SIZE_ATTRIBUTE,
)
from app.repositories.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)

# Share of demo products in "New" condition
NEW_CONDITION_SHARE = 0.7
USED_PRICE_FACTOR = 0.4
MAX_SIZE_MARKUP = 0.2


class MockService:
    """Service for seeding demo catalog data"""

    def __init__(self, repository: Optional[CatalogRepository] = None, rng: Optional[random.Random] = None):
        self.repository = repository or CatalogRepository()
        self.rng = rng or random.Random()

    def build_product(self, template: ProductTemplate, category_ids: List[int]) -> DemoProduct:
        """
        Build one demo product from a template

        - Colour attribute follows the main image
        - 3 to 6 sizes, each up to 20% pricier than the base price
        - "Used" condition costs 40% of the base price
        """
        rng = self.rng
        images = list(DEMO_IMAGES)

        main_image = rng.choice(images)
        color = DEMO_IMAGES[main_image]

        categories = list(category_ids)
        rng.shuffle(categories)
        categories = categories[:rng.randrange(len(categories))] if categories else []

        sizes = [v.value for v in SIZE_ATTRIBUTE.values]
        rng.shuffle(sizes)
        sizes = sorted(sizes[:rng.randint(3, 6)], key=int)

        condition = "New" if rng.random() < NEW_CONDITION_SHARE else "Used"
        condition_variant = {}
        if condition == "Used":
            condition_variant["price"] = round(template.price * USED_PRICE_FACTOR)

        attributes = [
            {
                "key": "Color",
                "values": [{"value": color, "productVariant": {"images": [main_image]}}],
            },
            {
                "key": "Size",
                "values": [
                    {
                        "value": size,
                        "productVariant": {
                            "price": template.price + round(template.price * MAX_SIZE_MARKUP * rng.random())
                        },
                    }
                    for size in sizes
                ],
            },
            {
                "key": "Condition",
                "values": [{"value": condition, "productVariant": condition_variant}],
            },
        ]

        return DemoProduct(
            name=template.name,
            price=template.price,
            old_price=template.old_price,
            main_image=main_image,
            images=[main_image] + [rng.choice(images) for _ in range(DEMO_GALLERY_SIZE)],
            description=DEMO_DESCRIPTION,
            attributes=attributes,
            category_ids=categories,
            views=rng.randrange(1000),
        )

    def mock_products(self, times: int = 50) -> Dict[str, int]:
        """
        Replace all products with `times` copies of every demo product

        Categories should be seeded first, products link to random ones.
        """
        self.repository.delete_all_products()
        category_ids = self.repository.list_category_ids()

        products = [
            self.build_product(template, category_ids)
            for _ in range(times)
            for template in DEMO_PRODUCTS
        ]
        created = self.repository.create_products(products)

        logger.info(f"Mocked {len(created)} products")
        return {"products": len(created)}

    def mock_categories(self) -> Dict[str, int]:
        """Replace all categories with Category 1..20, each with up to 4 subcategories"""
        self.repository.delete_all_categories()

        categories = 0
        subcategories = 0
        for i in range(DEMO_CATEGORIES_COUNT):
            name = f"Category {i + 1}"
            parent_id = self.repository.create_category(Category(name=name, description=f"{name} description"))
            categories += 1

            for j in range(self.rng.randint(0, DEMO_MAX_SUBCATEGORIES)):
                sub_name = f"Subcategory {j + 1}"
                self.repository.create_category(Category(
                    name=sub_name,
                    description=f"{sub_name} description",
                    parent_id=parent_id
                ))
                subcategories += 1

        logger.info(f"Mocked {categories} categories and {subcategories} subcategories")
        return {"categories": categories, "subcategories": subcategories}

    def mock_attributes(self) -> Dict[str, int]:
        """Replace all attributes with Size, Color and Condition"""
        self.repository.delete_all_attributes()

        for attribute in DEMO_ATTRIBUTES:
            self.repository.create_attribute(attribute)

        logger.info(f"Mocked {len(DEMO_ATTRIBUTES)} attributes")
        return {"attributes": len(DEMO_ATTRIBUTES)}

    def mock_reviews(self) -> Dict[str, int]:
        """Replace all reviews: every product gets a random subset of demo reviews"""
        self.repository.delete_all_reviews()

        total = 0
        for product_id in self.repository.list_product_ids():
            reviews = self.rng.sample(DEMO_REVIEWS, len(DEMO_REVIEWS))
            count = self.rng.randrange(len(DEMO_REVIEWS))
            total += self.repository.create_reviews(product_id, reviews[:count])

        logger.info(f"Mocked {total} reviews")
        return {"reviews": total}

    def mock_all(self, times: int = 50) -> Dict[str, int]:
        """Seed everything, in dependency order"""
        result: Dict[str, int] = {}
        result.update(self.mock_categories())
        result.update(self.mock_attributes())
        result.update(self.mock_products(times))
        result.update(self.mock_reviews())
        return result
