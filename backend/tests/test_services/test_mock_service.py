"""
Unit tests for MockService (repository mocked, seeded randomness)

Author: TM3
Date: 2025-12-02
"""
import itertools
import random
from unittest.mock import MagicMock

import pytest

from app.domain.catalog import DEMO_IMAGES, DEMO_PRODUCTS, DEMO_REVIEWS, DemoProduct
from app.services.mock_service import MockService


@pytest.fixture
def repo():
    repo = MagicMock()
    repo.list_category_ids.return_value = [1, 2, 3, 4]
    repo.list_product_ids.return_value = [10, 11, 12]
    repo.create_products.side_effect = lambda products: list(range(1, len(products) + 1))
    repo.create_category.side_effect = itertools.count(1)
    repo.create_reviews.side_effect = lambda product_id, reviews: len(reviews)
    return repo


@pytest.fixture
def service(repo):
    return MockService(repository=repo, rng=random.Random(42))


def attribute(product: DemoProduct, key: str) -> dict:
    return next(a for a in product.attributes if a["key"] == key)


class TestBuildProduct:
    """Test a single demo product"""

    @pytest.mark.parametrize("seed", range(20))
    def test_product_shape(self, repo, seed):
        service = MockService(repository=repo, rng=random.Random(seed))
        template = DEMO_PRODUCTS[0]

        product = service.build_product(template, [1, 2, 3, 4])

        assert product.name == template.name
        assert product.images[0] == product.main_image
        assert len(product.images) == 7
        assert set(product.category_ids) <= {1, 2, 3, 4}
        assert len(product.category_ids) < 4
        assert 0 <= product.views < 1000

        color = attribute(product, "Color")["values"][0]
        assert color["value"] == DEMO_IMAGES[product.main_image]

        sizes = attribute(product, "Size")["values"]
        assert 3 <= len(sizes) <= 6
        assert [int(s["value"]) for s in sizes] == sorted(int(s["value"]) for s in sizes)
        for size in sizes:
            assert template.price <= size["productVariant"]["price"] <= template.price * 1.2 + 1

        condition = attribute(product, "Condition")["values"][0]
        if condition["value"] == "Used":
            assert condition["productVariant"]["price"] == round(template.price * 0.4)
        else:
            assert condition["productVariant"] == {}

    def test_without_categories(self, service):
        assert service.build_product(DEMO_PRODUCTS[0], []).category_ids == []

    def test_same_seed_same_product(self, repo):
        first = MockService(repository=repo, rng=random.Random(7)).build_product(DEMO_PRODUCTS[1], [1, 2])
        second = MockService(repository=repo, rng=random.Random(7)).build_product(DEMO_PRODUCTS[1], [1, 2])
        assert first == second


class TestMockService:
    """Test seeding flows"""

    def test_mock_products(self, service, repo):
        result = service.mock_products(times=2)

        assert result == {"products": 2 * len(DEMO_PRODUCTS)}
        repo.delete_all_products.assert_called_once()
        products = repo.create_products.call_args[0][0]
        assert [p.name for p in products[:len(DEMO_PRODUCTS)]] == [t.name for t in DEMO_PRODUCTS]

    def test_mock_categories(self, service, repo):
        result = service.mock_categories()

        repo.delete_all_categories.assert_called_once()
        assert result["categories"] == 20
        assert 0 <= result["subcategories"] <= 80
        assert repo.create_category.call_count == result["categories"] + result["subcategories"]

        created = [c[0][0] for c in repo.create_category.call_args_list]
        assert created[0].name == "Category 1"
        assert created[0].parent_id is None
        for category in created:
            if category.name.startswith("Subcategory"):
                assert category.parent_id is not None

    def test_mock_attributes(self, service, repo):
        assert service.mock_attributes() == {"attributes": 3}

        repo.delete_all_attributes.assert_called_once()
        keys = [c[0][0].key for c in repo.create_attribute.call_args_list]
        assert keys == ["Size", "Color", "Condition"]

    def test_mock_reviews(self, service, repo):
        result = service.mock_reviews()

        repo.delete_all_reviews.assert_called_once()
        calls = repo.create_reviews.call_args_list
        assert [c[0][0] for c in calls] == [10, 11, 12]

        total = 0
        for call in calls:
            reviews = call[0][1]
            assert len(reviews) < len(DEMO_REVIEWS)
            assert len({r.user_name for r in reviews}) == len(reviews)
            total += len(reviews)
        assert result == {"reviews": total}

    def test_mock_all_runs_in_order(self, service, repo):
        result = service.mock_all(times=1)

        assert set(result) == {"categories", "subcategories", "attributes", "products", "reviews"}
        order = [c[0] for c in repo.method_calls if c[0].startswith("delete_all")]
        assert order == [
            "delete_all_categories",
            "delete_all_attributes",
            "delete_all_products",
            "delete_all_reviews"
        ]
