"""
Catalog Repository - Data Access Layer for the store catalog

Products, categories, attributes and reviews. Used by the demo data
seeder, so it favours bulk inserts over single-row lookups.

Author: TM3
Date: 2025-12-02
"""
import logging
from typing import List

from psycopg2.extras import Json

from app.domain.catalog import Attribute, Category, DemoProduct, ReviewTemplate
from app.core.database import get_db_connection_dict

logger = logging.getLogger(__name__)


class CatalogRepository:
    """
    Repository for catalog data access

    All SQL queries for catalog tables are centralized here.
    """

    def _execute_write(self, query: str, params=None) -> int:
        """Run a single write statement, return affected row count"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(query, params)
            affected = cursor.rowcount
            conn.commit()
            return affected

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def _fetch_ids(self, table: str) -> List[int]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"SELECT id FROM {table} ORDER BY id")
            return [row['id'] for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

    # ========================================
    # Products
    # ========================================

    def delete_all_products(self) -> int:
        """Delete every product (category links and reviews cascade)"""
        deleted = self._execute_write("DELETE FROM products")
        logger.info(f"Deleted {deleted} products")
        return deleted

    def create_products(self, products: List[DemoProduct]) -> List[int]:
        """
        Insert products with their category links in one transaction

        Returns:
            IDs of created products, in input order
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            product_ids = []
            for product in products:
                cursor.execute("""
                    INSERT INTO products (
                        name, price, old_price, main_image, images,
                        description, attributes, views
                    )
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                    RETURNING id
                """, (
                    product.name,
                    product.price,
                    product.old_price,
                    product.main_image,
                    Json(product.images),
                    product.description,
                    Json(product.attributes),
                    product.views
                ))
                product_id = cursor.fetchone()['id']
                product_ids.append(product_id)

                for category_id in product.category_ids:
                    cursor.execute("""
                        INSERT INTO product_category_links (product_id, category_id)
                        VALUES (%s, %s)
                    """, (product_id, category_id))

            conn.commit()
            return product_ids

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def list_product_ids(self) -> List[int]:
        return self._fetch_ids("products")

    # ========================================
    # Categories
    # ========================================

    def delete_all_categories(self) -> int:
        deleted = self._execute_write("DELETE FROM product_categories")
        logger.info(f"Deleted {deleted} categories")
        return deleted

    def create_category(self, category: Category) -> int:
        """
        Insert a category

        Returns:
            ID of created category
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                INSERT INTO product_categories (name, description, parent_id)
                VALUES (%s, %s, %s)
                RETURNING id
            """, (category.name, category.description, category.parent_id))

            category_id = cursor.fetchone()['id']
            conn.commit()
            return category_id

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def list_category_ids(self) -> List[int]:
        return self._fetch_ids("product_categories")

    # ========================================
    # Attributes
    # ========================================

    def delete_all_attributes(self) -> int:
        deleted = self._execute_write("DELETE FROM attributes")
        logger.info(f"Deleted {deleted} attributes")
        return deleted

    def create_attribute(self, attribute: Attribute) -> int:
        data = attribute.to_dict()
        return self._execute_write("""
            INSERT INTO attributes (key, values, type)
            VALUES (%s, %s, %s)
        """, (data['key'], Json(data['values']), data['type']))

    # ========================================
    # Reviews
    # ========================================

    def delete_all_reviews(self) -> int:
        deleted = self._execute_write("DELETE FROM product_reviews")
        logger.info(f"Deleted {deleted} reviews")
        return deleted

    def create_reviews(self, product_id: int, reviews: List[ReviewTemplate]) -> int:
        """Insert reviews for a product, return how many were created"""
        if not reviews:
            return 0

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            for review in reviews:
                cursor.execute("""
                    INSERT INTO product_reviews (product_id, title, description, rating, user_name)
                    VALUES (%s, %s, %s, %s, %s)
                """, (product_id, review.title, review.description, review.rating, review.user_name))

            conn.commit()
            return len(reviews)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()
