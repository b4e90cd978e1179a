"""
Repository Layer - Data Access

This layer handles all reads of theme files and database queries and
returns domain models. Repositories abstract away storage details from
business logic.

Author: TM3
Date: 2025-12-02
"""
from app.repositories.theme_config_repository import ThemeConfigRepository
from app.repositories.order_repository import OrderRepository
from app.repositories.catalog_repository import CatalogRepository

__all__ = [
    'ThemeConfigRepository',
    'OrderRepository',
    'CatalogRepository'
]
