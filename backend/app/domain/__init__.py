"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities.
These models enforce type safety and validation across the application.

Author: TM3
Date: 2025-12-02
"""
from app.domain.theme import BlockData, PageConfig, PageInfo, ThemeConfig, CmsConfig
from app.domain.order import Order, OrderInput, OrderStatusUpdate

__all__ = [
    'BlockData',
    'PageConfig',
    'PageInfo',
    'ThemeConfig',
    'CmsConfig',
    'Order',
    'OrderInput',
    'OrderStatusUpdate'
]
