"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities.
These models enforce type safety and validation across the application.

Author: TM3
Date: 2026-10-17
"""
from app.domain.product import Product, ProductWrite
from app.domain.order import (
    Order,
    OrderSummary,
    OrderDetail,
    OrderItem,
    OrderCreate,
    OrderItemCreate,
)

__all__ = [
    'Product',
    'ProductWrite',
    'Order',
    'OrderSummary',
    'OrderDetail',
    'OrderItem',
    'OrderCreate',
    'OrderItemCreate',
]
