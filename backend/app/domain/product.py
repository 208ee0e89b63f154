"""
Product Domain Model

Represents a product entity in the EssenceLuxe catalog.
This is the single source of truth for product data structure.

Author: TM3
Date: 2026-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from decimal import Decimal

# Largest value a PostgreSQL INTEGER column accepts
INTEGER_MAX = 2147483647


class Product(BaseModel):
    """
    Product domain model - represents a product in our catalog

    This model matches the products table and provides type safety
    for all product-related operations.

    Fields:
        product_id: Internal product ID (primary key)
        sku: Stock Keeping Unit (unique)
        name: Product name
        description: Product description (optional)
        price: Current selling price
        stock: Units available for sale
        created_at: When product was created
    """

    product_id: int = Field(..., description="Internal product ID")
    sku: str = Field(..., description="Stock Keeping Unit")
    name: str = Field(..., description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    price: Decimal = Field(Decimal('0'), description="Selling price", ge=0)
    stock: int = Field(0, description="Units in stock", ge=0)
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        """
        Convert to a JSON friendly dictionary

        Decimal price becomes a float and created_at an ISO string.
        """
        data = self.model_dump()
        data['price'] = float(data['price'])
        if data.get('created_at'):
            data['created_at'] = data['created_at'].isoformat()
        return data


class ProductWrite(BaseModel):
    """
    Schema for creating or replacing a product

    Missing description is stored as NULL, missing price/stock as 0.
    """
    sku: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    price: Decimal = Field(Decimal('0'), ge=0, max_digits=10, decimal_places=2)
    stock: int = Field(0, ge=0, le=INTEGER_MAX)
