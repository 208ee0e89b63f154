"""
Order Domain Models

Represents order-related entities in the EssenceLuxe system.
These are the single source of truth for order data structure.

Author: TM3
Date: 2026-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List
from datetime import datetime
from decimal import Decimal

from app.domain.product import INTEGER_MAX

ORDER_STATUS_PENDING = "pending"

# GET /api/orders returns at most this many orders, newest first
ORDER_LIST_LIMIT = 50


def _to_json_friendly(data: dict, money_fields: List[str]) -> dict:
    for field in money_fields:
        if data.get(field) is not None:
            data[field] = float(data[field])
    if isinstance(data.get('created_at'), datetime):
        data['created_at'] = data['created_at'].isoformat()
    return data


class OrderItem(BaseModel):
    """
    Order Item domain model - represents a line item in an order

    Fields:
        order_item_id: Internal order item ID
        order_id: Parent order ID
        product_id: Reference to product catalog
        name: Current product name (from JOIN, None if product is gone)
        quantity: Number of units ordered
        unit_price: Price per unit at the time the order was placed
        line_total: quantity * unit_price (generated column)
    """

    order_item_id: int = Field(..., description="Order item ID")
    order_id: Optional[int] = Field(None, description="Parent order ID")
    product_id: Optional[int] = Field(None, description="Product catalog ID")
    name: Optional[str] = Field(None, description="Product name (from JOIN)")
    quantity: int = Field(..., description="Quantity ordered", ge=1)
    unit_price: Decimal = Field(..., description="Price per unit", ge=0)
    line_total: Decimal = Field(..., description="Total for line item", ge=0)

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float conversion"""
        return _to_json_friendly(self.model_dump(), ['unit_price', 'line_total'])


class Order(BaseModel):
    """
    Order domain model - an order row as stored

    Fields:
        order_id: Internal order ID (primary key)
        customer_id: Reference to customer
        address_id: Reference to shipping address
        status: Order status (only "pending" is ever written)
        total: Sum of the order's line totals
        created_at: When order was created
    """

    order_id: int = Field(..., description="Internal order ID")
    customer_id: Optional[int] = Field(None, description="Customer ID")
    address_id: Optional[int] = Field(None, description="Address ID")
    status: str = Field(ORDER_STATUS_PENDING, description="Order status")
    total: Decimal = Field(Decimal('0'), description="Total order amount", ge=0)
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        return _to_json_friendly(self.model_dump(), ['total'])


class OrderSummary(Order):
    """Order row as listed, with the customer's name (from JOIN)"""

    first_name: Optional[str] = Field(None, description="Customer first name (from JOIN)")
    last_name: Optional[str] = Field(None, description="Customer last name (from JOIN)")


class OrderDetail(OrderSummary):
    """Order with customer name, shipping address and its line items"""

    street: Optional[str] = Field(None, description="Shipping street (from JOIN)")
    city: Optional[str] = Field(None, description="Shipping city (from JOIN)")

    items: List[OrderItem] = Field(default_factory=list, description="Order items")

    def to_dict(self) -> dict:
        """
        Convert to the {order, items} response shape

        The order part carries every order/customer/address column,
        the items list carries each line item.
        """
        order = _to_json_friendly(self.model_dump(exclude={'items'}), ['total'])
        return {
            'order': order,
            'items': [item.to_dict() for item in self.items],
        }


class OrderItemCreate(BaseModel):
    """
    One requested line of a new order

    Positivity of quantity is checked inside the order transaction, so a
    non-positive value still rolls back. Ids and quantity are capped at
    INTEGER_MAX to fit their INTEGER columns.
    """
    product_id: int = Field(..., le=INTEGER_MAX)
    quantity: int = Field(..., le=INTEGER_MAX)


class OrderCreate(BaseModel):
    """Schema for creating a new order"""
    customer_id: int = Field(..., gt=0, le=INTEGER_MAX)
    address_id: int = Field(..., gt=0, le=INTEGER_MAX)
    items: List[OrderItemCreate] = Field(..., min_length=1)
