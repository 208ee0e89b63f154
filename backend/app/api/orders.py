"""
Orders API Endpoints
Handles order listing, detail and creation

Author: TM3
Date: 2026-10-17
"""
from fastapi import APIRouter, Depends, Path, status

from app.core.database import Database, get_database
from app.core.errors import NotFoundError
from app.domain.order import OrderCreate
from app.domain.product import INTEGER_MAX
from app.repositories.order_repository import OrderRepository
from app.services.order_service import OrderService

router = APIRouter()


def get_order_repository(db: Database = Depends(get_database)) -> OrderRepository:
    return OrderRepository(db)


def get_order_service(db: Database = Depends(get_database)) -> OrderService:
    return OrderService(db)


@router.get("")
def get_orders(repo: OrderRepository = Depends(get_order_repository)):
    """
    Get the 50 most recent orders with customer name
    """
    orders = repo.find_recent()
    return [order.to_dict() for order in orders]


@router.get("/{order_id}")
def get_order(
    order_id: int = Path(..., le=INTEGER_MAX, description="Order ID"),
    repo: OrderRepository = Depends(get_order_repository)
):
    """
    Get order details with customer, address and items

    Returns {order, items}
    """
    order = repo.find_by_id(order_id)
    if not order:
        raise NotFoundError("Order not found")

    return order.to_dict()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_order(
    payload: OrderCreate,
    service: OrderService = Depends(get_order_service)
):
    """
    Create order with items

    Body: {customer_id, address_id, items: [{product_id, quantity}]}

    Errors:
    - 400: missing fields, empty items, non-positive quantity
    - 404: unknown product
    - 409: insufficient stock
    """
    order = service.create_order(payload)
    return {"order": order.to_dict()}
