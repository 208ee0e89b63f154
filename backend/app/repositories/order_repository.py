"""
Order Repository - Data Access Layer for Orders

Handles the read queries for orders and returns Order domain models.
Order creation lives in OrderService because it spans several tables
inside one transaction.

Author: TM3
Date: 2026-10-17
"""
from typing import List, Optional

from app.core.database import Database
from app.domain.order import OrderDetail, OrderItem, OrderSummary, ORDER_LIST_LIMIT


class OrderRepository:
    """
    Repository for Order data access

    All read queries for orders are centralized here.
    Returns Order domain models with related data (customer, address, items).
    """

    def __init__(self, db: Database):
        self.db = db

    def find_recent(self, limit: int = ORDER_LIST_LIMIT) -> List[OrderSummary]:
        """
        Find the most recent orders with the customer's name

        Args:
            limit: Maximum results to return

        Returns:
            List of orders, newest first
        """
        with self.db.transaction() as conn:
            with conn.cursor() as cursor:
                cursor.execute("""
                    SELECT
                        o.order_id, o.customer_id, o.address_id,
                        o.status, o.total, o.created_at,
                        c.first_name, c.last_name
                    FROM orders o
                    LEFT JOIN customers c ON o.customer_id = c.customer_id
                    ORDER BY o.created_at DESC, o.order_id DESC
                    LIMIT %s
                """, (limit,))
                rows = cursor.fetchall()

        return [OrderSummary(**row) for row in rows]

    def find_by_id(self, order_id: int) -> Optional[OrderDetail]:
        """
        Find order by ID with customer, address, and items

        Args:
            order_id: Internal order ID

        Returns:
            OrderDetail with all related data or None if not found
        """
        with self.db.transaction() as conn:
            with conn.cursor() as cursor:
                cursor.execute("""
                    SELECT
                        o.order_id, o.customer_id, o.address_id,
                        o.status, o.total, o.created_at,
                        c.first_name, c.last_name,
                        a.street, a.city
                    FROM orders o
                    LEFT JOIN customers c ON o.customer_id = c.customer_id
                    LEFT JOIN addresses a ON o.address_id = a.address_id
                    WHERE o.order_id = %s
                """, (order_id,))

                row = cursor.fetchone()
                if not row:
                    return None

                cursor.execute("""
                    SELECT
                        oi.order_item_id, oi.order_id, oi.product_id,
                        p.name, oi.quantity, oi.unit_price, oi.line_total
                    FROM order_items oi
                    LEFT JOIN products p ON oi.product_id = p.product_id
                    WHERE oi.order_id = %s
                    ORDER BY oi.order_item_id
                """, (order_id,))

                items = cursor.fetchall()

        # Build OrderDetail object with items
        order_dict = dict(row)
        order_dict['items'] = [OrderItem(**item) for item in items]

        return OrderDetail(**order_dict)
