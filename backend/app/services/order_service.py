"""
Order Service
Creates orders with their line items in a single transaction

Author: TM3
Date: 2026-10-17
"""
import logging

from psycopg2 import errors as pg_errors

from app.core.database import Database
from app.core.errors import ConflictError, InvalidInputError, NotFoundError
from app.domain.order import Order, OrderCreate, OrderItemCreate, ORDER_STATUS_PENDING

logger = logging.getLogger(__name__)


class OrderService:
    """
    Service for placing orders

    Handles:
    - Order row creation (status pending, total 0)
    - Price snapshot per line item
    - Stock decrement guarded by the available stock
    - Total recomputation from the stored line totals
    """

    def __init__(self, db: Database):
        self.db = db

    @staticmethod
    def _validate_quantity(item: OrderItemCreate) -> int:
        quantity = item.quantity
        if quantity <= 0:
            raise InvalidInputError(
                f"Invalid quantity {quantity!r} for product {item.product_id}"
            )
        return quantity

    def create_order(self, data: OrderCreate) -> Order:
        """
        Create an order and its items

        Steps (one transaction, one pooled connection):
        1. Insert the order as pending with total 0
        2. For each item: fetch price and stock, insert the item with the
           current price, decrement stock only if enough is available
        3. Write back total = SUM(line_total) of the order's items
        4. Commit (Database.transaction rolls back on any exception)

        Args:
            data: Validated order request

        Returns:
            The stored order row

        Raises:
            NotFoundError: a product does not exist
            InvalidInputError: non-positive quantity, or unknown customer/address
            ConflictError: not enough stock for an item
        """
        if not data.items:
            raise InvalidInputError("customer_id, address_id and items[] are required")

        try:
            with self.db.transaction() as conn:
                with conn.cursor() as cursor:
                    # 1. Create order (total is filled in after the items)
                    cursor.execute("""
                        INSERT INTO orders (customer_id, address_id, status, total)
                        VALUES (%s, %s, %s, %s)
                        RETURNING order_id
                    """, (data.customer_id, data.address_id, ORDER_STATUS_PENDING, 0))
                    order_id = cursor.fetchone()['order_id']

                    # 2. Items, in request order
                    for item in data.items:
                        self._add_item(cursor, order_id, item)

                    # 3. Total from the generated line_total column
                    cursor.execute("""
                        UPDATE orders
                        SET total = (
                            SELECT COALESCE(SUM(line_total), 0)
                            FROM order_items
                            WHERE order_id = %s
                        )
                        WHERE order_id = %s
                        RETURNING order_id, customer_id, address_id, status, total, created_at
                    """, (order_id, order_id))
                    row = cursor.fetchone()
        except pg_errors.ForeignKeyViolation as e:
            logger.warning(
                f"Order rejected: customer {data.customer_id} or address {data.address_id} does not exist"
            )
            raise InvalidInputError("customer_id or address_id does not reference an existing record") from e

        order = Order(**row)
        logger.info(
            f"Order {order.order_id} created for customer {order.customer_id}: "
            f"{len(data.items)} items, total {order.total}"
        )
        return order

    def _add_item(self, cursor, order_id: int, item: OrderItemCreate) -> None:
        cursor.execute(
            "SELECT price, stock FROM products WHERE product_id = %s",
            (item.product_id,)
        )
        product = cursor.fetchone()
        if not product:
            logger.warning(f"Order {order_id} rolled back: product {item.product_id} not found")
            raise NotFoundError(f"Product {item.product_id} not found")

        quantity = self._validate_quantity(item)

        # unit_price is a snapshot, later price changes don't touch this order
        cursor.execute("""
            INSERT INTO order_items (order_id, product_id, quantity, unit_price)
            VALUES (%s, %s, %s, %s)
        """, (order_id, item.product_id, quantity, product['price']))

        cursor.execute("""
            UPDATE products
            SET stock = stock - %s
            WHERE product_id = %s AND stock >= %s
        """, (quantity, item.product_id, quantity))

        if cursor.rowcount == 0:
            logger.warning(
                f"Order {order_id} rolled back: product {item.product_id} has "
                f"{product['stock']} in stock, {quantity} requested"
            )
            raise ConflictError(
                f"Insufficient stock for product {item.product_id}: "
                f"requested {quantity}, available {product['stock']}"
            )

