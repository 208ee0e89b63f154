"""
Product Repository - Data Access Layer for Products

Handles all database queries for products and returns Product domain models.

Author: TM3
Date: 2026-10-17
"""
import logging
from typing import List, Optional

from psycopg2 import errors as pg_errors

from app.core.database import Database
from app.core.errors import ConflictError
from app.domain.product import Product, ProductWrite

logger = logging.getLogger(__name__)

PRODUCT_COLUMNS = "product_id, sku, name, description, price, stock, created_at"


class ProductRepository:
    """
    Repository for Product data access

    All SQL queries for products are centralized here.
    Returns Product domain models, not raw dictionaries.
    """

    def __init__(self, db: Database):
        self.db = db

    @staticmethod
    def _map_row_to_product(row: dict) -> Product:
        """Helper method to map database row to Product domain model"""
        return Product(
            product_id=row['product_id'],
            sku=row['sku'],
            name=row['name'],
            description=row.get('description'),
            price=row['price'],
            stock=row['stock'],
            created_at=row.get('created_at'),
        )

    def find_all(self) -> List[Product]:
        """
        Find all products, newest first

        Returns:
            List of products
        """
        with self.db.transaction() as conn:
            with conn.cursor() as cursor:
                cursor.execute(f"""
                    SELECT {PRODUCT_COLUMNS}
                    FROM products
                    ORDER BY created_at DESC, product_id DESC
                """)
                rows = cursor.fetchall()

        return [self._map_row_to_product(row) for row in rows]

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """
        Find product by ID

        Args:
            product_id: Internal product ID

        Returns:
            Product or None if not found
        """
        with self.db.transaction() as conn:
            with conn.cursor() as cursor:
                cursor.execute(f"""
                    SELECT {PRODUCT_COLUMNS}
                    FROM products
                    WHERE product_id = %s
                """, (product_id,))
                row = cursor.fetchone()

        if not row:
            return None

        return self._map_row_to_product(row)

    def create(self, data: ProductWrite) -> Product:
        """
        Insert a new product

        Raises:
            ConflictError: if the SKU is already taken
        """
        try:
            with self.db.transaction() as conn:
                with conn.cursor() as cursor:
                    cursor.execute(f"""
                        INSERT INTO products (sku, name, description, price, stock)
                        VALUES (%s, %s, %s, %s, %s)
                        RETURNING {PRODUCT_COLUMNS}
                    """, (data.sku, data.name, data.description, data.price, data.stock))
                    row = cursor.fetchone()
        except pg_errors.UniqueViolation as e:
            logger.warning(f"Duplicate SKU rejected: {data.sku}")
            raise ConflictError(f"Product with SKU {data.sku} already exists") from e

        logger.info(f"Product {row['product_id']} created (sku={data.sku})")
        return self._map_row_to_product(row)

    def update(self, product_id: int, data: ProductWrite) -> Optional[Product]:
        """
        Replace every editable field of a product

        Returns:
            Updated Product or None if the product does not exist

        Raises:
            ConflictError: if the new SKU belongs to another product
        """
        try:
            with self.db.transaction() as conn:
                with conn.cursor() as cursor:
                    cursor.execute(f"""
                        UPDATE products
                        SET sku = %s, name = %s, description = %s, price = %s, stock = %s
                        WHERE product_id = %s
                        RETURNING {PRODUCT_COLUMNS}
                    """, (data.sku, data.name, data.description, data.price, data.stock, product_id))
                    row = cursor.fetchone()
        except pg_errors.UniqueViolation as e:
            logger.warning(f"Duplicate SKU rejected on update of product {product_id}: {data.sku}")
            raise ConflictError(f"Product with SKU {data.sku} already exists") from e

        if not row:
            return None

        return self._map_row_to_product(row)

    def delete(self, product_id: int) -> bool:
        """
        Delete a product

        Returns:
            True if a row was deleted, False if the product did not exist

        Raises:
            ConflictError: if order items still reference the product
        """
        try:
            with self.db.transaction() as conn:
                with conn.cursor() as cursor:
                    cursor.execute("DELETE FROM products WHERE product_id = %s", (product_id,))
                    deleted = cursor.rowcount > 0
        except pg_errors.ForeignKeyViolation as e:
            logger.warning(f"Product {product_id} is referenced by order items, not deleted")
            raise ConflictError(f"Product {product_id} is referenced by existing orders") from e

        if deleted:
            logger.info(f"Product {product_id} deleted")
        return deleted
