"""
Schema bootstrap helpers

schema.sql is idempotent (CREATE ... IF NOT EXISTS), so apply_schema can run
on every deploy.
"""
import logging
from pathlib import Path

from app.core.database import Database

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent / "schema.sql"


def apply_schema(db: Database, schema_path: Path = SCHEMA_PATH) -> None:
    """Create every table and index the service needs"""
    sql = schema_path.read_text(encoding="utf-8")
    with db.transaction() as conn:
        with conn.cursor() as cursor:
            cursor.execute(sql)
    logger.info(f"Schema applied from {schema_path.name}")


def seed_demo_data(db: Database) -> dict:
    """
    Insert one customer, one address and a few products

    Returns:
        Dict with the generated customer_id, address_id and product_ids
    """
    with db.transaction() as conn:
        with conn.cursor() as cursor:
            cursor.execute("""
                INSERT INTO customers (first_name, last_name, email)
                VALUES (%s, %s, %s)
                ON CONFLICT (email) DO UPDATE SET first_name = EXCLUDED.first_name
                RETURNING customer_id
            """, ("Ada", "Lovelace", "ada@example.com"))
            customer_id = cursor.fetchone()['customer_id']

            cursor.execute("""
                INSERT INTO addresses (customer_id, street, city)
                VALUES (%s, %s, %s)
                RETURNING address_id
            """, (customer_id, "12 Rue de la Paix", "Paris"))
            address_id = cursor.fetchone()['address_id']

            product_ids = []
            for sku, name, price, stock in [
                ("EL-OUD-50", "Oud Royale 50ml", "89.00", 25),
                ("EL-ROSE-30", "Rose Absolue 30ml", "54.50", 40),
                ("EL-MUSK-100", "White Musk 100ml", "120.00", 10),
            ]:
                cursor.execute("""
                    INSERT INTO products (sku, name, price, stock)
                    VALUES (%s, %s, %s, %s)
                    ON CONFLICT (sku) DO UPDATE SET name = EXCLUDED.name
                    RETURNING product_id
                """, (sku, name, price, stock))
                product_ids.append(cursor.fetchone()['product_id'])

    logger.info(f"Demo data seeded: customer {customer_id}, {len(product_ids)} products")
    return {
        'customer_id': customer_id,
        'address_id': address_id,
        'product_ids': product_ids,
    }
