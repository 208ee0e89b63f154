#!/usr/bin/env python3
"""
Script: init_db.py
Purpose: Create the EssenceLuxe tables and optionally seed demo data

Usage:
    cd backend && source venv/bin/activate
    python scripts/init_db.py [--seed]

Options:
    --seed    Insert a demo customer, address and products after the schema
"""
import argparse
import sys
from pathlib import Path

# Add backend to path
BACKEND_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(BACKEND_DIR))

from app.core.config import get_settings
from app.core.database import Database
from app.core.logging_config import configure_logging
from app.core.schema import apply_schema, seed_demo_data


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create the EssenceLuxe schema")
    parser.add_argument("--seed", action="store_true", help="Insert demo data")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    db = Database.from_settings(settings)
    db.open()
    try:
        apply_schema(db)
        print("✅ Schema applied")

        if args.seed:
            seeded = seed_demo_data(db)
            print(f"✅ Demo data: customer_id={seeded['customer_id']}, "
                  f"address_id={seeded['address_id']}, products={seeded['product_ids']}")
    finally:
        db.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
