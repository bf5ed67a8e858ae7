"""buyNothing database management CLI.

Usage:
    python src/manage.py setup-db                    # Create all tables
    python src/manage.py drop-db                     # Drop all tables
    python src/manage.py seed-products products.json # Insert products from a JSON list
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from catalogue.product.catalog import ProductCatalog
from shared.db import configure_database, dispose_database, drop_db, get_session_factory, setup_db


async def setup_database():
    configure_database()
    try:
        print("Creating database schema...")
        await setup_db()
        print("Done.")
    finally:
        await dispose_database()


async def drop_database():
    configure_database()
    try:
        print("Dropping database schema...")
        await drop_db()
        print("Done.")
    finally:
        await dispose_database()


async def seed_products(path: Path):
    """Insert products from a JSON file holding a list of product objects.

    Recognised keys: id, name, description, price, category, isActive,
    inventory, featured.
    """
    records = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(records, list):
        raise ValueError("Product seed file must contain a JSON list")

    configure_database()
    try:
        await setup_db()
        catalog = ProductCatalog(get_session_factory())
        for record in records:
            product = await catalog.add_product(
                product_id=record.get("id"),
                name=record["name"],
                price=int(record["price"]),
                description=record.get("description"),
                category=record.get("category"),
                is_active=record.get("isActive", True),
                inventory=record.get("inventory", 0),
                featured=record.get("featured", False),
            )
            print(f"  {product.id}  {product.name}  {product.price}")
        print(f"Seeded {len(records)} products.")
    finally:
        await dispose_database()


def main():
    parser = argparse.ArgumentParser(description="buyNothing database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    seed_parser = subparsers.add_parser("seed-products", help="Insert products from a JSON file")
    seed_parser.add_argument("path", type=Path, help="JSON file with a list of products")

    args = parser.parse_args()

    if args.command == "setup-db":
        asyncio.run(setup_database())
    elif args.command == "drop-db":
        asyncio.run(drop_database())
    elif args.command == "seed-products":
        asyncio.run(seed_products(args.path))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
