"""ShopFront database management CLI.

Usage:
    python src/manage.py setup-db                       # Create all tables
    python src/manage.py drop-db                        # Drop all tables
    python src/manage.py seed-db                        # Load the sample products
    python src/manage.py seed-db --file products.json   # Load products from a JSON list
"""

import argparse
import json
import sys
from pathlib import Path

SAMPLE_PRODUCTS = [
    {"name": "Kraken T-Shirt", "price": 19.99},
    {"name": "Coffee Mug", "price": 9},
    {"name": "Sticker Pack", "price": 2.5},
    {"name": "Hoodie", "price": 44.995},
]


def _domain():
    from catalogue.domain import catalogue

    catalogue.init()
    return catalogue


def setup_database():
    """Create the catalogue database schema."""
    from catalogue.utils.db import setup_db

    domain = _domain()
    print("Creating catalogue database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    """Drop the catalogue database schema."""
    from catalogue.utils.db import drop_db

    domain = _domain()
    print("Dropping catalogue database schema...")
    drop_db(domain)
    print("Done.")


def load_seed_file(path):
    """Read and validate a JSON list of ``{"name": ..., "price": ...}`` records."""
    from catalogue.api.schemas import ProductSeed

    records = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(records, list):
        raise ValueError(f"{path}: expected a JSON list of products")
    return [ProductSeed.model_validate(record).model_dump() for record in records]


def seed_products(domain, products):
    """Ingest ``products`` through AddProduct and return the new ids."""
    from catalogue.product.ingestion import AddProduct

    with domain.domain_context():
        return [
            domain.process(AddProduct(name=record.get("name"), price=record.get("price")), asynchronous=False)
            for record in products
        ]


def seed_database(path=None):
    products = load_seed_file(path) if path else SAMPLE_PRODUCTS
    domain = _domain()
    product_ids = seed_products(domain, products)
    print(f"Seeded {len(product_ids)} products.")


def main():
    parser = argparse.ArgumentParser(description="ShopFront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    seed_parser = subparsers.add_parser("seed-db", help="Load products into the catalogue")
    seed_parser.add_argument(
        "--file",
        help="JSON file holding a list of products (default: built-in samples)",
    )

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed-db":
        seed_database(args.file)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
