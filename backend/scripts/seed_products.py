#!/usr/bin/env python3
"""
Seed the catalog with demo products.

Entries go through the same validation and uniqueness rules as the create
endpoint, so a slug that already exists is skipped rather than duplicated.
Pass --reset to drop and recreate the products table first.

Usage:
    python scripts/seed_products.py
    python scripts/seed_products.py --reset --file products.json
"""
import argparse
import json
import logging
import os
import sys

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.db import SessionLocal, init_db
from app.errors import CatalogError
from app.services.catalog_service import CatalogService

logger = logging.getLogger("seed_products")

DEFAULT_PRODUCTS = [
    {"name": "Wireless Headphones", "slug": "wireless-headphones", "price": 199.99, "category": "Electronics", "inventory": 45,
     "description": "High-quality wireless headphones with noise cancellation and 30-hour battery life."},
    {"name": "USB-C Cable", "slug": "usb-c-cable", "price": 12.99, "category": "Accessories", "inventory": 150,
     "description": "Durable USB-C charging cable compatible with most devices."},
    {"name": "Portable SSD 1TB", "slug": "portable-ssd-1tb", "price": 129.99, "category": "Storage", "inventory": 30,
     "description": "Fast portable solid-state drive with 1TB storage capacity."},
    {"name": "Mechanical Keyboard", "slug": "mechanical-keyboard", "price": 149.99, "category": "Peripherals", "inventory": 25,
     "description": "RGB mechanical keyboard with cherry mx switches for gaming and typing."},
    {"name": "Wireless Mouse", "slug": "wireless-mouse", "price": 34.99, "category": "Peripherals", "inventory": 5,
     "description": "Ergonomic wireless mouse with precision tracking."},
    {"name": "4K Webcam", "slug": "4k-webcam", "price": 89.99, "category": "Electronics", "inventory": 15,
     "description": "4K resolution webcam perfect for streaming and video calls."},
    {"name": "Monitor Arm Stand", "slug": "monitor-arm-stand", "price": 59.99, "category": "Accessories", "inventory": 40,
     "description": "Adjustable monitor arm stand for improved workspace ergonomics."},
    {"name": "Laptop Stand", "slug": "laptop-stand", "price": 44.99, "category": "Accessories", "inventory": 2,
     "description": "Aluminum laptop stand for better ventilation and viewing angle."},
    {"name": "Power Bank 20000mAh", "slug": "power-bank-20000mah", "price": 39.99, "category": "Electronics", "inventory": 60,
     "description": "High-capacity power bank with fast charging support."},
    {"name": "HDMI 2.1 Cable", "slug": "hdmi-2-1-cable", "price": 19.99, "category": "Cables", "inventory": 100,
     "description": "High-speed HDMI 2.1 cable for 4K@120Hz and 8K@60Hz video."},
]


def load_entries(path: str):
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise RuntimeError(f"Failed to parse JSON from {path}: {e}")
    # accept a bare list or an object wrapping it, as the list endpoint returns
    if isinstance(data, dict):
        data = data.get("data") or data.get("items") or []
    if not isinstance(data, list):
        raise RuntimeError(f"{path} does not contain a list of products")
    return data


def seed(entries, reset: bool = False) -> int:
    init_db(reset=reset)
    db = SessionLocal()
    svc = CatalogService(db)
    created = 0
    try:
        for entry in entries:
            try:
                svc.create_product(entry)
                created += 1
            except CatalogError as e:
                logger.warning(f"Skipping {entry.get('slug')!r}: {e.message}")
    finally:
        db.close()
    logger.info(f"Seeded products: {created}")
    return created


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", "-f", default=None, help="JSON list of products (defaults to the built-in demo set)")
    parser.add_argument("--reset", action="store_true", help="drop and recreate the products table first")
    args = parser.parse_args()
    if args.file and not os.path.exists(args.file):
        print("File not found:", args.file)
        sys.exit(1)
    entries = load_entries(args.file) if args.file else DEFAULT_PRODUCTS
    seed(entries, reset=args.reset)
