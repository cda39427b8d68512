from typing import Dict, List, Sequence

from app.models.product import Product

RECOMMENDATION_LIMIT = 8
HIGH_VALUE_PICKS = 3


def stock_value(p: Product) -> float:
    return p.price * p.inventory


def is_low_stock(p: Product, threshold: int) -> bool:
    return 0 < p.inventory <= threshold


def inventory_stats(products: Sequence[Product], low_stock_threshold: int) -> Dict:
    """
    Aggregate figures for the admin dashboard.

    Low stock means 1..threshold units left; out of stock means exactly 0.
    Category entries are keyed by category name in first-seen order.
    """
    low_stock = sorted(
        (p for p in products if is_low_stock(p, low_stock_threshold)),
        key=lambda p: p.inventory,
    )
    out_of_stock = [p for p in products if p.inventory == 0]

    categories: Dict[str, Dict] = {}
    for p in products:
        entry = categories.setdefault(
            p.category, {"count": 0, "value": 0.0, "inventory": 0}
        )
        entry["count"] += 1
        entry["value"] += stock_value(p)
        entry["inventory"] += p.inventory

    return {
        "totalProducts": len(products),
        "totalValue": sum(stock_value(p) for p in products),
        "totalInventory": sum(p.inventory for p in products),
        "lowStockCount": len(low_stock),
        "outOfStockCount": len(out_of_stock),
        "lowStockProducts": low_stock,
        "outOfStockProducts": out_of_stock,
        "categories": categories,
    }


def recommend(
    products: Sequence[Product], limit: int = RECOMMENDATION_LIMIT
) -> List[Product]:
    """One product per category, then the highest stock-value items, deduplicated."""
    per_category: Dict[str, Product] = {}
    for p in products:
        per_category.setdefault(p.category, p)

    high_value = sorted(products, key=stock_value, reverse=True)[:HIGH_VALUE_PICKS]

    picked: Dict[str, Product] = {}
    for p in list(per_category.values()) + high_value:
        picked.setdefault(p.id, p)
    return list(picked.values())[:limit]
