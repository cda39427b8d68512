"""
Field rules for product payloads.

Two rule sets exist because the admin form and the HTTP API disagree on one
point: the form refuses a price of exactly 0, the API only refuses negative
prices. Both are kept explicit so each layer states which one it applies.
"""
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping

CATEGORIES = ("Electronics", "Accessories", "Storage", "Peripherals", "Cables")

PRODUCT_FIELDS = ("name", "slug", "description", "price", "category", "inventory")
UPDATABLE_FIELDS = ("name", "description", "category", "price", "inventory")

NAME_MAX_LENGTH = 100
DESCRIPTION_MIN_LENGTH = 10
SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")
# products.inventory is a 64-bit integer column
INVENTORY_MAX = 2**63 - 1

_LABELS = {
    "name": "Product name",
    "slug": "Product slug",
    "description": "Description",
    "price": "Price",
    "category": "Category",
    "inventory": "Inventory",
}


@dataclass(frozen=True)
class RuleSet:
    name: str
    allow_zero_price: bool


API_RULES = RuleSet(name="api", allow_zero_price=True)
UI_RULES = RuleSet(name="ui", allow_zero_price=False)


def _is_number(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is not a price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large to convert to float
        return False


def _check_text(field: str, value: Any):
    if not isinstance(value, str):
        return f"{_LABELS[field]} must be a string"
    if not value.strip():
        return f"{_LABELS[field]} is required"
    return None


def check_name(value: Any):
    error = _check_text("name", value)
    if error:
        return error
    if len(value.strip()) > NAME_MAX_LENGTH:
        return f"Product name must be less than {NAME_MAX_LENGTH} characters"
    return None


def check_slug(value: Any):
    error = _check_text("slug", value)
    if error:
        return error
    if not SLUG_PATTERN.match(value.strip()):
        return "Slug must contain only lowercase letters, numbers, and hyphens"
    return None


def check_description(value: Any):
    error = _check_text("description", value)
    if error:
        return error
    if len(value.strip()) < DESCRIPTION_MIN_LENGTH:
        return f"Description must be at least {DESCRIPTION_MIN_LENGTH} characters"
    return None


def check_price(value: Any, rules: RuleSet = API_RULES):
    if not _is_number(value) or value < 0:
        return "Price must be a non-negative number"
    if value == 0 and not rules.allow_zero_price:
        return "Price cannot be zero"
    return None


def check_inventory(value: Any):
    if not _is_number(value) or value < 0:
        return "Inventory must be a non-negative integer"
    if isinstance(value, float) and not value.is_integer():
        return "Inventory must be a non-negative integer"
    if value > INVENTORY_MAX:
        return f"Inventory must be at most {INVENTORY_MAX}"
    return None


def check_category(value: Any):
    if not isinstance(value, str) or not value.strip():
        return "Please select a category"
    if value.strip() not in CATEGORIES:
        return "Category must be one of: " + ", ".join(CATEGORIES)
    return None


def validate_product(
    fields: Mapping[str, Any], partial: bool = False, rules: RuleSet = API_RULES
) -> Dict[str, str]:
    """Return field -> message for every failing rule; empty means valid.

    With partial=False every product field is required. With partial=True only
    the fields present in ``fields`` are checked.
    """
    checks = {
        "name": check_name,
        "slug": check_slug,
        "description": check_description,
        "price": lambda v: check_price(v, rules),
        "category": check_category,
        "inventory": check_inventory,
    }
    errors: Dict[str, str] = {}
    for field in PRODUCT_FIELDS:
        if field not in fields:
            if not partial:
                errors[field] = f"{_LABELS[field]} is required"
            continue
        error = checks[field](fields[field])
        if error:
            errors[field] = error
    return errors


def missing_fields(fields: Mapping[str, Any]):
    return [f for f in PRODUCT_FIELDS if f not in fields or fields[f] is None]


def clean_product(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Normalize already-validated fields into the shape the store persists."""
    cleaned: Dict[str, Any] = {}
    for field in PRODUCT_FIELDS:
        if field not in fields:
            continue
        value = fields[field]
        if field in ("name", "slug", "description", "category"):
            value = value.strip()
        elif field == "price":
            value = float(value)
        elif field == "inventory":
            value = int(value)
        cleaned[field] = value
    return cleaned
