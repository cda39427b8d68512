import re
from typing import Any, Dict, List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.errors import Conflict, InvalidInput
from app.models.product import Product, utcnow

_ID_PATTERN = re.compile(r"^[0-9a-f]{32}$")


def is_valid_id(value: Any) -> bool:
    return isinstance(value, str) and bool(_ID_PATTERN.match(value))


class ProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_all(
        self, q: Optional[str] = None, category: Optional[str] = None
    ) -> List[Product]:
        """Every product, newest first. q matches name or description, case-insensitively."""
        query = self.db.query(Product)
        if q:
            like = f"%{q}%"
            query = query.filter(
                or_(Product.name.ilike(like), Product.description.ilike(like))
            )
        if category:
            query = query.filter(Product.category == category)
        return query.order_by(Product.created_at.desc()).all()

    def find_by_slug(self, slug: str) -> Optional[Product]:
        return self.db.query(Product).filter(Product.slug == slug).first()

    def find_by_id(self, product_id: str) -> Optional[Product]:
        if not is_valid_id(product_id):
            raise InvalidInput("Invalid product ID")
        return self.db.get(Product, product_id)

    def insert(self, fields: Dict[str, Any]) -> Product:
        """
        Add a product and flush it. The unique index on slug is the final word on
        duplicates: a violation here is reported as Conflict even when the caller's
        own existence check passed.
        """
        now = utcnow()
        p = Product(**fields, created_at=now, last_updated=now)
        self.db.add(p)
        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            if "slug" in str(e.orig).lower():
                raise Conflict() from e
            raise
        return p

    def update_partial(
        self, product_id: str, fields: Dict[str, Any]
    ) -> Optional[Product]:
        p = self.find_by_id(product_id)
        if p is None:
            return None
        for key, value in fields.items():
            setattr(p, key, value)
        now = utcnow()
        # clock skew must never move lastUpdated backwards
        if p.last_updated is not None and p.last_updated > now:
            now = p.last_updated
        p.last_updated = now
        self.db.flush()
        return p
