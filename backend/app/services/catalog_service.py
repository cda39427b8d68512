import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import Conflict, InvalidInput, NotFound, StoreUnavailable
from app.models.product import Product
from app.repositories.product_repo import ProductRepository, is_valid_id
from app.services.validation import (
    API_RULES,
    UPDATABLE_FIELDS,
    clean_product,
    missing_fields,
    validate_product,
)

logger = logging.getLogger(__name__)


def _first_error(errors: Dict[str, str]) -> str:
    return next(iter(errors.values()))


class CatalogService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepository(db)

    @contextmanager
    def _store(self, failure_message: str):
        """Turn driver/ORM failures into StoreUnavailable with a generic message."""
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"{failure_message}: {e}", exc_info=True)
            raise StoreUnavailable(failure_message) from e

    def list_products(
        self, q: Optional[str] = None, category: Optional[str] = None
    ) -> List[Product]:
        with self._store("Failed to fetch products"):
            return self.repo.find_all(q=q, category=category)

    def get_product(self, slug: Optional[str]) -> Product:
        if not slug or not slug.strip():
            raise InvalidInput("Slug is required")
        with self._store("Failed to fetch product"):
            p = self.repo.find_by_slug(slug)
        if p is None:
            raise NotFound()
        return p

    def create_product(self, payload: Dict[str, Any]) -> Product:
        missing = missing_fields(payload)
        if missing:
            raise InvalidInput(
                "Missing required fields: " + ", ".join(missing),
                {f: "This field is required" for f in missing},
            )
        errors = validate_product(payload, partial=False, rules=API_RULES)
        if errors:
            raise InvalidInput(_first_error(errors), errors)

        fields = clean_product(payload)
        with self._store("Failed to create product"):
            # fast path; insert() still maps a racing duplicate to Conflict
            if self.repo.find_by_slug(fields["slug"]) is not None:
                raise Conflict()
            p = self.repo.insert(fields)
            self.db.commit()
            self.db.refresh(p)
        logger.info(f"Created product {p.id} with slug {p.slug}")
        return p

    def ensure_valid_id(self, product_id: str):
        if not is_valid_id(product_id):
            raise InvalidInput("Invalid product ID")

    def update_product(self, product_id: str, payload: Dict[str, Any]) -> Product:
        self.ensure_valid_id(product_id)
        # slug is immutable through this path; unknown keys are ignored
        supplied = {k: payload[k] for k in UPDATABLE_FIELDS if k in payload}
        errors = validate_product(supplied, partial=True, rules=API_RULES)
        if errors:
            raise InvalidInput(_first_error(errors), errors)

        fields = clean_product(supplied)
        with self._store("Failed to update product"):
            p = self.repo.update_partial(product_id, fields)
            if p is None:
                raise NotFound()
            self.db.commit()
            self.db.refresh(p)
        logger.info(f"Updated product {product_id} fields={sorted(fields)}")
        return p
