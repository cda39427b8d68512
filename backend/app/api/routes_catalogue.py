from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.db import get_db
from app.schemas.product_schema import envelope, product_to_dict
from app.services.catalog_service import CatalogService

router = APIRouter(tags=["catalogue"])


@router.get("", summary="List products")
def list_products(
    q: Optional[str] = Query(None, description="search name and description"),
    category: Optional[str] = Query(None, description="exact category"),
    db: Session = Depends(get_db),
):
    svc = CatalogService(db)
    items = svc.list_products(q=q, category=category)
    return envelope(data=[product_to_dict(p) for p in items], count=len(items))


@router.get("/{slug}", summary="Get product by slug")
def get_product(slug: str, db: Session = Depends(get_db)):
    svc = CatalogService(db)
    p = svc.get_product(slug)
    return envelope(data=product_to_dict(p))
