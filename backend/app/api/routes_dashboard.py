from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.config import settings
from app.db import get_db
from app.schemas.product_schema import envelope, product_to_dict
from app.services.catalog_service import CatalogService
from app.services.dashboard_service import inventory_stats, recommend

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/dashboard/stats", summary="Inventory statistics")
def dashboard_stats(db: Session = Depends(get_db)):
    products = CatalogService(db).list_products()
    stats = inventory_stats(products, settings.LOW_STOCK_THRESHOLD)
    stats["lowStockProducts"] = [product_to_dict(p) for p in stats["lowStockProducts"]]
    stats["outOfStockProducts"] = [
        product_to_dict(p) for p in stats["outOfStockProducts"]
    ]
    return envelope(data=stats)


@router.get("/recommendations", summary="Recommended products")
def recommendations(db: Session = Depends(get_db)):
    products = CatalogService(db).list_products()
    picks = recommend(products)
    return envelope(data=[product_to_dict(p) for p in picks], count=len(picks))
