import json

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from app.db import get_db
from app.errors import InvalidInput
from app.schemas.product_schema import envelope, product_to_dict
from app.services.catalog_service import CatalogService
from app.utils.auth import require_api_key

# the body is read by hand so an unauthenticated request is rejected before
# anything in its payload is looked at
router = APIRouter(
    prefix="/api/products", tags=["admin"], dependencies=[Depends(require_api_key)]
)


async def _json_object(request: Request) -> dict:
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise InvalidInput("Request body must be valid JSON")
    if not isinstance(body, dict):
        raise InvalidInput("Request body must be a JSON object")
    return body


@router.post(
    "/create",
    summary="Create a product",
    status_code=status.HTTP_201_CREATED,
)
async def create_product(request: Request, db: Session = Depends(get_db)):
    payload = await _json_object(request)
    svc = CatalogService(db)
    p = svc.create_product(payload)
    return envelope(data=product_to_dict(p), message="Product created successfully")


@router.put("/update/{product_id}", summary="Partially update a product")
async def update_product(
    product_id: str, request: Request, db: Session = Depends(get_db)
):
    svc = CatalogService(db)
    # a malformed id is reported before the body is parsed
    svc.ensure_valid_id(product_id)
    payload = await _json_object(request)
    p = svc.update_product(product_id, payload)
    return envelope(data=product_to_dict(p), message="Product updated successfully")
