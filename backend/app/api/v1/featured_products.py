"""Featured product endpoints.

Handlers work with snake_case data; responses are camelCased on the way out.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.featured_product import FeaturedProductUpdate
from app.services.featured_product_service import FeaturedProductService

router = APIRouter(prefix="/featured-products", tags=["featured-products"])


def get_featured_product_service(db: Session = Depends(get_db)) -> FeaturedProductService:
    return FeaturedProductService(db)


@router.get("")
def list_featured_products(
    featured_only: bool = False,
    best_sellers_only: bool = False,
    service: FeaturedProductService = Depends(get_featured_product_service),
) -> list[dict[str, Any]]:
    """List featured/bestselling products."""
    products = service.list(featured_only=featured_only, best_sellers_only=best_sellers_only)
    return [product.to_plain_object() for product in products]


@router.get("/{product_id}")
def get_featured_product(
    product_id: str,
    service: FeaturedProductService = Depends(get_featured_product_service),
) -> dict[str, Any]:
    """Get a product's featured status."""
    product = service.get(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Featured product not found")
    return product.to_plain_object()


@router.put("/{product_id}")
def upsert_featured_product(
    product_id: str,
    update: FeaturedProductUpdate,
    service: FeaturedProductService = Depends(get_featured_product_service),
) -> dict[str, Any]:
    """Feature a product or update its status."""
    changes = update.model_dump(exclude_none=True, exclude={"user_id"})
    product = service.upsert(product_id, changes, user_id=update.user_id)
    return product.to_plain_object()


@router.delete("/{product_id}")
def delete_featured_product(
    product_id: str,
    service: FeaturedProductService = Depends(get_featured_product_service),
) -> dict[str, Any]:
    """Remove a product from the featured lists."""
    if not service.delete(product_id):
        raise HTTPException(status_code=404, detail="Featured product not found")
    return {"printify_product_id": product_id, "deleted": True}
