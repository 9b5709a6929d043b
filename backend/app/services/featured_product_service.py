"""Featured and bestselling product management."""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.base import utcnow
from app.db.models import FeaturedProduct

logger = logging.getLogger(__name__)

# Columns a caller may change; the key and audit columns are managed here
EDITABLE_FIELDS = ("is_featured", "is_best_seller", "display_order")


class FeaturedProductService:
    """Service for the storefront's featured/bestselling product list."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def list(
        self, featured_only: bool = False, best_sellers_only: bool = False
    ) -> list[FeaturedProduct]:
        """List products that are not soft-deleted, in display order."""
        query = select(FeaturedProduct).where(FeaturedProduct.deleted_at.is_(None))
        if featured_only:
            query = query.where(FeaturedProduct.is_featured.is_(True))
        if best_sellers_only:
            query = query.where(FeaturedProduct.is_best_seller.is_(True))
        query = query.order_by(
            FeaturedProduct.display_order, FeaturedProduct.printify_product_id
        )
        return list(self.db.scalars(query))

    def get(self, product_id: str, include_deleted: bool = False) -> FeaturedProduct | None:
        """Get a product's status by Printify product ID."""
        product = self.db.get(FeaturedProduct, product_id)
        if product is None or (product.deleted_at is not None and not include_deleted):
            return None
        return product

    def upsert(
        self, product_id: str, changes: dict[str, Any], user_id: int | None = None
    ) -> FeaturedProduct:
        """Create or update a product's status.

        A soft-deleted row is restored.
        """
        product = self.get(product_id, include_deleted=True)
        if product is None:
            product = FeaturedProduct(printify_product_id=product_id, created_by=user_id)
            self.db.add(product)
            logger.info(f"Featuring product {product_id}")
        elif product.deleted_at is not None:
            product.deleted_at = None
            logger.info(f"Restoring featured product {product_id}")

        for field in EDITABLE_FIELDS:
            if changes.get(field) is not None:
                setattr(product, field, changes[field])
        if user_id is not None:
            product.updated_by = user_id

        self.db.commit()
        self.db.refresh(product)
        return product

    def delete(self, product_id: str) -> bool:
        """Soft-delete a product's status."""
        product = self.get(product_id)
        if product is None:
            return False

        product.deleted_at = utcnow()
        self.db.commit()
        logger.info(f"Removed featured product {product_id}")
        return True
