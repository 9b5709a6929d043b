"""Storefront database models."""

import uuid

from sqlalchemy import JSON, Boolean, Column, DateTime, Enum, Integer, String, UniqueConstraint

from app.db.base import Base, timestamp_columns, utcnow
from app.utils.model_enhancer import enhance_model, enhance_model_options

FEATURED_PRODUCT_OPTIONS = enhance_model_options({
    "table_name": "featured_products",
    "timestamps": True,
    "paranoid": True,
    "comment": "Stores products marked as featured or bestselling for storefront display",
})


class FeaturedProduct(timestamp_columns(FEATURED_PRODUCT_OPTIONS), Base):
    """Featured/bestselling status of a Printify product."""

    __tablename__ = FEATURED_PRODUCT_OPTIONS["table_name"]
    __table_args__ = {"comment": FEATURED_PRODUCT_OPTIONS["comment"]}
    __model_options__ = FEATURED_PRODUCT_OPTIONS

    printify_product_id = Column(String(64), primary_key=True, comment="Printify product ID")
    is_featured = Column(
        Boolean,
        nullable=False,
        default=False,
        comment="Indicates if the product should be featured on the homepage",
    )
    is_best_seller = Column(
        Boolean,
        nullable=False,
        default=False,
        comment="Indicates if the product is a best seller",
    )
    display_order = Column(
        Integer,
        nullable=False,
        default=999,
        comment="Display order within the featured/bestselling lists",
    )
    created_by = Column(
        Integer, nullable=True, comment="User ID who marked this product as featured/bestselling"
    )
    updated_by = Column(
        Integer, nullable=True, comment="User ID who last updated this product status"
    )


PRINTIFY_CACHE_TYPES = ("product", "shop", "order")

PRINTIFY_CACHE_OPTIONS = enhance_model_options({
    "table_name": "printify_cache",
    "timestamps": True,
})


class PrintifyCache(timestamp_columns(PRINTIFY_CACHE_OPTIONS), Base):
    """Mirror of Printify API responses keyed by type and external ID."""

    __tablename__ = PRINTIFY_CACHE_OPTIONS["table_name"]
    __table_args__ = (
        UniqueConstraint("type", "external_id", name="uq_printify_cache_type_external_id"),
    )
    __model_options__ = PRINTIFY_CACHE_OPTIONS

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    type = Column(Enum(*PRINTIFY_CACHE_TYPES, name="printify_cache_type"), nullable=False)
    external_id = Column(String(64), nullable=False)
    data = Column(JSON, nullable=False)
    last_updated = Column(DateTime(timezone=True), default=utcnow, nullable=False)


for _model in (FeaturedProduct, PrintifyCache):
    enhance_model(_model)
