"""Featured product request models."""

from pydantic import Field

from app.models.base import BaseSchema


class FeaturedProductUpdate(BaseSchema):
    """Request to feature a product or change its status."""

    is_featured: bool | None = None
    is_best_seller: bool | None = None
    display_order: int | None = Field(default=None, ge=0)
    user_id: int | None = None
