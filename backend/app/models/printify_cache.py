"""Printify cache request models."""

from typing import Any, Literal

from app.models.base import BaseSchema

PrintifyCacheType = Literal["product", "shop", "order"]


class PrintifyCacheWrite(BaseSchema):
    """Payload to store for a Printify object."""

    data: dict[str, Any] | list[Any]
