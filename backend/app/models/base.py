"""Base schema with camelCase serialization for API payloads."""

from pydantic import BaseModel, ConfigDict

from app.utils.name_mapper import snake_to_camel


class BaseSchema(BaseModel):
    """Base schema that all API models must inherit from.

    Fields are declared in snake_case and serialized as camelCase. Both
    spellings are accepted on input, since request bodies arrive already
    converted to snake_case.
    """

    model_config = ConfigDict(
        alias_generator=snake_to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
