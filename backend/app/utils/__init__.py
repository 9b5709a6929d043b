# Naming-convention utilities shared by the API and persistence layers

from .model_enhancer import enhance_model, enhance_model_options, standardize_attributes
from .model_transformer import (
    Serializable,
    TransformResult,
    object_camel_to_snake,
    object_snake_to_camel,
    to_camel_case,
    to_snake_case,
    transform_request_data,
    transform_response_data,
)
from .name_mapper import (
    FieldMappings,
    NameMapper,
    USER_FIELD_MAPPINGS,
    camel_to_snake,
    default_name_mapper,
    map_field,
    snake_to_camel,
)

__all__ = [
    "enhance_model",
    "enhance_model_options",
    "standardize_attributes",
    "Serializable",
    "TransformResult",
    "object_camel_to_snake",
    "object_snake_to_camel",
    "to_camel_case",
    "to_snake_case",
    "transform_request_data",
    "transform_response_data",
    "FieldMappings",
    "NameMapper",
    "USER_FIELD_MAPPINGS",
    "camel_to_snake",
    "default_name_mapper",
    "map_field",
    "snake_to_camel",
]
