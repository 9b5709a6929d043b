"""Transform model data between database and application naming conventions.

Persistence records use snake_case keys; the application and API clients use
camelCase. The helpers here rewrite keys recursively and provide the
fail-open conversions used by the HTTP integration points.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

from app.utils.name_mapper import camel_to_snake, snake_to_camel


@runtime_checkable
class Serializable(Protocol):
    """A record that can describe itself as a plain dict."""

    def to_plain_object(self) -> dict[str, Any]: ...


def _convert_keys(obj: Any, convert: Callable[[str], str]) -> Any:
    # Lists pass through here; only lists nested in a mapping are mapped.
    if obj is None or not isinstance(obj, Mapping):
        return obj

    converted: dict[str, Any] = {}
    for key, value in obj.items():
        if isinstance(value, Mapping):
            value = _convert_keys(value, convert)
        elif isinstance(value, (list, tuple)):
            value = [_convert_keys(item, convert) for item in value]
        # Non-string keys (e.g. integer ids) are kept as-is
        converted[convert(key) if isinstance(key, str) else key] = value
    return converted


def object_snake_to_camel(obj: Any) -> Any:
    """Convert mapping keys from snake_case to camelCase, recursively."""
    return _convert_keys(obj, snake_to_camel)


def object_camel_to_snake(obj: Any) -> Any:
    """Convert mapping keys from camelCase to snake_case, recursively."""
    return _convert_keys(obj, camel_to_snake)


def to_camel_case(model: Serializable | Mapping[str, Any] | object | None) -> dict[str, Any] | None:
    """Project a model instance, mapping or plain object to camelCase keys."""
    if model is None:
        return None

    if isinstance(model, Serializable):
        obj = model.to_plain_object()
    elif isinstance(model, Mapping):
        obj = dict(model)
    else:
        obj = dict(vars(model))
    return object_snake_to_camel(obj)


def to_snake_case(application_obj: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Convert an application object to snake_case for database operations."""
    if application_obj is None:
        return None
    return object_camel_to_snake(application_obj)


@dataclass(frozen=True)
class TransformResult:
    """Outcome of a fail-open conversion.

    ``value`` is the converted payload, or the untouched original when the
    conversion raised; ``error`` then holds the exception.
    """

    value: Any
    original: Any
    error: Exception | None = None

    @property
    def fell_back(self) -> bool:
        return self.error is not None


def transform_response_data(data: Any) -> TransformResult:
    """Convert outbound data to camelCase, falling back to the original."""
    try:
        if not data:
            converted = data
        elif isinstance(data, list):
            converted = [object_snake_to_camel(item) for item in data]
        else:
            converted = object_snake_to_camel(data)
    except Exception as e:
        return TransformResult(value=data, original=data, error=e)
    return TransformResult(value=converted, original=data)


def transform_request_data(body: Any) -> TransformResult:
    """Convert an inbound payload to snake_case, falling back to the original."""
    try:
        converted = object_camel_to_snake(body) if isinstance(body, Mapping) else body
    except Exception as e:
        return TransformResult(value=body, original=body, error=e)
    return TransformResult(value=converted, original=body)


class _CamelCaseAccessor:
    """Descriptor exposing ``to_camel_case`` on both a model class and its instances.

    ``Model.to_camel_case(instance)`` and ``instance.to_camel_case()`` are
    equivalent.
    """

    def __get__(self, instance: Any, owner: type | None = None) -> Callable[..., Any]:
        if instance is None:
            return to_camel_case
        return lambda: to_camel_case(instance)


def attach_conversion_helpers(model_cls: type) -> None:
    """Add ``to_camel_case`` helpers to a model class."""
    setattr(model_cls, "to_camel_case", _CamelCaseAccessor())
