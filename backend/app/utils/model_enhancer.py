"""Common enhancements applied to every database model.

Keeps column naming consistent (snake_case, including timestamps) and gives
each model class the camelCase conversion helpers.
"""

import logging
from typing import Any

from app.utils.model_transformer import attach_conversion_helpers

logger = logging.getLogger(__name__)


def enhance_model_options(model_options: dict[str, Any]) -> dict[str, Any]:
    """Apply the standard configuration to a model's options.

    Args:
        model_options: Options for the model definition (``timestamps``,
            ``paranoid``, ``table_name``, ...)

    Returns:
        A new options dict with ``underscored`` forced on and snake_case
        timestamp column names, unless timestamps are explicitly disabled
    """
    options = {**model_options, "underscored": True}

    if model_options.get("timestamps") is not False:
        options["created_at_column"] = "created_at"
        options["updated_at_column"] = "updated_at"
        if model_options.get("paranoid"):
            options["deleted_at_column"] = "deleted_at"

    return options


def standardize_attributes(attributes: dict[str, Any]) -> dict[str, Any]:
    """Hook for attribute standardization.

    Attribute names are expected to already match the snake_case columns, so
    nothing is changed.
    """
    return attributes


def enhance_model(model: type) -> bool:
    """Apply all enhancements to a model class.

    Failures are logged rather than raised so a bad model does not stop startup.
    """
    name = getattr(model, "__name__", repr(model))
    try:
        attach_conversion_helpers(model)
    except Exception as e:
        logger.error(f"Error enhancing model {name}: {e}", exc_info=True)
        return False

    logger.info(f"Enhanced model: {name} with standard transformations")
    return True
