"""
Parametric config parsing: turns the `config.parametric` block of a .nam model
into an ordered list of ParameterDescriptor records.

Expected shape:
    {
        "ParamName": {
            "type": "boolean" | "continuous",   (case-insensitive)
            "default_value": ...,
            "minval": ... (continuous, optional),
            "maxval": ... (continuous, optional)
        },
        ...
    }

Keys are sorted lexicographically so descriptor order matches the trainer.
Out-of-range continuous defaults are clamped; inconsistent bounds are rejected.
"""
import logging
import math
import numbers
import os
from typing import Any, Dict, List, Optional

import numpy as np

from namengine.core.params import as_float, clamp_if_bounds
from namengine.core.types import ParameterDescriptor, ParameterType
from namengine.params.errors import SchemaError

logger = logging.getLogger("nam-parametric")

DEV = os.environ.get("ENV", "development").lower() in ("development", "dev", "test")


def _is_number(value: Any) -> bool:
    # JSON booleans are not numbers
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _parse_bound(name: str, definition: dict, field: str) -> Optional[float]:
    """Read an optional numeric bound; absent or null means unset."""
    value = definition.get(field)
    if value is None:
        return None
    if not _is_number(value):
        raise SchemaError(
            f"Continuous parameter `{name}` has non-numeric `{field}`.", parameter=name
        )
    return as_float(value)


def _parse_boolean(name: str, default: Any) -> ParameterDescriptor:
    if isinstance(default, bool):
        value = 1.0 if default else 0.0
    elif _is_number(default):
        value = 0.0 if default == 0 else 1.0
    else:
        raise SchemaError(
            f"Boolean parameter `{name}` must have a numeric or boolean `default_value`.",
            parameter=name,
        )
    return ParameterDescriptor(name=name, type=ParameterType.BOOLEAN, default_value=value)


def _parse_continuous(name: str, definition: dict) -> ParameterDescriptor:
    default = definition["default_value"]
    if not _is_number(default):
        raise SchemaError(
            f"Continuous parameter `{name}` must have numeric `default_value`.", parameter=name
        )
    min_value = _parse_bound(name, definition, "minval")
    max_value = _parse_bound(name, definition, "maxval")

    if min_value is not None and max_value is not None and min_value > max_value:
        raise SchemaError(
            f"Continuous parameter `{name}` has `minval` > `maxval` ({min_value} > {max_value}).",
            parameter=name,
        )

    default_value = as_float(default)
    clamped = clamp_if_bounds(default_value, min_value, max_value)
    if clamped != default_value and not math.isnan(default_value):
        logger.log(
            logging.WARNING if DEV else logging.DEBUG,
            "[Parametric] Default for `%s` clamped from %s to %s (minval=%s, maxval=%s)",
            name,
            default_value,
            clamped,
            min_value,
            max_value,
        )

    return ParameterDescriptor(
        name=name,
        type=ParameterType.CONTINUOUS,
        default_value=clamped,
        min_value=min_value,
        max_value=max_value,
    )


def _parse_definition(name: str, definition: Any) -> ParameterDescriptor:
    if not isinstance(definition, dict):
        raise SchemaError(
            f"Parameter definition for `{name}` must be a JSON object.", parameter=name
        )
    if "type" not in definition:
        raise SchemaError(f"Parameter `{name}` is missing field `type`.", parameter=name)
    if not isinstance(definition["type"], str):
        raise SchemaError(
            f"Parameter `{name}` has non-string field `type` (got {definition['type']!r}).",
            parameter=name,
        )
    if "default_value" not in definition:
        raise SchemaError(
            f"Parameter `{name}` is missing field `default_value`.", parameter=name
        )

    raw_type = definition["type"]
    param_type = raw_type.lower()
    if param_type == ParameterType.BOOLEAN.value:
        return _parse_boolean(name, definition["default_value"])
    if param_type == ParameterType.CONTINUOUS.value:
        return _parse_continuous(name, definition)
    raise SchemaError(
        f"Parameter `{name}`: unrecognized parameter type `{raw_type}`.", parameter=name
    )


def parse_parameter_descriptors(parametric_config: Any) -> List[ParameterDescriptor]:
    """
    Parse and validate a parametric config object into descriptors.

    Args:
        parametric_config: Already-decoded JSON value of `config.parametric`.

    Returns:
        Descriptors sorted by name. An empty object yields an empty list.

    Raises:
        SchemaError: on the first schema violation (no partial result).
    """
    if not isinstance(parametric_config, dict):
        raise SchemaError(
            "Expected `config.parametric` to be a JSON object, "
            f"but it is not an object (got {type(parametric_config).__name__})."
        )

    descriptors = [
        _parse_definition(name, parametric_config[name])
        for name in sorted(parametric_config)
    ]
    logger.debug("[Parametric] Parsed %d parameter descriptor(s)", len(descriptors))
    return descriptors


def default_values(descriptors: List[ParameterDescriptor]) -> np.ndarray:
    """Default values as a float64 vector, in descriptor order."""
    return np.array([d.default_value for d in descriptors], dtype=np.float64)


def to_schema_entry(descriptor: ParameterDescriptor) -> Dict[str, Any]:
    """Schema entry for UI/JSON consumers: type, default, min, max."""
    return {
        "type": descriptor.type.value,
        "default": descriptor.default_value,
        "min": descriptor.min_value,
        "max": descriptor.max_value,
    }


def descriptors_to_schema(descriptors: List[ParameterDescriptor]) -> Dict[str, Dict[str, Any]]:
    return {d.name: to_schema_entry(d) for d in descriptors}
