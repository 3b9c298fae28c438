"""
Parametric model controls: descriptor parsing and schema views.
Single entry point is parse_parameter_descriptors(config["parametric"]).
"""
from namengine.params.errors import SchemaError
from namengine.params.parametric import (
    parse_parameter_descriptors,
    default_values,
    descriptors_to_schema,
)

__all__ = ["SchemaError", "parse_parameter_descriptors", "default_values", "descriptors_to_schema"]
