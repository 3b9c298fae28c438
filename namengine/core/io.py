import json
from pathlib import Path
from typing import Any, List, Optional, Union

from namengine.core.types import ParameterDescriptor
from namengine.params.errors import SchemaError
from namengine.params.parametric import parse_parameter_descriptors


class ModelIO:
    @staticmethod
    def load_model(path: Union[str, Path]) -> dict:
        """Reads a .nam model file (JSON) into a dict."""
        with open(path, "r", encoding="utf-8") as f:
            model = json.load(f)
        if not isinstance(model, dict):
            raise SchemaError(f"Model file {path} must contain a JSON object.")
        return model

    @staticmethod
    def parametric_config(model: dict) -> Optional[Any]:
        """Returns the `config.parametric` block, or None for non-parametric models."""
        config = model.get("config")
        if not isinstance(config, dict):
            return None
        return config.get("parametric")

    @staticmethod
    def load_descriptors(path: Union[str, Path]) -> List[ParameterDescriptor]:
        """Loads a model file and parses its parametric block (empty if absent)."""
        block = ModelIO.parametric_config(ModelIO.load_model(path))
        if block is None:
            return []
        return parse_parameter_descriptors(block)
