from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ParameterType(str, Enum):
    BOOLEAN = "boolean"
    CONTINUOUS = "continuous"


@dataclass(frozen=True)
class ParameterDescriptor:
    name: str
    type: ParameterType
    default_value: float
    min_value: Optional[float] = None  # continuous only
    max_value: Optional[float] = None  # continuous only

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "type": self.type.value,
            "default_value": self.default_value,
            "min_value": self.min_value,
            "max_value": self.max_value,
        }
