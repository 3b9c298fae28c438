from typing import Optional


class SchemaError(ValueError):
    """Parametric config does not match the expected shape."""

    def __init__(self, message: str, parameter: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.parameter = parameter
