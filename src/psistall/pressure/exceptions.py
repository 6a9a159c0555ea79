"""
Custom exceptions for psistall pressure parsing.
"""


class PressureParseError(ValueError):
    """Raised when a pressure file cannot be turned into a ResourcePressure."""

    def __init__(self, message: str, resource: str = None):
        """
        Initialize PressureParseError.

        Args:
            message: Error message describing what could not be parsed
            resource: Optional resource name for better error messages
        """
        self.resource = resource
        full_message = f"Pressure parse failed: {message}"
        if resource:
            full_message += f" (resource: {resource})"
        super().__init__(full_message)


class FieldConversionError(PressureParseError):
    """Raised when a numeric field of a pressure line cannot be converted."""

    def __init__(self, field: str, raw: str, resource: str = None):
        self.field = field
        self.raw = raw
        super().__init__(f"could not parse {field} {raw!r}", resource)


class UnexpectedRecordKindError(PressureParseError):
    """Raised when a pressure line is neither a 'some' nor a 'full' record."""

    def __init__(self, kind: str, resource: str = None):
        self.kind = kind
        super().__init__(f"unknown pressure measurement type {kind!r}", resource)


class NoPressureDataError(PressureParseError):
    """Raised when a pressure file holds no recognizable 'some' or 'full' line."""

    def __init__(self, resource: str):
        super().__init__(f"no parsable pressure data for {resource}", resource)
