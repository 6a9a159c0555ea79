"""
Pressure Stall Information parsing.

Reads /proc/pressure/<resource> files and returns validated Pydantic models.
"""

from .parser import parse_resource_pressure
from .procfs import FS, DEFAULT_MOUNT_POINT, RESOURCES, resource_pressure
from .pressure_schema import ResourcePressure, ResourcePressureMeasurement
from .exceptions import (
    PressureParseError,
    FieldConversionError,
    UnexpectedRecordKindError,
    NoPressureDataError,
)

__all__ = [
    # Primary API
    "resource_pressure",
    "parse_resource_pressure",
    "FS",

    # Schemas
    "ResourcePressure",
    "ResourcePressureMeasurement",

    # Configuration
    "DEFAULT_MOUNT_POINT",
    "RESOURCES",

    # Exceptions
    "PressureParseError",
    "FieldConversionError",
    "UnexpectedRecordKindError",
    "NoPressureDataError",
]
