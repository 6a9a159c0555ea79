"""
psistall - Typed Pressure Stall Information for Linux.

Submodules:
    - psistall.pressure: PSI file parsing and procfs access
"""

# Import submodules for namespace access (psistall.pressure.FS(...))
from . import pressure

# Top-level convenience exports (most common operations)
from .pressure import (
    resource_pressure,
    parse_resource_pressure,
    FS,
    ResourcePressure,
    ResourcePressureMeasurement,
    PressureParseError,
    FieldConversionError,
    UnexpectedRecordKindError,
    NoPressureDataError,
)

__version__ = "0.1.0"

__all__ = [
    # Submodules
    "pressure",

    # Primary API
    "resource_pressure",
    "parse_resource_pressure",
    "FS",
    "ResourcePressure",
    "ResourcePressureMeasurement",

    # Exceptions
    "PressureParseError",
    "FieldConversionError",
    "UnexpectedRecordKindError",
    "NoPressureDataError",
]
