#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Parser for Pressure Stall Information (PSI) files.

The kernel exposes one file per resource under /proc/pressure (cpu, memory,
io). Each file holds up to two lines, one for "some" pressure and one for
"full" pressure:

    some avg10=0.06 avg60=0.21 avg300=0.99 total=8537362
    full avg10=0.00 avg60=0.13 avg300=0.96 total=8183134

The avg* values are the percentage of wall time stalled over the last 10, 60
and 300 seconds. total is the cumulative stall time in microseconds.

See Documentation/accounting/psi.rst in the kernel tree for the format.
"""

import logging
import math
import re
from typing import Dict, Union

from .exceptions import FieldConversionError, NoPressureDataError, UnexpectedRecordKindError
from .pressure_schema import MAX_TOTAL_MICROSECONDS, ResourcePressure, ResourcePressureMeasurement

# Module logger
logger = logging.getLogger(__name__)

# Values are captured as raw tokens and checked during conversion, so a
# malformed number is reported instead of the whole line being skipped.
PRESSURE_LINE_RE = re.compile(
    r"^[ \t]*(?P<kind>some|full)"
    r" avg10=(?P<avg10>\S+)"
    r" avg60=(?P<avg60>\S+)"
    r" avg300=(?P<avg300>\S+)"
    r" total=(?P<total>\S+)",
    re.MULTILINE,
)

# Unsigned decimal, '.' radix point, no exponent
_DECIMAL_RE = re.compile(r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_UNSIGNED_RE = re.compile(r"[0-9]+")


def _parse_total(raw: str, resource: str) -> int:
    """Convert a total= token to an unsigned 64-bit integer."""
    if not _UNSIGNED_RE.fullmatch(raw):
        raise FieldConversionError("total", raw, resource)
    value = int(raw)
    if value > MAX_TOTAL_MICROSECONDS:
        raise FieldConversionError("total", raw, resource)
    return value


def _parse_average(field: str, raw: str, resource: str) -> float:
    """Convert an avgN= token to a float percentage."""
    if not _DECIMAL_RE.fullmatch(raw):
        raise FieldConversionError(field, raw, resource)
    value = float(raw)
    if not math.isfinite(value):
        raise FieldConversionError(field, raw, resource)
    return value


def _parse_measurement(elements: Dict[str, str], resource: str) -> ResourcePressureMeasurement:
    """
    Build a measurement from the named groups of one matched line.

    Fields are converted in file order of significance: total first, then the
    three averages. The first failing field aborts the parse.
    """
    total = _parse_total(elements["total"], resource)
    avg10 = _parse_average("avg10", elements["avg10"], resource)
    avg60 = _parse_average("avg60", elements["avg60"], resource)
    avg300 = _parse_average("avg300", elements["avg300"], resource)

    return ResourcePressureMeasurement(
        congested_percent_10s=avg10,
        congested_percent_60s=avg60,
        congested_percent_300s=avg300,
        total_microseconds=total,
    )


def parse_resource_pressure(resource: str, content: Union[bytes, str]) -> ResourcePressure:
    """
    Parse the content of a pressure file into a ResourcePressure.

    Lines that do not look like a "some" or "full" record are ignored. If the
    same record kind appears more than once, the last line wins.

    Args:
        resource: Resource the content was read for (e.g., "cpu", "memory", "io").
            Only used to tag the result and error messages.
        content: Raw file content, as bytes or text

    Returns:
        ResourcePressure: Frozen model with ``some`` and/or ``full`` populated

    Raises:
        FieldConversionError: A recognized line holds a value that is not a valid number
        UnexpectedRecordKindError: A recognized line has a record kind other than some/full
        NoPressureDataError: No recognizable pressure line was found

    Example:
        >>> pressure = parse_resource_pressure("cpu", b"some avg10=0.10 avg60=2.00 avg300=5.00 total=29151915\\n")
        >>> pressure.full is None
        True
        >>> pressure.some.total_microseconds
        29151915
    """
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")

    slots: Dict[str, ResourcePressureMeasurement] = {}

    for match in PRESSURE_LINE_RE.finditer(content):
        elements = match.groupdict()
        measurement = _parse_measurement(elements, resource)

        kind = elements["kind"]
        if kind not in ("some", "full"):
            raise UnexpectedRecordKindError(kind, resource)
        if kind in slots:
            logger.debug(f"Duplicate '{kind}' line in {resource} pressure, keeping the last one")
        slots[kind] = measurement

    if not slots:
        raise NoPressureDataError(resource)

    logger.debug(f"Parsed {resource} pressure: {sorted(slots)}")
    return ResourcePressure(resource=resource, some=slots.get("some"), full=slots.get("full"))
