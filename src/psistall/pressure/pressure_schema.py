#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pressure Schema Definitions

Pydantic BaseModel schemas for parsed Pressure Stall Information (PSI).

A ResourcePressure is an immutable snapshot of one /proc/pressure/<resource>
file at the moment it was read. Models are frozen, so two parses of the same
content compare equal and can be hashed.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Cumulative stall counters are unsigned 64-bit in the kernel
MAX_TOTAL_MICROSECONDS = 2**64 - 1


class ResourcePressureMeasurement(BaseModel):
    """One 'some' or 'full' line of a pressure file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    congested_percent_10s: float = Field(..., ge=0, description="Share of wall time stalled, averaged over 10 seconds")
    congested_percent_60s: float = Field(..., ge=0, description="Share of wall time stalled, averaged over 60 seconds")
    congested_percent_300s: float = Field(..., ge=0, description="Share of wall time stalled, averaged over 300 seconds")
    total_microseconds: int = Field(..., ge=0, le=MAX_TOTAL_MICROSECONDS, description="Cumulative stall time in microseconds")


class ResourcePressure(BaseModel):
    """
    Parsed representation of a resource pressure file.

    CPU pressure files carry no 'full' line on most kernels, so ``full`` being
    None is expected there. At least one of ``some`` and ``full`` is always set.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    resource: str = Field(..., min_length=1, description="Resource the file was read for (e.g., 'cpu', 'memory', 'io')")
    full: Optional[ResourcePressureMeasurement] = Field(None, description="Time all non-idle tasks were stalled")
    some: Optional[ResourcePressureMeasurement] = Field(None, description="Time at least one task was stalled")

    @model_validator(mode="after")
    def _require_measurement(self) -> "ResourcePressure":
        if self.full is None and self.some is None:
            raise ValueError(f"pressure for {self.resource} has neither 'some' nor 'full' data")
        return self
