#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Filesystem access for Pressure Stall Information.

PSI is available on Linux 4.20+ kernels built with CONFIG_PSI. Each resource
is a single file under <mount_point>/pressure/. The mount point defaults to
/proc but can point at any directory laid out the same way, which is how
container sidecars and test fixtures read pressure data.
"""

import logging
import os
from typing import Optional

from .parser import parse_resource_pressure
from .pressure_schema import ResourcePressure

# Module logger
logger = logging.getLogger(__name__)

DEFAULT_MOUNT_POINT = "/proc"

# Resources the kernel currently exposes. Informational only, other names
# are passed through to the filesystem untouched.
RESOURCES = ("cpu", "memory", "io")


class FS:
    """
    A procfs mount point to read pressure files from.

    Raises:
        FileNotFoundError: If the mount point does not exist
        NotADirectoryError: If the mount point is not a directory
    """

    def __init__(self, mount_point: str = DEFAULT_MOUNT_POINT):
        if not os.path.exists(mount_point):
            raise FileNotFoundError(f"procfs mount point {mount_point} does not exist")
        if not os.path.isdir(mount_point):
            raise NotADirectoryError(f"procfs mount point {mount_point} is not a directory")
        self.mount_point = mount_point

    def __repr__(self) -> str:
        return f"FS({self.mount_point!r})"

    def path(self, *parts: str) -> str:
        """Return a path below the mount point."""
        return os.path.join(self.mount_point, *parts)

    def read_resource_file(self, resource: str) -> bytes:
        """
        Read the raw pressure file for a resource.

        OSError subclasses (missing file, permission denied) propagate unchanged.
        """
        path = self.path("pressure", resource)
        logger.debug(f"Reading pressure file {path}")
        with open(path, "rb") as f:
            return f.read()

    def resource_pressure(self, resource: str) -> ResourcePressure:
        """
        Load the pressure data for a given resource ("io", "memory" or "cpu").

        Returns:
            ResourcePressure: Parsed, validated pressure snapshot

        Raises:
            OSError: If the pressure file cannot be read
            PressureParseError: If the file content cannot be parsed
        """
        return parse_resource_pressure(resource, self.read_resource_file(resource))


def resource_pressure(resource: str, mount_point: Optional[str] = None) -> ResourcePressure:
    """
    Read and parse /proc/pressure/<resource>.

    Args:
        resource: Resource name ("cpu", "memory", "io")
        mount_point: procfs mount point, defaults to /proc

    Returns:
        ResourcePressure: A validated Pydantic BaseModel

    Example:
        >>> mem = resource_pressure("memory")
        >>> print(f"Memory stalled {mem.some.congested_percent_10s}% over 10s")
    """
    return FS(mount_point or DEFAULT_MOUNT_POINT).resource_pressure(resource)
