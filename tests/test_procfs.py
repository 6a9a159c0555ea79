"""Tests for reading pressure files from a procfs tree."""

import pytest

from psistall import FS, NoPressureDataError, resource_pressure
from psistall.pressure import DEFAULT_MOUNT_POINT, RESOURCES


def test_io_pressure(fs):
    iopressure = fs.resource_pressure("io")

    assert iopressure.some is not None
    assert iopressure.full is not None
    assert iopressure.full.total_microseconds == 5933015
    assert iopressure.some.total_microseconds == 6164237
    assert iopressure.full.congested_percent_10s == 0.01
    assert iopressure.some.congested_percent_300s == 10.3


def test_memory_pressure(fs):
    mempressure = fs.resource_pressure("memory")

    assert mempressure.full.total_microseconds == 1
    assert mempressure.some.total_microseconds == 10
    assert mempressure.full.congested_percent_300s == 0.01
    assert mempressure.some.congested_percent_300s == 0.02


def test_cpu_pressure(fs):
    cpupressure = fs.resource_pressure("cpu")

    assert cpupressure.full is None
    assert cpupressure.some.total_microseconds == 29151915
    assert cpupressure.some.congested_percent_300s == 5.0


def test_empty_file(fs):
    with pytest.raises(NoPressureDataError):
        fs.resource_pressure("empty")


def test_missing_resource_propagates_os_error(fs):
    with pytest.raises(FileNotFoundError):
        fs.resource_pressure("gpu")


def test_read_resource_file_returns_bytes(fs):
    data = fs.read_resource_file("cpu")

    assert isinstance(data, bytes)
    assert data.startswith(b"some ")


def test_path(fs, fixtures_root):
    assert fs.path("pressure", "io").startswith(fixtures_root)
    assert fs.path("pressure", "io").endswith("io")


def test_missing_mount_point(tmp_path):
    with pytest.raises(FileNotFoundError):
        FS(str(tmp_path / "nope"))


def test_mount_point_is_a_file(tmp_path):
    target = tmp_path / "proc"
    target.write_text("")

    with pytest.raises(NotADirectoryError):
        FS(str(target))


def test_module_level_helper(fixtures_root):
    assert resource_pressure("io", mount_point=fixtures_root) == FS(fixtures_root).resource_pressure("io")


def test_defaults():
    assert DEFAULT_MOUNT_POINT == "/proc"
    assert RESOURCES == ("cpu", "memory", "io")
