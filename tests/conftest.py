"""Pytest configuration and shared fixtures.

Provides common test fixtures and configuration for the typedbrep test suite.
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest
import structlog

from brepkernel.occt_ops import get_occt_info


def _configure_test_logging() -> None:
    structlog.configure(
        processors=[
            structlog.testing.LogCapture(),
        ],
        logger_factory=structlog.testing.CapturingLoggerFactory(),
        cache_logger_on_first_use=False,
    )


# Configure test logging
_configure_test_logging()


@pytest.fixture
def restore_test_logging() -> Generator[None, None, None]:
    """Put the capture configuration back after a test reconfigures structlog."""
    yield
    _configure_test_logging()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def skip_if_no_occt():
    """Skip test if the OCP binding is not available."""
    if not get_occt_info()["ocp_available"]:
        pytest.skip("No OCCT binding available (OCP required)")


@pytest.fixture
def unit_box(skip_if_no_occt):
    """Provide the unit box primitive."""
    from typedbrep import Shape

    return Shape.make_box()


@pytest.fixture
def square_wire(skip_if_no_occt) -> Callable:
    """Provide a factory for closed unit-square wires at a given height."""
    from typedbrep import Wire

    def make(z: float = 0.0, size: float = 1.0):
        return Wire.polygon([
            (0.0, 0.0, z),
            (size, 0.0, z),
            (size, size, z),
            (0.0, size, z),
        ])

    return make
