"""Root pytest configuration for all tests.

Shared fixtures for frequencies used across the radio and infrastructure
test packages. Tests import ``domain.*`` and ``infrastructure.*`` directly;
pythonpath is configured in pyproject.toml.
"""

import pytest

from domain.radio.value_objects import RadioFrequency


@pytest.fixture
def freq_25khz() -> RadioFrequency:
    """Guard frequency 121.500 (25 kHz channel)."""
    return RadioFrequency.new(121, 500)


@pytest.fixture
def freq_8_33khz() -> RadioFrequency:
    """120.905 (8.33 kHz channel)."""
    return RadioFrequency.new(120, 905)
