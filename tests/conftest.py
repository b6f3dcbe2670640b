"""
Shared fixtures for the trapprofile test suite.
"""
import pytest

from trapprofile import KinematicLimits, ProfileGenerator, RecordingTelemetry


@pytest.fixture
def limits() -> KinematicLimits:
    return KinematicLimits(
        max_velocity=10.0,
        max_accel=5.0,
        max_decel=-5.0,
        sample_interval=0.01
    )


@pytest.fixture
def telemetry() -> RecordingTelemetry:
    return RecordingTelemetry()


@pytest.fixture
def generator(limits, telemetry) -> ProfileGenerator:
    return ProfileGenerator(limits, telemetry=telemetry)
