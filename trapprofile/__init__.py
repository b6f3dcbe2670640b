"""
Trapezoidal motion profile generation for a single linear axis.
"""

from .core import (
    ConfigurationError,
    InvalidLimitsError,
    DistanceError,
    OutOfRangeQueryError,
    EmptyProfileError,
    TelemetrySink,
    NullTelemetry,
    LoggerTelemetry,
    RecordingTelemetry
)
from .motion_profiles import (
    KinematicLimits,
    Phase,
    ProfileSample,
    ProfileSummary,
    Profile,
    ProfileGenerator
)


__all__ = [
    "ConfigurationError",
    "InvalidLimitsError",
    "DistanceError",
    "OutOfRangeQueryError",
    "EmptyProfileError",
    "TelemetrySink",
    "NullTelemetry",
    "LoggerTelemetry",
    "RecordingTelemetry",
    "KinematicLimits",
    "Phase",
    "ProfileSample",
    "ProfileSummary",
    "Profile",
    "ProfileGenerator"
]
