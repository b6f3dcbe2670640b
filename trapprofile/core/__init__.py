"""
Core components shared by the profile generator: exceptions and telemetry
sinks.
"""

from .exceptions import (
    ConfigurationError,
    InvalidLimitsError,
    DistanceError,
    OutOfRangeQueryError,
    EmptyProfileError
)
from .telemetry import (
    TelemetrySink,
    NullTelemetry,
    LoggerTelemetry,
    RecordingTelemetry
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
    "RecordingTelemetry"
]
