import logging

import pytest

from trapprofile import (
    DistanceError,
    LoggerTelemetry,
    NullTelemetry,
    ProfileGenerator,
    RecordingTelemetry,
)


EXPECTED_KEYS = {
    "Calculated Desired Distance",
    "Calculated Acceleration Time",
    "Calculated Acceleration + Cruise Time",
    "Calculated Deceleration Time",
    "Calculated Expected End Time",
    "Is triangular",
    "Calculated Peak Velocity",
    "Calculated Actual End Time",
}


def test_generate_publishes_summary(generator, telemetry):
    summary = generator.generate(100.0)

    assert set(telemetry.values) == EXPECTED_KEYS
    assert telemetry["Calculated Desired Distance"] == 100.0
    assert telemetry["Calculated Acceleration Time"] == pytest.approx(2.0)
    assert telemetry["Calculated Expected End Time"] == pytest.approx(12.0)
    assert telemetry["Is triangular"] is False
    assert telemetry["Calculated Actual End Time"] == summary.actual_end_time


def test_telemetry_follows_latest_profile(generator, telemetry):
    generator.generate(100.0)
    generator.generate(5.0)

    assert telemetry["Is triangular"] is True
    assert telemetry["Calculated Peak Velocity"] == pytest.approx(4.5)


def test_rejected_distance_publishes_nothing(generator, telemetry):
    with pytest.raises(DistanceError):
        generator.generate(-3.0)
    assert "Calculated Desired Distance" not in telemetry


def test_actual_end_time_key_spelling(generator, telemetry):
    generator.generate(5.0)

    assert "Calculated Actual End Time" in telemetry
    assert "Calculated Acutal End Time" not in telemetry


def test_recording_telemetry_clear():
    sink = RecordingTelemetry()
    sink.put_number("x", 1)
    sink.put_boolean("flag", 0)

    assert sink["x"] == 1.0
    assert sink["flag"] is False
    sink.clear()
    assert sink.values == {}


def test_logger_telemetry_writes_records(limits, caplog):
    logger = logging.getLogger("test.telemetry")
    gen = ProfileGenerator(limits, telemetry=LoggerTelemetry(logger, level=logging.INFO))

    with caplog.at_level(logging.INFO, logger="test.telemetry"):
        gen.generate(100.0)

    assert "Is triangular: False" in caplog.text
    assert "Calculated Expected End Time: 12.0000" in caplog.text


def test_null_telemetry_is_default(limits):
    gen = ProfileGenerator(limits)
    assert isinstance(gen.telemetry, NullTelemetry)
