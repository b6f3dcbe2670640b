"""
Telemetry sinks for publishing named values while a motion profile is being
generated.

A sink is write-only: the profile generator pushes key/value pairs to it and
never reads them back. Three implementations are available:
- `NullTelemetry` discards everything.
- `LoggerTelemetry` writes each value as a log record.
- `RecordingTelemetry` keeps the last value published under each key, which
  is convenient for HMI screens and for tests.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
import logging


class TelemetrySink(ABC):

    @abstractmethod
    def put_number(self, key: str, value: float) -> None:
        ...

    @abstractmethod
    def put_boolean(self, key: str, value: bool) -> None:
        ...


class NullTelemetry(TelemetrySink):

    def put_number(self, key: str, value: float) -> None:
        pass

    def put_boolean(self, key: str, value: bool) -> None:
        pass


class LoggerTelemetry(TelemetrySink):
    """
    Writes published values to a logger.

    Parameters
    ----------
    logger:
        Logger to write to. If `None`, the module logger is used.
    level:
        Logging level of the records (default `logging.DEBUG`).
    decimal_precision:
        Number of decimals used to format numeric values.
    """
    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.DEBUG,
        decimal_precision: int = 4
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.level = level
        self.decimal_precision = decimal_precision

    def put_number(self, key: str, value: float) -> None:
        self.logger.log(self.level, f"{key}: {value:.{self.decimal_precision}f}")

    def put_boolean(self, key: str, value: bool) -> None:
        self.logger.log(self.level, f"{key}: {value}")


class RecordingTelemetry(TelemetrySink):
    """
    Keeps the most recent value published under each key in `self.values`.
    """
    def __init__(self) -> None:
        self.values: dict[str, float | bool] = {}

    def put_number(self, key: str, value: float) -> None:
        self.values[key] = float(value)

    def put_boolean(self, key: str, value: bool) -> None:
        self.values[key] = bool(value)

    def __getitem__(self, key: str) -> float | bool:
        return self.values[key]

    def __contains__(self, key: str) -> bool:
        return key in self.values

    def clear(self) -> None:
        self.values.clear()
