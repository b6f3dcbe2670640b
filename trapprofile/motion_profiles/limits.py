from __future__ import annotations
from typing import Any, Mapping
from dataclasses import dataclass
import math
import numbers

from trapprofile.core.exceptions import ConfigurationError, InvalidLimitsError


# a 1 MHz tick is far beyond any control loop; shorter ticks stall `t += clk`
MIN_SAMPLE_INTERVAL = 1e-6


@dataclass(frozen=True)
class KinematicLimits:
    """
    Kinematic limits of a single linear axis.

    Attributes
    ----------
    max_velocity:
        Cruise velocity the axis must not exceed (> 0).
    max_accel:
        Acceleration used to speed up (> 0).
    max_decel:
        Acceleration used to slow down. This value is negative-signed (< 0).
    sample_interval:
        Period of the control loop in seconds (> 0). The motion profile is
        sampled at this fixed tick.

    Units can be chosen freely, but must be consistent (e.g. mm, mm/s and
    mm/s² when time is expressed in seconds).
    """
    max_velocity: float
    max_accel: float
    max_decel: float
    sample_interval: float

    def __post_init__(self):
        for name in ("max_velocity", "max_accel", "max_decel", "sample_interval"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidLimitsError(
                    f"`{name}` must be a number, got {value!r}."
                )
            value = float(value)
            if not math.isfinite(value):
                raise InvalidLimitsError(f"`{name}` must be finite, got {value}.")
            object.__setattr__(self, name, value)
        if self.max_velocity <= 0.0:
            raise InvalidLimitsError(
                f"`max_velocity` must be positive, got {self.max_velocity}."
            )
        if self.max_accel <= 0.0:
            raise InvalidLimitsError(
                f"`max_accel` must be positive, got {self.max_accel}."
            )
        if self.max_decel >= 0.0:
            raise InvalidLimitsError(
                f"`max_decel` must be negative, got {self.max_decel}."
            )
        if self.sample_interval <= 0.0:
            raise InvalidLimitsError(
                f"`sample_interval` must be positive, got {self.sample_interval}."
            )
        if self.sample_interval < MIN_SAMPLE_INTERVAL:
            raise InvalidLimitsError(
                f"`sample_interval` must be at least {MIN_SAMPLE_INTERVAL} s, "
                f"got {self.sample_interval}."
            )

    @property
    def loop_frequency(self) -> float:
        """Control loop frequency in Hz."""
        return 1.0 / self.sample_interval

    @property
    def min_trapezoidal_distance(self) -> float:
        """
        Shortest travel distance for which the axis reaches `max_velocity`,
        i.e. the shortest distance that gives a trapezoidal profile.
        """
        return self.max_velocity ** 2 / self.max_accel

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KinematicLimits:
        """
        Creates a `KinematicLimits` object from a mapping, e.g. the contents of
        a TOML configuration file.

        The limits may be given at the top level or inside a `limits` table.
        The sample interval is read from key `sample_interval` (seconds) or,
        if absent, derived from key `loop_frequency` (Hz).
        """
        if "limits" in data and isinstance(data["limits"], Mapping):
            data = data["limits"]

        def _get(key: str) -> float:
            try:
                value = data[key]
            except KeyError:
                raise ConfigurationError(
                    f"Missing key `{key}` in kinematic limit configuration."
                ) from None
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ConfigurationError(
                    f"Key `{key}` must be a number, got {value!r}."
                )
            return float(value)

        if "sample_interval" in data:
            sample_interval = _get("sample_interval")
        elif "loop_frequency" in data:
            loop_frequency = _get("loop_frequency")
            if loop_frequency <= 0.0:
                raise InvalidLimitsError(
                    f"`loop_frequency` must be positive, got {loop_frequency}."
                )
            sample_interval = 1.0 / loop_frequency
        else:
            raise ConfigurationError(
                "Either `sample_interval` or `loop_frequency` must be "
                "configured."
            )
        return cls(
            max_velocity=_get("max_velocity"),
            max_accel=_get("max_accel"),
            max_decel=_get("max_decel"),
            sample_interval=sample_interval
        )
