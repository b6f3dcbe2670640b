"""
Trapezoidal motion profile generator for a single linear axis.

The generator precomputes a discretized velocity profile at the fixed tick of
the control loop that consumes it. The control loop then queries the profile
at each tick with the time elapsed since the start of the motion.

Two profile shapes can be generated:
- a trapezoidal profile (acceleration, cruise at `max_velocity`, deceleration)
  when the travel distance is long enough to reach `max_velocity`;
- a triangular profile (acceleration, deceleration) when it is not.
"""
from __future__ import annotations
from typing import Iterator
from dataclasses import dataclass
from enum import StrEnum
import logging
import math
import numbers
import threading

import numpy as np

from trapprofile.core.exceptions import (
    DistanceError,
    EmptyProfileError,
    OutOfRangeQueryError
)
from trapprofile.core.telemetry import TelemetrySink, NullTelemetry
from .limits import KinematicLimits
from .kinematics import (
    accel_phase,
    cruise_phase,
    decel_phase,
    integrate_velocity
)


class Phase(StrEnum):
    ACCEL = "accel"
    CRUISE = "cruise"
    DECEL = "decel"
    HOLD = "hold"


@dataclass(frozen=True)
class ProfileSample:
    time: float
    position: float
    velocity: float
    acceleration: float
    phase: Phase


@dataclass(frozen=True)
class ProfileSummary:
    """
    Outcome of a single call to `ProfileGenerator.generate()`.

    Attributes
    ----------
    distance:
        Commanded travel distance.
    accel_time:
        Nominal duration of the acceleration phase.
    accel_and_cruise_time:
        Nominal time moment the deceleration phase begins.
    decel_time:
        Nominal duration of the deceleration phase.
    end_time:
        Expected end time of the motion.
    actual_end_time:
        Time value at which sampling of the deceleration phase stopped.
    triangular:
        `True` if `max_velocity` cannot be reached over `distance`.
    peak_velocity:
        Velocity used in the cruise and deceleration formulas. For a
        triangular profile, this is the reachable peak velocity reduced by a
        margin of 5 % of `max_velocity`.
    sample_count:
        Number of samples in the generated profile.
    """
    distance: float
    accel_time: float
    accel_and_cruise_time: float
    decel_time: float
    end_time: float
    actual_end_time: float
    triangular: bool
    peak_velocity: float
    sample_count: int


class Profile:
    """
    Immutable sequence of `ProfileSample` objects, in the order they were
    generated. The `ProfileSummary` of the generation that produced the
    samples is kept in `summary`, so both are always published together.
    """
    def __init__(
        self,
        samples: tuple[ProfileSample, ...],
        sample_interval: float,
        summary: ProfileSummary | None = None
    ) -> None:
        self._samples = samples
        self.sample_interval = sample_interval
        self.summary = summary

    def __len__(self) -> int:
        return len(self._samples)

    def __getitem__(self, index: int) -> ProfileSample:
        return self._samples[index]

    def __iter__(self) -> Iterator[ProfileSample]:
        return iter(self._samples)

    @property
    def samples(self) -> tuple[ProfileSample, ...]:
        return self._samples

    @property
    def duration(self) -> float:
        """Time value of the last sample."""
        return self._samples[-1].time

    @property
    def peak_velocity(self) -> float:
        """Highest velocity found in the samples."""
        return max(s.velocity for s in self._samples)

    def as_arrays(self) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Returns the profile as Numpy arrays.

        Returns
        -------
        A tuple of four Numpy arrays: time, position, velocity, and
        acceleration values.
        """
        t = np.array([s.time for s in self._samples])
        x = np.array([s.position for s in self._samples])
        v = np.array([s.velocity for s in self._samples])
        a = np.array([s.acceleration for s in self._samples])
        return t, x, v, a

    def integrated_position(self) -> np.ndarray:
        """
        Returns the position obtained by integrating the velocity samples over
        time. Only meaningful when the sample times increase monotonically.
        """
        t, _, v, _ = self.as_arrays()
        return integrate_velocity(t, v)


class ProfileGenerator:
    """
    Generates and stores a trapezoidal motion profile, and answers queries
    about the profile by elapsed time.

    Only one profile is current at a time: each call to `generate()` replaces
    the previous profile. The new profile is built completely before it is
    published, so readers in other threads see either the old or the new
    profile, never a partial one.

    Parameters
    ----------
    limits:
        Kinematic limits of the axis. These are never altered by the
        generator.
    telemetry:
        Sink that receives the profile summary each time a profile is
        generated. By default, nothing is published.
    logger:
        Logger of the generator. If `None`, the module logger is used.
    max_samples:
        Upper limit on the number of samples of a single profile.
    """
    v_stop: float = 1e-4

    def __init__(
        self,
        limits: KinematicLimits,
        telemetry: TelemetrySink | None = None,
        logger: logging.Logger | None = None,
        max_samples: int = 1_000_000
    ) -> None:
        self.limits = limits
        self.telemetry = telemetry or NullTelemetry()
        self.logger = logger or logging.getLogger(__name__)
        self._lock = threading.Lock()
        self.max_samples = max_samples
        self._profile: Profile | None = None
        self._range_warned: Profile | None = None

    @property
    def profile(self) -> Profile | None:
        """The current profile, or `None` if no profile was generated yet."""
        return self._profile

    @property
    def summary(self) -> ProfileSummary | None:
        profile = self._profile
        return profile.summary if profile is not None else None

    @property
    def is_empty(self) -> bool:
        return self._profile is None

    def clear(self) -> None:
        """Discards the current profile."""
        with self._lock:
            self._profile = None

    def is_triangular(self, distance: float) -> tuple[bool, float]:
        """
        Checks if `max_velocity` can be reached over `distance`.

        Returns
        -------
        A tuple with a flag that is `True` when the profile is triangular, and
        the velocity to use in the cruise and deceleration phases. If the
        profile is triangular, this velocity is the peak velocity reachable
        at mid-distance minus 5 % of `max_velocity`.
        """
        v_max = self.limits.max_velocity
        mid = distance / 2
        v_peak = math.sqrt(2 * self.limits.max_accel * mid)
        if v_peak < v_max:
            return True, v_peak - v_max / 20
        return False, v_max

    def generate(self, distance: float) -> ProfileSummary:
        """
        Generates a new motion profile over `distance` and makes it the
        current profile.

        Parameters
        ----------
        distance:
            Travel distance (>= 0).

        Returns
        -------
        The `ProfileSummary` of the new profile.

        Raises
        ------
        DistanceError:
            If `distance` is negative or not finite, or if the profile would
            need more than `max_samples` samples. The current profile is left
            untouched.
        """
        if isinstance(distance, bool) or not isinstance(distance, numbers.Real):
            raise DistanceError(f"Distance must be a number, got {distance!r}.")
        distance = float(distance)
        if not math.isfinite(distance) or distance < 0.0:
            raise DistanceError(
                f"Distance must be a finite, non-negative number, got {distance}."
            )
        with self._lock:
            if distance == 0.0:
                samples, summary = self._generate_hold()
            else:
                samples, summary = self._generate_motion(distance)
            self._publish_summary(summary)
            self._profile = Profile(samples, self.limits.sample_interval, summary)
        self.logger.info(
            f"Generated {'triangular' if summary.triangular else 'trapezoidal'} "
            f"profile over distance {summary.distance:.4f}: "
            f"{summary.sample_count} samples, end time {summary.end_time:.4f} s"
        )
        return summary

    def _generate_hold(self) -> tuple[tuple[ProfileSample, ...], ProfileSummary]:
        samples = (ProfileSample(0.0, 0.0, 0.0, 0.0, Phase.HOLD),)
        summary = ProfileSummary(
            distance=0.0,
            accel_time=0.0,
            accel_and_cruise_time=0.0,
            decel_time=0.0,
            end_time=0.0,
            actual_end_time=0.0,
            triangular=False,
            peak_velocity=0.0,
            sample_count=1
        )
        return samples, summary

    def _generate_motion(
        self,
        distance: float
    ) -> tuple[tuple[ProfileSample, ...], ProfileSummary]:
        v_max = self.limits.max_velocity
        a_max = self.limits.max_accel
        d_max = self.limits.max_decel
        clk = self.limits.sample_interval

        # Phase boundaries always derive from the configured (unadjusted)
        # maximum velocity.
        t_acc = v_max / a_max
        t_dec_start = distance / v_max
        dt_dec = -v_max / d_max
        t_end = t_dec_start + dt_dec

        # accel phase plus everything from the start of deceleration to the end
        n_max = math.ceil(t_acc / clk) + math.ceil(t_end / clk) + 2
        if n_max > self.max_samples:
            raise DistanceError(
                f"A profile over distance {distance} would need up to {n_max} "
                f"samples at a tick of {clk} s (limit: {self.max_samples})."
            )

        triangular, v_top = self.is_triangular(distance)
        if triangular:
            self.logger.warning(
                f"Distance {distance:.4f} is too short to reach max. velocity "
                f"{v_max:.4f}; peak velocity reduced to {v_top:.4f} while phase "
                f"boundaries still follow the unadjusted max. velocity."
            )

        samples: list[ProfileSample] = []

        t = 0.0
        while t < t_acc:
            x, v, a = accel_phase(t, a_max)
            samples.append(ProfileSample(t, x, v, a, Phase.ACCEL))
            t += clk
        n_acc = len(samples)

        if not triangular:
            t = t_acc
            while t < t_dec_start:
                x, v, a = cruise_phase(t, v_top, a_max)
                samples.append(ProfileSample(t, x, v, a, Phase.CRUISE))
                t += clk
        n_cov = len(samples) - n_acc

        t = t_dec_start
        while t <= t_end:
            x, v, a = decel_phase(t, distance, v_top, d_max, t_dec_start, t_end, self.v_stop)
            samples.append(ProfileSample(t, x, v, a, Phase.DECEL))
            t += clk
        n_dec = len(samples) - n_acc - n_cov

        self.logger.debug(
            f"Samples per phase: accel={n_acc}, cruise={n_cov}, decel={n_dec}"
        )
        summary = ProfileSummary(
            distance=distance,
            accel_time=t_acc,
            accel_and_cruise_time=t_dec_start,
            decel_time=dt_dec,
            end_time=t_end,
            actual_end_time=t,
            triangular=triangular,
            peak_velocity=v_top,
            sample_count=len(samples)
        )
        return tuple(samples), summary

    def _publish_summary(self, summary: ProfileSummary) -> None:
        self.telemetry.put_number("Calculated Desired Distance", summary.distance)
        self.telemetry.put_number("Calculated Acceleration Time", summary.accel_time)
        self.telemetry.put_number(
            "Calculated Acceleration + Cruise Time",
            summary.accel_and_cruise_time
        )
        self.telemetry.put_number("Calculated Deceleration Time", summary.decel_time)
        self.telemetry.put_number("Calculated Expected End Time", summary.end_time)
        self.telemetry.put_boolean("Is triangular", summary.triangular)
        self.telemetry.put_number("Calculated Peak Velocity", summary.peak_velocity)
        self.telemetry.put_number("Calculated Actual End Time", summary.actual_end_time)

    def _index(self, profile: Profile, t: float) -> int:
        if not math.isfinite(t):
            raise OutOfRangeQueryError(f"Query time must be finite, got {t}.")
        last = len(profile) - 1
        i = math.floor(t / self.limits.sample_interval)
        if i < 0:
            self._warn_out_of_range(
                profile,
                f"Query time {t:.4f} s lies before the start of the profile; "
                f"the first sample is returned."
            )
            return 0
        if i > last:
            self._warn_out_of_range(
                profile,
                f"Query time {t:.4f} s lies beyond the end of the profile; "
                f"the last sample is returned."
            )
            return last
        return i

    def _warn_out_of_range(self, profile: Profile, msg: str) -> None:
        # only the first clamped query of each profile is a warning
        if self._range_warned is profile:
            self.logger.debug(msg)
        else:
            self._range_warned = profile
            self.logger.warning(msg)

    def read_sample(self, t: float) -> ProfileSample:
        """
        Returns the sample at index `floor(t / sample_interval)`, where `t` is
        the time elapsed since the start of the motion. No interpolation is
        done: the control loop must query at its own fixed tick.

        Query times outside the profile return the first or the last sample.

        Raises
        ------
        EmptyProfileError:
            If no profile was generated yet.
        OutOfRangeQueryError:
            If `t` is not a finite number.
        """
        profile = self._profile
        if profile is None:
            raise EmptyProfileError()
        return profile[self._index(profile, t)]

    def read_velocity(self, t: float) -> float:
        """Returns the goal velocity at elapsed time `t`."""
        return self.read_sample(t).velocity

    def read_distance(self, t: float) -> float:
        """Returns the goal position at elapsed time `t`."""
        return self.read_sample(t).position

    def read_acceleration(self, t: float) -> float:
        """Returns the goal acceleration at elapsed time `t`."""
        return self.read_sample(t).acceleration
