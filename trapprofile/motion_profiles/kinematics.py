"""
Kinematic equations of the three phases of a trapezoidal velocity profile.

Each phase function takes a time moment `t` (measured from the start of the
motion) and returns a tuple `(x, v, a)` with the position, velocity and
acceleration of the axis at that moment.
"""
from __future__ import annotations
import numpy as np
from scipy.integrate import cumulative_trapezoid


def accel_phase(t: float, a_max: float) -> tuple[float, float, float]:
    x = 0.5 * a_max * t ** 2
    v = a_max * t
    return x, v, a_max


def cruise_phase(t: float, v_top: float, a_max: float) -> tuple[float, float, float]:
    # the distance covered while accelerating to `v_top` plus constant-speed travel
    x = 0.5 * (v_top ** 2 / a_max) + v_top * (t - v_top / a_max)
    return x, v_top, 0.0


def decel_phase(
    t: float,
    distance: float,
    v_top: float,
    d_max: float,
    t_dec: float,
    t_end: float,
    v_stop: float = 1e-4
) -> tuple[float, float, float]:
    """
    Deceleration phase that starts at time moment `t_dec` and ends at `t_end`
    with the axis at position `distance`. `d_max` is negative.

    Velocities below `v_stop` are returned as zero, so that no residual or
    negative velocity is commanded at the end of the motion.
    """
    x = distance + 0.5 * d_max * (t - t_end) ** 2
    v = v_top + d_max * (t - t_dec)
    if v < v_stop:
        v = 0.0
    return x, v, d_max


def integrate_velocity(
    t: np.ndarray,
    v: np.ndarray,
    s0: float = 0.0
) -> np.ndarray:
    """Integrates the sampled velocity `v` over the time values `t` using the
    trapezoidal rule. `s0` is the known position at `t[0]`.

    Returns
    -------
    Numpy array with the position at each time value in `t`.
    """
    if len(t) == 0:
        return np.zeros(0)
    return s0 + cumulative_trapezoid(v, t, initial=0.0)
