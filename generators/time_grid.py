"""
Time grid helpers shared by the scenario generators.

Grid points are 0, Δ, 2Δ, ... up to the horizon. Comparisons against the
horizon are tolerant so floating round-off in k*Δ neither drops nor adds
the final point.
"""

import math

from data.config import GRID_ABSOLUTE_TOLERANCE, GRID_RELATIVE_TOLERANCE


def approx_equal(x, y):
    return math.isclose(x, y, rel_tol=GRID_RELATIVE_TOLERANCE, abs_tol=GRID_ABSOLUTE_TOLERANCE)


def validate_grid(timestep, endtime):
    if not timestep > 0:
        raise ValueError(f"timestep must be positive, got {timestep}")
    if endtime < 0:
        raise ValueError(f"endtime must be non-negative, got {endtime}")


def step_count(timestep, endtime):
    """Number of post-initial grid points, floor(endtime / timestep)."""
    ratio = endtime / timestep
    nearest = round(ratio)
    if approx_equal(ratio, nearest):
        return int(nearest)
    return int(math.floor(ratio))


def grid_length(timestep, endtime):
    """Number of grid points in [0, endtime], including t=0."""
    return 1 + step_count(timestep, endtime)


def is_terminal(time, timestep, endtime):
    """
    True when no further grid point fits before the horizon.

    Covers time > endtime and time ≈ endtime, and also stops a grid whose
    horizon is not a whole number of steps at its last point below it.
    """
    if time > endtime or approx_equal(time, endtime):
        return True
    next_time = time + timestep
    return next_time > endtime and not approx_equal(next_time, endtime)
