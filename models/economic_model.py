"""
Economic model abstraction shared by all stochastic processes.

Every model is an immutable value exposing three operations:

    initial_value(timestep=None)   the first emitted level
    next_value(value, time, timestep, variate)
                                   one transition driven by a uniform variate
    output_type()                  the type of the emitted values

Uniform variates are turned into standard normal shocks through the inverse
normal CDF before they enter a drift/diffusion update.
"""

from abc import ABC, abstractmethod

from scipy.special import ndtri


def normal_shock(variate):
    """
    Map a uniform variate in (0, 1) to a standard normal quantile.

    Raises:
        ValueError: if the variate is not strictly inside the unit interval
    """
    if not 0.0 < variate < 1.0:
        raise ValueError(f"variate must lie in the open interval (0, 1), got {variate}")
    return float(ndtri(variate))


def check_volatility(sigma):
    """Raise ValueError for a negative volatility parameter."""
    if sigma < 0:
        raise ValueError(f"volatility must be non-negative, got {sigma}")


class EconomicModel(ABC):
    """Base class for short-rate and equity processes."""

    def initial_value(self, timestep=None):
        """
        Starting level of the process.

        Models whose first observation depends on the step size override this;
        by default the timestep is ignored.
        """
        return self.initial

    @abstractmethod
    def next_value(self, value, time, timestep, variate):
        """Advance the process by one step of size ``timestep`` from ``time``."""

    def output_type(self):
        return float
