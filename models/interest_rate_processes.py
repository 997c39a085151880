"""
Short-Rate Models for Scenario Generation
Euler-Maruyama discretisations of one-factor short-rate SDEs

Vasicek:            dr = a(b - r)dt + σ dW
Cox-Ingersoll-Ross: dr = a(b - r)dt + σ√r dW
Hull-White:         dr = (θ(t) - a r)dt + σ dW
"""

from dataclasses import dataclass
from typing import Callable

import numpy as np
from scipy.stats import norm

from data.config import FORWARD_RATE_BUMP
from models.economic_model import EconomicModel, check_volatility, normal_shock


@dataclass(frozen=True)
class Vasicek(EconomicModel):
    """
    Mean-reverting Gaussian short rate.

    r(t + Δ) = r(t) + a(b - r(t))Δ + σ√Δ Z
    """
    a: float
    b: float
    sigma: float
    initial: float

    def __post_init__(self):
        check_volatility(self.sigma)

    def next_value(self, value, time, timestep, variate):
        z = normal_shock(variate)
        return float(value + self.a * (self.b - value) * timestep + self.sigma * np.sqrt(timestep) * z)


@dataclass(frozen=True)
class CoxIngersollRoss(EconomicModel):
    """
    Square-root diffusion short rate.

    The diffusion uses max(r, 0) so a step that overshoots below zero
    keeps a real-valued volatility (full truncation).
    """
    a: float
    b: float
    sigma: float
    initial: float

    def __post_init__(self):
        check_volatility(self.sigma)

    def next_value(self, value, time, timestep, variate):
        z = normal_shock(variate)
        diffusion = self.sigma * np.sqrt(max(value, 0.0)) * np.sqrt(timestep) * z
        return float(value + self.a * (self.b - value) * timestep + diffusion)


@dataclass(frozen=True)
class HullWhite(EconomicModel):
    """
    Hull-White one-factor model fitted to a discount curve.

    Args:
        a: Mean reversion speed (> 0)
        sigma: Volatility
        curve: Callable t -> P(0, t), the discount factor to time t
    """
    a: float
    sigma: float
    curve: Callable[[float], float]

    def __post_init__(self):
        check_volatility(self.sigma)
        if self.a <= 0:
            raise ValueError(f"Hull-White mean reversion must be positive, got {self.a}")

    def forward_rate(self, t1, t2):
        """Continuously compounded forward rate between t1 and t2."""
        return -(np.log(self.curve(t2)) - np.log(self.curve(t1))) / (t2 - t1)

    def instantaneous_forward(self, t):
        return self.forward_rate(t, t + FORWARD_RATE_BUMP)

    def theta(self, t):
        h = FORWARD_RATE_BUMP
        f = self.instantaneous_forward(t)
        slope = (self.instantaneous_forward(t + h) - f) / h
        return slope + self.a * f + self.sigma**2 / (2 * self.a) * (1 - np.exp(-2 * self.a * t))

    def initial_value(self, timestep=None):
        # The first observed rate is the forward over the first step
        if timestep is None:
            return float(self.instantaneous_forward(0.0))
        return float(self.forward_rate(0.0, timestep))

    def next_value(self, value, time, timestep, variate):
        z = normal_shock(variate)
        drift = (self.theta(time) - self.a * value) * timestep
        return float(value + drift + self.sigma * np.sqrt(timestep) * z)


def rate_distribution(generator):
    """
    Exact distribution of the Euler-discretised Vasicek rate at the horizon.

    With φ = 1 - aΔ and n steps:
        mean     = b + (r0 - b)φⁿ
        variance = σ²Δ Σ_{k<n} φ^{2k}

    Returns:
        Frozen scipy.stats.norm distribution
    """
    model = generator.model
    if not isinstance(model, Vasicek):
        raise TypeError(f"rate_distribution requires a Vasicek model, got {type(model).__name__}")

    dt = generator.timestep
    n = len(generator) - 1
    phi = 1.0 - model.a * dt
    mean = model.b + (model.initial - model.b) * phi**n
    variance = model.sigma**2 * dt * np.sum(phi ** (2 * np.arange(n)))
    return norm(loc=mean, scale=np.sqrt(variance))
