"""
Equity Process Models for Scenario Generation
Implements geometric Brownian motion and constant elasticity of variance

S(t + Δ) = S(t) * exp[(r - q - 0.5*σ²)*Δ + σ*Z*√Δ]

where Z = Φ⁻¹(U) is the standard normal quantile of the supplied uniform variate.
"""

from dataclasses import dataclass

import numpy as np
from scipy.stats import lognorm

from models.economic_model import EconomicModel, check_volatility, normal_shock


@dataclass(frozen=True)
class BlackScholesMerton(EconomicModel):
    """
    Log-normal equity price with continuous dividend (or borrow) yield.

    Args:
        r: Risk-free rate
        q: Dividend yield
        sigma: Volatility
        initial: Initial spot price S0
    """
    r: float
    q: float
    sigma: float
    initial: float

    def __post_init__(self):
        check_volatility(self.sigma)
        if self.initial <= 0:
            raise ValueError(f"initial price must be positive, got {self.initial}")

    def next_value(self, value, time, timestep, variate):
        z = normal_shock(variate)
        drift = (self.r - self.q - 0.5 * self.sigma**2) * timestep
        diffusion = self.sigma * z * np.sqrt(timestep)
        return float(value * np.exp(drift + diffusion))


@dataclass(frozen=True)
class ConstantElasticityOfVariance(EconomicModel):
    """
    CEV equity price, Euler step:

    S(t + Δ) = S(t) + (r - q)*S(t)*Δ + σ*S(t)^γ*Z*√Δ

    Zero is absorbing: once the price reaches zero it stays there.
    """
    r: float
    q: float
    sigma: float
    gamma: float
    initial: float

    def __post_init__(self):
        check_volatility(self.sigma)
        if self.initial <= 0:
            raise ValueError(f"initial price must be positive, got {self.initial}")

    def next_value(self, value, time, timestep, variate):
        z = normal_shock(variate)
        if value <= 0:
            return 0.0
        drift = (self.r - self.q) * value * timestep
        diffusion = self.sigma * value**self.gamma * z * np.sqrt(timestep)
        return float(max(value + drift + diffusion, 0.0))


def price_distribution(generator):
    """
    Terminal price distribution implied by a Black-Scholes-Merton generator.

    log S(T) ~ N(log S0 + (r - q - 0.5*σ²)*T, σ²*T) with T = generator.endtime.

    Returns:
        Frozen scipy.stats.lognorm distribution
    """
    model = generator.model
    if not isinstance(model, BlackScholesMerton):
        raise TypeError(
            f"price_distribution requires a BlackScholesMerton model, got {type(model).__name__}"
        )

    T = generator.endtime
    mu = np.log(model.initial) + (model.r - model.q - 0.5 * model.sigma**2) * T
    s = model.sigma * np.sqrt(T)
    return lognorm(s=s, scale=np.exp(mu))
