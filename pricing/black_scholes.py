import numpy as np
from scipy.stats import norm

from models.equity_processes import BlackScholesMerton


def _require_bsm(model):
    if not isinstance(model, BlackScholesMerton):
        raise TypeError(f"Expected a BlackScholesMerton model, got {type(model).__name__}")


def black_scholes_price(model, K, T, option_type='call'):
    """
    Black-Scholes-Merton price for European call or put option.
    Args:
        model: BlackScholesMerton model (spot, r, q, sigma)
        K: Strike price
        T: Time to maturity (years)
        option_type: 'call' or 'put'
    Returns:
        Option price (float)
    """
    _require_bsm(model)
    if option_type not in ('call', 'put'):
        raise ValueError(f"option_type must be 'call' or 'put', got {option_type}")

    S, r, q, sigma = model.initial, model.r, model.q, model.sigma
    if T == 0:
        if option_type == 'call':
            return max(S - K, 0.0)
        else:
            return max(K - S, 0.0)
    d1 = (np.log(S / K) + (r - q + 0.5 * sigma**2) * T) / (sigma * np.sqrt(T))
    d2 = d1 - sigma * np.sqrt(T)
    if option_type == 'call':
        price = S * np.exp(-q * T) * norm.cdf(d1) - K * np.exp(-r * T) * norm.cdf(d2)
    else:
        price = K * np.exp(-r * T) * norm.cdf(-d2) - S * np.exp(-q * T) * norm.cdf(-d1)
    return float(price)


def forward_value(model, K, T):
    """
    Value at t=0 of a long forward struck at K:
        S0 * e^(-qT) - K * e^(-rT)
    """
    _require_bsm(model)
    return float(model.initial * np.exp(-model.q * T) - K * np.exp(-model.r * T))
