import numpy as np

from generators.scenario_generator import terminal_values
from pricing.black_scholes import forward_value


def run_martingale_test(generator, config):
    """
    Martingale Test:
    Under the risk-neutral measure, discounted asset prices must be martingales.

    We test this by comparing:
        - Monte Carlo discounted expected payoff of an at-the-money forward
        - Analytical t=0 forward valuation

    Returns:
        dict with test results
    """

    model = generator.model
    T = generator.endtime
    r = model.r
    K = model.initial
    N = config["num_simulations"]

    # --- Simulate terminal prices ---
    ST = terminal_values(generator, N)

    # --- Monte Carlo discounted payoff ---
    discounted_payoff = np.exp(-r * T) * (ST - K)

    mc_estimate = np.mean(discounted_payoff)
    std_dev = np.std(discounted_payoff, ddof=1)
    std_error = std_dev / np.sqrt(N)

    ci_lower = mc_estimate - 1.96 * std_error
    ci_upper = mc_estimate + 1.96 * std_error

    # --- Analytical forward value at t=0 ---
    theoretical_value = forward_value(model, K, T)

    passes = ci_lower <= theoretical_value <= ci_upper

    return {
        "test": "Martingale Test",
        "instrument": f"{type(model).__name__} Forward",
        "mc_estimate": mc_estimate,
        "theoretical_value": theoretical_value,
        "std_error": std_error,
        "ci_lower_95": ci_lower,
        "ci_upper_95": ci_upper,
        "passes_test": passes
    }
