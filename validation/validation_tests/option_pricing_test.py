import numpy as np

from generators.scenario_generator import terminal_values
from pricing.black_scholes import black_scholes_price


def run_option_pricing_test(generator, config):
    """
    Option Pricing Test:
    Compare Monte Carlo discounted payoffs of a call and a put
    with analytical Black-Scholes-Merton prices.

    Both payoffs are evaluated on the same simulated terminal prices.

    Returns:
        list of dict results
    """

    model = generator.model
    T = generator.endtime
    r = model.r
    K = config["option_strike"]
    N = config["num_simulations"]

    ST = terminal_values(generator, N)

    payoffs = {
        "call": np.maximum(ST - K, 0.0),
        "put": np.maximum(K - ST, 0.0),
    }

    results = []

    for option_type, payoff in payoffs.items():

        # --- Monte Carlo discounted payoff ---
        discounted_payoff = np.exp(-r * T) * payoff

        mc_estimate = np.mean(discounted_payoff)
        std_dev = np.std(discounted_payoff, ddof=1)
        std_error = std_dev / np.sqrt(N)

        ci_lower = mc_estimate - 1.96 * std_error
        ci_upper = mc_estimate + 1.96 * std_error

        # --- Analytical price ---
        theoretical_value = black_scholes_price(model, K=K, T=T, option_type=option_type)

        passes = ci_lower <= theoretical_value <= ci_upper

        results.append({
            "test": "Option Pricing Test",
            "instrument": f"{option_type.capitalize()} K={K:g} T={T:g}",
            "mc_estimate": mc_estimate,
            "theoretical_value": theoretical_value,
            "std_error": std_error,
            "ci_lower_95": ci_lower,
            "ci_upper_95": ci_upper,
            "passes_test": passes
        })

    return results
