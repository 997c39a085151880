import numpy as np

from generators.correlated import Correlated
from models.copulas import GaussianCopula


def run_correlation_test(generators, config, rng):
    """
    Correlation Structure Check:

    Correlates two Black-Scholes-Merton generators with a Gaussian copula and
    verifies that the empirical correlation between their log-returns equals
    the copula correlation.

    Confidence Interval:
        Uses Fisher z-transformation.

    Returns:
        dict result
    """

    rho_theoretical = config["copula_correlation"]
    num_traversals = config["num_correlated_traversals"]

    copula = GaussianCopula([[1.0, rho_theoretical], [rho_theoretical, 1.0]])
    correlated = Correlated(generators, copula, rng)

    r1, r2 = [], []
    for _ in range(num_traversals):
        first, second = correlated.collect()
        # Paths exclude t=0, so prepend the initial level before differencing
        r1.append(np.diff(np.log(np.concatenate(([generators[0].model.initial], first)))))
        r2.append(np.diff(np.log(np.concatenate(([generators[1].model.initial], second)))))

    # Flatten all increments (all traversals, all timesteps)
    r1 = np.concatenate(r1)
    r2 = np.concatenate(r2)

    N = len(r1)

    # --- Sample correlation ---
    rho_hat = np.corrcoef(r1, r2)[0, 1]

    # --- Fisher z-transformation ---
    z_hat = 0.5 * np.log((1 + rho_hat) / (1 - rho_hat))
    se_z = 1 / np.sqrt(N - 3)

    z_lower = z_hat - 1.96 * se_z
    z_upper = z_hat + 1.96 * se_z

    # Transform back
    rho_lower = np.tanh(z_lower)
    rho_upper = np.tanh(z_upper)

    passes = rho_lower <= rho_theoretical <= rho_upper

    return {
        "test": "Correlation Structure Check",
        "instrument": " vs ".join(type(g.model).__name__ for g in generators),
        "mc_estimate": rho_hat,
        "theoretical_value": rho_theoretical,
        "std_error": se_z,
        "ci_lower_95": rho_lower,
        "ci_upper_95": rho_upper,
        "ci_method": "Fisher Z-transformation",
        "passes_test": passes
    }
