import time

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from models.equity_processes import price_distribution
from validation.validation_tests.lognormal_fit_test import run_lognormal_fit_test
from validation.validation_tests.martingale_test import run_martingale_test
from validation.validation_tests.option_pricing_test import run_option_pricing_test
from validation.validation_tests.short_rate_moment_test import run_short_rate_moment_test
from validation.validation_tests.correlation_structure_check import run_correlation_test

from utils.output_writer import OutputWriter


def plot_terminal_distribution(generator, sample):
    """
    Histogram of simulated terminal prices against the log-normal density.

    Returns:
        matplotlib Figure
    """
    dist = price_distribution(generator)
    grid = np.linspace(np.min(sample), np.max(sample), 400)

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.hist(sample, bins=100, density=True, alpha=0.6, label="Simulated S(T)")
    ax.plot(grid, dist.pdf(grid), label="Log-normal density")
    ax.set_xlabel("Terminal price")
    ax.set_ylabel("Density")
    ax.set_title(f"Terminal Price Distribution (T={generator.endtime:g})")
    ax.legend()
    ax.grid(True)
    return fig


def run_validation(config, output_path="output/validation"):
    """
    Runs the Monte Carlo scenario validation.

    Executes:
        a) Log-normal Fit Test (Kolmogorov-Smirnov)
        b) Martingale Test
        c) Option Pricing Test
        d) Short-Rate Moment Test
        e) Correlation Structure Check

    Saves results to (unless output_path is None):
        <output_path>/validation_results.csv
        <output_path>/terminal_price_distribution.png
        <output_path>/summary.json

    Returns:
        pandas.DataFrame of results
    """
    generators = config["generators"]
    equity = generators["black_scholes_merton"]
    short_rate = generators["vasicek"]

    # --- Run Validation Tests ---
    print("Running validation tests...")
    step_start = time.time()

    fit_result = run_lognormal_fit_test(equity, config)
    martingale_result = run_martingale_test(equity, config)
    option_results = run_option_pricing_test(equity, config)
    moment_result = run_short_rate_moment_test(short_rate, config)
    correlation_result = run_correlation_test(
        [equity, equity], config, np.random.default_rng(config["random_seed"])
    )

    print(f"✓ Validation completed in {time.time() - step_start:.2f}s")

    sample = fit_result.pop("sample")

    # Flatten results
    all_results = []
    all_results.append(fit_result)
    all_results.append(martingale_result)
    all_results.extend(option_results)
    all_results.append(moment_result)
    all_results.append(correlation_result)

    results_df = pd.DataFrame(all_results)

    for _, row in results_df.iterrows():
        status = "✓" if row["passes_test"] else "✗"
        print(f"  {status} {row['test']} ({row['instrument']})")

    # --- Save Results ---
    if output_path is not None:
        fig = plot_terminal_distribution(equity, sample)
        OutputWriter.write_report(
            output_path,
            tables={"validation_results": results_df},
            figures={"terminal_price_distribution": fig},
            summary={
                "random_seed": config["random_seed"],
                "num_simulations": config["num_simulations"],
                "all_passed": bool(results_df["passes_test"].all()),
            },
        )
        plt.close(fig)

    return results_df
