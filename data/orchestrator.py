"""
Orchestrator for economic scenario generation
Coordinates data flow from configuration to reference models and generators
"""

import numpy as np

from data import config
from models.interest_rate_processes import Vasicek, CoxIngersollRoss, HullWhite
from models.equity_processes import BlackScholesMerton, ConstantElasticityOfVariance
from generators.scenario_generator import ScenarioGenerator


def flat_discount_curve(rate):
    """Discount function t -> exp(-rate * t) for a flat continuous rate."""
    def discount(t):
        return np.exp(-rate * t)
    return discount


def create_models():
    """
    Build the reference models from the configured parameters.

    Returns:
        dict: model name -> EconomicModel
    """
    hw = config.HULL_WHITE
    return {
        'vasicek': Vasicek(**config.VASICEK),
        'cox_ingersoll_ross': CoxIngersollRoss(**config.COX_INGERSOLL_ROSS),
        'hull_white': HullWhite(hw['a'], hw['sigma'], flat_discount_curve(hw['flat_rate'])),
        'black_scholes_merton': BlackScholesMerton(**config.BLACK_SCHOLES_MERTON),
        'constant_elasticity_of_variance': ConstantElasticityOfVariance(
            **config.CONSTANT_ELASTICITY_OF_VARIANCE
        ),
    }


def create_generators(models, timestep, endtime, seed):
    """
    One ScenarioGenerator per model, each with its own seeded random source.

    Seeds are derived from a single SeedSequence so the sources are
    independent but reproducible.
    """
    children = np.random.SeedSequence(seed).spawn(len(models))
    return {
        name: ScenarioGenerator(timestep, endtime, model, np.random.default_rng(child))
        for (name, model), child in zip(models.items(), children)
    }


def initialize():
    """
    Initialize and return all configuration parameters, models and generators.

    Returns:
        dict: Dictionary containing all config parameters, models and generators
    """
    models = create_models()
    generators = create_generators(models, config.TIMESTEP, config.ENDTIME, config.RANDOM_SEED)

    data = {
        # Time Grid
        'timestep': config.TIMESTEP,
        'endtime': config.ENDTIME,

        # Correlation
        'copula_correlation': config.COPULA_CORRELATION,
        'student_t_nu': config.STUDENT_T_DEGREES_OF_FREEDOM,

        # Simulation & Validation Parameters
        'num_simulations': config.NUM_SIMULATIONS,
        'num_correlated_traversals': config.NUM_CORRELATED_TRAVERSALS,
        'random_seed': config.RANDOM_SEED,
        'significance_level': config.SIGNIFICANCE_LEVEL,
        'option_strike': config.OPTION_STRIKE,

        # Models & Generators
        'models': models,
        'generators': generators,
    }

    return data
