"""Test configuration loading and reference model construction"""

import numpy as np

from data import config
from data.orchestrator import flat_discount_curve, initialize
from generators.scenario_generator import ScenarioGenerator
from models.economic_model import EconomicModel


def test_initialize_contents():
    data = initialize()

    assert data['timestep'] == config.TIMESTEP
    assert data['endtime'] == config.ENDTIME
    assert data['num_simulations'] == config.NUM_SIMULATIONS
    assert set(data['models']) == set(data['generators'])

    for name, model in data['models'].items():
        assert isinstance(model, EconomicModel)
        generator = data['generators'][name]
        assert isinstance(generator, ScenarioGenerator)
        assert generator.model is model
        assert len(generator) == 31


def test_initialize_is_reproducible():
    a = initialize()['generators']
    b = initialize()['generators']
    for name in a:
        np.testing.assert_array_equal(a[name].collect(), b[name].collect())


def test_generator_sources_are_independent():
    generators = initialize()['generators']
    draws = [g.rng.random() for g in generators.values()]
    assert len(set(draws)) == len(draws)


def test_flat_discount_curve():
    curve = flat_discount_curve(0.03)
    assert curve(0.0) == 1.0
    assert np.isclose(curve(2.0), np.exp(-0.06))
