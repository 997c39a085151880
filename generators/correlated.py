"""
Correlated multi-path scenario generator.

The copula returns sampled CDF values which each model interprets through
its own transition (e.g. Black-Scholes-Merton turns the variate into a
normal shock inside its diffusion). Iterating a Correlated yields the full
time series of each component generator in turn, rather than a
cross-section of all generators at each time step:

    >>> m = BlackScholesMerton(0.01, 0.02, 0.15, 100.0)
    >>> s = ScenarioGenerator(1, 30, m)
    >>> c = Correlated([s, s], GaussianCopula([[1.0, 0.9], [0.9, 1.0]]))
    >>> paths = list(c)        # two correlated paths of length 30
"""

from typing import NamedTuple

import numpy as np

from generators.scenario_generator import SequenceCursor


class CorrelatedState(NamedTuple):
    variates: np.ndarray
    n: int


class Correlated:
    """
    Generators sharing one time grid, driven by a jointly sampled variate matrix.

    Args:
        generators: Ordered ScenarioGenerators with identical timestep and endtime
        copula: Object with ``dim`` and ``sample(rng, n)`` returning (dim, n) variates
        rng: numpy Generator passed to the copula; default_rng() when omitted

    Raises:
        ValueError: If the generators disagree on timestep or endtime, the group
            is empty, or the copula dimension differs from the number of generators
    """

    def __init__(self, generators, copula, rng=None):
        generators = list(generators)
        if not generators:
            raise ValueError("Correlated requires at least one scenario generator.")

        first = generators[0]
        if not all(g.timestep == first.timestep for g in generators):
            raise ValueError("All component generators must have the same `timestep`.")
        if not all(g.endtime == first.endtime for g in generators):
            raise ValueError("All component generators must have the same `endtime`.")

        dim = getattr(copula, "dim", None)
        if dim is not None and dim != len(generators):
            raise ValueError(
                f"Copula dimension {dim} does not match number of generators {len(generators)}"
            )

        self._generators = tuple(generators)
        self._copula = copula
        self._rng = np.random.default_rng() if rng is None else rng

    @property
    def generators(self):
        return self._generators

    @property
    def copula(self):
        return self._copula

    @property
    def rng(self):
        return self._rng

    @property
    def steps(self):
        """Post-initial grid points per path."""
        return len(self._generators[0]) - 1

    @property
    def eltype(self):
        return np.ndarray

    def __len__(self):
        return len(self._generators)

    def _path(self, n, variates):
        sg = self._generators[n]
        values = np.empty(self.steps, dtype=sg.eltype)
        value = sg.model.initial_value(sg.timestep)
        for i in range(self.steps):
            value = sg.model.next_value(value, (i + 1) * sg.timestep, sg.timestep, variates[n, i])
            values[i] = value
        return values

    def start(self):
        variates = np.asarray(self._copula.sample(self._rng, self.steps))
        expected = (len(self._generators), self.steps)
        if variates.shape != expected:
            raise ValueError(f"Copula sample has shape {variates.shape}, expected {expected}")
        return self._path(0, variates), CorrelatedState(variates=variates, n=1)

    def step(self, state):
        if state.n >= len(self._generators):
            return None
        path = self._path(state.n, state.variates)
        return path, CorrelatedState(variates=state.variates, n=state.n + 1)

    def __iter__(self):
        return SequenceCursor(self)

    def collect(self):
        """All paths of one traversal stacked into a (generators, steps) array."""
        return np.vstack(list(self))
