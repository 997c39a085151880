"""
Single-path scenario generator.

A ScenarioGenerator pairs an EconomicModel with a time grid and a random
source. Iterating it yields the model's path lazily, one grid point at a
time, starting with the initial value at t=0:

    >>> m = Vasicek(0.136, 0.0168, 0.0119, 0.01)   # a, b, σ, initial rate
    >>> s = ScenarioGenerator(1, 30, m, np.random.default_rng(1))
    >>> len(s)
    31
    >>> path = s.collect()

Each traversal draws one uniform variate per step from the generator's
random source. The source is never rewound, so a second traversal continues
the random stream where the first one stopped.
"""

from dataclasses import dataclass
from itertools import islice
from typing import NamedTuple, Optional

import numpy as np

from models.economic_model import EconomicModel
from generators.time_grid import grid_length, is_terminal, validate_grid


class ScenarioState(NamedTuple):
    time: float
    value: float


class SequenceCursor:
    """
    Iterator driving a pull protocol of ``start()`` and ``step(state)``.

    ``start`` returns the first ``(item, state)`` pair; ``step`` returns the
    next pair or None once the sequence is exhausted.
    """

    def __init__(self, sequence):
        self._sequence = sequence
        self._state = None
        self._started = False
        self._exhausted = False

    def __iter__(self):
        return self

    def __next__(self):
        if self._exhausted:
            raise StopIteration
        if not self._started:
            result = self._sequence.start()
            self._started = True
        else:
            result = self._sequence.step(self._state)
        if result is None:
            self._exhausted = True
            raise StopIteration
        item, self._state = result
        return item


@dataclass(frozen=True, eq=False)
class ScenarioGenerator:
    """
    Lazy, finite sequence of model values on the grid 0, Δ, 2Δ, ..., endtime.

    Args:
        timestep: Grid spacing Δ (> 0)
        endtime: Projection horizon (>= 0)
        model: Any EconomicModel
        rng: numpy Generator supplying uniform variates; a fresh
            default_rng() is created when omitted
    """
    timestep: float
    endtime: float
    model: EconomicModel
    rng: Optional[np.random.Generator] = None

    def __post_init__(self):
        validate_grid(self.timestep, self.endtime)
        if self.rng is None:
            object.__setattr__(self, "rng", np.random.default_rng())

    def __len__(self):
        return grid_length(self.timestep, self.endtime)

    @property
    def eltype(self):
        return self.model.output_type()

    def start(self):
        value = self.model.initial_value(self.timestep)
        state = ScenarioState(time=0.0, value=value)
        return value, state

    def step(self, state):
        if is_terminal(state.time, self.timestep, self.endtime):
            return None
        variate = self.rng.random()
        new_value = self.model.next_value(state.value, state.time, self.timestep, variate)
        state = ScenarioState(time=state.time + self.timestep, value=new_value)
        return new_value, state

    def __iter__(self):
        return SequenceCursor(self)

    def element_at(self, i):
        """
        Value at grid index ``i`` from a fresh traversal of ``i`` steps.

        Not memoized: every call consumes ``i`` new variates from the random
        source, so repeated calls with the same index generally differ. Use
        ``collect()`` and index the result for a stable path.
        """
        n = len(self)
        if i < 0:
            i += n
        if not 0 <= i < n:
            raise IndexError(f"index {i} out of range for scenario of length {n}")
        return next(islice(iter(self), i, None))

    def __getitem__(self, i):
        return self.element_at(i)

    def collect(self):
        """One full traversal as an array of length len(self)."""
        return np.fromiter(iter(self), dtype=self.eltype, count=len(self))


def terminal_values(generator, num_simulations):
    """
    Horizon values of ``num_simulations`` independent traversals.

    Consecutive traversals share the generator's random source, so each
    one continues the stream and yields a fresh path.
    """
    return np.array([generator.element_at(-1) for _ in range(num_simulations)])
