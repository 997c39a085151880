"""
tests/conftest.py

Pytest configuration for setting up import paths and shared fixtures.
"""

import sys
import os

import numpy as np
import pytest

# Add the workspace root to sys.path so imports work correctly
workspace_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if workspace_root not in sys.path:
    sys.path.insert(0, workspace_root)

from models.equity_processes import BlackScholesMerton
from models.interest_rate_processes import Vasicek


@pytest.fixture
def bsm():
    return BlackScholesMerton(0.01, 0.02, 0.15, 100.0)


@pytest.fixture
def vasicek():
    return Vasicek(0.136, 0.0168, 0.0119, 0.01)


@pytest.fixture
def rng():
    return np.random.default_rng(1)
