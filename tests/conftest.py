"""
Pytest configuration and shared fixtures for addmissing tests.
"""

import pytest
import numpy as np
import pandas as pd
from addmissing.core.rng import RNGState, set_default_seed


@pytest.fixture
def rng():
    """Provide seeded RNG for reproducible tests."""
    return RNGState(seed=42)


@pytest.fixture(autouse=True)
def seeded_default_rng():
    """Seed the process-level RNG once per test."""
    return set_default_seed(2024)


@pytest.fixture
def y_normal():
    """1000 standard normal draws as a numpy array."""
    return np.random.default_rng(42).standard_normal(1000)


@pytest.fixture
def covariates():
    """Covariate table with a ~25% female & low subgroup."""
    n = 1000
    gen = np.random.default_rng(43)
    return pd.DataFrame({
        "group": gen.choice(["male", "female"], size=n),
        "level": gen.choice(["high", "low"], size=n),
    })
