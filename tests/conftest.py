import pytest

from synthseries.core.random_source import RandomSource
from synthseries.utils.params import load_params


@pytest.fixture(autouse=True)
def _fresh_params_cache():
    """@brief Reload bundled defaults around every test.

    @details Tests that point the loader at another file must not leak the
    cached parameters into the rest of the suite.
    """
    load_params.cache_clear()
    yield
    load_params.cache_clear()


@pytest.fixture
def random_source() -> RandomSource:
    """@brief Provide a seeded random source for reproducible draws."""
    return RandomSource(seed=42)
