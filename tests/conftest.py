# tests/conftest.py
import pytest

from domain import array_pool


@pytest.fixture(autouse=True)
def empty_default_pool():
    """Keeps the shared default pool empty between tests."""
    array_pool.default_pool._arrays.clear()
    yield array_pool.default_pool
    array_pool.default_pool._arrays.clear()


@pytest.fixture(scope="session")
def buffer_definitions():
    """Buffer kinds in the same shape as the `buffers` section of config.json."""
    return {
        "vec3": {"shape": [3], "dtype": "float32"},
        "mat4": {"shape": [4, 4], "dtype": "float32", "fill": "identity"},
    }
