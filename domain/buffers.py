# domain/buffers.py
import numpy as np

from .array_pool import ArrayPool


FILL_MODES = ("zeros", "identity")


def zeros_factory(shape, dtype=np.float64):
    """Returns a create strategy producing zero-filled arrays of `shape`."""

    def create():
        return np.zeros(shape, dtype=dtype)

    return create


def identity_factory(size, dtype=np.float64):
    """Returns a create strategy producing `size` x `size` identity matrices."""

    def create():
        return np.eye(size, dtype=dtype)

    return create


def zero_fill(array: np.ndarray):
    """Dispose strategy: zeroes the array in place."""
    array.fill(0)


def reset_identity(matrix: np.ndarray):
    """Dispose strategy: resets a square matrix to the identity in place."""
    matrix.fill(0)
    np.fill_diagonal(matrix, 1)


def vector_pool(dim: int, dtype=np.float64) -> ArrayPool:
    """A pool of zeroed vectors of length `dim`."""
    return ArrayPool(create=zeros_factory((dim,), dtype), dispose=zero_fill)


def matrix_pool(size: int, dtype=np.float64) -> ArrayPool:
    """A pool of `size` x `size` matrices, reset to the identity on release."""
    return ArrayPool(create=identity_factory(size, dtype), dispose=reset_identity)


def pool_from_definition(definition: dict) -> ArrayPool:
    """
    Builds a pool from a buffer definition, as found in the `buffers` section
    of the configuration.

    Example definition: {"shape": [4, 4], "dtype": "float32", "fill": "identity"}

    Args:
        definition (dict): Must contain `shape`. `dtype` defaults to float64
                           and `fill` to "zeros".

    Returns:
        ArrayPool: A pool producing and recycling arrays of that shape.

    Raises:
        ValueError: If the shape is missing or has negative or non-integer
                    dimensions, the dtype is not understood, the fill mode is
                    unknown, or an identity fill is requested for a
                    non-square shape.
    """
    shape = definition.get("shape")
    if shape is None:
        raise ValueError("Buffer definition is missing a 'shape'.")
    if isinstance(shape, int):
        shape = (shape,)
    elif isinstance(shape, (list, tuple)):
        shape = tuple(shape)
    else:
        raise ValueError(f"Invalid shape: {shape!r}")

    for dim in shape:
        if isinstance(dim, bool) or not isinstance(dim, int) or dim < 0:
            raise ValueError(
                f"Invalid shape {shape}: dimensions must be non-negative integers."
            )

    try:
        dtype = np.dtype(definition.get("dtype", "float64"))
    except TypeError:
        raise ValueError(f"Unknown dtype: {definition.get('dtype')}")
    fill = definition.get("fill", "zeros")

    if fill == "zeros":
        return ArrayPool(create=zeros_factory(shape, dtype), dispose=zero_fill)

    if fill == "identity":
        if len(shape) != 2 or shape[0] != shape[1]:
            raise ValueError(f"Identity fill needs a square 2D shape, got {shape}.")
        return matrix_pool(shape[0], dtype)

    raise ValueError(f"Unknown fill mode: {fill}. Expected one of {FILL_MODES}.")
