# domain/array_pool.py


class ArrayPool:
    """
    A pool that recycles arrays to reduce allocation overhead in hot loops.

    The `create` and `dispose` strategies can be overridden either by passing
    callables to the constructor or by sub-classing. For example, a pool of
    point vectors:

        def reset_point(point):
            point[0] = point[1] = 0

        points = ArrayPool(create=lambda: [0, 0], dispose=reset_point)

    The pool only tracks released arrays. Releasing the same array twice, or
    using an array after releasing it, is the caller's responsibility.
    The pool is not thread-safe.
    """

    def __init__(self, create=None, dispose=None):
        """
        Initializes the pool.

        Args:
            create (callable, optional): A no-argument function returning a new
                                         array when the pool is empty.
            dispose (callable, optional): A one-argument function that resets an
                                          array in place before it is pooled.

        Arguments that are not callable are ignored and the default kept.
        """
        self._arrays = []

        if callable(create):
            self.create = create

        if callable(dispose):
            self.dispose = dispose

    def create(self):
        """Creates a new, empty array. Called when acquiring from an empty pool."""
        return []

    def dispose(self, array):
        """Clears an array in place before it is added to the pool."""
        del array[:]

    def acquire(self):
        """
        Gets an array from the pool.

        The most recently released array is returned first. If the pool is
        empty a new one is created.

        Returns:
            A recycled or newly created array.
        """
        return self._arrays.pop() if self._arrays else self.create()

    def release(self, array) -> int:
        """
        Disposes of an array and adds it to the pool.

        Args:
            array: The array to release into the pool.

        Returns:
            int: The count of arrays in the pool after the array has been added.
        """
        self.dispose(array)
        self._arrays.append(array)
        return len(self._arrays)

    def __len__(self):
        return len(self._arrays)


# Shared pool using the default strategies, for ad-hoc use
default_pool = ArrayPool()

acquire = default_pool.acquire
release = default_pool.release
