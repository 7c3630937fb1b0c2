# application/frame_buffers.py
from domain.buffers import pool_from_definition
from .config import config


class FrameBufferService:
    """
    Hands out scratch arrays for the duration of a single frame.

    One ArrayPool is kept per buffer kind. Every buffer acquired during a
    frame is released back to its pool by `end_frame()`, so callers must not
    hold on to a buffer past the end of the frame it was acquired in.
    """

    def __init__(self, buffer_definitions=None):
        if buffer_definitions is None:
            buffer_definitions = config.get("buffers", default={})

        self.pools = {
            kind: pool_from_definition(definition)
            for kind, definition in buffer_definitions.items()
        }
        self._checked_out = []
        self.frame_count = 0
        self.log_messages = []

        if self.pools:
            self.add_log(f"Registered buffer kinds: {', '.join(sorted(self.pools))}.")
        else:
            self.add_log("No buffer kinds configured.")

    def add_log(self, message):
        self.log_messages.append(message)
        if len(self.log_messages) > 99:
            self.log_messages.pop(0)

    def acquire(self, kind: str):
        """
        Gets a buffer of the given kind for the current frame.

        Raises:
            ValueError: If no pool is registered for `kind`.
        """
        pool = self.pools.get(kind)
        if pool is None:
            raise ValueError(f"Unknown buffer kind: {kind}")

        buffer = pool.acquire()
        self._checked_out.append((pool, buffer))
        return buffer

    def end_frame(self) -> int:
        """
        Releases every buffer acquired during the frame back to its pool.

        If a pool's dispose strategy raises, the error propagates and the
        failing buffer, plus any not yet released, stay checked out.

        Returns:
            int: The number of buffers released.
        """
        released = len(self._checked_out)
        # Most recent first, so the next frame gets buffers back in acquire order
        while self._checked_out:
            pool, buffer = self._checked_out[-1]
            pool.release(buffer)
            self._checked_out.pop()
        self.frame_count += 1
        return released

    def available(self, kind: str) -> int:
        if kind not in self.pools:
            raise ValueError(f"Unknown buffer kind: {kind}")
        return len(self.pools[kind])

    def in_use(self) -> int:
        return len(self._checked_out)
