"""Minimum-spacing gate for outbound provider requests."""

import logging
import threading
import time
from typing import Callable

logger = logging.getLogger(__name__)


class DispatchGate:
    """
    Space request dispatches at least ``interval`` seconds apart.

    The gate keeps the earliest time the next request may start. ``wait``
    reserves a slot and moves that time forward under the lock, before the
    caller issues its request, so spacing is measured between dispatch starts
    and a slow response never delays the next dispatch beyond ``interval``.
    Callers never queue for anything but their own slot.
    """

    def __init__(
        self,
        interval: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the gate.

        Args:
            interval: Minimum number of seconds between two dispatches
            clock: Monotonic time source
            sleep: Blocking sleep used while waiting for a slot
        """
        self.interval = interval
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._next_dispatch = clock()  # ready immediately

    def wait(self) -> float:
        """
        Block until this caller may dispatch.

        Returns:
            The reserved dispatch time (clock units)
        """
        with self._lock:
            now = self._clock()
            slot = max(now, self._next_dispatch)
            self._next_dispatch = slot + self.interval

        delay = slot - now
        if delay > 0:
            logger.debug(f"Waiting {delay:.3f}s for dispatch slot")
            self._sleep(delay)
        return slot
