"""Wall-clock sources for ``Seconds.now``.

The default ``SystemClock`` reads the platform clock. Tests and callers
that need a deterministic "now" pass their own ``Clock`` subclass.
"""

import logging
import time
from abc import ABC, abstractmethod

from typing_extensions import override

from unisecs.duration import Duration

logger = logging.getLogger(__name__)


class Clock(ABC):

    @abstractmethod
    def since_epoch(self) -> Duration:
        """Return the time elapsed since the Unix epoch."""
        pass


class SystemClock(Clock):
    """Clock backed by ``time.time_ns()``.

    A reading before the epoch (skewed or misconfigured system clock) is
    normalized to ``Duration.ZERO`` instead of raising.
    """

    @override
    def since_epoch(self) -> Duration:
        nanos = time.time_ns()
        if nanos < 0:
            logger.debug(
                "system clock reports %d ns before the epoch, using the epoch",
                -nanos,
            )
            return Duration.ZERO
        return Duration.from_nanos(nanos)


SYSTEM_CLOCK: Clock = SystemClock()
