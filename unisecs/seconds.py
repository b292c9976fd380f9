"""Unix time as fractional seconds.

``Seconds`` wraps a single float counting the seconds elapsed since
1970-01-01T00:00:00Z, with the fractional part carrying sub-second
precision. It converts to and from ``Duration`` and can be shifted by
durations with ``+`` and ``-``.
"""

import math
import numbers
from dataclasses import dataclass
from datetime import timedelta

from typing_extensions import override

from unisecs.clock import SYSTEM_CLOCK, Clock
from unisecs.duration import Duration
from unisecs.util import NANOS_PER_SEC, U32_MAX, U64_MAX, saturating_cast


@dataclass(frozen=True, eq=False)
class Seconds:
    """Fractional seconds since the Unix epoch.

    Negative values (times before the epoch) are accepted as-is. Equality
    is plain float equality on ``value``, so ``Seconds(nan)`` never equals
    itself.
    """

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, numbers.Real):
            raise TypeError(
                f"Seconds value must be a real number.\n"
                f"Got {type(self.value).__name__!r}: {self.value!r}\n"
                f"Hint: use Seconds.from_duration() or Seconds.from_timedelta() "
                f"for durations since the epoch"
            )
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def now(cls, clock: Clock | None = None) -> "Seconds":
        """Return the current time in seconds since the Unix epoch.

        Args:
            clock: Source of the current time (defaults to the system clock).
                A system clock set before the epoch yields ``Seconds(0.0)``.
        """
        clock = SYSTEM_CLOCK if clock is None else clock
        return cls.from_duration(clock.since_epoch())

    @classmethod
    def default(cls) -> "Seconds":
        """Same as ``now()``."""
        return cls.now()

    @classmethod
    def from_duration(cls, duration: Duration) -> "Seconds":
        """Convert a duration measured from the Unix epoch.

        Any duration is accepted, but the result is only a meaningful
        timestamp when ``duration`` is anchored at the epoch.
        """
        return cls(duration.secs + duration.nanos / NANOS_PER_SEC)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Seconds":
        return cls.from_duration(Duration.from_timedelta(delta))

    def to_duration(self) -> Duration:
        """Convert to a duration since the epoch.

        Whole seconds are truncated toward zero and sub-second nanoseconds
        are rounded, both saturating into their unsigned range. Negative
        values therefore come back as ``Duration.ZERO``; that result is
        implementation-defined rather than an error.
        """
        fract, whole = math.modf(self.value)
        secs = saturating_cast(whole, U64_MAX)
        scaled = fract * NANOS_PER_SEC
        nanos = 0 if math.isnan(scaled) else saturating_cast(round(scaled), U32_MAX)
        if nanos >= NANOS_PER_SEC:
            if secs == U64_MAX:
                return Duration.MAX
            return Duration.new(secs, nanos)
        return Duration(secs, nanos)

    def to_timedelta(self) -> timedelta:
        return self.to_duration().to_timedelta()

    def trunc(self) -> "Seconds":
        """Drop the fractional seconds."""
        return Seconds(math.modf(self.value)[1])

    def __add__(self, other: object) -> "Seconds":
        duration = _as_duration(other)
        if duration is None:
            return NotImplemented
        return Seconds.from_duration(self.to_duration() + duration)

    def __sub__(self, other: object) -> "Seconds":
        """Shift back by a duration.

        Raises:
            DurationOverflowError: If ``other`` is longer than the time
                elapsed since the epoch
        """
        duration = _as_duration(other)
        if duration is None:
            return NotImplemented
        return Seconds.from_duration(self.to_duration() - duration)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seconds):
            return NotImplemented
        return self.value == other.value

    @override
    def __hash__(self) -> int:
        return hash(self.value)

    def __float__(self) -> float:
        return self.value

    def __int__(self) -> int:
        return int(self.value)

    @override
    def __str__(self) -> str:
        return repr(self.value)


def _as_duration(other: object) -> Duration | None:
    if isinstance(other, Duration):
        return other
    if isinstance(other, timedelta):
        return Duration.from_timedelta(other)
    return None
