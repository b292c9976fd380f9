from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar

from typing_extensions import override

from unisecs.util import (
    NANOS_PER_MICRO,
    NANOS_PER_MILLI,
    NANOS_PER_SEC,
    SECS_PER_DAY,
    SECS_PER_HOUR,
    SECS_PER_MINUTE,
    U64_MAX,
)


class DurationOverflowError(OverflowError):
    """Raised when duration arithmetic leaves the unsigned range.

    This is not a recoverable condition: callers are expected to keep
    operands within range rather than catch it.
    """


@dataclass(frozen=True, order=True)
class Duration:
    """Unsigned span of time as whole seconds plus sub-second nanoseconds.

    Used as the duration-since-epoch form that ``Seconds`` converts to and
    from. It cannot represent negative spans.
    """

    secs: int
    nanos: int = 0

    ZERO: ClassVar["Duration"]
    MAX: ClassVar["Duration"]

    def __post_init__(self) -> None:
        for name in ("secs", "nanos"):
            field = getattr(self, name)
            if isinstance(field, bool) or not isinstance(field, int):
                raise TypeError(
                    f"Duration {name} must be an int.\n"
                    f"Got {type(field).__name__!r}: {field!r}\n"
                    f"Hint: use Duration.from_secs_f64() for fractional seconds"
                )
        if not 0 <= self.secs <= U64_MAX:
            raise ValueError(
                f"Duration secs ({self.secs}) must be between 0 and {U64_MAX}"
            )
        if not 0 <= self.nanos < NANOS_PER_SEC:
            raise ValueError(
                f"Duration nanos ({self.nanos}) must be between 0 and "
                f"{NANOS_PER_SEC - 1}\n"
                f"Hint: use Duration.new(secs, nanos) to carry excess "
                f"nanoseconds into seconds"
            )

    @classmethod
    def new(cls, secs: int, nanos: int) -> "Duration":
        """Build a duration, carrying nanoseconds past one second into secs."""
        extra, nanos = divmod(nanos, NANOS_PER_SEC)
        secs += extra
        if secs > U64_MAX:
            raise DurationOverflowError("overflow in Duration.new")
        return cls(secs, nanos)

    @classmethod
    def from_secs(cls, secs: int) -> "Duration":
        return cls(secs)

    @classmethod
    def from_millis(cls, millis: int) -> "Duration":
        secs, rem = divmod(millis, 1000)
        return cls(secs, rem * NANOS_PER_MILLI)

    @classmethod
    def from_micros(cls, micros: int) -> "Duration":
        secs, rem = divmod(micros, 1_000_000)
        return cls(secs, rem * NANOS_PER_MICRO)

    @classmethod
    def from_nanos(cls, nanos: int) -> "Duration":
        secs, rem = divmod(nanos, NANOS_PER_SEC)
        return cls(secs, rem)

    @classmethod
    def from_secs_f64(cls, secs: float) -> "Duration":
        """Convert fractional seconds, rejecting negative and non-finite input."""
        if secs != secs or secs < 0:
            raise ValueError(
                f"can not convert float seconds to Duration: got {secs!r}"
            )
        if secs >= U64_MAX + 1:
            raise DurationOverflowError(
                f"can not convert float seconds to Duration: {secs!r} is too big"
            )
        whole = int(secs)
        return cls.new(whole, round((secs - whole) * NANOS_PER_SEC))

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        """Convert a non-negative ``datetime.timedelta``.

        Raises:
            ValueError: If the timedelta is negative
        """
        if delta < timedelta(0):
            raise ValueError(
                f"Duration cannot represent a negative span.\n"
                f"Got timedelta: {delta!r}\n"
                f"Hint: use a non-negative timedelta and pick + or - for the direction"
            )
        secs = delta.days * SECS_PER_DAY + delta.seconds
        return cls(secs, delta.microseconds * NANOS_PER_MICRO)

    @property
    def subsec_nanos(self) -> int:
        return self.nanos

    def as_nanos(self) -> int:
        return self.secs * NANOS_PER_SEC + self.nanos

    def as_secs_f64(self) -> float:
        return self.secs + self.nanos / NANOS_PER_SEC

    def to_timedelta(self) -> timedelta:
        """Convert to ``datetime.timedelta`` (microsecond precision, truncated)."""
        return timedelta(seconds=self.secs, microseconds=self.nanos // NANOS_PER_MICRO)

    def checked_add(self, other: "Duration") -> "Duration | None":
        total = self.as_nanos() + other.as_nanos()
        if total > Duration.MAX.as_nanos():
            return None
        return Duration.from_nanos(total)

    def checked_sub(self, other: "Duration") -> "Duration | None":
        total = self.as_nanos() - other.as_nanos()
        if total < 0:
            return None
        return Duration.from_nanos(total)

    def saturating_sub(self, other: "Duration") -> "Duration":
        result = self.checked_sub(other)
        return Duration.ZERO if result is None else result

    def __add__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        result = self.checked_add(other)
        if result is None:
            raise DurationOverflowError("overflow when adding durations")
        return result

    def __sub__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        result = self.checked_sub(other)
        if result is None:
            raise DurationOverflowError("overflow when subtracting durations")
        return result

    def __bool__(self) -> bool:
        return self.secs != 0 or self.nanos != 0

    @override
    def __str__(self) -> str:
        if self.nanos == 0:
            return f"{self.secs}s"
        return f"{self.secs}.{self.nanos:09d}".rstrip("0") + "s"


Duration.ZERO = Duration(0)
Duration.MAX = Duration(U64_MAX, NANOS_PER_SEC - 1)

SECOND = Duration(1)
MINUTE = Duration(SECS_PER_MINUTE)
HOUR = Duration(SECS_PER_HOUR)
DAY = Duration(SECS_PER_DAY)
