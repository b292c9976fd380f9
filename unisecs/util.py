"""Numeric constants shared across unisecs.

The unsigned limits mirror the ranges a duration-since-epoch can take.
"""

NANOS_PER_SEC = 1_000_000_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_MICRO = 1_000

SECS_PER_MINUTE = 60
SECS_PER_HOUR = 3600
SECS_PER_DAY = 86400

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1


def saturating_cast(value: float, upper: int) -> int:
    """Truncate a float toward zero, clamped to ``[0, upper]``.

    NaN maps to 0, matching a float-to-unsigned cast.
    """
    if value != value or value <= 0:
        return 0
    if value >= upper:
        return upper
    return int(value)
