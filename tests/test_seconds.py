import math
from datetime import timedelta

import pytest
from typing_extensions import override

from unisecs import DAY, HOUR, MINUTE, SECOND, Clock, Duration, DurationOverflowError, Seconds
from unisecs.util import U64_MAX


class FixedClock(Clock):
    """Clock that always reports the same elapsed time."""

    def __init__(self, elapsed: Duration):
        self.elapsed: Duration = elapsed

    @override
    def since_epoch(self) -> Duration:
        return self.elapsed


SAMPLE = Seconds(1545136342.711932)


def test_default_matches_now() -> None:
    now, default = Seconds.now(), Seconds.default()
    assert now.trunc() == default.trunc()


def test_now_reads_the_given_clock() -> None:
    clock = FixedClock(Duration(1545136342, 711_932_000))
    assert Seconds.now(clock) == Seconds(1545136342.711932)


class EpochClock(FixedClock):
    """A clock that reads as falsy, like an empty container."""

    def __bool__(self) -> bool:
        return False


def test_now_uses_a_falsy_clock() -> None:
    assert Seconds.now(EpochClock(Duration.ZERO)) == Seconds(0.0)


def test_shift_then_unshift_matches_net_shift() -> None:
    now = Seconds.now(FixedClock(Duration(1545136342, 711_932_000)))
    d1 = Duration(3600, 250_000_000)
    d2 = Duration(10, 100_000_000)

    assert ((now + d1) - d2).trunc() == (now + (d1 - d2)).trunc()


def test_shift_against_system_clock() -> None:
    now = Seconds.now()
    d1 = Duration(120)
    d2 = Duration(60)
    assert abs(((now + d1) - d2).trunc().value - (now + (d1 - d2)).trunc().value) <= 1


@pytest.mark.parametrize(
    "duration",
    [
        Duration.ZERO,
        Duration(1, 999_999_999),
        Duration(1545136342, 711_932_000),
        Duration(2**40, 5),
    ],
)
def test_duration_round_trip_keeps_whole_seconds(duration: Duration) -> None:
    assert Seconds.from_duration(duration).to_duration().secs == duration.secs


def test_from_duration_combines_seconds_and_nanos() -> None:
    assert Seconds.from_duration(Duration(90, 250_000_000)) == Seconds(90.25)


def test_to_duration_rounds_nanos() -> None:
    duration = Seconds(90.25).to_duration()
    assert duration == Duration(90, 250_000_000)
    assert SAMPLE.to_duration().secs == 1545136342
    assert abs(SAMPLE.to_duration().nanos - 711_932_000) < 1000


def test_to_duration_carries_rounded_nanos() -> None:
    assert Seconds(1.9999999999).to_duration() == Duration(2, 0)


def test_negative_seconds_truncate_to_zero_duration() -> None:
    assert Seconds(-1.5).to_duration() == Duration.ZERO
    assert Seconds(-0.25).to_duration() == Duration.ZERO


def test_non_finite_seconds_do_not_crash() -> None:
    assert Seconds(math.nan).to_duration() == Duration.ZERO
    assert Seconds(math.inf).to_duration() == Duration(U64_MAX, 0)


def test_trunc_drops_fraction() -> None:
    truncated = SAMPLE.trunc()
    assert isinstance(truncated, Seconds)
    assert truncated == Seconds(1545136342.0)
    assert Seconds(-1.5).trunc() == Seconds(-1.0)


def test_format() -> None:
    assert str(SAMPLE) == "1545136342.711932"
    assert f"{SAMPLE}" == "1545136342.711932"
    assert repr(SAMPLE) == "Seconds(value=1545136342.711932)"


def test_add_one_second() -> None:
    assert SAMPLE + Duration(1) == Seconds(1545136343.711932)


def test_sub_one_second() -> None:
    assert SAMPLE - Duration(1) == Seconds(1545136341.711932)


def test_timedelta_operands() -> None:
    assert SAMPLE + timedelta(seconds=1) == Seconds(1545136343.711932)
    assert SAMPLE - timedelta(seconds=1) == Seconds(1545136341.711932)


def test_negative_timedelta_is_rejected() -> None:
    with pytest.raises(ValueError, match="negative span"):
        SAMPLE + timedelta(seconds=-1)


def test_negative_timedelta_hint_fits_both_operators() -> None:
    with pytest.raises(ValueError, match="non-negative timedelta") as exc_info:
        Seconds(10.0) - timedelta(seconds=-1)
    assert "adding" not in str(exc_info.value)


def test_unit_constants_shift_seconds() -> None:
    assert Seconds(0.0) + MINUTE == Seconds(60.0)
    assert Seconds(86400.5) - DAY == Seconds(0.5)
    assert Seconds(10.0) + HOUR - SECOND == Seconds(3609.0)
    assert HOUR == Duration(3600)


def test_sub_past_epoch_fails() -> None:
    with pytest.raises(DurationOverflowError, match="overflow when subtracting durations"):
        Seconds(10.0) - Duration(11)


def test_add_past_max_fails() -> None:
    with pytest.raises(DurationOverflowError, match="overflow when adding durations"):
        Seconds(1.0) + Duration.MAX


def test_unsupported_operand() -> None:
    with pytest.raises(TypeError):
        SAMPLE + 1  # pyright: ignore[reportOperatorIssue]
    with pytest.raises(TypeError):
        SAMPLE - "1s"  # pyright: ignore[reportOperatorIssue]


def test_equality_is_float_equality() -> None:
    assert Seconds(1) == Seconds(1.0)
    assert Seconds(0.0) == Seconds(-0.0)
    nan = Seconds(math.nan)
    assert nan != nan
    assert Seconds(1.0) != 1.0
    assert len({Seconds(1.0), Seconds(1)}) == 1


def test_negative_values_are_accepted() -> None:
    assert Seconds(-86400.5).value == -86400.5


def test_constructor_rejects_non_numbers() -> None:
    with pytest.raises(TypeError, match="must be a real number"):
        Seconds("1545136342.711932")  # pyright: ignore[reportArgumentType]
    with pytest.raises(TypeError, match="must be a real number"):
        Seconds(True)


def test_value_is_always_float() -> None:
    secs = Seconds(3)
    assert isinstance(secs.value, float)
    assert str(secs) == "3.0"


def test_immutable() -> None:
    with pytest.raises(AttributeError):
        SAMPLE.value = 0.0  # pyright: ignore[reportAttributeAccessIssue]


def test_numeric_conversions() -> None:
    assert float(SAMPLE) == 1545136342.711932
    assert int(SAMPLE) == 1545136342


def test_timedelta_interop() -> None:
    assert Seconds.from_timedelta(timedelta(seconds=90, microseconds=250_000)) == Seconds(90.25)
    assert Seconds(90.25).to_timedelta() == timedelta(seconds=90.25)
