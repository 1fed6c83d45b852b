"""Tests for FlatForwardCurve, InterpolatedZeroCurve and ZeroCurveBuilder."""

import math
from datetime import date, datetime, timezone

import pytest

from pricing_core.curves import FlatForwardCurve, InterpolatedZeroCurve, ZeroCurveBuilder
from pricing_core.daycount import Actual365Fixed
from pricing_core.errors import (
    CurveConstructionError,
    DomainConstructionError,
    InvalidDateTime,
    T2LessThanT1,
)
from pricing_core.rates import Compounding, CompoundingKind, InterestRate


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def test_flat_curve_discount_factors(flat_curve) -> None:
    """Flat 4.5% continuous, ACT/365F, reference 2024-01-01."""
    assert abs(flat_curve.discount_factor(utc(2025, 1, 1)).value - 0.95587962) < 1e-7
    assert abs(flat_curve.discount_factor(utc(2025, 8, 1)).value - 0.93121948) < 1e-7


def test_flat_curve_zero_and_forward_rates(flat_curve) -> None:
    """Zero and forward rates of a flat curve equal the curve rate."""
    zero = flat_curve.zero_rate(utc(2025, 1, 1))
    assert abs(zero.rate.value - 0.045) < 1e-10
    assert zero.compounding.kind is CompoundingKind.CONTINUOUS

    forward = flat_curve.forward_rate(utc(2024, 6, 1), utc(2025, 1, 1))
    assert abs(forward.rate.value - 0.045) < 1e-9


def test_discount_factor_at_reference_date(flat_curve, reference_date) -> None:
    """A zero year fraction is replaced by the minimum fraction, so DF is ~1."""
    df = flat_curve.discount_factor(reference_date)
    assert abs(df.value - 1.0) < 1e-8
    assert abs(flat_curve.zero_rate(reference_date).rate.value - 0.045) < 1e-6


def test_dates_outside_curve_rejected(reference_date, act365) -> None:
    """Before the reference date or after max_date raises InvalidDateTime."""
    curve = FlatForwardCurve(
        reference_date,
        InterestRate(0.03, act365, Compounding.continuous()),
        max_date=utc(2030, 1, 1),
    )
    with pytest.raises(InvalidDateTime, match="lies outside"):
        curve.discount_factor(utc(2023, 12, 31))
    with pytest.raises(InvalidDateTime):
        curve.zero_rate(utc(2031, 1, 1))
    with pytest.raises(InvalidDateTime):
        curve.forward_rate(utc(2025, 1, 1), utc(2031, 1, 1))
    assert curve.is_date_valid(utc(2030, 1, 1))
    assert not curve.is_date_valid(utc(2030, 1, 2))


def test_reversed_forward_interval(flat_curve) -> None:
    """forward_rate(t1, t2) with t2 < t1 raises."""
    with pytest.raises(T2LessThanT1):
        flat_curve.forward_rate(utc(2025, 1, 1), utc(2024, 6, 1))


def test_default_max_date(flat_curve) -> None:
    """Flat curves extend to 9999-12-31 unless told otherwise."""
    assert flat_curve.max_date == utc(9999, 12, 31)


def test_naive_dates_accepted(flat_curve) -> None:
    """Naive datetimes and bare dates are treated as UTC."""
    aware = flat_curve.discount_factor(utc(2025, 1, 1)).value
    assert flat_curve.discount_factor(datetime(2025, 1, 1)).value == aware
    assert flat_curve.discount_factor(date(2025, 1, 1)).value == aware


def test_negative_rate_discount_factor_rejected(reference_date, act365) -> None:
    """Discount factors above one are outside their domain."""
    curve = FlatForwardCurve(reference_date, InterestRate(-0.01, act365, Compounding.continuous()))
    with pytest.raises(DomainConstructionError):
        curve.discount_factor(utc(2025, 1, 1))


def test_flat_curve_bumped(flat_curve) -> None:
    """Parallel bump shifts the rate and leaves the original alone."""
    bumped = flat_curve.bumped(0.001)
    assert abs(bumped.zero_rate(utc(2025, 1, 1)).rate.value - 0.046) < 1e-10
    assert flat_curve.rate.rate.value == 0.045
    assert bumped.discount_factor(utc(2025, 1, 1)) < flat_curve.discount_factor(utc(2025, 1, 1))


def test_max_date_before_reference_rejected(reference_date, act365) -> None:
    """max_date must not precede the reference date."""
    with pytest.raises(CurveConstructionError):
        FlatForwardCurve(
            reference_date,
            InterestRate(0.03, act365, Compounding.continuous()),
            max_date=utc(2023, 1, 1),
        )


def _zero_curve(reference_date) -> InterpolatedZeroCurve:
    return InterpolatedZeroCurve(
        reference_date,
        pillars=((utc(2026, 1, 1), 0.05), (utc(2025, 1, 1), 0.04)),
        day_counter=Actual365Fixed(),
    )


def test_zero_curve_interpolates_rates(reference_date) -> None:
    """Linear in zero rate between pillars, flat before the first."""
    curve = _zero_curve(reference_date)
    assert curve.zero_rate_at(utc(2024, 6, 1)) == 0.04
    assert curve.zero_rate_at(utc(2025, 1, 1)) == 0.04
    assert abs(curve.zero_rate_at(utc(2025, 7, 2, 12)) - 0.045) < 1e-12
    assert curve.max_date == utc(2026, 1, 1)
    assert curve.pillars[0][0] == utc(2025, 1, 1)


def test_zero_curve_discount_factor(reference_date) -> None:
    """DF uses the interpolated rate with continuous compounding."""
    curve = _zero_curve(reference_date)
    expected = math.exp(-0.05 * 731 / 365)
    assert abs(curve.discount_factor(utc(2026, 1, 1)).value - expected) < 1e-12
    assert abs(curve.zero_rate(utc(2026, 1, 1)).rate.value - 0.05) < 1e-10
    with pytest.raises(InvalidDateTime):
        curve.discount_factor(utc(2026, 6, 1))


def test_zero_curve_discount_factors_decrease(reference_date) -> None:
    """With positive rates DF is strictly decreasing in maturity."""
    curve = _zero_curve(reference_date)
    dates = [utc(2024, 3, 1), utc(2024, 9, 1), utc(2025, 1, 1), utc(2025, 6, 1), utc(2026, 1, 1)]
    dfs = [curve.discount_factor(d).value for d in dates]
    for i in range(1, len(dfs)):
        assert dfs[i] < dfs[i - 1]
    assert all(0 < d <= 1 for d in dfs)


def test_zero_curve_validation(reference_date) -> None:
    """Empty, duplicate, pre-reference and non-finite pillars are rejected."""
    with pytest.raises(CurveConstructionError, match="at least one pillar"):
        InterpolatedZeroCurve(reference_date, pillars=())
    with pytest.raises(CurveConstructionError, match="duplicate"):
        InterpolatedZeroCurve(
            reference_date, pillars=((utc(2025, 1, 1), 0.04), (date(2025, 1, 1), 0.05))
        )
    with pytest.raises(CurveConstructionError, match="precedes reference date"):
        InterpolatedZeroCurve(reference_date, pillars=((utc(2023, 1, 1), 0.04),))
    with pytest.raises(CurveConstructionError, match="must be finite"):
        InterpolatedZeroCurve(reference_date, pillars=((utc(2025, 1, 1), math.nan),))


def test_zero_curve_bumped(reference_date) -> None:
    """Every pillar rate moves by the bump."""
    bumped = _zero_curve(reference_date).bumped(0.01)
    assert abs(bumped.zero_rate_at(utc(2025, 1, 1)) - 0.05) < 1e-12
    assert abs(bumped.zero_rate_at(utc(2026, 1, 1)) - 0.06) < 1e-12


def test_zero_curve_builder(reference_date) -> None:
    """Builder upserts by date and builds an immutable curve."""
    builder = ZeroCurveBuilder(reference_date, day_counter=Actual365Fixed())
    assert builder.add_rate(utc(2025, 1, 1), 0.03) is None
    assert builder.add_rates([(utc(2026, 1, 1), 0.05), (utc(2025, 1, 1), 0.04)]) == [None, 0.03]
    assert builder.add_rate(utc(2027, 1, 1), 0.06) is None
    assert builder.remove_rate(utc(2027, 1, 1)) == 0.06
    assert len(builder) == 2

    curve = builder.build()
    assert curve.zero_rate_at(utc(2025, 1, 1)) == 0.04
    assert curve.max_date == utc(2026, 1, 1)
    assert curve.compounding == Compounding.continuous()


def test_empty_builder_fails_to_build(reference_date) -> None:
    """Building without pillars raises."""
    with pytest.raises(CurveConstructionError):
        ZeroCurveBuilder(reference_date).build()
