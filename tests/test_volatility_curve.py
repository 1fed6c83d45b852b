"""Tests for Black volatility curves."""

import math
from datetime import datetime, timedelta, timezone

import pytest

from pricing_core.curves import (
    BlackVolatilityCurve,
    BlackVolatilityCurveBuilder,
    ConstantVolatilityCurve,
)
from pricing_core.daycount import Actual365Fixed
from pricing_core.errors import (
    ArithmeticDomainViolation,
    CurveConstructionError,
    NegativeVolatilityError,
    T2LessThanT1,
)
from pricing_core.floats import Volatility
from pricing_core.interpolation import ExistingValue, InterpolatedValue, OutOfRange
from pricing_core.money import USD, Money


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


STRIKE = Money(100.0, USD)


def _curve(reference_date) -> BlackVolatilityCurve:
    return BlackVolatilityCurve(
        reference_date,
        points=((utc(2025, 1, 1), 0.30), (utc(2024, 1, 1), 0.20)),
        day_counter=Actual365Fixed(),
    )


def test_constant_curve_returns_existing_value(reference_date) -> None:
    """Every maturity and strike gets the same volatility."""
    curve = ConstantVolatilityCurve(0.2, reference_date=reference_date)
    assert curve.black_volatility(utc(2030, 1, 1), STRIKE) == ExistingValue(Volatility(0.2))
    assert curve.black_volatility(reference_date, 50.0) == ExistingValue(Volatility(0.2))
    assert curve.black_forward_volatility(utc(2025, 1, 1), utc(2026, 1, 1), STRIKE) == ExistingValue(
        Volatility(0.2)
    )


def test_constant_curve_validation() -> None:
    """Negative or missing volatility is rejected once, at construction."""
    with pytest.raises(NegativeVolatilityError, match="non-negative"):
        ConstantVolatilityCurve(-0.1)
    with pytest.raises(CurveConstructionError, match="no volatility provided"):
        ConstantVolatilityCurve(None)
    with pytest.raises(CurveConstructionError, match="finite"):
        ConstantVolatilityCurve(math.inf)


def test_negative_zero_volatility_is_zero(reference_date) -> None:
    """-0.0 is accepted as a zero volatility by both curve types."""
    constant = ConstantVolatilityCurve(-0.0, reference_date=reference_date)
    assert constant.black_volatility(utc(2025, 1, 1), STRIKE) == ExistingValue(Volatility(0.0))
    assert math.copysign(1.0, constant.volatility.value) == 1.0

    curve = BlackVolatilityCurve(reference_date, points=((utc(2025, 1, 1), -0.0),))
    assert curve.black_volatility(utc(2025, 1, 1), STRIKE) == ExistingValue(Volatility(0.0))


def test_constant_curve_defaults_to_now() -> None:
    """Without a reference date the curve starts now, in UTC."""
    curve = ConstantVolatilityCurve(0.15)
    assert curve.reference_date.tzinfo is not None
    assert abs(datetime.now(timezone.utc) - curve.reference_date) < timedelta(minutes=1)
    assert curve.max_date == utc(9999, 12, 31)


def test_constant_curve_bumped(reference_date) -> None:
    """Bumping shifts the volatility; a negative result is rejected."""
    curve = ConstantVolatilityCurve(0.2, reference_date=reference_date)
    assert abs(curve.bumped(0.01).volatility.value - 0.21) < 1e-15
    with pytest.raises(NegativeVolatilityError):
        curve.bumped(-0.3)


def test_curve_lookup(reference_date) -> None:
    """Exact, interpolated and out-of-range maturities."""
    curve = _curve(reference_date)
    assert curve.black_volatility(reference_date, STRIKE) == ExistingValue(Volatility(0.2))
    assert curve.black_volatility(utc(2025, 1, 1), STRIKE) == ExistingValue(Volatility(0.3))

    mid = curve.black_volatility(utc(2024, 7, 2), STRIKE)
    assert isinstance(mid, InterpolatedValue)
    assert isinstance(mid.value, Volatility)
    assert abs(mid.value.value - (0.2 + 0.1 * 183 / 366)) < 1e-12

    assert curve.black_volatility(utc(2025, 1, 2), STRIKE) == OutOfRange()
    assert curve.black_volatility(utc(2023, 12, 31), STRIKE) == OutOfRange()


def test_curve_strike_is_ignored(reference_date) -> None:
    """The smile is flat: the strike does not change the answer."""
    curve = _curve(reference_date)
    when = utc(2024, 7, 2)
    assert curve.black_volatility(when, Money(50.0, USD)) == curve.black_volatility(when, STRIKE)


def test_curve_max_date_is_last_point(reference_date) -> None:
    """The curve ends at its last sample."""
    curve = _curve(reference_date)
    assert curve.max_date == utc(2025, 1, 1)
    assert curve.points[0] == (utc(2024, 1, 1), Volatility(0.2))


def test_curve_validation(reference_date) -> None:
    """Bad samples are rejected at construction."""
    with pytest.raises(NegativeVolatilityError):
        BlackVolatilityCurve(reference_date, points=((utc(2025, 1, 1), -0.1),))
    with pytest.raises(CurveConstructionError, match="finite"):
        BlackVolatilityCurve(reference_date, points=((utc(2025, 1, 1), math.nan),))
    with pytest.raises(CurveConstructionError, match="duplicate"):
        BlackVolatilityCurve(
            reference_date, points=((utc(2025, 1, 1), 0.1), (utc(2025, 1, 1), 0.2))
        )
    with pytest.raises(CurveConstructionError, match="precedes reference date"):
        BlackVolatilityCurve(reference_date, points=((utc(2023, 1, 1), 0.1),))
    with pytest.raises(CurveConstructionError, match="at least one point"):
        BlackVolatilityCurve(reference_date, points=())


def test_forward_volatility_from_total_variance(reference_date) -> None:
    """sigma_f^2 = (sigma_2^2 t_2 - sigma_1^2 t_1) / (t_2 - t_1)."""
    curve = BlackVolatilityCurve(
        reference_date,
        points=((utc(2025, 1, 1), 0.20), (utc(2026, 1, 1), 0.30)),
        day_counter=Actual365Fixed(),
    )
    t1, t2 = 366 / 365, 731 / 365
    expected = math.sqrt((0.09 * t2 - 0.04 * t1) / (t2 - t1))
    result = curve.black_forward_volatility(utc(2025, 1, 1), utc(2026, 1, 1), STRIKE)
    assert isinstance(result, InterpolatedValue)
    assert abs(result.value.value - expected) < 1e-12


def test_forward_volatility_edge_cases(reference_date) -> None:
    """Reversed intervals raise; unavailable ends propagate; decreasing variance raises."""
    curve = _curve(reference_date)
    with pytest.raises(T2LessThanT1):
        curve.black_forward_volatility(utc(2024, 6, 1), utc(2024, 3, 1), STRIKE)
    assert curve.black_forward_volatility(utc(2024, 6, 1), utc(2026, 1, 1), STRIKE) == OutOfRange()

    inverted = BlackVolatilityCurve(
        reference_date, points=((utc(2025, 1, 1), 0.40), (utc(2026, 1, 1), 0.10))
    )
    with pytest.raises(ArithmeticDomainViolation, match="negative forward variance"):
        inverted.black_forward_volatility(utc(2025, 1, 1), utc(2026, 1, 1), STRIKE)


def test_curve_bumped(reference_date) -> None:
    """All samples move by the bump."""
    bumped = _curve(reference_date).bumped(0.05)
    assert abs(bumped.black_volatility(reference_date, STRIKE).value.value - 0.25) < 1e-15
    assert abs(bumped.black_volatility(utc(2025, 1, 1), STRIKE).value.value - 0.35) < 1e-15


def test_builder(reference_date) -> None:
    """Builder upserts and removes points, then builds the curve."""
    builder = BlackVolatilityCurveBuilder(reference_date)
    assert builder.add_point(utc(2025, 1, 1), 0.25) is None
    assert builder.add_points([(reference_date, 0.2), (utc(2025, 1, 1), 0.3)]) == [None, 0.25]
    assert builder.add_point(utc(2026, 1, 1), 0.35) is None
    assert builder.remove_points([utc(2026, 1, 1), utc(2027, 1, 1)]) == [0.35, None]
    assert len(builder) == 2

    curve = builder.build()
    assert curve.black_volatility(utc(2025, 1, 1), STRIKE) == ExistingValue(Volatility(0.3))
    assert curve.max_date == utc(2025, 1, 1)


def test_builder_rejects_on_build(reference_date) -> None:
    """Validation happens when the curve is built."""
    builder = BlackVolatilityCurveBuilder(reference_date)
    builder.add_point(utc(2025, 1, 1), -0.2)
    with pytest.raises(NegativeVolatilityError):
        builder.build()
    with pytest.raises(CurveConstructionError):
        BlackVolatilityCurveBuilder(reference_date).build()
