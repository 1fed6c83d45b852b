"""Shared fixtures for pricing_core tests."""

from datetime import datetime, timezone

import pytest

from pricing_core.config import reset_config
from pricing_core.curves import ConstantVolatilityCurve, FlatForwardCurve
from pricing_core.daycount import Actual365Fixed
from pricing_core.money import USD, Money
from pricing_core.rates import Compounding, InterestRate


@pytest.fixture(autouse=True)
def _default_config():
    """Every test starts and ends with the default configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def reference_date() -> datetime:
    return datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def act365() -> Actual365Fixed:
    return Actual365Fixed()


@pytest.fixture
def flat_curve(reference_date, act365) -> FlatForwardCurve:
    """Flat 4.5% continuously compounded curve, ACT/365F."""
    rate = InterestRate(0.045, act365, Compounding.continuous())
    return FlatForwardCurve(reference_date, rate)


@pytest.fixture
def atm_market():
    """S=K=100 USD, r=5% cont., sigma=20%, exactly one ACT/365F year to expiry."""
    ref = datetime(2023, 1, 1, tzinfo=timezone.utc)
    expiry = datetime(2024, 1, 1, tzinfo=timezone.utc)
    dc = Actual365Fixed()
    yield_curve = FlatForwardCurve(ref, InterestRate(0.05, dc, Compounding.continuous()))
    vol_curve = ConstantVolatilityCurve(0.20, reference_date=ref, day_counter=dc)
    return {
        "spot": Money(100.0, USD),
        "strike": Money(100.0, USD),
        "expiry": expiry,
        "yield_curve": yield_curve,
        "vol_curve": vol_curve,
    }
