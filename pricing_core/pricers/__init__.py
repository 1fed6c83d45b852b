"""Pricer implementations."""

from pricing_core.pricers.base import BasePricer
from pricing_core.pricers.black_scholes import AnalyticBlackScholesMerton

__all__ = [
    "BasePricer",
    "AnalyticBlackScholesMerton",
]
