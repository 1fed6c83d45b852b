"""Spot delta risk measure (spot bump, finite difference)."""

from __future__ import annotations

from dataclasses import dataclass

from pricing_core.pricers.black_scholes import AnalyticBlackScholesMerton
from pricing_core.products.options import VanillaOption
from pricing_core.risk.base import BaseRiskMeasure


@dataclass
class Delta(BaseRiskMeasure):
    """Delta: (PV(bumped) - PV(base)) / (spot_bumped - spot)."""

    bump_pct: float = 0.01

    @property
    def name(self) -> str:
        return "Delta"

    def compute(self, option: VanillaOption, pricer: AnalyticBlackScholesMerton) -> float:
        """Finite-difference delta with relative spot bump."""
        spot = pricer.spot
        spot_bumped = spot * (1.0 + self.bump_pct)
        pv_base = pricer.price(option)
        pv_bumped = pricer.with_spot(spot_bumped).price(option)
        return (pv_bumped - pv_base).value / (spot_bumped - spot).value
