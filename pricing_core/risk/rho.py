"""Parallel rho risk measure (bump-and-reprice)."""

from __future__ import annotations

from dataclasses import dataclass

from pricing_core.pricers.black_scholes import AnalyticBlackScholesMerton
from pricing_core.products.options import VanillaOption
from pricing_core.risk.base import BaseRiskMeasure


@dataclass
class Rho(BaseRiskMeasure):
    """Rho: PV change for a parallel shift of the yield curve."""

    bump_bp: float = 1.0

    @property
    def name(self) -> str:
        return f"Rho_{self.bump_bp:g}bp"

    def compute(self, option: VanillaOption, pricer: AnalyticBlackScholesMerton) -> float:
        """PV(bumped) - PV(base) for a parallel curve shift."""
        bump = self.bump_bp / 10000.0
        bumped_pricer = pricer.with_yield_curve(pricer.yield_curve.bumped(bump))
        return (bumped_pricer.price(option) - pricer.price(option)).value
