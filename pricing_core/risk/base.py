"""Base class for risk measure implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pricing_core.pricers.black_scholes import AnalyticBlackScholesMerton
from pricing_core.products.options import VanillaOption


class BaseRiskMeasure(ABC):
    """Base class for risk measure implementations."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name."""
        ...

    @abstractmethod
    def compute(self, option: VanillaOption, pricer: AnalyticBlackScholesMerton) -> float:
        """Compute the risk measure value."""
        ...
