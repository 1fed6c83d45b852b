"""Base pricer abstract class for instrument pricing implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from pricing_core.interfaces import Instrument
from pricing_core.money import Money


class BasePricer(ABC):
    """Abstract base class for instrument pricers.

    Subclasses implement can_price() and price() for specific instrument types.
    This allows pricing logic to be isolated, testable, and pluggable.
    """

    @abstractmethod
    def can_price(self, instrument: Instrument) -> bool:
        """Return True if this pricer handles the instrument."""
        ...

    @abstractmethod
    def price(self, instrument: Instrument) -> Money:
        """Compute present value."""
        ...

    def price_vec(self, instruments: Sequence[Instrument]) -> list[Money]:
        """Price each instrument independently, preserving input order."""
        return [self.price(instrument) for instrument in instruments]
