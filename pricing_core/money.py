"""
Monetary amounts tagged with a currency.

``Money`` pairs a ``Finite`` amount with a ``Currency`` record. Amounts in
different currencies never combine implicitly: arithmetic and ordering check
the currency code at runtime and raise ``CurrencyMismatchError``. Crossing
currencies goes through an explicit ``ExchangeRate``.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from numbers import Real
from typing import Any, Optional

from pricing_core.errors import (
    ArithmeticDomainViolation,
    CurrencyMismatchError,
    DomainConstructionError,
)
from pricing_core.floats import ConstrainedFloat, Finite, PositiveFinite


@dataclass(frozen=True)
class Currency:
    """ISO 4217 currency metadata."""

    code: str
    numeric: int
    symbol: str
    minor: int
    name: str

    def __str__(self) -> str:
        return self.code


USD = Currency(code="USD", numeric=840, symbol="$", minor=2, name="United States dollar")
EUR = Currency(code="EUR", numeric=978, symbol="€", minor=2, name="Euro")
GBP = Currency(code="GBP", numeric=826, symbol="£", minor=2, name="Pound sterling")
JPY = Currency(code="JPY", numeric=392, symbol="¥", minor=0, name="Japanese yen")
CHF = Currency(code="CHF", numeric=756, symbol="CHF", minor=2, name="Swiss franc")

_CURRENCIES = {c.code: c for c in (USD, EUR, GBP, JPY, CHF)}


def get_currency(code: str) -> Currency:
    """Look up a registered currency by ISO code (case-insensitive)."""
    try:
        return _CURRENCIES[code.upper()]
    except KeyError:
        raise KeyError(
            f"Unknown currency '{code}'. Available: {sorted(_CURRENCIES)}"
        ) from None


@total_ordering
@dataclass(frozen=True, eq=False)
class Money:
    """
    A finite amount of one currency.

    Construction raises ``DomainConstructionError`` for NaN or infinite
    amounts; ``Money.new`` returns None instead.
    """

    amount: Finite
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Finite):
            object.__setattr__(self, "amount", Finite(self.amount))

    @classmethod
    def new(cls, amount: Any, currency: Currency) -> Optional[Money]:
        finite = Finite.new(amount)
        if finite is None:
            return None
        return cls(finite, currency)

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        return cls(Finite(0.0), currency)

    @property
    def value(self) -> float:
        """Raw amount as a float."""
        return self.amount.value

    def _check_currency(self, other: Money) -> None:
        if self.currency.code != other.currency.code:
            raise CurrencyMismatchError(
                self.currency.code,
                other.currency.code,
                context={"left": str(self), "right": str(other)},
            )

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other)
        return Money(self.amount - other.amount, self.currency)

    def __mul__(self, scalar: Any) -> Money:
        if not _is_scalar(scalar):
            return NotImplemented
        return Money(self.amount * scalar, self.currency)

    __rmul__ = __mul__

    def __truediv__(self, scalar: Any) -> Money:
        if not _is_scalar(scalar):
            return NotImplemented
        return Money(self.amount / scalar, self.currency)

    def __neg__(self) -> Money:
        return Money(-self.amount, self.currency)

    def __abs__(self) -> Money:
        return Money(abs(self.amount), self.currency)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.currency.code == other.currency.code and self.amount == other.amount

    def __lt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other)
        return self.amount < other.amount

    def __hash__(self) -> int:
        return hash((self.amount.value, self.currency.code))

    def __float__(self) -> float:
        return self.amount.value

    def __str__(self) -> str:
        return f"{self.currency.symbol} {self.amount.value:.{self.currency.minor}f}"

    def __repr__(self) -> str:
        return f"Money({self.amount.value!r}, {self.currency.code})"


def _is_scalar(value: Any) -> bool:
    return isinstance(value, ConstrainedFloat) or (
        isinstance(value, Real) and not isinstance(value, bool)
    )


@dataclass(frozen=True)
class ExchangeRate:
    """
    Quote-currency units per one unit of base currency (EUR/USD 1.08 means
    1 EUR = 1.08 USD).
    """

    base: Currency
    quote: Currency
    rate: PositiveFinite

    def __post_init__(self) -> None:
        if not isinstance(self.rate, PositiveFinite):
            object.__setattr__(self, "rate", PositiveFinite(self.rate))
        if self.base.code == self.quote.code:
            raise DomainConstructionError(
                f"{self.base.code}/{self.quote.code}",
                "ExchangeRate",
                "(base and quote must differ)",
            )

    def convert_to_base(self, money: Money) -> Money:
        """Convert a quote-currency amount into the base currency."""
        if money.currency.code != self.quote.code:
            raise CurrencyMismatchError(money.currency.code, self.quote.code)
        return Money(money.amount / self.rate.value, self.base)

    def convert_to_quote(self, money: Money) -> Money:
        """Convert a base-currency amount into the quote currency."""
        if money.currency.code != self.base.code:
            raise CurrencyMismatchError(money.currency.code, self.base.code)
        return Money(money.amount * self.rate.value, self.quote)

    def inverse(self) -> ExchangeRate:
        return ExchangeRate(self.quote, self.base, PositiveFinite(1.0 / self.rate.value))

    def __str__(self) -> str:
        return f"{self.rate.value} {self.base.code}/{self.quote.code}"
