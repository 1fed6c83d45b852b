"""Vanilla option products (instrument data only; pricing lives in pricers)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Union

from pricing_core.dates import to_utc
from pricing_core.money import Money


class OptionType(str, Enum):
    CALL = "CALL"
    PUT = "PUT"

    def __str__(self) -> str:
        return self.value


class ExerciseStyle(str, Enum):
    EUROPEAN = "E"
    AMERICAN = "A"


@dataclass(frozen=True)
class EuropeanExercise:
    """Exercisable only on ``date``."""

    date: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", to_utc(self.date))

    @property
    def style(self) -> ExerciseStyle:
        return ExerciseStyle.EUROPEAN

    @property
    def last_date(self) -> datetime:
        return self.date

    def dates(self) -> tuple[datetime, ...]:
        return (self.date,)


@dataclass(frozen=True)
class AmericanExercise:
    """Exercisable on any date up to and including ``date``."""

    date: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", to_utc(self.date))

    @property
    def style(self) -> ExerciseStyle:
        return ExerciseStyle.AMERICAN

    @property
    def last_date(self) -> datetime:
        return self.date

    def dates(self) -> tuple[datetime, ...]:
        return (self.date,)


Exercise = Union[EuropeanExercise, AmericanExercise]


@dataclass(frozen=True)
class VanillaPayoff:
    """Plain call/put payoff struck at ``strike``."""

    strike: Money
    option_type: OptionType

    def apply(self, price: Money) -> Money:
        """Intrinsic value at underlying ``price``: max(S-K, 0) or max(K-S, 0)."""
        if self.option_type is OptionType.CALL:
            intrinsic = price - self.strike
        else:
            intrinsic = self.strike - price
        return max(intrinsic, Money.zero(self.strike.currency))

    def __str__(self) -> str:
        return f"{self.strike} {self.option_type}"


@dataclass(frozen=True)
class VanillaOption:
    """
    Vanilla call or put.

    ``str()`` renders expiry, strike, type and style, e.g.
    ``24/07/27 $ 30.00 C (E)``.
    """

    payoff: VanillaPayoff
    exercise: Exercise

    @classmethod
    def european(
        cls, strike: Money, expiry: date | datetime, option_type: OptionType
    ) -> VanillaOption:
        return cls(VanillaPayoff(strike, option_type), EuropeanExercise(to_utc(expiry)))

    @classmethod
    def american(
        cls, strike: Money, expiry: date | datetime, option_type: OptionType
    ) -> VanillaOption:
        return cls(VanillaPayoff(strike, option_type), AmericanExercise(to_utc(expiry)))

    @property
    def option_type(self) -> OptionType:
        return self.payoff.option_type

    @property
    def strike(self) -> Money:
        return self.payoff.strike

    @property
    def exercise_date(self) -> datetime:
        return self.exercise.last_date

    @property
    def style(self) -> ExerciseStyle:
        return self.exercise.style

    def __str__(self) -> str:
        return (
            f"{self.exercise_date:%y/%m/%d} {self.strike} "
            f"{self.option_type.value[0]} ({self.style.value})"
        )
