"""
Domain-constrained floating-point values.

One validated-value base class, ``ConstrainedFloat``, is parameterised by a
predicate (``contains``). Variants only declare their domain:

- ``Finite``            no NaN, no infinities
- ``NonNegativeFinite`` [0, inf), rejecting -0.0
- ``Positive``          (0, inf]
- ``PositiveFinite``    (0, inf)

and the financial subtypes ``DiscountFactor`` (0, 1], ``CompoundFactor``
(0, inf) and ``Volatility`` [0, inf).

Construction never yields an invalid value: calling the class raises
``DomainConstructionError`` and ``Cls.new(raw)`` returns ``None``. Arithmetic
re-validates the result against the left operand's variant and raises
``ArithmeticDomainViolation`` when it would leave the domain, so e.g.
``NonNegativeFinite(1) - 2`` fails rather than going negative.

Since NaN can never be stored, plain IEEE ordering is a total order here.
"""

from __future__ import annotations

import math
import operator
from functools import total_ordering
from numbers import Real
from typing import Any, Callable, ClassVar, Optional, TypeVar, Union

from pricing_core.errors import ArithmeticDomainViolation, DomainConstructionError

T = TypeVar("T", bound="ConstrainedFloat")

FloatLike = Union["ConstrainedFloat", float, int]


@total_ordering
class ConstrainedFloat:
    """A float that always satisfies its class predicate."""

    __slots__ = ("_value",)

    domain: ClassVar[str] = "(-inf, inf)"

    def __init__(self, value: Any) -> None:
        raw = _to_float(value)
        if raw is None or not self.contains(raw):
            raise DomainConstructionError(value, type(self).__name__, self.domain)
        object.__setattr__(self, "_value", raw)

    @classmethod
    def contains(cls, value: float) -> bool:
        """Return True if ``value`` lies in this variant's domain."""
        return not math.isnan(value)

    @classmethod
    def new(cls: type[T], value: Any) -> Optional[T]:
        """Validating factory: the constrained value, or None if out of domain."""
        raw = _to_float(value)
        if raw is None or not cls.contains(raw):
            return None
        return cls(raw)

    @property
    def value(self) -> float:
        return self._value

    # --- conversions ---

    def cast(self, target: type[T]) -> T:
        """Convert to another variant, raising if the value is outside its domain."""
        return target(self._value)

    def try_cast(self, target: type[T]) -> Optional[T]:
        """Convert to another variant, or None if the value is outside its domain."""
        return target.new(self._value)

    def __float__(self) -> float:
        return self._value

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple:
        return (type(self), (self._value,))

    # --- comparison ---

    def __eq__(self, other: object) -> bool:
        raw = _operand(other)
        if raw is None:
            return NotImplemented
        return self._value == raw

    def __lt__(self, other: object) -> bool:
        raw = _operand(other)
        if raw is None:
            return NotImplemented
        return self._value < raw

    def __hash__(self) -> int:
        return hash(self._value)

    # --- arithmetic ---

    def _apply(self: T, other: Any, op: Callable[[float, float], float],
               symbol: str, reflected: bool = False) -> T:
        raw = _operand(other)
        if raw is None:
            return NotImplemented
        lhs, rhs = (raw, self._value) if reflected else (self._value, raw)
        try:
            result = op(lhs, rhs)
        except (ZeroDivisionError, OverflowError, ValueError) as exc:
            raise ArithmeticDomainViolation(
                f"{lhs!r} {symbol} {rhs!r} is undefined for {type(self).__name__}",
                operation=symbol,
                context={"lhs": lhs, "rhs": rhs},
            ) from exc
        return self._checked(result, f"{lhs!r} {symbol} {rhs!r}", symbol)

    def _checked(self: T, result: float, expression: str, symbol: str) -> T:
        if not self.contains(result):
            raise ArithmeticDomainViolation(
                f"{expression} = {result!r} leaves the domain of "
                f"{type(self).__name__} {self.domain}",
                operation=symbol,
                context={"result": result},
            )
        return type(self)(result)

    def __add__(self: T, other: FloatLike) -> T:
        return self._apply(other, operator.add, "+")

    def __radd__(self: T, other: FloatLike) -> T:
        return self._apply(other, operator.add, "+", reflected=True)

    def __sub__(self: T, other: FloatLike) -> T:
        return self._apply(other, operator.sub, "-")

    def __rsub__(self: T, other: FloatLike) -> T:
        return self._apply(other, operator.sub, "-", reflected=True)

    def __mul__(self: T, other: FloatLike) -> T:
        return self._apply(other, operator.mul, "*")

    def __rmul__(self: T, other: FloatLike) -> T:
        return self._apply(other, operator.mul, "*", reflected=True)

    def __truediv__(self: T, other: FloatLike) -> T:
        return self._apply(other, operator.truediv, "/")

    def __rtruediv__(self: T, other: FloatLike) -> T:
        return self._apply(other, operator.truediv, "/", reflected=True)

    def __mod__(self: T, other: FloatLike) -> T:
        return self._apply(other, math.fmod, "%")

    def __rmod__(self: T, other: FloatLike) -> T:
        return self._apply(other, math.fmod, "%", reflected=True)

    def __neg__(self: T) -> T:
        return self._checked(-self._value, f"-{self._value!r}", "neg")

    def __abs__(self: T) -> T:
        return self._checked(abs(self._value), f"abs({self._value!r})", "abs")

    def __repr__(self) -> str:
        # _value is unset when construction failed part-way
        return f"{type(self).__name__}({getattr(self, '_value', '<unset>')!r})"

    def __str__(self) -> str:
        return str(getattr(self, "_value", "<unset>"))


def _to_float(value: Any) -> Optional[float]:
    if isinstance(value, ConstrainedFloat):
        return value.value
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    return float(value)


def _operand(value: Any) -> Optional[float]:
    if isinstance(value, ConstrainedFloat):
        return value.value
    if isinstance(value, Real) and not isinstance(value, bool):
        return float(value)
    return None


class Finite(ConstrainedFloat):
    """Real numbers: neither NaN nor infinite."""

    __slots__ = ()
    domain = "(-inf, inf)"

    @classmethod
    def contains(cls, value: float) -> bool:
        return math.isfinite(value)


class NonNegativeFinite(ConstrainedFloat):
    """Elements of [0, inf). Negative zero is rejected."""

    __slots__ = ()
    domain = "[0, inf)"

    @classmethod
    def contains(cls, value: float) -> bool:
        return math.isfinite(value) and math.copysign(1.0, value) > 0


class Positive(ConstrainedFloat):
    """Elements of (0, inf], infinity included."""

    __slots__ = ()
    domain = "(0, inf]"

    @classmethod
    def contains(cls, value: float) -> bool:
        return value > 0


class PositiveFinite(ConstrainedFloat):
    """Elements of (0, inf)."""

    __slots__ = ()
    domain = "(0, inf)"

    @classmethod
    def contains(cls, value: float) -> bool:
        return math.isfinite(value) and value > 0


class DiscountFactor(ConstrainedFloat):
    """Present value of one unit receivable at a future date; lies in (0, 1]."""

    __slots__ = ()
    domain = "(0, 1]"

    @classmethod
    def contains(cls, value: float) -> bool:
        return 0 < value <= 1


class CompoundFactor(ConstrainedFloat):
    """Growth of one unit over a period; lies in (0, inf)."""

    __slots__ = ()
    domain = "(0, inf)"

    @classmethod
    def contains(cls, value: float) -> bool:
        return math.isfinite(value) and value > 0


class Volatility(NonNegativeFinite):
    """Annualised lognormal (Black) volatility."""

    __slots__ = ()
