"""
Exception hierarchy for the pricing core.

Every error carries a ``context`` dict with the offending inputs so callers can
log or re-raise with structured detail. Validation failures are raised
immediately at construction or query time; nothing here is transient, so no
retry semantics exist.
"""

from __future__ import annotations

from typing import Any, Optional


class PricingCoreError(Exception):
    """Base class for all library errors."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.context = context or {}


# --- Numeric domain ---


class DomainError(PricingCoreError, ValueError):
    """A value or operation falls outside a numeric type's domain."""


class DomainConstructionError(DomainError):
    """A raw value violates a constrained type's predicate at construction."""

    def __init__(self, value: Any, type_name: str, domain: str = "", **kwargs: Any) -> None:
        message = f"{value!r} does not fit into the domain of {type_name}"
        if domain:
            message += f" {domain}"
        super().__init__(message, **kwargs)
        self.value = value
        self.type_name = type_name


class ArithmeticDomainViolation(DomainError):
    """An operation between constrained values would leave the codomain."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.operation = operation


class CurrencyMismatchError(DomainError):
    """Arithmetic or ordering attempted across two different currencies."""

    def __init__(self, left: str, right: str, **kwargs: Any) -> None:
        super().__init__(
            f"cannot combine {left} with {right} without an explicit exchange rate",
            **kwargs,
        )
        self.left = left
        self.right = right


# --- Term structures ---


class TermStructureError(PricingCoreError):
    """Base class for curve query failures."""


class InvalidDateTime(TermStructureError):
    """Queried date lies outside the curve's supported interval."""

    def __init__(self, message: str, date: Any = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.date = date


class T2LessThanT1(TermStructureError):
    """Forward rate requested over a reversed interval."""


class CurveConstructionError(PricingCoreError, ValueError):
    """Curve inputs failed validation during build."""


class NegativeVolatilityError(CurveConstructionError):
    """A volatility sample or constant volatility is negative."""


# --- Interpolation ---


class InterpolationError(PricingCoreError):
    """Base class for interpolation lookups that produced no value."""


class InterpolationOutOfRange(InterpolationError):
    """Index lies strictly outside the sampled range."""


class NoPointsError(InterpolationError):
    """Interpolator holds no samples."""


# --- Pricing ---


class PricingError(PricingCoreError):
    """Pricer could not produce a value from the supplied market data."""

    def __init__(self, message: str, stage: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.stage = stage


class UnsupportedInstrumentError(PricingError):
    """Instrument type or exercise style not handled by the pricer."""


# --- Configuration ---


class ConfigurationError(PricingCoreError, ValueError):
    """Configuration overrides failed validation."""

    def __init__(self, message: str, errors: Optional[list[Any]] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.errors = errors or []
