"""Yield and volatility term structures."""

from pricing_core.curves.base import (
    BlackVolatilityTermStructure,
    TermStructure,
    YieldTermStructure,
)
from pricing_core.curves.volatility import (
    BlackVolatilityCurve,
    BlackVolatilityCurveBuilder,
    ConstantVolatilityCurve,
)
from pricing_core.curves.yield_curves import (
    FlatForwardCurve,
    InterpolatedZeroCurve,
    ZeroCurveBuilder,
)

__all__ = [
    "TermStructure",
    "YieldTermStructure",
    "BlackVolatilityTermStructure",
    "FlatForwardCurve",
    "InterpolatedZeroCurve",
    "ZeroCurveBuilder",
    "BlackVolatilityCurve",
    "BlackVolatilityCurveBuilder",
    "ConstantVolatilityCurve",
]
