"""Pricing core: constrained numerics, money, rates, curves, option pricing and risk."""

from pricing_core.config import (
    PricingCoreConfig,
    get_config,
    load_config,
    reset_config,
    set_config,
)
from pricing_core.curves import (
    BlackVolatilityCurve,
    BlackVolatilityCurveBuilder,
    ConstantVolatilityCurve,
    FlatForwardCurve,
    InterpolatedZeroCurve,
    ZeroCurveBuilder,
)
from pricing_core.dates import MAX_DATE, Frequency, to_utc, utc_now
from pricing_core.daycount import (
    Actual360,
    Actual365Fixed,
    DayCounter,
    Thirty360,
    get_day_counter,
)
from pricing_core.errors import (
    ArithmeticDomainViolation,
    ConfigurationError,
    CurrencyMismatchError,
    CurveConstructionError,
    DomainConstructionError,
    DomainError,
    InterpolationError,
    InvalidDateTime,
    NegativeVolatilityError,
    PricingCoreError,
    PricingError,
    T2LessThanT1,
    TermStructureError,
    UnsupportedInstrumentError,
)
from pricing_core.floats import (
    CompoundFactor,
    DiscountFactor,
    Finite,
    NonNegativeFinite,
    Positive,
    PositiveFinite,
    Volatility,
)
from pricing_core.interfaces import Instrument, Pricer, RiskMeasure, VolatilityCurve, YieldCurve
from pricing_core.interpolation import (
    ExistingValue,
    InterpolatedValue,
    InterpolationResult,
    LinearInterpolator,
    NoPoints,
    OutOfRange,
)
from pricing_core.money import CHF, EUR, GBP, JPY, USD, Currency, ExchangeRate, Money, get_currency
from pricing_core.pricers import AnalyticBlackScholesMerton, BasePricer
from pricing_core.pricing import price, price_many
from pricing_core.products import (
    AmericanExercise,
    EuropeanExercise,
    OptionType,
    VanillaOption,
    VanillaPayoff,
)
from pricing_core.rates import Compounding, InterestRate, implied_rate_from_compound_factor
from pricing_core.risk import Delta, Rho, Vega, delta, rho, vega

__all__ = [
    "PricingCoreConfig",
    "get_config",
    "load_config",
    "set_config",
    "reset_config",
    "Finite",
    "NonNegativeFinite",
    "Positive",
    "PositiveFinite",
    "DiscountFactor",
    "CompoundFactor",
    "Volatility",
    "Currency",
    "Money",
    "ExchangeRate",
    "get_currency",
    "USD",
    "EUR",
    "GBP",
    "JPY",
    "CHF",
    "Frequency",
    "MAX_DATE",
    "to_utc",
    "utc_now",
    "DayCounter",
    "Actual360",
    "Actual365Fixed",
    "Thirty360",
    "get_day_counter",
    "Compounding",
    "InterestRate",
    "implied_rate_from_compound_factor",
    "LinearInterpolator",
    "InterpolationResult",
    "ExistingValue",
    "InterpolatedValue",
    "OutOfRange",
    "NoPoints",
    "FlatForwardCurve",
    "InterpolatedZeroCurve",
    "ZeroCurveBuilder",
    "BlackVolatilityCurve",
    "BlackVolatilityCurveBuilder",
    "ConstantVolatilityCurve",
    "Instrument",
    "Pricer",
    "RiskMeasure",
    "YieldCurve",
    "VolatilityCurve",
    "OptionType",
    "EuropeanExercise",
    "AmericanExercise",
    "VanillaPayoff",
    "VanillaOption",
    "BasePricer",
    "AnalyticBlackScholesMerton",
    "price",
    "price_many",
    "Delta",
    "Rho",
    "Vega",
    "delta",
    "rho",
    "vega",
    "PricingCoreError",
    "DomainError",
    "DomainConstructionError",
    "ArithmeticDomainViolation",
    "CurrencyMismatchError",
    "TermStructureError",
    "InvalidDateTime",
    "T2LessThanT1",
    "CurveConstructionError",
    "NegativeVolatilityError",
    "InterpolationError",
    "PricingError",
    "UnsupportedInstrumentError",
    "ConfigurationError",
]
