"""Analytic Black-Scholes-Merton pricer for European vanilla options."""

from __future__ import annotations

import math
from typing import Callable

from scipy.stats import norm

from pricing_core.errors import (
    CurrencyMismatchError,
    DomainError,
    PricingError,
    TermStructureError,
    UnsupportedInstrumentError,
)
from pricing_core.interfaces import Instrument, VolatilityCurve, YieldCurve
from pricing_core.interpolation import ExistingValue, InterpolatedValue
from pricing_core.logging import get_logger, log_price
from pricing_core.money import Money
from pricing_core.pricers.base import BasePricer
from pricing_core.products.options import ExerciseStyle, OptionType, VanillaOption
from pricing_core.rates import effective_year_fraction

logger = get_logger(__name__)


class AnalyticBlackScholesMerton(BasePricer):
    """
    Closed-form Black-Scholes-Merton pricing against a volatility curve and a
    yield curve.

    With D the discount factor to expiry, F = S / D the forward,
    tau the year fraction from the volatility curve's reference date to expiry
    and sigma the curve volatility:

        d+ = (ln(F/K) + 0.5 * sigma^2 * tau) / (sigma * sqrt(tau))
        d- = d+ - sigma * sqrt(tau)
        CALL = D * (N(d+) * F - N(d-) * K)
        PUT  = D * (N(-d-) * K - N(-d+) * F)

    The pricer holds no mutable state; ``with_*`` return new pricers.
    """

    def __init__(
        self,
        spot: Money,
        volatility_curve: VolatilityCurve,
        yield_curve: YieldCurve,
        cdf: Callable[[float], float] = norm.cdf,
    ) -> None:
        self.spot = spot
        self.volatility_curve = volatility_curve
        self.yield_curve = yield_curve
        self.cdf = cdf

    def can_price(self, instrument: Instrument) -> bool:
        return (
            isinstance(instrument, VanillaOption)
            and instrument.style is ExerciseStyle.EUROPEAN
        )

    def price(self, instrument: Instrument) -> Money:
        if not self.can_price(instrument):
            raise UnsupportedInstrumentError(
                f"{type(self).__name__} prices European vanilla options only, got {instrument}",
                stage="dispatch",
            )
        option: VanillaOption = instrument
        strike = option.strike
        if strike.currency.code != self.spot.currency.code:
            raise CurrencyMismatchError(self.spot.currency.code, strike.currency.code)

        vol_curve = self.volatility_curve
        expiry = option.exercise_date

        raw_tau = vol_curve.day_counter.day_count_fraction(vol_curve.reference_date, expiry)
        if raw_tau < 0:
            logger.warning("expiry_before_reference", option=str(option),
                           reference_date=str(vol_curve.reference_date))
            raise PricingError(
                f"expiry {expiry.isoformat()} precedes the volatility reference date",
                stage="year_fraction",
                context={"expiry": expiry, "reference_date": vol_curve.reference_date},
            )
        tau = effective_year_fraction(raw_tau)

        result = vol_curve.black_volatility(vol_curve.reference_date, strike)
        if not isinstance(result, (ExistingValue, InterpolatedValue)):
            logger.warning("volatility_lookup_failed", option=str(option),
                           result=type(result).__name__)
            raise PricingError(
                f"no volatility available at {vol_curve.reference_date.isoformat()}: "
                f"{type(result).__name__}",
                stage="volatility",
                context={"result": result},
            )
        sigma = result.value.value

        try:
            discount = self.yield_curve.discount_factor(expiry).value
        except (TermStructureError, DomainError) as exc:
            logger.warning("discount_lookup_failed", option=str(option), error=str(exc))
            raise PricingError(
                f"cannot discount to {expiry.isoformat()}: {exc}",
                stage="discount",
                context={"expiry": expiry},
            ) from exc

        spot = self.spot.value
        k = strike.value
        if spot <= 0 or k <= 0:
            raise PricingError(
                "spot and strike must be positive",
                stage="inputs",
                context={"spot": spot, "strike": k},
            )
        forward = spot / discount

        if sigma == 0:
            # Deterministic underlying: discounted forward intrinsic value.
            if option.option_type is OptionType.CALL:
                value = discount * max(forward - k, 0.0)
            else:
                value = discount * max(k - forward, 0.0)
        else:
            std_dev = sigma * math.sqrt(tau)
            d_plus = (math.log(forward / k) + 0.5 * sigma * sigma * tau) / std_dev
            d_minus = d_plus - std_dev
            if option.option_type is OptionType.CALL:
                value = discount * (
                    float(self.cdf(d_plus)) * forward - float(self.cdf(d_minus)) * k
                )
            else:
                value = discount * (
                    float(self.cdf(-d_minus)) * k - float(self.cdf(-d_plus)) * forward
                )

        pv = Money(value, self.spot.currency)
        log_price(logger, option, pv, {
            "spot": spot, "sigma": sigma, "tau": tau, "discount_factor": discount,
        })
        return pv

    def with_spot(self, spot: Money) -> AnalyticBlackScholesMerton:
        return AnalyticBlackScholesMerton(spot, self.volatility_curve, self.yield_curve, self.cdf)

    def with_yield_curve(self, yield_curve: YieldCurve) -> AnalyticBlackScholesMerton:
        return AnalyticBlackScholesMerton(self.spot, self.volatility_curve, yield_curve, self.cdf)

    def with_volatility_curve(
        self, volatility_curve: VolatilityCurve
    ) -> AnalyticBlackScholesMerton:
        return AnalyticBlackScholesMerton(self.spot, volatility_curve, self.yield_curve, self.cdf)
