"""
Library configuration: frozen defaults, validation and dict overrides.

The active configuration is process-wide and meant to be set once at start-up
(``set_config``); every numeric routine reads it through ``get_config``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, is_dataclass
from datetime import datetime
from typing import Any, Optional

from pricing_core.dates import MAX_DATE
from pricing_core.errors import ConfigurationError


@dataclass(frozen=True)
class NumericsParams:
    """Numerical policy parameters."""
    min_year_fraction: float = 1e-7         # substituted for a zero year fraction


@dataclass(frozen=True)
class CurveParams:
    """Term-structure defaults."""
    max_date: datetime = MAX_DATE
    default_day_counter: str = "ACT/365F"


@dataclass(frozen=True)
class LoggingParams:
    """Logging defaults used by configure_logging."""
    level: str = "WARNING"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class PricingCoreConfig:
    """Complete library configuration."""
    numerics: NumericsParams = field(default_factory=NumericsParams)
    curves: CurveParams = field(default_factory=CurveParams)
    logging: LoggingParams = field(default_factory=LoggingParams)


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def get_default_config() -> PricingCoreConfig:
    """Get the default configuration."""
    return PricingCoreConfig()


def validate_config(config: PricingCoreConfig) -> list[ValidationError]:
    """Validate a configuration; an empty list means valid."""
    # Deferred: daycount imports config for its default lookup.
    from pricing_core.daycount import DAY_COUNTERS

    errors = []

    value = config.numerics.min_year_fraction
    if not isinstance(value, (int, float)) or not 0 < value < 1:
        errors.append(ValidationError(
            field="numerics.min_year_fraction",
            message="Must be a number strictly between 0 and 1",
            value=value,
        ))

    value = config.curves.max_date
    if not isinstance(value, datetime) or value.tzinfo is None:
        errors.append(ValidationError(
            field="curves.max_date",
            message="Must be a timezone-aware datetime",
            value=value,
        ))

    value = config.curves.default_day_counter
    if value not in DAY_COUNTERS:
        errors.append(ValidationError(
            field="curves.default_day_counter",
            message=f"Must be one of {sorted(DAY_COUNTERS)}",
            value=value,
        ))

    value = config.logging.level
    if not isinstance(value, str) or value.upper() not in _LOG_LEVELS:
        errors.append(ValidationError(
            field="logging.level",
            message=f"Must be one of {sorted(_LOG_LEVELS)}",
            value=value,
        ))

    value = config.logging.format_json
    if not isinstance(value, bool):
        errors.append(ValidationError(
            field="logging.format_json",
            message="Must be a boolean",
            value=value,
        ))

    return errors


def load_config(overrides: Optional[dict[str, Any]] = None) -> PricingCoreConfig:
    """
    Build a configuration from defaults plus nested dict overrides.

    Raises ConfigurationError on unknown sections/keys or invalid values.
    """
    merged = _deep_merge(asdict(get_default_config()), overrides or {})
    try:
        config = _from_dict(PricingCoreConfig, merged)
    except TypeError as exc:
        raise ConfigurationError(f"Invalid configuration structure: {exc}") from exc

    errors = validate_config(config)
    if errors:
        details = "; ".join(f"{e.field}: {e.message}" for e in errors)
        raise ConfigurationError(f"Invalid configuration: {details}", errors=errors)
    return config


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def _from_dict(cls: type, data: dict[str, Any]) -> Any:
    """Rebuild nested frozen dataclasses from a dict."""
    kwargs = {}
    for f in fields(cls):
        if f.name not in data:
            continue
        value = data[f.name]
        default = getattr(cls(), f.name)
        if is_dataclass(default):
            if not isinstance(value, dict):
                raise TypeError(f"{f.name} must be a mapping")
            value = _from_dict(type(default), value)
        kwargs[f.name] = value
    unknown = set(data) - {f.name for f in fields(cls)}
    if unknown:
        raise TypeError(", ".join(sorted(unknown)))
    return cls(**kwargs)


_active_config: PricingCoreConfig = get_default_config()


def get_config() -> PricingCoreConfig:
    """Return the active configuration."""
    return _active_config


def set_config(config: PricingCoreConfig) -> None:
    """Replace the active configuration after validating it."""
    global _active_config
    errors = validate_config(config)
    if errors:
        details = "; ".join(f"{e.field}: {e.message}" for e in errors)
        raise ConfigurationError(f"Invalid configuration: {details}", errors=errors)
    _active_config = config


def reset_config() -> None:
    """Restore the default configuration."""
    global _active_config
    _active_config = get_default_config()
