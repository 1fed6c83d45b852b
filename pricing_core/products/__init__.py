"""Priceable instruments."""

from pricing_core.products.options import (
    AmericanExercise,
    EuropeanExercise,
    Exercise,
    ExerciseStyle,
    OptionType,
    VanillaOption,
    VanillaPayoff,
)

__all__ = [
    "OptionType",
    "ExerciseStyle",
    "EuropeanExercise",
    "AmericanExercise",
    "Exercise",
    "VanillaPayoff",
    "VanillaOption",
]
