from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import pandas as pd

from constants import (
    LIGHT_ICING_LIMITS,
    MODERATE_CRUISE_LIMITS,
    RISK_COLORS,
    SERIOUS_ANY_POWER_LIMITS,
    SERIOUS_DESCENT_POWER_LIMITS,
)
from utils.numbers import parse_float

logger = logging.getLogger(__name__)

NumericInput = Union[int, float, str, None]


class Unit(str, Enum):
    CELSIUS = "C"
    FAHRENHEIT = "F"

    @property
    def symbol(self) -> str:
        return f"°{self.value}"

    @property
    def display_name(self) -> str:
        return "Celsius" if self is Unit.CELSIUS else "Fahrenheit"


class RiskCategory(Enum):
    SERIOUS_ANY_POWER = "Serious icing - any power"
    SERIOUS_DESCENT_POWER = "Serious icing - descent power"
    MODERATE_CRUISE_OR_SERIOUS_DESCENT = (
        "Moderate icing - cruise power, or Serious icing - descent power"
    )
    LIGHT_CRUISE_OR_DESCENT = "Light icing - cruise or descent power"
    NO_ICING = "No icing"

    @property
    def label(self) -> str:
        return self.value

    @property
    def color(self) -> str:
        return RISK_COLORS[self.name.lower()]


@dataclass(frozen=True)
class RiskRule:
    category: RiskCategory
    max_temperature: float
    max_depression: float

    def matches(self, temperature_c: float, depression_c: float) -> bool:
        return (
            0 <= temperature_c <= self.max_temperature
            and 0 <= depression_c <= self.max_depression
        )


# Evaluated top to bottom; later rows overlap earlier ones, first match wins.
RISK_RULES: tuple[RiskRule, ...] = (
    RiskRule(RiskCategory.SERIOUS_ANY_POWER, *SERIOUS_ANY_POWER_LIMITS),
    RiskRule(RiskCategory.SERIOUS_DESCENT_POWER, *SERIOUS_DESCENT_POWER_LIMITS),
    RiskRule(RiskCategory.MODERATE_CRUISE_OR_SERIOUS_DESCENT, *MODERATE_CRUISE_LIMITS),
    RiskRule(RiskCategory.LIGHT_CRUISE_OR_DESCENT, *LIGHT_ICING_LIMITS),
)


def celsius_to_fahrenheit(c: float) -> float:
    return c * 9 / 5 + 32


def fahrenheit_to_celsius(f: float) -> float:
    return (f - 32) * 5 / 9


def to_celsius(value: float, unit: Unit) -> float:
    return fahrenheit_to_celsius(value) if Unit(unit) is Unit.FAHRENHEIT else value


def from_celsius(value_c: float, unit: Unit) -> float:
    return celsius_to_fahrenheit(value_c) if Unit(unit) is Unit.FAHRENHEIT else value_c


def delta_to_display(delta_c: float, unit: Unit) -> float:
    """Convert a temperature difference; no +32 offset applies to intervals."""
    return delta_c * 9 / 5 if Unit(unit) is Unit.FAHRENHEIT else delta_c


def dew_point_depression(temperature_c: float, dew_point_c: float) -> float:
    return temperature_c - dew_point_c


def classify_icing_risk(
    temperature_c: NumericInput, dew_point_c: NumericInput
) -> Optional[RiskCategory]:
    """
    Classify carburetor icing risk for a temperature/dew point pair in °C.

    Returns None when either value is missing or not a finite number, meaning
    there is not enough data to classify. Any finite pair yields exactly one
    category, falling back to NO_ICING. A dew point above the temperature
    (negative depression) matches no rule and therefore gives NO_ICING.
    """
    t = parse_float(temperature_c)
    dp = parse_float(dew_point_c)
    if t is None or dp is None:
        return None

    depression = dew_point_depression(t, dp)
    for order, rule in enumerate(RISK_RULES, start=1):
        if rule.matches(t, depression):
            logger.debug("T=%s D=%s matched rule %d (%s)", t, depression, order, rule.category.name)
            return rule.category
    return RiskCategory.NO_ICING


def rule_for(category: RiskCategory) -> Optional[RiskRule]:
    for rule in RISK_RULES:
        if rule.category is category:
            return rule
    return None


def risk_table(unit: Unit = Unit.CELSIUS) -> pd.DataFrame:
    """Ordered threshold table for display, ranges shown in the given unit."""
    unit = Unit(unit)
    rows = []
    for order, rule in enumerate(RISK_RULES, start=1):
        t_lo, t_hi = from_celsius(0.0, unit), from_celsius(rule.max_temperature, unit)
        d_hi = delta_to_display(rule.max_depression, unit)
        rows.append(
            {
                "order": order,
                "risk": rule.category.label,
                "temperature": f"{t_lo:g} to {t_hi:g} {unit.symbol}",
                "dew_point_depression": f"0 to {d_hi:g} {unit.symbol}",
            }
        )
    rows.append(
        {
            "order": len(RISK_RULES) + 1,
            "risk": RiskCategory.NO_ICING.label,
            "temperature": "otherwise",
            "dew_point_depression": "otherwise",
        }
    )
    return pd.DataFrame(rows)
