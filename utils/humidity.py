from __future__ import annotations

import math

# Magnus coefficients over water, valid roughly -45..60 °C.
MAGNUS_A = 17.62
MAGNUS_B = 243.12


def _gamma(temp_c: float) -> float:
    return MAGNUS_A * temp_c / (MAGNUS_B + temp_c)


def relative_humidity(temp_c: float, dew_point_c: float) -> float:
    """
    Relative humidity (%) from temperature and dew point via the Magnus
    approximation. Capped at 100 since a dew point above the temperature
    means saturated air.
    """
    rh = 100.0 * math.exp(_gamma(dew_point_c) - _gamma(temp_c))
    return min(rh, 100.0)


def dew_point_for_humidity(temp_c: float, rh_percent: float) -> float:
    """Dew point (°C) at which air of temp_c has the given relative humidity."""
    if not 0 < rh_percent <= 100:
        raise ValueError("Relative humidity must be in (0, 100].")
    gamma = _gamma(temp_c) + math.log(rh_percent / 100.0)
    return MAGNUS_B * gamma / (MAGNUS_A - gamma)
