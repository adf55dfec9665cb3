from __future__ import annotations

# Domain constants for the carburetor icing charts.
# Kept in a dedicated module to avoid cross-module magic numbers.

Point = tuple[float, float]

# Classification thresholds (°C): (max temperature, max dew point depression),
# in priority order. Lower bounds are 0 for both.
SERIOUS_ANY_POWER_LIMITS: tuple[float, float] = (20.0, 8.0)
SERIOUS_DESCENT_POWER_LIMITS: tuple[float, float] = (20.0, 12.0)
MODERATE_CRUISE_LIMITS: tuple[float, float] = (30.0, 15.0)
LIGHT_ICING_LIMITS: tuple[float, float] = (40.0, 25.0)

# Badge colors per risk category, plus the fallback for "unknown".
RISK_COLORS: dict[str, str] = {
    "serious_any_power": "#dc2626",
    "serious_descent_power": "#f97316",
    "moderate_cruise_or_serious_descent": "#eab308",
    "light_cruise_or_descent": "#60a5fa",
    "no_icing": "#22c55e",
}
UNKNOWN_RISK_COLOR: str = "#d1d5db"

DEFAULT_CHART_HEIGHT: int = 350

# Dew point depression chart (CASA). Axis domains keyed by unit code.
DEPRESSION_X_RANGE: dict[str, Point] = {"C": (0, 50), "F": (32, 110)}
DEPRESSION_Y_RANGE: dict[str, Point] = {"C": (-10, 30), "F": (-18, 54)}

# Region outlines, drawn largest first. Fahrenheit outlines are the hand-drawn
# chart values, not converted from the Celsius ones.
DEPRESSION_REGIONS: dict[str, dict[str, list[Point]]] = {
    "C": {
        "light": [(0, 0), (40, 0), (40, 25), (35, 28), (25, 30), (15, 28), (5, 25), (0, 20)],
        "moderate": [(0, 0), (30, 0), (30, 15), (25, 18), (15, 20), (5, 18), (0, 15)],
        "serious_descent": [(0, 0), (20, 0), (20, 12), (15, 15), (10, 16), (5, 15), (0, 12)],
        "serious_any": [(0, 0), (20, 0), (20, 8), (15, 10), (10, 11), (5, 10), (0, 8)],
    },
    "F": {
        "light": [(32, 0), (110, 0), (110, 45), (95, 50), (77, 54), (59, 50), (41, 45), (32, 36)],
        "moderate": [(32, 0), (86, 0), (86, 27), (77, 32), (59, 36), (41, 32), (32, 27)],
        "serious_descent": [(32, 0), (68, 0), (68, 22), (59, 27), (50, 29), (41, 27), (32, 22)],
        "serious_any": [(32, 0), (68, 0), (68, 14), (59, 18), (50, 20), (41, 18), (32, 14)],
    },
}

# (legend label, fill, outline)
DEPRESSION_REGION_STYLES: dict[str, tuple[str, str, str]] = {
    "light": ("Light icing - cruise/descent", "rgba(173,216,230,0.3)", "rgba(173,216,230,0.8)"),
    "moderate": ("Moderate icing - cruise power", "rgba(100,149,237,0.4)", "rgba(100,149,237,0.8)"),
    "serious_descent": ("Serious icing - descent power", "rgba(70,130,180,0.5)", "rgba(70,130,180,0.8)"),
    "serious_any": ("Serious icing - any power", "rgba(25,25,112,0.6)", "rgba(25,25,112,0.8)"),
}

# Relative humidity chart (ambient temperature vs dew point).
HUMIDITY_X_RANGE: dict[str, Point] = {"C": (0, 54), "F": (0, 110)}
HUMIDITY_Y_RANGE: dict[str, Point] = {"C": (0, 32), "F": (0, 90)}

HUMIDITY_REGIONS: dict[str, dict[str, list[Point]]] = {
    "C": {
        "icing": [(0, 0), (38, 0), (38, 27), (32, 29), (21, 32), (10, 29), (4, 27), (0, 21)],
        "serious_glide": [(0, 0), (27, 0), (27, 21), (21, 24), (10, 27), (4, 24), (0, 18)],
        "serious_cruise": [(0, 0), (16, 0), (16, 10), (10, 13), (4, 16), (0, 13)],
        "pressure_type": [(4, 4), (16, 4), (16, 13), (14, 13), (9, 13), (4, 10)],
    },
    "F": {
        "icing": [(0, 0), (110, 0), (110, 80), (90, 85), (70, 90), (50, 85), (30, 80), (10, 70), (0, 60)],
        "serious_glide": [(0, 0), (80, 0), (80, 70), (70, 75), (50, 80), (30, 75), (10, 65), (0, 55)],
        "serious_cruise": [(0, 0), (60, 0), (60, 50), (50, 55), (30, 60), (10, 55), (0, 45)],
        "pressure_type": [(10, 40), (30, 40), (30, 55), (25, 55), (15, 55), (10, 50)],
    },
}

HUMIDITY_REGION_STYLES: dict[str, tuple[str, str, str]] = {
    "icing": ("Icing (glide and cruise power)", "rgba(100,149,237,0.3)", "rgba(100,149,237,0.8)"),
    "serious_glide": ("Serious icing (glide power)", "rgba(255,255,0,0.4)", "rgba(255,255,0,0.8)"),
    "serious_cruise": ("Serious icing (cruise power)", "rgba(255,165,0,0.5)", "rgba(255,165,0,0.8)"),
    "pressure_type": ("Icing (pressure-type carburetors)", "rgba(34,139,34,0.6)", "rgba(34,139,34,0.8)"),
}

HUMIDITY_LINE_LEVELS: tuple[int, ...] = (20, 40, 60, 80, 100)
HUMIDITY_LINE_SAMPLES: int = 50
