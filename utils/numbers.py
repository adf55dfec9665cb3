from __future__ import annotations

import math
from typing import Optional, Union

Number = Union[int, float]


def parse_float(value: Union[Number, str, None]) -> Optional[float]:
    """
    Parse a number typed into a text field. Blank, non-numeric, NaN or
    infinite input gives None instead of raising.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def format_number(value: Optional[float], digits: int = 1) -> str:
    """Render a value for an input box; drops a trailing '.0'."""
    if value is None:
        return ""
    text = f"{round(value, digits):.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
