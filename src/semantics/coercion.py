# src/semantics/coercion.py
"""
Scalar coercion for quoted numbers.

The engine dump writes float fields such as mManufactoringDuration as
quoted strings ("4", "0.5"), so they cannot be read with a plain type
check. parse_stringed_float is the single place that repairs this.
"""

from __future__ import annotations

import math
import re
from typing import Any

from .errors import NumericStringError


# sign, digits with optional fraction (or .fraction), optional exponent
_FLOAT_LITERAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_stringed_float(value: Any) -> float:
    """
    Parse a JSON string token holding a decimal float.

    Raises NumericStringError (a ValueError) when value is not a string,
    is not a float literal, or overflows to a non-finite float.
    """
    if not isinstance(value, str):
        raise NumericStringError(value)
    if not _FLOAT_LITERAL.fullmatch(value):
        raise NumericStringError(value)

    result = float(value)
    if not math.isfinite(result):
        raise NumericStringError(value)
    return result


__all__ = ["parse_stringed_float"]
