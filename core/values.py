"""
Canonical string form of configuration scalars.

Values are compared by their string form so that the same setting written
as 5432 in one format and "5432" in another is not reported as a change.
The rendering follows JavaScript's String() so results line up with
configs written by JS tooling:

    None -> "null", True -> "true", 5.0 -> "5", 0.5 -> "0.5"
"""
import math
from datetime import date, datetime, time
from typing import Any, Union

# Leaf values a parsed tree can hold; TOML and YAML add dates and times
Scalar = Union[str, int, float, bool, None, date, datetime, time]


def stringify_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)
