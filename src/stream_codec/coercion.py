"""
Reusable decode strategies for wire fields whose JSON representation differs from the
in-memory type.
"""
import math
import re
from typing import Annotated, Any

from pydantic import BeforeValidator, Field, ValidationInfo
from pydantic_core import PydanticCustomError

U64_MAX = 2**64 - 1

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_decimal_string(value: Any, info: ValidationInfo) -> float:
    """
    Converts a decimal string such as '4532.56000000' to a float. Wire input must be a
    string; programmatic construction may also pass a number directly.
    """
    if isinstance(value, str):
        if not _DECIMAL_PATTERN.fullmatch(value):
            raise PydanticCustomError(
                "numeric_parse",
                "Could not parse '{text}' as a decimal number",
                {"text": value},
            )
        number = float(value)
        if not math.isfinite(number):
            raise PydanticCustomError(
                "numeric_parse",
                "Decimal '{text}' is out of range for a float",
                {"text": value},
            )
        return number

    if (
        info.mode == "python"
        and isinstance(value, (int, float))
        and not isinstance(value, bool)
    ):
        return float(value)

    raise PydanticCustomError("decimal_string_type", "Input should be a decimal string")


def bool_or_string(value: Any) -> str:
    """Accepts a string as-is and renders a boolean as 'true' or 'false'."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    raise PydanticCustomError("bool_or_string", "Input should be a string or a boolean")


UInt64 = Annotated[int, Field(ge=0, le=U64_MAX)]
DecimalString = Annotated[float, BeforeValidator(parse_decimal_string)]
BoolOrString = Annotated[str, BeforeValidator(bool_or_string)]
