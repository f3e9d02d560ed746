"""Explicit numeric coercion for values coming from the dashboard.

Values arrive as ints, floats, numeric strings or ``None``.  Instead of
relying on implicit conversion, ``to_number`` spells out what is accepted
and returns the ``NAN`` sentinel for anything it cannot read.
"""

import logging
import math
import numbers
import re
from decimal import Decimal

logger = logging.getLogger(__name__)

NAN = float("nan")

_DECIMAL_INT = re.compile(r"[+-]?\d+")
_PREFIXED_INT = re.compile(r"0[xXoObB][0-9a-fA-F]+")


def to_number(value) -> int | float:
    """Coerce *value* to an int or float.

    Args:
        value: int, float, bool, ``numbers.Real``, Decimal, str or None.

    Returns:
        ``int`` for booleans, ints and integer literals (decimal or
        0x/0o/0b prefixed), ``float`` for everything else that parses,
        ``0`` for None or a blank string, and ``NAN`` when the value
        cannot be read as a number.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, (numbers.Real, Decimal)):
        try:
            return float(value)
        except ValueError:
            # signaling NaN
            logger.debug(f"Cannot convert {value!r} to float")
            return NAN
    if isinstance(value, str):
        return _parse_string(value)

    logger.debug(f"Cannot coerce {type(value).__name__} to a number")
    return NAN


def _parse_string(text: str) -> int | float:
    text = text.strip()
    if not text:
        return 0
    if _DECIMAL_INT.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # too many digits for int(); float() overflows to inf instead
            pass
    elif _PREFIXED_INT.fullmatch(text):
        try:
            return int(text, 0)
        except ValueError:
            # e.g. "0b12" matches the pattern but is not valid binary
            logger.debug(f"Invalid prefixed integer literal: {text!r}")
            return NAN
    try:
        return float(text)
    except ValueError:
        logger.debug(f"Cannot parse {text!r} as a number")
        return NAN


def is_absent(value) -> bool:
    """True when *value* should be displayed as a plain ``"0"``.

    Falsy values (None, 0, empty string, False) and NaN count as absent.
    """
    if not value:
        return True
    return isinstance(value, float) and math.isnan(value)
