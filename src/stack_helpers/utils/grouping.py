"""Digit-grouping strategies.

A grouper turns a number into a grouped-digit string and reports which
character it used between groups, so callers can swap that separator
for their own without caring where the grouping rules came from.
"""

import locale
import math
import threading
from contextlib import contextmanager
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterator, Protocol

from stack_helpers.utils.constants import (
    DEFAULT_MAX_FRACTION_DIGITS,
    GROUPING_STRATEGIES,
)

# setlocale() is process-wide
_LOCALE_LOCK = threading.Lock()


class DigitGrouper(Protocol):
    """Anything that can render a number with grouped digits."""

    @property
    def separator(self) -> str: ...

    def group(self, value: int | float) -> str: ...


def _trim_fraction(text: str, decimal_point: str) -> str:
    """Drop trailing fraction zeros (and a bare decimal point)."""
    if decimal_point and decimal_point in text:
        text = text.rstrip("0").rstrip(decimal_point)
    return text


class DefaultGrouper:
    """Locale-free grouping: ``,`` every three digits, ``.`` decimal point.

    Fractions are rounded half away from zero to at most
    *max_fraction_digits* places and trailing zeros are dropped, so
    ``1234.5`` renders as ``"1,234.5"`` and ``1234.56789`` as
    ``"1,234.568"``.
    """

    separator = ","
    decimal_point = "."

    def __init__(self, max_fraction_digits: int = DEFAULT_MAX_FRACTION_DIGITS):
        if max_fraction_digits < 0:
            raise ValueError("max_fraction_digits must be >= 0")
        self.max_fraction_digits = max_fraction_digits

    def group(self, value: int | float) -> str:
        if isinstance(value, int):
            return format(value, ",")
        if not math.isfinite(value):
            return format(value, ",")

        exact = Decimal(repr(value))
        step = Decimal(1).scaleb(-self.max_fraction_digits)
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec,
                           exact.adjusted() + self.max_fraction_digits + 2)
            rounded = exact.quantize(step, rounding=ROUND_HALF_UP)
        return _trim_fraction(format(rounded, ",f"), self.decimal_point)


class LocaleGrouper:
    """Grouping from the process locale database (``LC_NUMERIC``).

    With *name* set, that locale is selected for the duration of each call
    and the previous ``LC_NUMERIC`` setting is restored afterwards.
    ``locale.Error`` propagates when the locale is not installed.
    """

    def __init__(self, name: str | None = None,
                 max_fraction_digits: int = DEFAULT_MAX_FRACTION_DIGITS):
        if max_fraction_digits < 0:
            raise ValueError("max_fraction_digits must be >= 0")
        self.name = name or None
        self.max_fraction_digits = max_fraction_digits

    @contextmanager
    def _numeric_locale(self) -> Iterator[dict]:
        with _LOCALE_LOCK:
            if self.name is None:
                yield locale.localeconv()
                return
            previous = locale.setlocale(locale.LC_NUMERIC)
            locale.setlocale(locale.LC_NUMERIC, self.name)
            try:
                yield locale.localeconv()
            finally:
                locale.setlocale(locale.LC_NUMERIC, previous)

    @property
    def separator(self) -> str:
        with self._numeric_locale() as conv:
            return conv["thousands_sep"]

    def group(self, value: int | float) -> str:
        with self._numeric_locale() as conv:
            if isinstance(value, int):
                return locale.format_string("%d", value, grouping=True)
            if not math.isfinite(value):
                return str(value)
            text = locale.format_string(
                f"%.{self.max_fraction_digits}f", value, grouping=True
            )
            return _trim_fraction(text, conv["decimal_point"])


def get_grouper(name: str = "default", locale_name: str | None = None,
                max_fraction_digits: int = DEFAULT_MAX_FRACTION_DIGITS
                ) -> DigitGrouper:
    """Build a grouping strategy by name (see ``GROUPING_STRATEGIES``)."""
    if name == "default":
        return DefaultGrouper(max_fraction_digits)
    if name == "locale":
        return LocaleGrouper(locale_name, max_fraction_digits)
    raise ValueError(
        f"Unknown grouping strategy {name!r}; "
        f"expected one of {', '.join(GROUPING_STRATEGIES)}"
    )
