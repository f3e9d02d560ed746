"""Formatting utilities for sats/BTC display values."""

from stack_helpers.utils.constants import GROUP_SEPARATOR, SATS_PER_BTC
from stack_helpers.utils.grouping import DigitGrouper
from stack_helpers.utils.numbers import is_absent, to_number


def format_sats_number(value, grouper: DigitGrouper | None = None) -> str:
    """Format a number with space-separated digit groups.

    Missing, zero and NaN values render as ``"0"``.  Anything else is
    coerced with ``to_number`` and grouped by *grouper*
    (``Config.get_grouper()`` when omitted); every group separator it
    emits becomes a single space, e.g. ``1234567 -> "1 234 567"``.
    Strings that do not parse come out as the grouper renders NaN.
    """
    if is_absent(value):
        return "0"
    number = to_number(value)

    if grouper is None:
        from stack_helpers.config import Config
        grouper = Config.get_grouper()

    grouped = grouper.group(number)
    separator = grouper.separator
    if separator:
        grouped = grouped.replace(separator, GROUP_SEPARATOR)
    return grouped


def convert_btc_to_sats(value) -> int | float:
    """Convert a BTC amount (number or numeric string) to sats.

    No rounding is applied; unreadable input gives NaN.
    """
    return to_number(value) * SATS_PER_BTC
