"""Numeric display constants shared by the stack dashboard helpers."""

# 1 BTC expressed in the dashboard's subunit
SATS_PER_BTC = 1_000_000_000

# Character that replaces whatever separator the grouping strategy emits
GROUP_SEPARATOR = " "

# Matches the dashboard's default number format (max 3 fraction digits)
DEFAULT_MAX_FRACTION_DIGITS = 3

# Names accepted by grouping.get_grouper / Config.NUMBER_GROUPING
GROUPING_STRATEGIES = ["default", "locale"]
