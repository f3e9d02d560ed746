"""Standalone sats formatter — preview dashboard number display from command line."""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from stack_helpers.config import Config
from stack_helpers.utils.formatters import convert_btc_to_sats, format_sats_number


def main():
    logging.basicConfig(level=Config.LOG_LEVEL)

    if len(sys.argv) < 3:
        print("Usage: python format_sats.py <btc|sats> <value> [value ...]")
        sys.exit(1)

    unit = sys.argv[1].lower()
    values = sys.argv[2:]

    if unit not in ("btc", "sats"):
        print(f"Unknown unit: {unit}. Use 'btc' or 'sats'.")
        sys.exit(1)

    grouper = Config.get_grouper()
    for raw in values:
        amount = convert_btc_to_sats(raw) if unit == "btc" else raw
        print(f"{raw} {unit} -> {format_sats_number(amount, grouper)} sats")


if __name__ == "__main__":
    main()
