from __future__ import annotations

U64_MAX = 2**64 - 1

# Decimal (SI) units, 1000-based.
_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB")


def saturating_add(total: int, value: int) -> int:
    """Add *value* to *total*, clamping at ``U64_MAX`` instead of overflowing."""
    return min(U64_MAX, total + value)


def format_bytes(num_bytes: int) -> str:
    """Format *num_bytes* with decimal units and two decimal places.

    Trailing zeros are dropped: ``1024 -> "1.02 kB"``, ``2_100_000_000 -> "2.1 GB"``,
    ``1000 -> "1 kB"``, ``999_999 -> "1000 kB"``.
    """
    if num_bytes < 1000:
        return f"{max(0, num_bytes)} B"
    value = float(num_bytes)
    unit = 0
    # The unit is picked before rounding: 999_999 reads "1000 kB".
    while value >= 1000 and unit < len(_UNITS) - 1:
        value /= 1000
        unit += 1
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {_UNITS[unit]}"
