"""
Core math modules

Детерминированные целочисленные примитивы цены.
"""

# Bonding Curve
from src.core.math.bonding_curve import (
    BASE_UNITS_PER_NATIVE,
    NATIVE_DECIMALS,
    UNIT_INCREMENT,
    cumulative_cost,
    from_base_units,
    price,
    to_base_units,
)

__all__ = [
    # Constants
    "NATIVE_DECIMALS",
    "BASE_UNITS_PER_NATIVE",
    "UNIT_INCREMENT",
    # Pricing
    "price",
    "cumulative_cost",
    # Unit conversion
    "to_base_units",
    "from_base_units",
]
