"""Angular unit table and conversion engine.

This package holds the two leaf components of the angle library:

    - unit_base: ``AngleUnit`` enumeration and the ``UNIT_DESCRIPTORS`` table
      giving each unit's period, symbol and format letter
    - conversion: pure functions that normalize magnitudes into a unit's range
      and convert them between units through ``CONVERSION_FACTORS``

Example:
    >>> from anglekit.unit import AngleUnit, convert
    >>> convert(0.5, AngleUnit.TURNS, AngleUnit.DEGREES)
    Decimal('180.0')
"""

from .conversion import (
    CONVERSION_FACTORS,
    approximately_equal,
    constrain,
    conversion_factor,
    convert,
    normalize,
    to_decimal,
)
from .unit_base import UNIT_DESCRIPTORS, AngleUnit, UnitDescriptor, describe

__all__ = [
    # units
    "AngleUnit",
    "UnitDescriptor",
    "UNIT_DESCRIPTORS",
    "describe",
    # conversion
    "CONVERSION_FACTORS",
    "conversion_factor",
    "convert",
    "normalize",
    "to_decimal",
    "approximately_equal",
    "constrain",
]
