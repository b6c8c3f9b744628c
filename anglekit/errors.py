"""Exception hierarchy for the angle library.

Every error derives from ``AngleError`` and also from the closest built-in
exception, so callers may catch either the library type or the generic one.
"""


class AngleError(Exception):
    """Base error."""


class InvalidUnitError(AngleError, ValueError):
    """Raised when a unit tag is not a member of ``AngleUnit``."""


class InvalidMagnitudeError(AngleError, ValueError):
    """Raised when a magnitude is NaN, infinite or otherwise not a finite number."""


class AngleDivisionByZeroError(AngleError, ZeroDivisionError):
    """Raised when an angle is divided by a scalar that is exactly zero."""


class InvalidFormatError(AngleError, ValueError):
    """Raised when a format code names an unknown format letter."""


class NullInputError(AngleError, TypeError):
    """Raised when the formatter receives ``None`` instead of a value."""
