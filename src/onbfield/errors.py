"""Exceptions raised by onbfield."""


class ONBFieldError(Exception):
    """Base class for all onbfield errors."""


class InvalidBitStringError(ONBFieldError, ValueError):
    """A bit string or coefficient sequence is not a valid field element."""


class InvalidFieldParametersError(ONBFieldError, ValueError):
    """(m, p) do not define a type II optimal normal basis."""


class ZeroInversionError(ONBFieldError, ZeroDivisionError):
    """The zero element has no multiplicative inverse."""
