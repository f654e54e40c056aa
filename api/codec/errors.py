"""
Errors raised by the resistor band codec.

Every error is a ValueError: the input was well-typed but does not describe a
valid resistor. Callers (the HTTP services) decide how to report them.
"""

from __future__ import annotations


class ResistorCodecError(ValueError):
    pass


class UnknownColorError(ResistorCodecError):
    pass


# Wrong category of color for a band position (e.g. gold as a digit band).
class InvalidBandError(ResistorCodecError):
    pass


class InvalidToleranceError(ResistorCodecError):
    pass


class InvalidValueError(ResistorCodecError):
    pass


class InvalidBandCountError(ResistorCodecError):
    pass


class UnknownMultiplierError(ResistorCodecError):
    pass


class UnknownToleranceError(ResistorCodecError):
    pass
