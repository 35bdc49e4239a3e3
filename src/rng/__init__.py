"""Seeded random number generation."""

from .curves import CURVES, Curve, back, front, get_curve, identity
from .errors import (
    EmptyCollectionError,
    ErrorType,
    GeneratorError,
    InsufficientElementsError,
    InvalidRangeError,
)
from .generator import Generator, make_source
from .sources import BitSource, LockedSource, MersenneSource

__all__ = [
    "Generator",
    "make_source",
    "BitSource",
    "MersenneSource",
    "LockedSource",
    "Curve",
    "CURVES",
    "get_curve",
    "identity",
    "front",
    "back",
    "ErrorType",
    "GeneratorError",
    "EmptyCollectionError",
    "InsufficientElementsError",
    "InvalidRangeError",
]
