"""Seed variants accepted by Generator."""

import math
import numbers
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from ..utils.constants import UINT32_MASK

if TYPE_CHECKING:
    from ..rng.sources import BitSource


@dataclass(frozen=True)
class Unseeded:
    """No seed given; the source is seeded from system entropy."""


@dataclass(frozen=True)
class IntegerSeed:
    """Integer seed, reduced to the unsigned 32-bit range of the twister."""

    value: int

    def __post_init__(self):
        """Normalize the seed value after initialization."""
        object.__setattr__(self, "value", int(self.value) & UINT32_MASK)


@dataclass(frozen=True)
class StringSeed:
    """Text seed, hashed into an integer seed when the source is built."""

    value: str


@dataclass(frozen=True)
class SourceSeed:
    """An existing draw source, adopted as-is so its stream is shared."""

    source: "BitSource"


Seed = Union[Unseeded, IntegerSeed, StringSeed, SourceSeed]


def resolve_seed(raw: Any) -> Seed:
    """Classify a raw seed argument.

    Args:
        raw: None, an integer (or other real number), a string, an object
            with a callable ``random()`` method, or an already-resolved Seed

    Returns:
        The matching Seed variant

    Raises:
        TypeError: If raw is none of the accepted shapes
    """
    if raw is None:
        return Unseeded()
    if isinstance(raw, (Unseeded, IntegerSeed, StringSeed, SourceSeed)):
        return raw
    if isinstance(raw, str):
        return StringSeed(raw)
    # bool is an Integral subclass but never a meaningful seed
    if (
        isinstance(raw, numbers.Real)
        and not isinstance(raw, bool)
        and math.isfinite(raw)
    ):
        return IntegerSeed(int(raw))
    if callable(getattr(raw, "random", None)):
        return SourceSeed(raw)
    raise TypeError(
        f"Invalid seed: {raw!r} (must be None, an int, a str, "
        "or an object with a random() method)"
    )
