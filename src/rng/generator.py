"""Seeded random number generator with curve weighting.

Every operation on a Generator is built on a single primitive draw
(``source.random()`` passed through the generator's curve), so replaying the
same calls against an identically seeded generator reproduces every result.
"""

import logging
import math
from collections.abc import MutableSequence, Sequence
from typing import Any, Callable, TypeVar

from ..models.seed import IntegerSeed, Seed, SourceSeed, StringSeed, Unseeded, resolve_seed
from ..utils.constants import CYCLE_LIMIT_DEFAULT, PLUCK_LIMIT_DEFAULT
from ..utils.hashing import string_hash
from .curves import Curve, back, front, identity
from .errors import EmptyCollectionError, InsufficientElementsError, InvalidRangeError
from .sources import BitSource, MersenneSource

logger = logging.getLogger(__name__)

T = TypeVar("T")


def make_source(seed: Seed, hasher: Callable[[str], int] = string_hash) -> BitSource:
    """Build (or adopt) the draw source for a resolved seed.

    Args:
        seed: Resolved seed variant
        hasher: Maps string seeds to integer seeds

    Returns:
        A new MersenneSource, or the caller's own source for SourceSeed
    """
    if isinstance(seed, SourceSeed):
        logger.debug("Adopting existing source %r", seed.source)
        return seed.source
    if isinstance(seed, StringSeed):
        derived = IntegerSeed(hasher(seed.value))
        logger.debug("Hashed string seed %r to %d", seed.value, derived.value)
        return MersenneSource(derived.value)
    if isinstance(seed, IntegerSeed):
        logger.debug("Seeding source with %d", seed.value)
        return MersenneSource(seed.value)
    if isinstance(seed, Unseeded):
        logger.debug("Seeding source from system entropy")
        return MersenneSource()
    raise TypeError(f"Unsupported seed variant: {seed!r}")


class Generator:
    """A seeded random number generator.

    The seed decides where draws come from:

    - None: a Mersenne Twister seeded from system entropy
    - an int: a Mersenne Twister seeded with that value
    - a str: hashed with ``hasher`` and then used as an int seed
    - an object with a ``random()`` method: used directly as the source

    Passing an existing source shares it: draws through any Generator holding
    it advance the same stream. ``clone()`` and ``curve()`` share sources the
    same way, which lets weighted and unweighted draws come from one seed.

    Example:
        rng = Generator("level-3")
        loot = rng.weight_front().choose(LOOT_TABLE)  # same stream, biased low
    """

    def __init__(
        self,
        seed: Any = None,
        *,
        curve: Curve | None = None,
        hasher: Callable[[str], int] = string_hash,
    ):
        """Initialize generator.

        Args:
            seed: Seed or source for this generator (see class docstring)
            curve: Function applied to every raw draw (default: identity)
            hasher: Maps string seeds to integer seeds

        Raises:
            TypeError: If seed is not one of the accepted shapes
        """
        self.source: BitSource = make_source(resolve_seed(seed), hasher)
        self.curve_fn: Curve = curve if curve is not None else identity
        self.hasher = hasher

    def clone(self) -> "Generator":
        """Create a generator with the same source and the default curve.

        The source is shared, not copied: drawing from either generator
        advances the stream seen by both.

        Returns:
            New Generator sharing this generator's source
        """
        return Generator(SourceSeed(self.source), hasher=self.hasher)

    def curve(self, fn: Curve) -> "Generator":
        """Create a generator with the same source that reshapes draws with fn.

        ``fn`` receives each raw draw in [0, 1) and should return a number in
        the same range. Curves that leave [0, 1) still give well-defined
        ``random()`` values, but integer ranges and the sequence operations
        stop honouring their bounds (``choose`` may raise IndexError, for
        instance). This generator's own curve is not applied to draws made
        through the new one, and this generator is left unchanged.

        Args:
            fn: Curve applied to each raw draw

        Returns:
            New Generator sharing this generator's source
        """
        logger.debug("Deriving curved generator with %s", getattr(fn, "__name__", fn))
        return Generator(SourceSeed(self.source), curve=fn, hasher=self.hasher)

    def weight_front(self) -> "Generator":
        """Curve draws toward the low end of [0, 1) by squaring them (mean 1/3)."""
        return self.curve(front)

    def weight_back(self) -> "Generator":
        """Curve draws toward the high end of [0, 1) with a square root (mean 2/3)."""
        return self.curve(back)

    def random(self) -> float:
        """Return random float in [0.0, 1.0), after the curve.

        Returns:
            Curved draw from the source
        """
        return self.curve_fn(self.source.random())

    def random_int(self, low: int, high: int | None = None) -> int:
        """Return random integer in range [low, high).

        With a single argument the range is [0, low) instead.

        Args:
            low: Lower bound (inclusive), or the upper bound if high is omitted
            high: Upper bound (exclusive)

        Returns:
            Random integer in the range

        Raises:
            InvalidRangeError: If the range contains no integers
        """
        if high is None:
            low, high = 0, low
        if high <= low:
            raise InvalidRangeError(f"Invalid range: [{low}, {high}) is empty")
        return math.floor(self.random() * (high - low) + low)

    def choose(self, seq: Sequence[T]) -> T:
        """Return random element of a sequence.

        Args:
            seq: Sequence to choose from

        Returns:
            Random element from sequence

        Raises:
            EmptyCollectionError: If seq is empty
        """
        if len(seq) == 0:
            raise EmptyCollectionError("Cannot choose from an empty sequence")
        return seq[self.random_int(0, len(seq))]

    def pluck(self, items: MutableSequence[T], limit: int = PLUCK_LIMIT_DEFAULT) -> T:
        """Remove and return random element of a list.

        Args:
            items: List to pluck from (modified)
            limit: Number of elements at the end of the list that are
                never picked; used by pluck_cycle

        Returns:
            The removed element

        Raises:
            InvalidRangeError: If limit is negative
            InsufficientElementsError: If no element is eligible
        """
        if limit < 0:
            raise InvalidRangeError(f"Invalid limit: {limit} (must be >= 0)")
        if len(items) <= limit:
            raise InsufficientElementsError(len(items), limit)
        index = self.random_int(len(items) - limit)
        return items.pop(index)

    def pluck_cycle(self, items: MutableSequence[T], limit: int = CYCLE_LIMIT_DEFAULT) -> T:
        """Return random element of a list, moving it to the end.

        Calling this repeatedly on the same list gives a semi-random sequence
        where any item is separated from its previous appearance by at least
        ``limit`` other items, since the last ``limit`` positions are never
        picked. Note that limit defaults to 1 here, unlike pluck. Combined
        with ``weight_front()`` it yields a loose shuffle that mostly follows
        the list order, which suits things like footstep sounds that must
        neither repeat back to back nor loop recognisably.

        Args:
            items: List to draw from (reordered)
            limit: Number of most recently drawn items to hold back

        Returns:
            The drawn element

        Raises:
            InvalidRangeError: If limit is negative
            InsufficientElementsError: If no element is eligible
        """
        item = self.pluck(items, limit)
        items.append(item)
        return item

    def shuffle(self, seq: Sequence[T]) -> list[T]:
        """Return a shuffled copy of a sequence.

        Args:
            seq: Sequence to shuffle (not modified)

        Returns:
            New list with the elements of seq in random order
        """
        return self.shuffle_in_place(list(seq))

    def shuffle_in_place(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """Shuffle a list in place (Fisher-Yates).

        The permutation is uniform only with the identity curve.

        Args:
            items: List to shuffle

        Returns:
            The same list
        """
        for i in range(len(items) - 1, 0, -1):
            j = math.floor(self.random() * (i + 1))
            items[i], items[j] = items[j], items[i]
        return items

    def __repr__(self) -> str:
        curve_name = getattr(self.curve_fn, "__name__", repr(self.curve_fn))
        return f"Generator(source={self.source!r}, curve={curve_name})"
