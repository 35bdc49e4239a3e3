"""Draw sources backing a Generator.

A draw source is anything with a ``random()`` method returning a float in
[0, 1). MersenneSource is the default; ``random.Random`` instances and the
``random`` module itself satisfy the same protocol and can be passed to a
Generator directly.
"""

import random
import threading
from typing import Protocol


class BitSource(Protocol):
    """Primitive deterministic draw provider."""

    def random(self) -> float:
        """Return the next float in [0, 1) and advance the stream."""
        ...


class MersenneSource:
    """Mersenne Twister (MT19937) stream backed by random.Random.

    Two sources built from the same integer produce identical streams.
    Without a seed the stream is seeded from system entropy.
    """

    def __init__(self, seed: int | None = None):
        """Initialize the source.

        Args:
            seed: Integer seed, or None to seed from system entropy
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def random(self) -> float:
        """Return random float in [0.0, 1.0).

        Returns:
            Random float between 0.0 and 1.0
        """
        return self.rng.random()

    def __repr__(self) -> str:
        return f"MersenneSource(seed={self.seed!r})"


class LockedSource:
    """Serializes draws on a source that several threads share.

    Generators never lock on their own; wrap the source in this before
    handing it to Generators used from different threads. Each draw stays
    atomic, but the order in which threads receive draws is still up to the
    scheduler.
    """

    def __init__(self, source: BitSource):
        self.source = source
        self._lock = threading.Lock()

    def random(self) -> float:
        with self._lock:
            return self.source.random()
