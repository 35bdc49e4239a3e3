"""Curve functions that reshape uniform draws.

A curve takes a number in [0, 1) and returns another number, normally in the
same range. Curves that stay monotonic and inside [0, 1) keep every
Generator operation meaningful while biasing which values come up:

- ``identity`` leaves draws uniform (mean 1/2)
- ``front`` squares draws, favouring low values (mean 1/3)
- ``back`` takes the square root, favouring high values (mean 2/3)
"""

import math
from typing import Callable

Curve = Callable[[float], float]


def identity(n: float) -> float:
    return n


def front(n: float) -> float:
    return n * n


def back(n: float) -> float:
    return math.sqrt(n)


CURVES: dict[str, Curve] = {
    "identity": identity,
    "front": front,
    "back": back,
}


def get_curve(name: str) -> Curve:
    """Look up a named curve.

    Args:
        name: One of the keys of CURVES

    Returns:
        The curve function

    Raises:
        ValueError: If no curve has that name
    """
    try:
        return CURVES[name]
    except KeyError:
        valid = ", ".join(sorted(CURVES))
        raise ValueError(f"Unknown curve: {name!r} (must be one of: {valid})") from None
