"""Execution of validated draw requests."""

import logging

from ..rng.curves import get_curve
from ..rng.generator import Generator
from ..utils.constants import CYCLE_LIMIT_DEFAULT, PLUCK_LIMIT_DEFAULT
from .schemas import DrawRequest, DrawResponse

logger = logging.getLogger(__name__)


def run_draw(request: DrawRequest) -> DrawResponse:
    """Run a draw request against a new generator.

    Sequence commands work on a private copy of ``request.items``; ``pluck``
    and ``cycle`` keep drawing from that one copy across all ``count`` draws.

    Args:
        request: Validated draw request

    Returns:
        Response holding one result per draw

    Raises:
        GeneratorError: If a draw's preconditions fail (e.g. plucking more
            items than were given)
    """
    rng = Generator(request.seed, curve=get_curve(request.curve))
    logger.info("Running %s x%d with %r", request.command, request.count, rng)

    results: list = []
    pool = list(request.items)
    for _ in range(request.count):
        if request.command == "random":
            results.append(rng.random())
        elif request.command == "int":
            results.append(rng.random_int(*request.bounds))
        elif request.command == "choose":
            results.append(rng.choose(pool))
        elif request.command == "pluck":
            limit = PLUCK_LIMIT_DEFAULT if request.limit is None else request.limit
            results.append(rng.pluck(pool, limit))
        elif request.command == "cycle":
            limit = CYCLE_LIMIT_DEFAULT if request.limit is None else request.limit
            results.append(rng.pluck_cycle(pool, limit))
        elif request.command == "shuffle":
            results.append(rng.shuffle(pool))

    return DrawResponse(
        command=request.command,
        seed=request.seed,
        curve=request.curve,
        results=results,
    )
