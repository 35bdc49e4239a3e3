"""seedroll - command line entry point.

Draws values from a seeded generator so sequences can be inspected and
reproduced from the shell.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from ..rng.curves import CURVES
from ..rng.errors import GeneratorError
from ..utils.constants import DEFAULT_CURVE, DRAW_COUNT_DEFAULT
from .commands import run_draw
from .schemas import DrawRequest, DrawResponse

logger = logging.getLogger(__name__)


def parse_seed_arg(text: str | None) -> int | str | None:
    """Interpret a --seed argument.

    Args:
        text: Raw argument, or None when the option was not given

    Returns:
        An int if the text is an integer literal, otherwise the text itself
    """
    if text is None:
        return None
    try:
        return int(text)
    except ValueError:
        return text


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="seedroll",
        description="Draw reproducible random values from a seed",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --seed 42 random                       # One real in [0, 1)
  %(prog)s --seed "test one" --count 5 int 1 7    # Five d6 rolls from a string seed
  %(prog)s --curve front choose common rare epic  # Choice biased toward the front
  %(prog)s --seed 7 --count 4 cycle a b c d       # Draws that never repeat back to back
  %(prog)s --json shuffle red green blue          # JSON output
        """,
    )
    parser.add_argument(
        "--seed",
        type=str,
        default=None,
        help="Integer or string seed (default: seeded from system entropy)",
    )
    parser.add_argument(
        "--curve",
        choices=sorted(CURVES),
        default=DEFAULT_CURVE,
        help=f"Curve applied to every draw (default: {DEFAULT_CURVE})",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=DRAW_COUNT_DEFAULT,
        help=f"Number of draws (default: {DRAW_COUNT_DEFAULT})",
    )
    parser.add_argument("--json", action="store_true", help="Print the response as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("random", help="Reals in [0, 1)")

    int_parser = commands.add_parser("int", help="Integers in [0, HIGH) or [LOW, HIGH)")
    int_parser.add_argument("bounds", type=int, nargs="+", metavar="BOUND")

    for name, help_text in (
        ("choose", "Pick items (with replacement)"),
        ("pluck", "Pick items without replacement"),
        ("cycle", "Pick items, holding back the most recent ones"),
        ("shuffle", "Shuffle the items"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("items", nargs="+", metavar="ITEM")
        if name in ("pluck", "cycle"):
            sub.add_argument(
                "--limit",
                type=int,
                default=None,
                help="Number of trailing items never picked (default: 0 for pluck, 1 for cycle)",
            )

    return parser


def format_response(response: DrawResponse, as_json: bool = False) -> str:
    """Render a response for the terminal.

    Args:
        response: Response to render
        as_json: If True, render the whole response as JSON

    Returns:
        Text to print
    """
    if as_json:
        return response.model_dump_json(indent=2)
    lines = []
    for result in response.results:
        if isinstance(result, list):
            lines.append(" ".join(str(item) for item in result))
        else:
            lines.append(str(result))
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        request = DrawRequest(
            command=args.command,
            seed=parse_seed_arg(args.seed),
            curve=args.curve,
            count=args.count,
            bounds=getattr(args, "bounds", []),
            items=getattr(args, "items", []),
            limit=getattr(args, "limit", None),
        )
        response = run_draw(request)
    except ValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        print(f"Error: {messages}", file=sys.stderr)
        return 2
    except GeneratorError as e:
        logger.debug("Draw failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(format_response(response, as_json=args.json))
    return 0


if __name__ == "__main__":
    sys.exit(main())
