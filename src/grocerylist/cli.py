"""Command line entry point for parsing and merging ingredient lists.

Run with: grocerylist recipe.txt
Merge with: grocerylist recipe.txt --merge other_recipe.txt

Input files hold one ingredient per line; "-" reads from stdin. Output is JSON
on stdout.
"""

import argparse
import json
import sys
from collections.abc import Sequence
from typing import TextIO

from grocerylist.config import get_settings
from grocerylist.logging_config import LoggingContext, configure_logging, get_logger
from grocerylist.parse import parse_ingredients
from grocerylist.schemas import GroceryItemSchema, MergeRequest, ParsedIngredientSchema

logger = get_logger(__name__)


def read_lines(stream: TextIO) -> list[str]:
    """Read non-blank lines from a text stream."""
    return [line.rstrip("\n") for line in stream if line.strip()]


def parse_command(lines: list[str]) -> list[dict]:
    parsed = parse_ingredients(lines)
    return [ParsedIngredientSchema.from_parsed(p).model_dump() for p in parsed]


def merge_command(lines_a: list[str], lines_b: list[str]) -> list[dict]:
    request = MergeRequest(
        list_a=[GroceryItemSchema.from_item(p.to_grocery_item()) for p in parse_ingredients(lines_a)],
        list_b=[GroceryItemSchema.from_item(p.to_grocery_item()) for p in parse_ingredients(lines_b)],
    )
    return [item.model_dump() for item in request.merge()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Parse recipe ingredient lines into grocery items")
    parser.add_argument(
        "input",
        type=argparse.FileType("r", encoding="utf-8"),
        help="File with one ingredient per line ('-' for stdin)",
    )
    parser.add_argument(
        "--merge",
        "-m",
        type=argparse.FileType("r", encoding="utf-8"),
        help="Second ingredient file to merge into the first",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    return parser


def main(argv: Sequence[str] | None = None, stdout: TextIO | None = None) -> int:
    settings = get_settings()
    configure_logging(log_level=settings.log_level, json_format=settings.json_logs)

    args = build_parser().parse_args(argv)
    out = stdout or sys.stdout

    with LoggingContext(list_id=args.input.name):
        lines = read_lines(args.input)
        if args.merge is not None:
            result = merge_command(lines, read_lines(args.merge))
            logger.info(f"Merged into {len(result)} grocery items")
        else:
            result = parse_command(lines)
            logger.info(f"Parsed {len(result)} ingredient lines")

    json.dump(result, out, indent=args.indent, ensure_ascii=False)
    out.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
