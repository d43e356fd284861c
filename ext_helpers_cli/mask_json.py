"""
JSON masking command-line interface.

Reads a JSON document from a file (or standard input), resets every field
addressed by the given path expressions to the default value of its kind and
writes the masked document to a file (or standard output).

---

# Quick ways to run the script

1. Using a file

>>> ext-helpers-mask input.json -p "password" -p "users[*].token" -o masked.json

*If you omit `-o …` the result will be printed on the console.*


2. Piping data

>>> cat input.json | ext-helpers-mask -p "$.credentials.secret" > masked.json
"""

import argparse
import json
import sys

from ext_helpers_lib.exceptions import ExtHelpersError
from ext_helpers_lib.masking import mask
from ext_helpers_lib.utils.logger import prepare_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Mask fields of a JSON document addressed by path expressions."
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Input JSON file (defaults to STDIN).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=argparse.FileType("w", encoding="utf-8"),
        default=sys.stdout,
        help="Output file (defaults to STDOUT).",
    )
    parser.add_argument(
        "-p",
        "--path",
        dest="paths",
        action="append",
        required=True,
        help="Path of a field to mask, e.g. 'items[*].secret' (repeatable).",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Indentation of the written JSON (default: 2).",
    )
    parser.add_argument(
        "--log-level", default=None, help="Logging level (default: INFO)."
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = prepare_logger("ext_helpers_lib", level=args.log_level)

    try:
        document = json.load(args.input)
    except json.JSONDecodeError as exc:
        logger.error("Input is not valid JSON: %s", exc)
        return 1

    try:
        masked = mask(document, args.paths)
    except ExtHelpersError as exc:
        logger.error("Masking failed: %s", exc)
        return 1

    json.dump(masked, args.output, indent=args.indent, ensure_ascii=False)
    args.output.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
