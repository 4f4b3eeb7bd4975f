"""Small file tools: combining CSV files with a shared header and building comma lists."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path

COMBINED_OUTPUT = "combined_output.csv"
COMMA_LIST_OUTPUT = "comma.separate.list.output.txt"


def _read_lines(path: Path) -> Iterator[str]:
    with path.open(encoding="utf-8", newline="") as handle:
        for line in handle:
            yield line.removesuffix("\n").removesuffix("\r")


def combine_csv(directory: str | Path = ".", output: str | Path | None = None) -> list[str]:
    """Append every CSV file in ``directory`` to ``output``, keeping only the first header.

    Returns the names of the files combined, in the order they were processed.
    """
    directory = Path(directory)
    out_path = Path(output) if output is not None else directory / COMBINED_OUTPUT
    out_resolved = out_path.resolve()
    sources = sorted(
        path
        for path in directory.iterdir()
        if path.suffix == ".csv" and path.is_file() and path.resolve() != out_resolved
    )
    processed: list[str] = []
    if not sources:
        return processed
    with out_path.open("a", encoding="utf-8", newline="") as out:
        for path in sources:
            lines = _read_lines(path)
            if processed:
                next(lines, None)
            for line in lines:
                out.write(line + "\n")
            processed.append(path.name)
    return processed


def generate_comma_list(
    input_file: str | Path, constant_value: str, output: str | Path = COMMA_LIST_OUTPUT
) -> tuple[str, str]:
    """Append two lines to ``output``: the input's rows joined by commas, and
    ``constant_value`` repeated once per row, joined by commas.

    Returns the two lines written.
    """
    rows = list(_read_lines(Path(input_file)))
    first = ",".join(rows)
    second = ",".join(constant_value for _ in rows)
    with Path(output).open("a", encoding="utf-8", newline="") as out:
        out.write(first + "\n")
        out.write(second + "\n")
    return first, second


def main_combine(argv: Sequence[str] | None = None) -> int:
    """Combine the CSV files of a directory (the current one by default)."""
    parser = argparse.ArgumentParser(
        description="Combine csv files with a common header in a directory."
    )
    parser.add_argument("directory", nargs="?", default=".")
    args = parser.parse_args(argv)
    try:
        names = combine_csv(args.directory)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    for name in names:
        print(f'processing csv file: "{name}"')
    if names:
        print(f"generated {COMBINED_OUTPUT}.")
    return 0


def main_comma_list(argv: Sequence[str] | None = None) -> int:
    """Build the two comma separated lists from an input file and a constant."""
    parser = argparse.ArgumentParser(
        prog="Generate comma separated list",
        description="Generate 2 comma separated list with constant value in second list.",
    )
    parser.add_argument("--version", action="version", version="1.0")
    parser.add_argument(
        "-i",
        "--inputFile",
        dest="input_file",
        metavar="inputFile",
        required=True,
        help="input file with multiple rows, the rows with be joined with comma",
    )
    parser.add_argument(
        "-c",
        "--constantValue",
        dest="constant_value",
        metavar="constantValue",
        required=True,
        help="this constant value will be joined with comma. number of times "
        "repeating is determined by number of rows in inputFile.",
    )
    args = parser.parse_args(argv)
    print(f"Input file is {args.input_file}.")
    print(f"Constant value is {args.constant_value}")
    print(f"writing to output file {COMMA_LIST_OUTPUT}.")
    try:
        generate_comma_list(args.input_file, args.constant_value)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0