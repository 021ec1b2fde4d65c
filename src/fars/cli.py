"""
FARS Command-Line Interface

Exposes three subcommands:

    fars filename  --year <year>                       Print the data file name
    fars summarize --years <year> [<year> ...] [...]    Monthly accident counts
    fars map       --state <num> --year <year> [...]    State accident map

Data files (``accident_<year>.csv.bz2``) are read from ``--data-dir``,
which defaults to the current working directory.

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional


# ===========================================================================
# Shared helpers
# ===========================================================================

def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\n❌  Error: {message}", file=sys.stderr)
    sys.exit(1)


def _data_dir(args: argparse.Namespace) -> Path:
    """Resolve ``--data-dir`` and make sure it exists.

    Raises:
        SystemExit: If the directory is absent.
    """
    data_dir = Path(args.data_dir)
    if not data_dir.is_dir():
        _die(f"Data directory not found: {data_dir}")
    return data_dir


# ===========================================================================
# Subcommand handlers
# ===========================================================================

def handle_filename(args: argparse.Namespace) -> None:
    """Print the accident file name for ``args.year``."""
    from fars.data.reader import resolve_filename

    print(resolve_filename(args.year))


def handle_summarize(args: argparse.Namespace) -> None:
    """Print, or save as CSV, the month-by-year accident count table.

    Args:
        args: Parsed CLI arguments.  Required field: ``args.years``.
    """
    from fars.reports.generators import summarize_years

    data_dir = _data_dir(args)
    table = summarize_years(args.years, data_dir=data_dir)

    if table.empty:
        print("⚠️   No data loaded for the requested years.", file=sys.stderr)

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(out_path, index=False)
        print(f"✅  Summary written to {out_path}")
    else:
        print(table.to_string(index=False))


def handle_map(args: argparse.Namespace) -> None:
    """Render the accident map for one state and year.

    Args:
        args: Parsed CLI arguments.  Required fields: ``args.state``,
              ``args.year``.
    """
    from fars.analysis.states import InvalidStateError
    from fars.data.reader import MissingFileError
    from fars.reports.generators import map_state

    data_dir = _data_dir(args)
    try:
        map_state(
            args.state,
            args.year,
            data_dir=data_dir,
            output_path=args.output,
        )
    except (MissingFileError, InvalidStateError) as exc:
        _die(str(exc))

    if args.output:
        print(f"✅  Map written to {args.output}")


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--data-dir",
        default=".",
        metavar="DIR",
        help="Directory holding accident_<year>.csv.bz2 files (default: cwd).",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser.

    Returns:
        Configured ``ArgumentParser`` with ``filename``, ``summarize``, and
        ``map`` subcommands attached.
    """
    parser = argparse.ArgumentParser(
        prog="fars",
        description=(
            "FARS – Fatality Analysis Reporting System toolkit\n"
            "Summarize yearly accident files and map accidents by state."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Log DEBUG messages.",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON.",
    )
    subs = parser.add_subparsers(dest="command", metavar="<command>")
    subs.required = True

    # ------------------------------------------------------------------
    # filename
    # ------------------------------------------------------------------
    p_name = subs.add_parser(
        "filename",
        help="Print the data file name for a year.",
    )
    p_name.add_argument("--year", required=True, help="Year, e.g. 2014.")
    p_name.set_defaults(func=handle_filename)

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        help="Count accidents per month for one or more years.",
        description=(
            "Load each year's accident file and count accidents per month.\n"
            "Years whose file is missing are reported and skipped."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        metavar="YEAR",
        help="One or more years, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--output",
        default=None,
        metavar="FILE",
        help="Write the table to this CSV file instead of printing it.",
    )
    _add_common_arguments(p_sum)
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        help="Plot accident locations for a state and year.",
    )
    p_map.add_argument(
        "--state",
        required=True,
        metavar="NUM",
        help="FARS state number, e.g. 30 (Montana).",
    )
    p_map.add_argument("--year", required=True, help="Year, e.g. 2013.")
    p_map.add_argument(
        "--output",
        default=None,
        metavar="FILE",
        help="Write the map to this HTML file instead of opening a viewer.",
    )
    _add_common_arguments(p_map)
    p_map.set_defaults(func=handle_map)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    from fars.utils.logging import configure_logging

    parser = _build_parser()
    args   = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, json_format=args.json_logs)
    args.func(args)


if __name__ == "__main__":
    main()
