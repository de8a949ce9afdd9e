"""
Command-line interface for the dependency age tool.
"""

import argparse
import logging
import sys
from pathlib import Path

from .checker import ReleaseDateChecker
from .exceptions import ManifestReadError
from .reporting import export_csv, export_worksheet, print_report, save_results_json


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
    else:
        logging.basicConfig(level=logging.WARNING, format="%(message)s", stream=sys.stderr)


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="List npm dependencies by how long ago their installed version was released"
    )

    parser.add_argument(
        "--project-dir",
        default=".",
        help="Directory containing package.json and node_modules. Default: current directory"
    )

    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Do not render the progress bar while fetching"
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Also write JSON and CSV results to this directory"
    )

    parser.add_argument(
        "--get-worksheets",
        action="store_true",
        help="Also export results to an Excel file (requires --output-dir)"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    if args.get_worksheets and args.output_dir is None:
        parser.error("--get-worksheets requires --output-dir")

    _configure_logging(args.verbose)

    project_dir = Path(args.project_dir)
    checker = ReleaseDateChecker(
        project_dir=project_dir,
        show_progress=not args.no_progress,
    )

    try:
        checker.load()
    except ManifestReadError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    records = checker.run()
    print_report(records)

    if args.output_dir:
        output_dir = Path(args.output_dir)
        project = checker.manifest.get("name") or project_dir.resolve().name
        project = str(project).replace("/", "_")
        results_file = save_results_json(records, output_dir, project)
        print(f"\nResults saved to: {results_file}")
        csv_file = export_csv(records, output_dir, project)
        print(f"CSV saved to: {csv_file}")
        if args.get_worksheets:
            excel_file = export_worksheet(records, output_dir, project)
            print(f"Worksheet saved to: {excel_file}")


if __name__ == "__main__":
    main()
