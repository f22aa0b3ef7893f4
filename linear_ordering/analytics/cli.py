"""
Interactive CLI for the standardized sum ranking.

Arguments not given on the command line are prompted for.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from linear_ordering.analytics.analysis import LinearOrderingAnalysis
from linear_ordering.config import DATA_LAYOUT, DATA_LAYOUTS, DEFAULT_RESULTS_FILE, LOG_LEVEL
from linear_ordering.errors import AnalysisError
from linear_ordering.ingestion import DataImporter, parse_min_coefficient
from linear_ordering.report import ReportWriter

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _prompt_non_empty(prompt: str) -> str:
    value = input(prompt).strip()
    while not value:
        value = input("Required. Try again: ").strip()
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rank observations with the standardized sum method."
    )
    parser.add_argument("observations", nargs="?", help="File with observation names, one per line.")
    parser.add_argument("variables", nargs="?", help="File with variable names, one per line.")
    parser.add_argument("data", nargs="?", help="File with numeric data (stimulants).")
    parser.add_argument("min_coefficient", nargs="?", help="Minimal coefficient of variation in %% (e.g. 10).")
    parser.add_argument("results", nargs="?", help="Output report file.")
    parser.add_argument(
        "--layout",
        choices=DATA_LAYOUTS,
        default=DATA_LAYOUT,
        help="Order of values in the data file (default: %(default)s).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=LOG_LEVEL,
        help="Logging level (default: %(default)s).",
    )
    return parser


def _run(args: argparse.Namespace) -> str:
    importer = DataImporter()

    observations = args.observations or _prompt_non_empty(
        "Provide file name (observation file) (e.g. Obs.txt): "
    )
    observation_labels = importer.read_observations(observations)

    variables = args.variables or _prompt_non_empty(
        "Provide file name (variable file) (e.g. Var.txt): "
    )
    variable_labels = importer.read_variables(variables, observations)

    data = args.data or _prompt_non_empty(
        "Provide file name (data file) (e.g. Data.txt): "
    )
    values = importer.read_data(data, observations, variables)
    dataset = importer.build(observation_labels, variable_labels, values, layout=args.layout)

    raw_coeff = args.min_coefficient
    if raw_coeff is None:
        raw_coeff = input("Provide minimal coeff value (e.g. 10% = 10): ")
    min_coefficient = parse_min_coefficient(raw_coeff)

    results = args.results or input(
        f"Provide file name (results file) (e.g. {DEFAULT_RESULTS_FILE}): "
    ).strip() or DEFAULT_RESULTS_FILE

    result = LinearOrderingAnalysis().run(dataset, min_coefficient)
    ReportWriter().write(result, results)
    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI. Returns the process exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        results = _run(args)
    except AnalysisError as e:
        print(f"\n{e.kind}: {e}")
        return 1

    print(f"\nCompleted. Results stored in {results} file")
    return 0


if __name__ == "__main__":
    sys.exit(main())
