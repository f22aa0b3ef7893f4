"""
Orchestrates reading and validation of the input files.
"""

from __future__ import annotations

import logging
import math
import os
from typing import Optional

from linear_ordering.config import DATA_LAYOUT
from linear_ordering.errors import DataFormatError, DuplicateFileError, RangeError
from linear_ordering.ingestion.file_reader import FileReader
from linear_ordering.models import DataMatrix, Dataset

logger = logging.getLogger(__name__)


def parse_min_coefficient(raw: str) -> float:
    """Parse the minimal coefficient of variation (a percentage, >= 0)."""
    try:
        value = float(str(raw).strip())
    except ValueError as e:
        raise DataFormatError(f"Value is not a number: {raw!r}") from e
    if math.isnan(value):
        raise DataFormatError(f"Value is not a number: {raw!r}")
    if value < 0:
        raise RangeError("Coefficient cannot be lower than 0")
    return value


def _same_file(first: str, second: str) -> bool:
    if os.path.exists(first) and os.path.exists(second):
        return os.path.samefile(first, second)
    return os.path.normcase(os.path.abspath(first)) == os.path.normcase(
        os.path.abspath(second)
    )


class DataImporter:
    """
    Loads the three input files of a run:
    read -> validate -> build a RAW matrix.
    """

    def __init__(self, file_reader: Optional[FileReader] = None) -> None:
        self._reader = file_reader or FileReader()

    def load(
        self,
        observations_path: str,
        variables_path: str,
        data_path: str,
        layout: str = DATA_LAYOUT,
    ) -> Dataset:
        """
        Validate and load the input files.
        Raises the matching AnalysisError on the first problem found.
        """
        observation_labels = self.read_observations(observations_path)
        variable_labels = self.read_variables(variables_path, observations_path)
        values = self.read_data(data_path, observations_path, variables_path)
        return self.build(observation_labels, variable_labels, values, layout)

    def read_observations(self, path: str) -> list[str]:
        return self._reader.read_labels(path)

    def read_variables(self, path: str, observations_path: str) -> list[str]:
        self._check_distinct(path, observations_path)
        return self._reader.read_labels(path)

    def read_data(
        self, path: str, observations_path: str, variables_path: str
    ) -> list[float]:
        self._check_distinct(path, observations_path)
        self._check_distinct(path, variables_path)
        return self._reader.read_values(path)

    def build(
        self,
        observation_labels: list[str],
        variable_labels: list[str],
        values: list[float],
        layout: str = DATA_LAYOUT,
    ) -> Dataset:
        """Check the counts and build the RAW matrix."""
        matrix = DataMatrix.from_values(
            values, observation_labels, variable_labels, layout=layout
        )
        logger.info(
            "Loaded %d observations, %d variables, %d values (%s)",
            len(observation_labels), len(variable_labels), len(values), layout,
        )
        return Dataset(
            observation_labels=observation_labels,
            variable_labels=variable_labels,
            matrix=matrix,
        )

    @staticmethod
    def _check_distinct(path: str, other: str) -> None:
        if _same_file(path, other):
            raise DuplicateFileError(f"Tried to open the same file: {path}")
