"""
File reader for label and data text files.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from linear_ordering.config import ENCODING
from linear_ordering.errors import DataFormatError, EmptyFileError, ExistenceError


class FileReader:
    """
    Reads the three input files of a run.
    Label files hold one name per line; the data file holds
    whitespace-separated numbers.
    """

    def __init__(self, encoding: str = ENCODING) -> None:
        self.encoding = encoding

    def read_text(self, filepath: str) -> str:
        try:
            with open(filepath, encoding=self.encoding) as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise DataFormatError(
                f"{filepath}: not a {self.encoding} text file ({e.reason} at byte {e.start})"
            ) from e
        except OSError as e:
            raise ExistenceError(f"{filepath}: {e.strerror or e}") from e

    def read_labels(self, filepath: str) -> list[str]:
        """
        Return one label per line, line terminators stripped.
        Trailing blank lines are ignored.
        """
        lines = self.read_text(filepath).splitlines()
        while lines and not lines[-1].strip():
            lines.pop()
        if not lines:
            raise EmptyFileError(f"This file is empty: {filepath}")
        return lines

    def read_values(self, filepath: str) -> list[float]:
        """Parse every whitespace-separated token as a finite float."""
        tokens = self.read_text(filepath).split()
        if not tokens:
            raise EmptyFileError(f"This file is empty: {filepath}")
        return parse_values(tokens)


def parse_values(tokens: list[str]) -> list[float]:
    """
    Convert tokens to floats.
    Raises DataFormatError with the 1-based position of the first bad token.
    """
    parsed = pd.to_numeric(pd.Series(tokens, dtype="object"), errors="coerce")
    values = parsed.to_numpy(dtype="float64")
    bad = np.flatnonzero(~np.isfinite(values))
    if bad.size:
        position = int(bad[0]) + 1
        raise DataFormatError(
            f"Value in position {position} is not a number "
            f"({tokens[position - 1]!r})"
        )
    return values.tolist()
