"""Data ingestion from label and data text files."""

from linear_ordering.ingestion.file_reader import FileReader, parse_values
from linear_ordering.ingestion.importer import DataImporter, parse_min_coefficient

__all__ = ["FileReader", "DataImporter", "parse_min_coefficient", "parse_values"]
