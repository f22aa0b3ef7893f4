import pytest

from linear_ordering.errors import (
    DataCountMismatchError,
    DataFormatError,
    DuplicateFileError,
    EmptyFileError,
    ExistenceError,
    RangeError,
)
from linear_ordering.ingestion import DataImporter, FileReader, parse_min_coefficient, parse_values
from linear_ordering.models import MatrixPhase


def test_read_labels_strips_line_endings(tmp_path):
    path = tmp_path / "Obs.txt"
    path.write_bytes(b"Poland\r\nCzech Republic\nSlovakia\n\n")

    assert FileReader().read_labels(str(path)) == ["Poland", "Czech Republic", "Slovakia"]


def test_missing_file_raises_existence_error(tmp_path):
    with pytest.raises(ExistenceError) as exc_info:
        FileReader().read_labels(str(tmp_path / "missing.txt"))
    assert isinstance(exc_info.value, FileNotFoundError)


@pytest.mark.parametrize("content", ["", "\n\n"])
def test_empty_label_file(tmp_path, content):
    path = tmp_path / "Var.txt"
    path.write_text(content)
    with pytest.raises(EmptyFileError):
        FileReader().read_labels(str(path))


def test_read_values_accepts_any_whitespace(tmp_path):
    path = tmp_path / "Data.txt"
    path.write_text("1 2.5\n-3e1\t4\n\n")
    assert FileReader().read_values(str(path)) == [1.0, 2.5, -30.0, 4.0]


@pytest.mark.parametrize("token", ["abc", "1,5", "nan", "inf"])
def test_parse_values_reports_position(token):
    with pytest.raises(DataFormatError, match="position 3"):
        parse_values(["1", "2", token, "4"])


def test_load_builds_raw_matrix(write_inputs):
    paths = write_inputs("A\nB\nC\n", "X\nY\n", "1\n2\n3\n10\n20\n15\n")
    dataset = DataImporter().load(*paths)

    assert dataset.observation_labels == ["A", "B", "C"]
    assert dataset.variable_labels == ["X", "Y"]
    assert dataset.matrix.phase is MatrixPhase.RAW
    assert dataset.matrix.row(2).tolist() == [3.0, 15.0]


def test_load_by_observation_layout(write_inputs):
    paths = write_inputs("A\nB\nC\n", "X\nY\n", "1 10\n2 20\n3 15\n")
    dataset = DataImporter().load(*paths, layout="by_observation")

    assert dataset.matrix.column(1).tolist() == [10.0, 20.0, 15.0]


def test_count_mismatch(write_inputs):
    paths = write_inputs("A\nB\n", "X\nY\n", "1 2 3\n")
    with pytest.raises(DataCountMismatchError) as exc_info:
        DataImporter().load(*paths)

    err = exc_info.value
    assert (err.observation_count, err.variable_count, err.data_count) == (2, 2, 3)


def test_duplicate_file(write_inputs):
    obs, _, data = write_inputs("A\nB\n", "X\n", "1 2\n")
    with pytest.raises(DuplicateFileError):
        DataImporter().load(obs, obs, data)
    with pytest.raises(DuplicateFileError):
        DataImporter().load(obs, data, data)


def test_empty_data_file(write_inputs):
    paths = write_inputs("A\n", "X\n", "  \n")
    with pytest.raises(EmptyFileError):
        DataImporter().load(*paths)


@pytest.mark.parametrize("raw, expected", [("10", 10.0), (" 0 ", 0.0), ("2.5", 2.5)])
def test_parse_min_coefficient(raw, expected):
    assert parse_min_coefficient(raw) == expected


@pytest.mark.parametrize("raw", ["ten", "", "nan"])
def test_parse_min_coefficient_not_a_number(raw):
    with pytest.raises(DataFormatError):
        parse_min_coefficient(raw)


def test_parse_min_coefficient_negative():
    with pytest.raises(RangeError):
        parse_min_coefficient("-0.5")


def test_non_utf8_file_is_a_format_error(tmp_path):
    path = tmp_path / "Obs.txt"
    path.write_bytes(b"Pozna\xf1\nB\n")
    with pytest.raises(DataFormatError, match="Obs.txt"):
        FileReader().read_labels(str(path))


def test_step_by_step_load_checks_each_file(write_inputs):
    obs, var, data = write_inputs("A\nB\n", "X\n", "1 2\n")
    importer = DataImporter()

    observation_labels = importer.read_observations(obs)
    with pytest.raises(DuplicateFileError):
        importer.read_variables(obs, obs)
    variable_labels = importer.read_variables(var, obs)
    values = importer.read_data(data, obs, var)

    dataset = importer.build(observation_labels, variable_labels, values)
    assert dataset.matrix.column(0).tolist() == [1.0, 2.0]
