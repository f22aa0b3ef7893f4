import pytest

from linear_ordering.models import DataMatrix, Dataset


@pytest.fixture
def write_inputs(tmp_path):
    """Write observation, variable and data files; return their paths."""

    def _write(observations, variables, data, names=("Obs.txt", "Var.txt", "Data.txt")):
        paths = []
        for name, content in zip(names, (observations, variables, data)):
            path = tmp_path / name
            path.write_text(content, encoding="utf-8")
            paths.append(str(path))
        return paths

    return _write


def make_dataset(rows, observations=None, variables=None):
    """Dataset from row-major values."""
    observations = observations or [chr(ord("A") + i) for i in range(len(rows))]
    variables = variables or [chr(ord("X") + j) for j in range(len(rows[0]))]
    flat = [v for row in rows for v in row]
    matrix = DataMatrix.from_values(flat, observations, variables, layout="by_observation")
    return Dataset(
        observation_labels=list(observations),
        variable_labels=list(variables),
        matrix=matrix,
    )


@pytest.fixture
def ordered_dataset():
    # X = 1, 2, 3 and Y = 1, 4, 7: C > B > A with indices 1, 0.5, 0
    return make_dataset([[1, 1], [2, 4], [3, 7]])


@pytest.fixture
def two_variable_dataset():
    return make_dataset([[1, 10], [2, 20], [3, 15]])


@pytest.fixture
def dataset_factory():
    return make_dataset
