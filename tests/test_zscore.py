import pandas as pd
import pytest

from linear_ordering.analytics.descriptive import DescriptiveStats
from linear_ordering.analytics.zscore import ZScoreCalculator, is_constant, scale
from linear_ordering.errors import DegenerateArithmeticError, MatrixPhaseError
from linear_ordering.models import MatrixPhase


def test_scale():
    assert scale(7.0, 4.0, 1.5) == pytest.approx(2.0)


def test_scale_with_zero_sd_raises():
    with pytest.raises(DegenerateArithmeticError):
        scale(1.0, 1.0, 0.0)


def test_standardized_columns_have_zero_mean_and_unit_sd(dataset_factory):
    dataset = dataset_factory([[1.0, 100.0, -3.0], [4.0, 250.0, 2.0], [2.5, 75.0, 0.5], [9.0, 110.0, -1.0]])
    matrix = dataset.matrix
    stats = DescriptiveStats().compute(matrix)

    result = ZScoreCalculator().compute(matrix, stats)

    assert result is matrix
    assert matrix.phase is MatrixPhase.STANDARDIZED
    for j in range(matrix.variable_count):
        column = matrix.column(j)
        assert column.mean() == pytest.approx(0.0, abs=1e-12)
        assert column.std(ddof=0) == pytest.approx(1.0)


def test_each_variable_uses_its_own_statistics(ordered_dataset):
    matrix = ordered_dataset.matrix
    stats = DescriptiveStats().compute(matrix)
    ZScoreCalculator().compute(matrix, stats)

    assert matrix.row(1).tolist() == [0.0, 0.0]
    assert matrix.column(0).iloc[2] == pytest.approx(1.224744871)
    assert matrix.column(1).iloc[0] == pytest.approx(-1.224744871)


def test_constant_column_raises_and_leaves_matrix_raw(dataset_factory):
    dataset = dataset_factory([[1.0, 5.0], [2.0, 5.0], [3.0, 5.0]], variables=["X", "Flat"])
    matrix = dataset.matrix
    stats = DescriptiveStats().compute(matrix)

    with pytest.raises(DegenerateArithmeticError, match="Flat"):
        ZScoreCalculator().compute(matrix, stats)

    assert matrix.phase is MatrixPhase.RAW
    assert matrix.column(0).tolist() == [1.0, 2.0, 3.0]


def test_cannot_standardize_twice(ordered_dataset):
    matrix = ordered_dataset.matrix
    stats = DescriptiveStats().compute(matrix)
    calculator = ZScoreCalculator()
    calculator.compute(matrix, stats)

    with pytest.raises(MatrixPhaseError):
        calculator.compute(matrix, stats)


def test_statistics_count_must_match(ordered_dataset):
    matrix = ordered_dataset.matrix
    stats = DescriptiveStats().compute(matrix)
    with pytest.raises(ValueError):
        ZScoreCalculator().compute(matrix, stats[:1])


def test_scale_accepts_a_whole_column():
    column = pd.Series([1.0, 4.0, 7.0])
    assert scale(column, 4.0, 3.0).tolist() == [-1.0, 0.0, 1.0]


def test_non_integer_constant_column_raises(dataset_factory):
    # 0.1 is not exactly representable: the computed sd is a tiny residue, not 0
    dataset = dataset_factory([[1.0, 0.1], [2.0, 0.1], [3.0, 0.1]], variables=["X", "Flat"])
    matrix = dataset.matrix
    stats = DescriptiveStats().compute(matrix)
    assert is_constant(stats[1])

    with pytest.raises(DegenerateArithmeticError, match="Flat"):
        ZScoreCalculator().compute(matrix, stats)
    assert matrix.phase is MatrixPhase.RAW
