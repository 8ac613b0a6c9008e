import pytest

from dsakit.arraystats import reversed_values, smallest_and_largest, sum_and_average

SOURCE_ARRAY = [1, 2, 3, 4, 5]


def test_smallest_and_largest_of_source_array():
    assert smallest_and_largest(SOURCE_ARRAY) == (1, 5)


@pytest.mark.parametrize(
    "values", [[3], [9, -2, 7, 7], [-5, -1, -9], list(range(100, 0, -3))]
)
def test_smallest_and_largest_bounds(values):
    low, high = smallest_and_largest(values)
    assert low in values and high in values
    assert all(low <= value <= high for value in values)


def test_smallest_and_largest_empty_raises():
    with pytest.raises(ValueError):
        smallest_and_largest([])


def test_reversed_source_array():
    assert reversed_values(SOURCE_ARRAY) == [5, 4, 3, 2, 1]


def test_reversal_round_trip():
    values = [8, 3, 3, 0, -1]
    assert reversed_values(reversed_values(values)) == values
    assert values == [8, 3, 3, 0, -1]


def test_sum_and_average_of_source_array():
    assert sum_and_average(SOURCE_ARRAY) == (15, 3)


def test_average_truncates_toward_zero():
    assert sum_and_average([-1, -2]) == (-3, -1)


@pytest.mark.parametrize("values", [[1, 2], [10, 20, 31], [-4, 9, 2, -13], [7]])
def test_average_bounds(values):
    total, average = sum_and_average(values)
    assert total == sum(values)
    assert abs(average * len(values)) <= abs(total)
    assert abs(total) - abs(average * len(values)) < len(values)


def test_sum_and_average_empty_raises():
    with pytest.raises(ValueError):
        sum_and_average([])