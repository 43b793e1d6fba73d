import pytest

from edakit.vectors import add_into, avg_abs_diff, distance, divide


def test_distance_pythagorean():
    assert distance([0.0, 0.0], [3.0, 4.0]) == pytest.approx(5.0)


def test_distance_zero_and_symmetric():
    u, v = [1.5, -2.0, 7.0], [0.25, 3.0, -1.0]
    assert distance(u, u) == 0.0
    assert distance(u, v) == pytest.approx(distance(v, u))


def test_distance_triangle_inequality():
    a, b, c = [0.0, 1.0], [2.0, 5.0], [-3.0, 4.0]
    assert distance(a, c) <= distance(a, b) + distance(b, c) + 1e-12


def test_distance_length_mismatch():
    with pytest.raises(ValueError):
        distance([1.0], [1.0, 2.0])


def test_add_into_in_place():
    total = [1.0, 2.0]
    add_into(total, [3.0, 4.0])
    assert total == [4.0, 6.0]


def test_add_into_zero_is_identity():
    total = [1.5, -2.5, 3.0]
    add_into(total, [0.0, 0.0, 0.0])
    assert total == [1.5, -2.5, 3.0]


def test_add_into_length_mismatch():
    with pytest.raises(ValueError):
        add_into([0.0], [1.0, 2.0])


def test_divide():
    assert divide([2.0, 4.0], 2) == [1.0, 2.0]


def test_divide_by_one_keeps_values():
    values = [0.5, -7.25, 3.0]
    assert divide(values, 1) == values


def test_avg_abs_diff_same_vector():
    assert avg_abs_diff([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == 0.0


def test_avg_abs_diff_constant_shift():
    assert avg_abs_diff([0.0, 0.0, 0.0], [1.5, 1.5, 1.5]) == pytest.approx(1.5)
    assert avg_abs_diff([1.5, 1.5], [0.0, 0.0]) == pytest.approx(1.5)


def test_avg_abs_diff_errors():
    with pytest.raises(ValueError):
        avg_abs_diff([], [])
    with pytest.raises(ValueError):
        avg_abs_diff([1.0], [1.0, 2.0])