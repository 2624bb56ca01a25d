import pytest

from scanslam.eigen3 import eigen_decomposition


def column(m, j):
    return [row[j] for row in m]


def matvec(m, vec):
    return [sum(a * b for a, b in zip(row, vec)) for row in m]


def check_decomposition(a):
    values, vectors = eigen_decomposition(a)
    n = len(a)
    assert values == sorted(values)
    for j in range(n):
        vj = column(vectors, j)
        av = matvec(a, vj)
        for got, want in zip(av, vj):
            assert got == pytest.approx(values[j] * want, abs=1e-9)
        for k in range(n):
            dot = sum(x * y for x, y in zip(vj, column(vectors, k)))
            assert dot == pytest.approx(1.0 if j == k else 0.0, abs=1e-9)
    return values


def test_diagonal_matrix():
    values = check_decomposition([[3.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 2.0]])
    assert values == pytest.approx([1.0, 2.0, 3.0])


def test_covariance_from_stat_example():
    values = check_decomposition([[1.0, 0.0, 0.0], [0.0, 0.01, 0.0], [0.0, 0.0, 0.01]])
    assert values == pytest.approx([0.01, 0.01, 1.0])


@pytest.mark.parametrize(
    "a",
    [
        [[2.0, 1.0, 0.5], [1.0, 3.0, -0.3], [0.5, -0.3, 1.5]],
        [[4.0, -2.0, 1.0], [-2.0, 2.0, 0.0], [1.0, 0.0, 5.0]],
        [[0.01, 0.002, 0.0], [0.002, 0.03, 0.001], [0.0, 0.001, 0.005]],
    ],
)
def test_symmetric_matrices(a):
    values = check_decomposition(a)
    assert sum(values) == pytest.approx(sum(a[i][i] for i in range(3)))


def test_input_is_not_modified():
    a = [[2.0, 1.0, 0.0], [1.0, 2.0, 0.0], [0.0, 0.0, 1.0]]
    copy = [row[:] for row in a]
    eigen_decomposition(a)
    assert a == copy


@pytest.mark.parametrize("bad", [[], [[1.0, 2.0], [3.0]], [[1.0, 2.0, 3.0]]])
def test_non_square_rejected(bad):
    with pytest.raises(ValueError):
        eigen_decomposition(bad)