import pytest

from cowdia.matrix import MAT_SIZE, Matrix

EPS = 1e-5

A_VALUES = [float(v) for v in range(1, 17)]
B_VALUES = [float(v) for v in range(3, 19)]


@pytest.fixture
def a():
    return Matrix(*A_VALUES)


@pytest.fixture
def b():
    return Matrix(*B_VALUES)


def _cells():
    return [(i, j) for i in range(MAT_SIZE) for j in range(MAT_SIZE)]


def test_construction_row_major(a, b):
    for i, j in _cells():
        assert a[i, j] == pytest.approx(i * 4 + j + 1, rel=EPS)
        assert b[i, j] == pytest.approx(i * 4 + j + 3, rel=EPS)


def test_add_matrices(a, b):
    result = a + b
    for i, j in _cells():
        assert result[i, j] == pytest.approx(i * 8 + j * 2 + 4, rel=EPS)


def test_sub_matrices(a, b):
    result = b - a
    for i, j in _cells():
        assert result[i, j] == pytest.approx(2, rel=EPS)


def test_mul_matrices_of_ones():
    ones = Matrix(*([1.0] * 16))
    result = ones * ones
    for i, j in _cells():
        assert result[i, j] == pytest.approx(4, rel=EPS)


def test_scalar_add_sub(a):
    plus = a + 2
    minus = a - 2
    for i, j in _cells():
        assert plus[i, j] == pytest.approx(i * 4 + j + 3, rel=EPS)
        assert minus[i, j] == pytest.approx(i * 4 + j - 1, abs=EPS)


def test_scalar_mul_div(a):
    mul = a * 3
    div = a / 2
    for i, j in _cells():
        assert mul[i, j] == pytest.approx(i * 12 + j * 3 + 3, rel=EPS)
        assert div[i, j] == pytest.approx(i * 2 + (j + 1) / 2, rel=EPS)


def test_transpose(a):
    t = a.transpose()
    for i, j in _cells():
        assert t[j, i] == pytest.approx(i * 4 + j + 1, rel=EPS)
    assert a.T == t


def test_reflected_scalar_ops(a):
    two_plus = 2 + a
    two_minus = 2 - a
    three_mul = 3 * a
    for i, j in _cells():
        assert two_plus[i, j] == pytest.approx(i * 4 + j + 3, rel=EPS)
        assert two_minus[i, j] == pytest.approx(-i * 4 - j + 1, abs=EPS)
        assert three_mul[i, j] == pytest.approx(i * 12 + j * 3 + 3, rel=EPS)


def test_zero_and_identity(a):
    assert list(Matrix.zero()) == [0.0] * 16
    assert a * Matrix.identity() == a
    assert Matrix.identity() * a == a
    assert Matrix.identity()[2, 2] == 1.0
    assert Matrix.identity()[2, 1] == 0.0


def test_matrix_product_values():
    m = Matrix(1, 2, 0, 0, 3, 4)
    n = Matrix(5, 6, 0, 0, 7, 8)
    result = m * n
    assert result[0, 0] == 19.0
    assert result[0, 1] == 22.0
    assert result[1, 0] == 43.0
    assert result[1, 1] == 50.0


def test_negation(a):
    assert list(-a) == [-v for v in A_VALUES]


def test_setitem(a):
    a[1, 2] = 42
    assert a[1, 2] == 42.0


def test_in_place_ops_fall_back(a):
    m = Matrix(*A_VALUES)
    m += 1
    assert m[0, 0] == 2.0
    m *= Matrix.identity()
    assert m[3, 3] == 17.0


def test_too_many_elements():
    with pytest.raises(ValueError):
        Matrix(*range(17))


def test_bad_index(a):
    with pytest.raises(IndexError):
        a[4, 0]
    with pytest.raises(TypeError):
        a[0]
    assert a[3, 3] == 16.0
    assert list(a) == A_VALUES


def test_missing_elements_are_zero():
    m = Matrix(1, 2)
    assert list(m) == [1.0, 2.0] + [0.0] * 14