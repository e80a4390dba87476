import pytest

from parexp.matrix import Matrix


def test_zeros_has_only_zero_entries():
    m = Matrix.zeros(4)
    assert m.size == 4
    assert all(value == 0.0 for row in m for value in row)


def test_default_size_is_three():
    assert Matrix.zeros().size == 3
    assert Matrix.identity().size == 3


def test_filled_sets_every_entry():
    m = Matrix.filled(2.5, 3)
    assert all(value == 2.5 for row in m for value in row)


def test_identity_diagonal():
    m = Matrix.identity(3)
    for i, row in enumerate(m):
        for j, value in enumerate(row):
            assert value == (1.0 if i == j else 0.0)


def test_non_square_rejected():
    with pytest.raises(ValueError):
        Matrix([[1, 2], [3]])


def test_empty_rejected():
    with pytest.raises(ValueError):
        Matrix([])


def test_bad_size_rejected():
    with pytest.raises(ValueError):
        Matrix.identity(0)


def test_add_is_elementwise():
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[10, 20], [30, 40]])
    assert a + b == Matrix([[11, 22], [33, 44]])


def test_add_zero_is_neutral():
    a = Matrix([[0.1, 0.4, 0.2], [0.3, 0.0, 0.5], [0.6, 0.2, 0.1]])
    assert a + Matrix.zeros(3) == a


def test_identity_is_multiplicative_neutral():
    a = Matrix([[1, -1, -1], [1, 1, 0], [3, 0, 1]])
    i = Matrix.identity(3)
    assert a * i == a
    assert i * a == a


def test_matrix_product_nilpotent():
    n = Matrix([[0, 1], [0, 0]])
    assert n * n == Matrix.zeros(2)


def test_product_is_associative_on_integers():
    a = Matrix([[1, -1, -1], [1, 1, 0], [3, 0, 1]])
    b = Matrix([[2, 0, 1], [0, 1, 0], [1, 0, 2]])
    c = Matrix([[0, 1, 0], [1, 0, 1], [0, 0, 1]])
    assert (a * b) * c == a * (b * c)


def test_scalar_multiply_both_sides():
    a = Matrix([[1, 2], [3, 4]])
    assert a * 2 == a + a
    assert 2 * a == a + a


def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        Matrix.identity(2) + Matrix.identity(3)
    with pytest.raises(ValueError):
        Matrix.identity(2) * Matrix.identity(3)


def test_unsupported_operand():
    with pytest.raises(TypeError):
        Matrix.identity(2) * "x"


def test_format_bracketed():
    text = Matrix.identity(3).format("I")
    lines = text.splitlines()
    assert lines[0] == "I (3x3):"
    assert lines[1] == "[   1.0000   0.0000   0.0000 ]"
    assert len(lines) == 4
    assert text.endswith("]\n")


def test_format_plain():
    text = Matrix.identity(2).format_plain("Matrix A")
    assert text == "Matrix A:\n  1.0000   0.0000 \n  0.0000   1.0000 \n\n"


def test_matrix_is_immutable():
    m = Matrix.identity(2)
    with pytest.raises(AttributeError):
        m.rows = ()
    assert m == Matrix.identity(2)
    assert [list(row) for row in m] == [[1.0, 0.0], [0.0, 1.0]]