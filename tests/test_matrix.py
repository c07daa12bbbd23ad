import pytest

from algolab.matrix import multiply_matrices, square_and_sum

A = [[1, 2, 3], [4, 5, 6]]
B = [[7, 8], [9, 10], [11, 12]]


def transpose(matrix):
    return [list(column) for column in zip(*matrix)]


def identity(size):
    return [[int(i == j) for j in range(size)] for i in range(size)]


def test_identity_on_the_right():
    assert multiply_matrices(A, identity(3)) == A


def test_identity_on_the_left():
    assert multiply_matrices(identity(2), A) == A


def test_result_shape():
    product = multiply_matrices(A, B)
    assert len(product) == 2
    assert all(len(row) == 2 for row in product)


def test_transpose_of_product():
    assert transpose(multiply_matrices(A, B)) == multiply_matrices(transpose(B), transpose(A))


def test_zero_matrix_gives_zeros():
    zeros = [[0, 0], [0, 0], [0, 0]]
    assert multiply_matrices(A, zeros) == [[0, 0], [0, 0]]


def test_not_multiplicable():
    with pytest.raises(ValueError):
        multiply_matrices(A, A)


def test_ragged_matrix_rejected():
    with pytest.raises(ValueError):
        multiply_matrices([[1, 2], [3]], [[1], [2]])


def test_square_and_sum_example():
    assert square_and_sum([1, 2, 3]) == ([1, 4, 9], 14)


def test_square_and_sum_ignores_sign():
    values = [3, -4, 5, -6, 7, -8]
    assert square_and_sum(values) == square_and_sum([abs(v) for v in values])


def test_square_and_sum_total_matches_squares():
    squares, total = square_and_sum([2, 5, -7, 0, 11, 3])
    assert total == sum(squares)


def test_square_and_sum_empty():
    assert square_and_sum([]) == ([], 0)