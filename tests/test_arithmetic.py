import pytest

from algolab.arithmetic import (
    add,
    divide,
    evaluate_polynomial,
    multiply,
    quadratic_roots,
    subtract,
    swap,
)


@pytest.mark.parametrize("a,b", [(3, 4), (-5, 2), (0, 0), (100, -100)])
def test_add_and_subtract_are_inverse(a, b):
    assert subtract(add(a, b), b) == a
    assert add(a, b) == a + b


def test_multiply_floats():
    assert multiply(2.5, 4.0) == pytest.approx(10.0)
    assert multiply(-3, 7) == -21


@pytest.mark.parametrize("a", range(-12, 13))
@pytest.mark.parametrize("b", [-5, -3, -1, 1, 2, 4])
def test_divide_truncates_toward_zero(a, b):
    assert divide(a, b) == int(a / b)


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        divide(5, 0)


def test_swap_source_values():
    assert swap(2, 4) == (4, 2)


def test_swap_twice_is_identity():
    assert swap(*swap("x", "y")) == ("x", "y")


def test_constant_polynomial():
    assert evaluate_polynomial([5.0], 123.0) == pytest.approx(5.0)


@pytest.mark.parametrize("x", [-2.0, -0.5, 0.0, 1.0, 3.0])
def test_polynomial_matches_power_sum(x):
    coefficients = [1.0, -2.0, 0.5, 3.0]
    expected = sum(c * x**i for i, c in enumerate(coefficients))
    assert evaluate_polynomial(coefficients, x) == pytest.approx(expected)


def test_polynomial_at_zero_is_constant_term():
    assert evaluate_polynomial([7.0, 4.0, 9.0], 0.0) == pytest.approx(7.0)


def test_polynomial_needs_coefficients():
    with pytest.raises(ValueError):
        evaluate_polynomial([], 1.0)


@pytest.mark.parametrize("a,b,c", [(1, -3, 2), (2, 5, -3), (-1, 4, 1)])
def test_real_roots_satisfy_vieta(a, b, c):
    roots = quadratic_roots(a, b, c)
    assert len(roots) == 2
    first, second = roots
    assert first + second == pytest.approx(-b / a)
    assert first * second == pytest.approx(c / a)
    for root in roots:
        assert a * root * root + b * root + c == pytest.approx(0.0, abs=1e-9)


def test_repeated_root():
    roots = quadratic_roots(1, -4, 4)
    assert len(roots) == 1
    assert roots[0] == pytest.approx(4 / 2)


def test_imaginary_roots():
    assert quadratic_roots(1, 0, 1) == ()


def test_zero_leading_coefficient():
    with pytest.raises(ValueError):
        quadratic_roots(0, 2, 1)