import math

import pytest

from glow.vector import Vector2


def approx(value):
    return pytest.approx(value, abs=1e-9)


def test_length_and_sqr_length():
    a = Vector2(3.0, 4.0)
    b = Vector2(1.0, 2.0)
    assert a.length() == approx(5.0)
    assert b.sqr_length() == approx(5.0)


def test_addition_operator():
    c = Vector2(3.0, 4.0) + Vector2(1.0, 2.0)
    assert c.x == approx(4.0)
    assert c.y == approx(6.0)


def test_subtraction_operator():
    d = Vector2(3.0, 4.0) - Vector2(1.0, 2.0)
    assert d.x == approx(2.0)
    assert d.y == approx(2.0)


def test_dot_product():
    a = Vector2(3.0, 4.0)
    b = Vector2(1.0, 2.0)
    assert a.dot(b) == approx(11.0)
    assert a * b == approx(11.0)


def test_scalar_multiplication():
    e = Vector2(3.0, 4.0) * 2.0
    assert e.x == approx(6.0)
    assert e.y == approx(8.0)


def test_scalar_division():
    f = Vector2(1.0, 2.0) / 2.0
    assert f.x == approx(0.5)
    assert f.y == approx(1.0)


def test_scalar_add_and_sub_on_right():
    assert (Vector2(1.0, 2.0) + 5.0) == Vector2(6.0, 7.0)
    assert (Vector2(1.0, 2.0) - 1.0) == Vector2(0.0, 1.0)


def test_normalized_returns_unit_copy():
    a = Vector2(3.0, 4.0)
    norm_a = a.normalized()
    assert norm_a.length() == approx(1.0)
    assert a.length() == approx(5.0)


def test_normalize_in_place():
    a = Vector2(3.0, 4.0)
    a.normalize()
    assert a.length() == approx(1.0)


def test_scalar_on_left_side():
    s = 5.0
    b = Vector2(1.0, 2.0)
    g = s + b
    assert (g.x, g.y) == (approx(6.0), approx(7.0))
    h = s - b
    assert (h.x, h.y) == (approx(4.0), approx(3.0))
    i = s * b
    assert (i.x, i.y) == (approx(5.0), approx(10.0))


def test_in_place_vector_add_sub():
    j = Vector2(2.0, 3.0)
    j.add(Vector2(1.0, 1.0))
    assert (j.x, j.y) == (approx(3.0), approx(4.0))
    j.sub(Vector2(2.0, 2.0))
    assert (j.x, j.y) == (approx(1.0), approx(2.0))


def test_in_place_scalar_add_sub():
    k = Vector2(1.0, 1.0)
    k.add(5.0)
    assert (k.x, k.y) == (approx(6.0), approx(6.0))
    k.sub(2.0)
    assert (k.x, k.y) == (approx(4.0), approx(4.0))


def test_in_place_mul_div():
    m = Vector2(2.0, 3.0)
    m.mul(2.0)
    assert (m.x, m.y) == (approx(4.0), approx(6.0))
    m.div(2.0)
    assert (m.x, m.y) == (approx(2.0), approx(3.0))


def test_div_by_zero_raises():
    m = Vector2(2.0, 3.0)
    with pytest.raises(ZeroDivisionError):
        m.div(0)
    with pytest.raises(ZeroDivisionError):
        Vector2(1.0, 1.0) / 0


def test_constructors():
    assert Vector2() == Vector2(0.0, 0.0)
    assert Vector2(2.5) == Vector2(2.5, 2.5)


def test_str_format():
    assert str(Vector2(3.0, 4.0)) == "( 3.000000 , 4.000000 )"


def test_standard_vectors():
    assert Vector2.zero() == Vector2(0, 0)
    assert Vector2.one() == Vector2(1, 1)
    assert Vector2.up() == Vector2(0, 1)
    assert Vector2.down() == Vector2(0, -1)
    assert Vector2.right() == Vector2(1, 0)
    assert Vector2.left() == Vector2(-1, 0)


def test_binary_operators_do_not_mutate():
    a = Vector2(3.0, 4.0)
    _ = a + Vector2(1.0, 1.0)
    _ = a * 3
    assert a == Vector2(3.0, 4.0)


def test_unsupported_operand_raises_type_error():
    with pytest.raises(TypeError):
        Vector2(1.0, 2.0) + "x"


def test_unpacking():
    x, y = Vector2(1.5, -2.0)
    assert (x, y) == (1.5, -2.0)
    assert math.isclose(Vector2(1.0, 1.0).normalized().x, math.sqrt(0.5))