import pytest

from qgrid.wave import WaveVector


def test_sum_of_opposite_vectors_is_zero():
    v = WaveVector([1, 1, 1, 1, 1])
    v2 = WaveVector([-1, -1, -1, -1, -1])
    assert v + v2 == [0, 0, 0, 0, 0]


def test_str_format():
    v = WaveVector([1, 1, 1, 1, 1])
    assert str(v) == "((1,0), (1,0), (1,0), (1,0), (1,0))"


def test_str_empty_and_complex():
    assert str(WaveVector()) == "()"
    assert str(WaveVector([1.5 - 2j])) == "((1.5,-2))"


def test_indexing_and_const_access():
    v = WaveVector([1, 2, 3])
    assert v[1] == 2
    v[1] = 5
    assert v[1] == 5 + 0j


def test_at_out_of_range_is_zero():
    v = WaveVector([1, 2, 3])
    assert v.at(-1) == 0
    assert v.at(3) == 0
    assert v.at(2) == 3


def test_iadd_extends_with_longer_operand():
    v = WaveVector([1, 2])
    v += WaveVector([10, 20, 30, 40])
    assert v == [11, 22, 30, 40]


def test_isub_extends_with_negated_values():
    v = WaveVector([1, 2])
    v -= WaveVector([1, 1, 3])
    assert v == [0, 1, -3]


def test_add_does_not_mutate_operands():
    a = WaveVector([1, 2])
    b = WaveVector([3])
    c = a + b
    assert c == [4, 2]
    assert a == [1, 2]
    assert b == [3]


def test_scalar_multiplication_and_division():
    v = WaveVector([1, 2j])
    assert v * 2 == [2, 4j]
    assert 2 * v == [2, 4j]
    assert v / 2 == [0.5, 1j]
    v *= 1j
    assert v == [1j, -2]
    v /= 1j
    assert v == [1, 2j]


def test_scalar_over_vector_divides_elements():
    v = WaveVector([2, 4])
    assert 2 / v == [1, 2]


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        WaveVector([1]) / 0


def test_inner_product_conjugates_left():
    a = WaveVector([1j, 2])
    b = WaveVector([1j, 3, 100])
    assert a * b == pytest.approx(1 + 6)
    assert a.dot(b) == a * b


def test_inner_product_with_self_is_square_norm():
    v = WaveVector([3 + 4j, 1j, -2])
    assert (v * v).real == pytest.approx(v.square_norm())
    assert v.square_norm() == pytest.approx(30.0)


def test_conj():
    v = WaveVector([1 + 1j, -2j])
    assert v.conj() == [1 - 1j, 2j]
    assert v == [1 + 1j, -2j]


def test_push_and_sequence_methods():
    v = WaveVector()
    v.push([1, 2])
    v.push(range(3, 5))
    v.append(5)
    v.insert(0, 0)
    assert v == [0, 1, 2, 3, 4, 5]
    assert len(v) == 6
    v.clear()
    assert len(v) == 0


def test_vector_times_unsupported_type():
    with pytest.raises(TypeError):
        WaveVector([1]) * "a"