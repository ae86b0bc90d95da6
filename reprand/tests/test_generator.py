import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_equal

from reprand.random import InvalidArgumentError, Random
from reprand.random.integers import SIZE_T_BITS, UNSIGNED_BITS


@pytest.mark.deterministic
def test_raw_values():
    rng = Random(42)
    assert rng.next32() == 4269938173
    assert rng() == 2413553444
    rng.seed(42)
    assert rng.get_int(32) == 4269938173
    rng.seed(42)
    assert rng.get_uint64() == 10366133113398105597
    rng.seed(42)
    assert rng.get_int(64) == 10366133113398105597
    rng.seed()
    assert rng.next32() == 3499211612


@pytest.mark.deterministic
def test_platform_width_accessors():
    rng1 = Random(5)
    rng2 = Random(5)
    assert rng1.get_unsigned() == rng2.get_int(UNSIGNED_BITS)
    assert rng1.get_size_t() == rng2.get_int(SIZE_T_BITS)
    assert rng1.next32() == rng2.next32()


@pytest.mark.deterministic
def test_integers_in_range():
    rng = Random(42)
    assert [rng.get_unsigned(10) for _ in range(4)] == [3, 4, 1, 9]
    rng.seed(42)
    assert [rng.uniform_int(10) for _ in range(8)] == [3, 4, 1, 9, 0, 6, 7, 9]
    rng.seed(42)
    assert rng.randint(10) == 3
    values = rng.randint(10, size=7)
    assert values.dtype == np.uint32
    assert_equal(values, [4, 1, 9, 0, 6, 7, 9])
    with pytest.raises(InvalidArgumentError):
        rng.get_unsigned(0)
    with pytest.raises(InvalidArgumentError):
        rng.randint(0, size=0)


@pytest.mark.deterministic
def test_reals():
    rng = Random(0)
    assert_allclose(rng.unif(), 0.81472367, rtol=1e-7)
    rng.seed(0)
    assert rng.dunif() == 0.1354770042967805
    rng.seed(0)
    assert rng.uniform_real() == 0.1354770042967805
    rng.seed(42)
    assert_allclose(rng.dgauss(), 0.37743128045977709, rtol=1e-14)
    rng.seed(42)
    value = rng.gauss()
    assert isinstance(value, np.float32)
    assert_allclose(value, 0.124360532, rtol=1e-5)


@pytest.mark.deterministic
def test_arrays():
    rng1 = Random(8)
    rng2 = Random(8)
    assert_equal(rng1.rand(100), [rng2.dunif() for _ in range(100)])
    assert_equal(rng1.rand(10, dtype=np.float32), [rng2.unif() for _ in range(10)])
    assert rng1.rand() == rng2.dunif()
    values = rng1.randn(50)
    assert values.dtype == np.float64
    assert_equal(values, [rng2.dgauss() for _ in range(50)])
    values = rng1.randn(5, dtype=np.float32)
    assert values.dtype == np.float32
    assert_equal(values, [rng2.gauss() for _ in range(5)])
    assert rng1.randn() == rng2.dgauss()
    assert len(rng1.rand(0)) == 0
    assert len(rng1.randn(0)) == 0
    assert rng1.next32() == rng2.next32()


@pytest.mark.deterministic
def test_mixed_sequence_reproducible():
    def draw_all(rng):
        values = []
        for _ in range(20):
            values.append(rng.next32())
            values.append(rng.get_uint64())
            values.append(rng.dunif())
            values.append(float(rng.unif()))
            values.append(rng.dgauss())
            values.append(float(rng.gauss()))
            values.append(rng.uniform_int(1000))
            rng.discard(3)
        return values

    assert draw_all(Random(2024)) == draw_all(Random(2024))
    assert draw_all(Random(2024)) != draw_all(Random(2025))


@pytest.mark.deterministic
def test_discard():
    rng = Random(7)
    rng.discard(1000)
    assert rng.next32() == 2211685972


@pytest.mark.deterministic
def test_state():
    rng = Random(1)
    rng.dgauss()
    state = rng.get_state()
    values = rng.rand(20)
    rng.set_state(state)
    assert_equal(rng.rand(20), values)


@pytest.mark.deterministic
def test_repr():
    assert "Random" in repr(Random())
    assert Random().engine is not Random().engine


if __name__ == "__main__":
    test_raw_values()
    test_platform_width_accessors()
    test_integers_in_range()
    test_reals()
    test_arrays()
    test_mixed_sequence_reproducible()
    test_discard()
    test_state()
    test_repr()
