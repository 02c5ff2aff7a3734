import pytest

from whisker.fastlog2 import fast_log2, fast_log2_2


@pytest.mark.parametrize("func", [fast_log2, fast_log2_2])
def test_zero_maps_to_zero(func):
    assert func(0) == 0


@pytest.mark.parametrize("func", [fast_log2, fast_log2_2])
@pytest.mark.parametrize("power", range(32))
def test_powers_of_two(func, power):
    assert func(1 << power) == power


@pytest.mark.parametrize("func", [fast_log2, fast_log2_2])
@pytest.mark.parametrize("power", range(1, 32))
def test_just_below_power_of_two(func, power):
    assert func((1 << power) - 1) == power - 1


@pytest.mark.parametrize("func", [fast_log2, fast_log2_2])
@pytest.mark.parametrize("value", [1, 3, 5, 100, 1000, 65537, 123456789, 0xFFFFFFFF])
def test_floor_log2_bounds(func, value):
    result = func(value)
    assert (1 << result) <= value < (1 << (result + 1))


def test_both_implementations_agree():
    for value in list(range(0, 5000)) + [0x80000000, 0xDEADBEEF, 0xFFFFFFFF]:
        assert fast_log2(value) == fast_log2_2(value)


@pytest.mark.parametrize("func", [fast_log2, fast_log2_2])
@pytest.mark.parametrize("value", [-1, 1 << 32])
def test_out_of_range_rejected(func, value):
    with pytest.raises(ValueError):
        func(value)