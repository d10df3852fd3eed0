import numpy as np
import pytest

from bigrational.core.typing import as_integer, is_integer_like


@pytest.mark.parametrize("dtype", [np.int8, np.int16, np.int32, np.int64, np.uint8, np.uint64])
def test_numpy_integers_are_widened(dtype):
    value = as_integer(dtype(7))
    assert value == 7
    assert type(value) is int


def test_python_int_passes_through():
    assert as_integer(10**50) == 10**50


@pytest.mark.parametrize("bad", [True, np.bool_(True), 1.0, np.float64(1.0), "3", None])
def test_non_integers_are_rejected(bad):
    assert not is_integer_like(bad)
    with pytest.raises(TypeError):
        as_integer(bad)
