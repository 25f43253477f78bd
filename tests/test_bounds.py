import numpy as np
import pytest

from envspaces.core.bounds import ArrayBound, ScalarBound, as_bound, materialize
from envspaces.core.types import Device, normalize_shape
from envspaces.utils.exceptions import ValidationError


class TestAsBound:
    @pytest.mark.parametrize("value", [1.5, -3, np.float32(2.0), np.int8(4), np.inf, -np.inf])
    def test_scalars(self, value):
        bound = as_bound(value)
        assert isinstance(bound, ScalarBound)
        assert bound.value == value

    def test_zero_dim_array_is_scalar(self):
        bound = as_bound(np.array(3.0))
        assert bound == ScalarBound(3.0)

    @pytest.mark.parametrize(
        "value, shape",
        [([1, 2], (2,)), ((1.0, 2.0, 3.0), (3,)), (np.zeros((2, 2)), (2, 2)), ([], (0,))],
    )
    def test_arrays(self, value, shape):
        bound = as_bound(value)
        assert isinstance(bound, ArrayBound)
        assert bound.shape == shape

    def test_bounds_pass_through(self):
        scalar = ScalarBound(1.0)
        array = ArrayBound(np.zeros(2))
        assert as_bound(scalar) is scalar
        assert as_bound(array) is array

    @pytest.mark.parametrize(
        "value",
        ["a", b"a", None, True, 1 + 2j, ["a", "b"], [[1, 2], [3]], object()],
    )
    def test_non_numeric_rejected(self, value):
        with pytest.raises(ValidationError):
            as_bound(value)

    def test_array_bound_requires_ndarray(self):
        with pytest.raises(ValidationError):
            ArrayBound([1.0, 2.0])  # type: ignore[arg-type]


class TestMaterialize:
    def test_float_scalar_broadcast(self):
        arr = materialize(ScalarBound(2.5), (2, 3))
        assert arr.shape == (2, 3)
        assert arr.dtype == np.float64
        assert (arr == 2.5).all()

    def test_integer_scalar_keeps_integer_dtype(self):
        arr = materialize(ScalarBound(2**53 + 1), (2,))
        assert np.issubdtype(arr.dtype, np.integer)
        assert (arr == 2**53 + 1).all()

    def test_unsigned_range_scalar(self):
        arr = materialize(ScalarBound(2**64 - 1), (1,))
        assert arr.dtype == np.uint64
        assert int(arr[0]) == 2**64 - 1

    def test_scalar_infinity_survives(self):
        arr = materialize(ScalarBound(-np.inf), (3,))
        assert np.isneginf(arr).all()

    def test_array_used_as_is(self):
        source = np.array([1.0, 2.0])
        assert materialize(ArrayBound(source), (2,)) is source


class TestNormalizeShape:
    @pytest.mark.parametrize(
        "shape, expected",
        [(3, (3,)), ([2, np.int64(3)], (2, 3)), ((), ()), ((0, 4), (0, 4))],
    )
    def test_valid(self, shape, expected):
        assert normalize_shape(shape) == expected

    @pytest.mark.parametrize("shape", [(-1,), (2.5,), (True,), "ab", 2.5, None])
    def test_invalid(self, shape):
        with pytest.raises(ValidationError):
            normalize_shape(shape)


class TestDevice:
    def test_none_defaults_to_cpu(self):
        assert Device.from_value(None) is Device.CPU

    def test_case_insensitive(self):
        assert Device.from_value(" Cuda ") is Device.CUDA

    def test_str(self):
        assert str(Device.METAL) == "metal"

    @pytest.mark.parametrize("value", ["tpu", 0, 1.0])
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            Device.from_value(value)
