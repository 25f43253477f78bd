"""
Property Tests: Box

Uses Hypothesis to check the Box construction rules on arbitrary shapes and
bounds: shape resolution, boundedness captured before clamping, the bound
summaries and per-space seeding.
"""

import numpy as np
import pytest
from hypothesis import assume, given, settings

from envspaces.spaces import Box, short_repr
from envspaces.utils.exceptions import ValidationError
from envspaces.utils.seeding import rs_random
from tests.strategies import (
    bound_arrays,
    bound_pairs,
    finite_elements,
    float_dtypes,
    seeds,
    shapes,
    uniform_arrays,
)

# ============================================================================
# Shape Resolution
# ============================================================================


class TestShapeResolution:
    @given(shape=shapes, low=finite_elements, high=finite_elements)
    def test_scalar_bounds_take_explicit_shape(self, shape, low, high):
        box = Box(low=low, high=high, shape=shape)
        assert box.shape == shape
        assert box.low.shape == box.high.shape == shape

    @given(pair=bound_pairs())
    def test_equal_array_shapes_resolve(self, pair):
        low, high = pair
        box = Box(low=low, high=high)
        assert box.shape == low.shape

    @given(low=bound_arrays(), high=bound_arrays())
    def test_different_array_shapes_fail(self, low, high):
        assume(low.shape != high.shape)
        with pytest.raises(ValidationError):
            Box(low=low, high=high)

    @given(low=finite_elements, high=finite_elements)
    def test_scalar_bounds_without_shape_fail(self, low, high):
        with pytest.raises(ValidationError):
            Box(low=low, high=high)


# ============================================================================
# Boundedness and Clamping
# ============================================================================


class TestBoundedness:
    @given(pair=bound_pairs(), dtype=float_dtypes)
    @settings(max_examples=200)
    def test_flags_reflect_original_infinities(self, pair, dtype):
        low, high = pair
        box = Box(low=low, high=high, dtype=dtype)

        np.testing.assert_array_equal(box.bounded_below, low > -np.inf)
        np.testing.assert_array_equal(box.bounded_above, high < np.inf)

    @given(pair=bound_pairs(), dtype=float_dtypes)
    def test_stored_bounds_are_finite(self, pair, dtype):
        low, high = pair
        box = Box(low=low, high=high, dtype=dtype)

        assert box.low.dtype == dtype
        assert np.isfinite(box.low).all()
        assert np.isfinite(box.high).all()

    @given(pair=bound_pairs())
    def test_infinities_clamp_to_dtype_limits(self, pair):
        low, high = pair
        box = Box(low=low, high=high, dtype=np.float32)
        info = np.finfo(np.float32)

        assert (box.low[np.isneginf(low)] == info.min).all()
        assert (box.high[np.isposinf(high)] == info.max).all()

    @given(pair=bound_pairs())
    def test_is_bounded_agrees_with_flags(self, pair):
        low, high = pair
        box = Box(low=low, high=high)

        assert box.is_bounded("below") == bool(box.bounded_below.all())
        assert box.is_bounded("above") == bool(box.bounded_above.all())
        assert box.is_bounded() == (box.is_bounded("below") and box.is_bounded("above"))


# ============================================================================
# Bound Summaries
# ============================================================================


class TestShortRepr:
    @given(arr=uniform_arrays())
    def test_uniform_arrays_collapse(self, arr):
        summary = short_repr(arr)
        assert summary.startswith("[") and summary.endswith("]")
        assert np.float32(summary[1:-1]) == arr.flat[0]

    @given(arr=bound_arrays())
    def test_non_uniform_arrays_render_fully(self, arr):
        assume(arr.size > 0 and arr.min() != arr.max())
        assert short_repr(arr) == str(arr)


# ============================================================================
# Seeding
# ============================================================================


class TestSeeding:
    @given(seed=seeds)
    @settings(max_examples=50)
    def test_rs_random_reproducible(self, seed):
        rng1, resolved = rs_random(seed)
        rng2, _ = rs_random(seed)

        assert resolved == seed
        np.testing.assert_array_equal(rng1.random(3), rng2.random(3))

    @given(first=seeds, second=seeds)
    @settings(max_examples=50)
    def test_reseeding_follows_new_seed_only(self, first, second):
        box = Box(low=0.0, high=1.0, shape=(2,), seed=first)
        box.np_random.random(7)

        box.seed(second)
        expected, _ = rs_random(second)
        np.testing.assert_array_equal(box.np_random.random(4), expected.random(4))

    def test_entropy_seeds_vary(self):
        resolved = {rs_random(None)[1] for _ in range(4)}
        assert len(resolved) > 1
