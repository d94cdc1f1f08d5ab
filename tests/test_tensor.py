"""
Tests for the index model and the recursive tensor representation.

These tests verify:
1. Index equality and variance helpers
2. FiniteTensor structural invariants (children count, positive size)
3. Shape, rank, indexing and leaf enumeration
4. Inert propagation of Err tensors
"""

import pytest
import numpy as np
from numpy.testing import assert_array_equal

from multilinear import (
    Err,
    FiniteTensor,
    Index,
    Scalar,
    TensorError,
    Variance,
)


def _vector(name, values, variance=Variance.COVARIANT):
    return FiniteTensor(Index(name, len(values), variance), tuple(Scalar(v) for v in values))


class TestIndex:
    """Test index data model."""

    def test_structural_equality(self):
        """Indices with same name, size and variance are equal."""
        assert Index("i", 3, Variance.COVARIANT) == Index("i", 3, Variance.COVARIANT)

    @pytest.mark.parametrize(
        "other",
        [
            Index("j", 3, Variance.COVARIANT),
            Index("i", 4, Variance.COVARIANT),
            Index("i", 3, Variance.CONTRAVARIANT),
        ],
    )
    def test_inequality_on_any_field(self, other):
        """Any differing field makes indices unequal."""
        assert Index("i", 3, Variance.COVARIANT) != other

    def test_variance_helpers(self):
        lower = Index("i", 2, Variance.COVARIANT)
        upper = Index("i", 2, Variance.CONTRAVARIANT)

        assert lower.is_covariant and not lower.is_contravariant
        assert upper.is_contravariant and not upper.is_covariant

    def test_str_marks_variance(self):
        assert str(Index("i", 3, Variance.COVARIANT)) == "_i[3]"
        assert str(Index("j", 2, Variance.CONTRAVARIANT)) == "^j[2]"

    def test_index_is_immutable(self):
        index = Index("i", 3, Variance.COVARIANT)
        with pytest.raises(AttributeError):
            index.size = 4


class TestFiniteTensorInvariants:
    """Test construction-time invariants of FiniteTensor."""

    def test_children_count_must_match_size(self):
        with pytest.raises(ValueError, match="size 3"):
            FiniteTensor(Index("i", 3, Variance.COVARIANT), (Scalar(1.0), Scalar(2.0)))

    def test_size_must_be_positive(self):
        with pytest.raises(ValueError, match="positive size"):
            FiniteTensor(Index("i", 0, Variance.COVARIANT), ())

    def test_children_list_stored_as_tuple(self):
        t = FiniteTensor(Index("i", 2, Variance.COVARIANT), [Scalar(1), Scalar(2)])
        assert isinstance(t.children, tuple)


class TestShapeAndAccess:
    """Test shape queries, coordinate access and leaf enumeration."""

    def test_scalar_has_rank_zero(self):
        s = Scalar(5.0)

        assert s.rank == 0
        assert s.shape == ()
        assert s.indices() == []
        assert s[()] == 5.0
        assert list(s.leaves()) == [5.0]

    def test_rank_two_shape(self):
        rows = tuple(_vector("j", [3 * r + c for c in range(3)]) for r in range(2))
        t = FiniteTensor(Index("i", 2, Variance.CONTRAVARIANT), rows)

        assert t.rank == 2
        assert t.shape == (2, 3)
        assert t.indices() == [
            Index("i", 2, Variance.CONTRAVARIANT),
            Index("j", 3, Variance.COVARIANT),
        ]
        assert t[1, 2] == 5
        assert list(t.leaves()) == [0, 1, 2, 3, 4, 5]

    def test_rank_one_accepts_bare_int(self):
        t = _vector("i", [10, 20, 30])

        assert t[1] == 20
        assert t[np.int64(2)] == 30

    def test_out_of_range_coordinate(self):
        t = _vector("i", [1, 2])

        with pytest.raises(IndexError, match="out of range"):
            t[2]

    @pytest.mark.parametrize("coords", [(), (0, 0)])
    def test_wrong_number_of_coordinates(self, coords):
        t = _vector("i", [1, 2])

        with pytest.raises(IndexError, match="Expected 1 coordinates"):
            t[coords]

    def test_to_numpy_row_major(self):
        rows = tuple(_vector("j", [3 * r + c for c in range(3)]) for r in range(2))
        t = FiniteTensor(Index("i", 2, Variance.CONTRAVARIANT), rows)

        arr = t.to_numpy(dtype=np.float64)

        assert arr.shape == (2, 3)
        assert arr.dtype == np.float64
        assert_array_equal(arr, np.arange(6.0).reshape(2, 3))

    def test_map_preserves_structure(self):
        t = _vector("i", [1, 2, 3])
        doubled = t.map(lambda v: 2 * v)

        assert doubled.indices() == t.indices()
        assert list(doubled.leaves()) == [2, 4, 6]
        # Source tensor untouched
        assert list(t.leaves()) == [1, 2, 3]

    def test_structural_equality(self):
        assert _vector("i", [1.0, 2.0]) == _vector("i", [1.0, 2.0])
        assert _vector("i", [1.0, 2.0]) != _vector("i", [1.0, 3.0])
        assert _vector("i", [1.0, 2.0]) != _vector("i", [1.0, 2.0], Variance.CONTRAVARIANT)


class TestErrPropagation:
    """Err tensors are inert values."""

    def test_err_is_flagged(self):
        err = Err("boom")

        assert err.is_err
        assert not Scalar(1).is_err
        assert not _vector("i", [1]).is_err

    def test_err_has_no_leaves(self):
        assert list(Err("boom").leaves()) == []

    @pytest.mark.parametrize("query", [
        lambda t: t.indices(),
        lambda t: t.rank,
        lambda t: t.shape,
    ])
    def test_shape_queries_raise_tensor_error(self, query):
        """A failed tensor never reports a scalar-like shape."""
        with pytest.raises(TensorError, match="boom"):
            query(Err("boom"))

    def test_map_returns_same_err(self):
        err = Err("boom")
        assert err.map(lambda v: v + 1) is err

    def test_indexing_err_raises_tensor_error(self):
        with pytest.raises(TensorError, match="boom"):
            Err("boom")[0]

    def test_to_numpy_err_raises_tensor_error(self):
        with pytest.raises(TensorError, match="boom"):
            Err("boom").to_numpy()

    def test_tensor_error_is_value_error(self):
        with pytest.raises(ValueError):
            Err("boom").to_numpy()
