"""
Recursive tensor representation.

A tensor is one of three immutable variants:
    Scalar(value)                      - zero-index tensor, terminal node
    FiniteTensor(index, children)      - one index plus one sub-tensor per
                                         coordinate value of that index
    Err(message)                       - value-level construction failure

A rank-K tensor built from indices (i_0, ..., i_{K-1}) is a tree of depth K:
    T[c_0, c_1, ..., c_{K-1}] = T.children[c_0].children[c_1]...[c_{K-1}].value

The first index varies slowest when leaves are enumerated, matching NumPy's
C (row-major) ordering, so ``to_numpy`` is a plain reshape of ``leaves()``.

``Err`` is data, not an exception: operations that build new trees from an
``Err`` return it unchanged, and operations that need a concrete shape raise
``TensorError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Sequence

import numpy as np

from multilinear.exceptions import TensorError
from multilinear.index import Index


class Tensor(ABC):
    """Common interface of the tensor variants."""

    @abstractmethod
    def indices(self) -> list[Index]:
        """Indices from root to leaf (the tensor's shape with variances)."""

    @abstractmethod
    def leaves(self) -> Iterator[Any]:
        """Leaf values in index order (first index varies slowest)."""

    @abstractmethod
    def map(self, fn: Callable[[Any], Any]) -> Tensor:
        """New tensor with ``fn`` applied to every leaf."""

    @property
    def rank(self) -> int:
        """Number of indices (0 for scalars)."""
        return len(self.indices())

    @property
    def shape(self) -> tuple[int, ...]:
        """Index sizes, outermost first."""
        return tuple(index.size for index in self.indices())

    @property
    def is_err(self) -> bool:
        return False

    def __getitem__(self, coords: int | Sequence[int]) -> Any:
        """
        Leaf value at a coordinate tuple.

        Parameters
        ----------
        coords : int or sequence of int
            One coordinate per index, outermost first. A bare int is accepted
            for rank-1 tensors.

        Raises
        ------
        IndexError
            If the number of coordinates differs from the rank or a coordinate
            is out of range
        TensorError
            If the tensor is an ``Err``
        """
        if isinstance(coords, (int, np.integer)):
            coords = (int(coords),)
        coords = tuple(coords)

        node: Tensor = self
        for depth, c in enumerate(coords):
            if not isinstance(node, FiniteTensor):
                raise IndexError(f"Expected {self.rank} coordinates, got {len(coords)}")
            if not 0 <= c < node.index.size:
                raise IndexError(
                    f"Coordinate {c} out of range for index '{node.index.name}' "
                    f"of size {node.index.size} (position {depth})"
                )
            node = node.children[c]

        if not isinstance(node, Scalar):
            raise IndexError(f"Expected {self.rank} coordinates, got {len(coords)}")
        return node.value

    def to_numpy(self, dtype: Any = None) -> np.ndarray:
        """Dense array of shape ``self.shape`` holding the leaf values."""
        return np.array(list(self.leaves()), dtype=dtype).reshape(self.shape)


@dataclass(frozen=True)
class Scalar(Tensor):
    """Zero-index tensor."""

    value: Any

    def indices(self) -> list[Index]:
        return []

    def leaves(self) -> Iterator[Any]:
        yield self.value

    def map(self, fn: Callable[[Any], Any]) -> Tensor:
        return Scalar(fn(self.value))


@dataclass(frozen=True)
class FiniteTensor(Tensor):
    """
    Tensor with at least one index.

    Attributes
    ----------
    index : Index
        Outermost index of this node
    children : tuple[Tensor, ...]
        Sub-tensors, ``children[k]`` has ``index`` fixed to coordinate ``k``.
        Length must equal ``index.size``.
    """

    index: Index
    children: tuple[Tensor, ...]

    def __post_init__(self):
        if self.index.size < 1:
            raise ValueError(
                f"Index '{self.index.name}' must have positive size, got {self.index.size}"
            )
        children = tuple(self.children)
        if len(children) != self.index.size:
            raise ValueError(
                f"Index '{self.index.name}' has size {self.index.size}, "
                f"got {len(children)} sub-tensors"
            )
        object.__setattr__(self, "children", children)

    def indices(self) -> list[Index]:
        # Every path carries the same indices, so the first one is enough
        return [self.index] + self.children[0].indices()

    def leaves(self) -> Iterator[Any]:
        for child in self.children:
            yield from child.leaves()

    def map(self, fn: Callable[[Any], Any]) -> Tensor:
        return FiniteTensor(self.index, tuple(child.map(fn) for child in self.children))


@dataclass(frozen=True)
class Err(Tensor):
    """Construction failure carried as a value."""

    message: str

    @property
    def is_err(self) -> bool:
        return True

    def indices(self) -> list[Index]:
        raise TensorError("A failed tensor has no indices", reason=self.message)

    def leaves(self) -> Iterator[Any]:
        return iter(())

    def map(self, fn: Callable[[Any], Any]) -> Tensor:
        return self

    def __getitem__(self, coords: int | Sequence[int]) -> Any:
        raise TensorError("Cannot index a failed tensor", reason=self.message)

    def to_numpy(self, dtype: Any = None) -> np.ndarray:
        raise TensorError("Cannot materialize a failed tensor", reason=self.message)
