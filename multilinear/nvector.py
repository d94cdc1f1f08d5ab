"""
N-vector constructors.

An n-vector is a tensor whose indices are all upper (contravariant). Index
names are given as a string with one character per index, and the sizes as
a sequence of the same length; a mismatch yields an ``Err`` tensor. Sampled
builders report the mismatch with their own diagnostic.

The first index varies slowest: ``from_indices("ij", [2, 3], f)`` calls
``f`` with coordinates [0, 0], [0, 1], [0, 2], [1, 0], ...
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from multilinear import generators
from multilinear.generators import NVECTOR_INVALID_INDICES, NVECTOR_RANDOM_INVALID_INDICES
from multilinear.index import Variance
from multilinear.sampling import Sampler, require_continuous, require_discrete
from multilinear.tensor import Tensor

__all__ = [
    "from_indices",
    "const",
    "random_sample",
    "random_sample_seeded",
    "random_double",
    "random_double_seed",
    "random_int",
    "random_int_seed",
]


def from_indices(names: str, sizes: Sequence[int], f: Callable[[list[int]], Any]) -> Tensor:
    """
    Generate n-vector as function of its indices.

    Parameters
    ----------
    names : str
        Index names (one character per index)
    sizes : Sequence[int]
        Index sizes
    f : callable
        ``f(coords)`` returns the component at coordinate list ``coords``

    Examples
    --------
    >>> v = from_indices("ij", [2, 3], lambda c: 10 * c[0] + c[1])
    >>> v.shape
    (2, 3)
    >>> v[1, 2]
    12
    """
    return generators.from_indices(
        names, sizes, f, Variance.CONTRAVARIANT, message=NVECTOR_INVALID_INDICES
    )


def const(names: str, sizes: Sequence[int], value: Any) -> Tensor:
    """Generate n-vector with all components equal to ``value``."""
    return generators.const(
        names, sizes, value, Variance.CONTRAVARIANT, message=NVECTOR_INVALID_INDICES
    )


def random_sample(names: str, sizes: Sequence[int], distribution: Sampler) -> Tensor:
    """Generate n-vector with components drawn from ``distribution`` (unseeded)."""
    return generators.random_sample(
        names, sizes, distribution, Variance.CONTRAVARIANT, message=NVECTOR_RANDOM_INVALID_INDICES
    )


def random_sample_seeded(
    names: str, sizes: Sequence[int], distribution: Sampler, seed: int
) -> Tensor:
    """Generate n-vector with components drawn from ``distribution`` with a fixed seed."""
    return generators.random_sample_seeded(
        names,
        sizes,
        distribution,
        seed,
        Variance.CONTRAVARIANT,
        message=NVECTOR_RANDOM_INVALID_INDICES,
    )


def random_double(names: str, sizes: Sequence[int], distribution: Sampler) -> Tensor:
    """Generate n-vector with real components from a continuous scipy.stats distribution."""
    require_continuous(distribution)
    return random_sample(names, sizes, distribution).map(float)


def random_double_seed(
    names: str, sizes: Sequence[int], distribution: Sampler, seed: int
) -> Tensor:
    """Seeded variant of ``random_double``."""
    require_continuous(distribution)
    return random_sample_seeded(names, sizes, distribution, seed).map(float)


def random_int(names: str, sizes: Sequence[int], distribution: Sampler) -> Tensor:
    """Generate n-vector with integer components from a discrete scipy.stats distribution."""
    require_discrete(distribution)
    return random_sample(names, sizes, distribution).map(int)


def random_int_seed(names: str, sizes: Sequence[int], distribution: Sampler, seed: int) -> Tensor:
    """Seeded variant of ``random_int``."""
    require_discrete(distribution)
    return random_sample_seeded(names, sizes, distribution, seed).map(int)
