"""
Linear functional (form) constructors.

A linear functional is a tensor with exactly one lower (covariant) index.
Every constructor takes a one-character index name and the number of
components; any other name yields an ``Err`` tensor regardless of the size.

Generators:
- from_indices: components as a function of the coordinate
- const: all components equal
- random_sample / random_sample_seeded: components drawn from any sampler
- random_double[_seed]: real components from a continuous distribution
- random_int[_seed]: integer components from a discrete distribution

Files:
- from_csv / to_csv: see ``multilinear.csv_io``

Example
-------
    from scipy.stats import norm
    from multilinear import form

    w = form.from_indices("i", 4, lambda i: 2.0 * i)
    noise = form.random_double_seed("i", 4, norm(0.0, 0.1), seed=7)
"""

from __future__ import annotations

from typing import Any, Callable

from multilinear import generators
from multilinear.csv_io import from_csv, to_csv
from multilinear.generators import FORM_INVALID_INDICES
from multilinear.index import Variance
from multilinear.sampling import Sampler, require_continuous, require_discrete
from multilinear.tensor import Err, Tensor
from multilinear.utils.validation import is_single_index_name

__all__ = [
    "from_indices",
    "const",
    "random_sample",
    "random_sample_seeded",
    "random_double",
    "random_double_seed",
    "random_int",
    "random_int_seed",
    "from_csv",
    "to_csv",
]


def from_indices(name: str, size: int, f: Callable[[int], Any]) -> Tensor:
    """
    Generate linear functional as function of its index.

    Parameters
    ----------
    name : str
        Index name (one character)
    size : int
        Number of components
    f : callable
        ``f(i)`` returns the component at coordinate ``i``

    Examples
    --------
    >>> list(from_indices("a", 4, lambda i: i * 1.0).leaves())
    [0.0, 1.0, 2.0, 3.0]
    >>> from_indices("ab", 4, float).is_err
    True
    """
    if not is_single_index_name(name):
        return Err(FORM_INVALID_INDICES)
    return generators.from_indices(
        name, [size], lambda coords: f(coords[0]), Variance.COVARIANT, message=FORM_INVALID_INDICES
    )


def const(name: str, size: int, value: Any) -> Tensor:
    """Generate linear functional with all components equal to ``value``."""
    if not is_single_index_name(name):
        return Err(FORM_INVALID_INDICES)
    return generators.const(name, [size], value, Variance.COVARIANT, message=FORM_INVALID_INDICES)


def random_sample(name: str, size: int, distribution: Sampler) -> Tensor:
    """Generate linear functional with components drawn from ``distribution`` (unseeded)."""
    if not is_single_index_name(name):
        return Err(FORM_INVALID_INDICES)
    return generators.random_sample(
        name, [size], distribution, Variance.COVARIANT, message=FORM_INVALID_INDICES
    )


def random_sample_seeded(name: str, size: int, distribution: Sampler, seed: int) -> Tensor:
    """Generate linear functional with components drawn from ``distribution`` with a fixed seed."""
    if not is_single_index_name(name):
        return Err(FORM_INVALID_INDICES)
    return generators.random_sample_seeded(
        name, [size], distribution, seed, Variance.COVARIANT, message=FORM_INVALID_INDICES
    )


def random_double(name: str, size: int, distribution: Sampler) -> Tensor:
    """
    Generate linear functional with random real components.

    Parameters
    ----------
    name : str
        Index name (one character)
    size : int
        Number of components
    distribution : scipy.stats frozen continuous distribution
        E.g. ``norm``, ``uniform``, ``beta``, ``gamma``, ``expon``, ``cauchy``,
        ``chi2``, ``t``, ``f``, ``laplace``

    Raises
    ------
    TypeError
        If ``distribution`` is not a continuous scipy.stats distribution
    """
    require_continuous(distribution)
    return random_sample(name, size, distribution).map(float)


def random_double_seed(name: str, size: int, distribution: Sampler, seed: int) -> Tensor:
    """Seeded variant of ``random_double``."""
    require_continuous(distribution)
    return random_sample_seeded(name, size, distribution, seed).map(float)


def random_int(name: str, size: int, distribution: Sampler) -> Tensor:
    """
    Generate linear functional with random integer components.

    Parameters
    ----------
    name : str
        Index name (one character)
    size : int
        Number of components
    distribution : scipy.stats frozen discrete distribution
        E.g. ``binom``, ``poisson``, ``geom``, ``hypergeom``

    Raises
    ------
    TypeError
        If ``distribution`` is not a discrete scipy.stats distribution
    """
    require_discrete(distribution)
    return random_sample(name, size, distribution).map(int)


def random_int_seed(name: str, size: int, distribution: Sampler, seed: int) -> Tensor:
    """Seeded variant of ``random_int``."""
    require_discrete(distribution)
    return random_sample_seeded(name, size, distribution, seed).map(int)

