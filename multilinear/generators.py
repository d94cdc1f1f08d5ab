"""
Generator engine: realize tensors of arbitrary rank from index specifications.

A specification is a string of index names (one character per index) and a
matching sequence of positive sizes. For names (n_0, ..., n_{K-1}) and sizes
(s_0, ..., s_{K-1}) the engine builds

    FiniteTensor(Index(n_0, s_0, v), [T_0, T_1, ..., T_{s_0 - 1}])

where T_x is the tensor built recursively from the remaining indices with
coordinate prefix (x,). With no indices left the result is a Scalar holding
the leaf value for the accumulated coordinates. The first index therefore
varies slowest, and sampled builders consume their draws in the same
depth-first order.

All shape logic lives in ``build``, which is parameterized over a leaf
supplier ``leaf(coords) -> value``. The public entry points only choose the
supplier:
- ``from_indices``: leaf = f(coords)
- ``const``: leaf = value
- ``random_sample`` / ``random_sample_seeded``: leaf = one draw from a
  distribution

A specification that does not describe a valid shape produces an ``Err``
tensor; nothing is raised and no partial structure is built.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from multilinear.index import Index, Variance
from multilinear.sampling import Sampler, draw, make_rng, require_sampler
from multilinear.tensor import Err, FiniteTensor, Scalar, Tensor
from multilinear.utils.validation import is_valid_index_spec

INVALID_INDICES = "Indices and its sizes not compatible with structure of tensor!"
FORM_INVALID_INDICES = "Indices and its sizes not compatible with structure of linear functional!"
NVECTOR_INVALID_INDICES = "Indices and its sizes incompatible with n-vector structure!"
NVECTOR_RANDOM_INVALID_INDICES = "Indices and its sizes not compatible with structure of n-vector!"

LeafSupplier = Callable[[tuple], Any]


def build(
    names: str,
    sizes: Sequence[int],
    variance: Variance | Sequence[Variance],
    leaf: LeafSupplier,
    *,
    message: str = INVALID_INDICES,
) -> Tensor:
    """
    Build a tensor from an index specification and a leaf supplier.

    Parameters
    ----------
    names : str
        Index names, one character per index, outermost first
    sizes : Sequence[int]
        Index sizes (positive), one per name
    variance : Variance or Sequence[Variance]
        Variance applied to every index, or one variance per index
    leaf : callable
        ``leaf(coords)`` returns the component at the coordinate tuple
        ``coords`` (outermost coordinate first). Called once per component,
        in index order.
    message : str
        Diagnostic carried by the ``Err`` returned for invalid specifications

    Returns
    -------
    Tensor
        Tensor of rank ``len(names)``, or ``Err(message)``
    """
    if not is_valid_index_spec(names, sizes):
        return Err(message)

    if isinstance(variance, Variance):
        variances = [variance] * len(names)
    else:
        variances = list(variance)
        if len(variances) != len(names):
            return Err(message)

    sizes = [int(size) for size in sizes]
    return _build(names, sizes, variances, leaf, ())


def _build(
    names: str,
    sizes: list[int],
    variances: list[Variance],
    leaf: LeafSupplier,
    prefix: tuple,
) -> Tensor:
    if not names:
        return Scalar(leaf(prefix))

    index = Index(names[0], sizes[0], variances[0])
    children = tuple(
        _build(names[1:], sizes[1:], variances[1:], leaf, prefix + (x,))
        for x in range(index.size)
    )
    return FiniteTensor(index, children)


def from_indices(
    names: str,
    sizes: Sequence[int],
    f: Callable[[list[int]], Any],
    variance: Variance | Sequence[Variance],
    *,
    message: str = INVALID_INDICES,
) -> Tensor:
    """Tensor whose component at coordinates ``c`` is ``f(c)``, ``c`` a list of ints."""
    return build(names, sizes, variance, lambda coords: f(list(coords)), message=message)


def const(
    names: str,
    sizes: Sequence[int],
    value: Any,
    variance: Variance | Sequence[Variance],
    *,
    message: str = INVALID_INDICES,
) -> Tensor:
    """Tensor with every component equal to ``value``."""
    return build(names, sizes, variance, lambda _coords: value, message=message)


def random_sample(
    names: str,
    sizes: Sequence[int],
    distribution: Sampler,
    variance: Variance | Sequence[Variance],
    *,
    message: str = INVALID_INDICES,
) -> Tensor:
    """
    Tensor with components drawn from ``distribution``.

    A new generator seeded from OS entropy is created for every call, so
    results are not reproducible across calls.
    """
    return _random(names, sizes, distribution, None, variance, message)


def random_sample_seeded(
    names: str,
    sizes: Sequence[int],
    distribution: Sampler,
    seed: int,
    variance: Variance | Sequence[Variance],
    *,
    message: str = INVALID_INDICES,
) -> Tensor:
    """
    Tensor with components drawn from ``distribution`` using a seeded generator.

    One generator is shared by the whole tree. Calls with the same shape,
    distribution and seed return equal tensors.
    """
    return _random(names, sizes, distribution, seed, variance, message)


def _random(names, sizes, distribution, seed, variance, message) -> Tensor:
    if not is_valid_index_spec(names, sizes):
        return Err(message)
    require_sampler(distribution)

    rng = make_rng(seed)
    return build(names, sizes, variance, lambda _coords: draw(distribution, rng), message=message)


def _mixed_spec(upper, lower):
    up_names, up_sizes = upper
    low_names, low_sizes = lower
    if not (is_valid_index_spec(up_names, up_sizes) and is_valid_index_spec(low_names, low_sizes)):
        return None
    names = up_names + low_names
    sizes = list(up_sizes) + list(low_sizes)
    variances = [Variance.CONTRAVARIANT] * len(up_names) + [Variance.COVARIANT] * len(low_names)
    return names, sizes, variances


def tensor_from_indices(
    upper: tuple[str, Sequence[int]],
    lower: tuple[str, Sequence[int]],
    f: Callable[[list[int], list[int]], Any],
) -> Tensor:
    """
    Mixed-variance tensor from a function of its upper and lower coordinates.

    Upper (contravariant) indices are placed outermost, followed by the lower
    (covariant) ones.

    Parameters
    ----------
    upper : tuple[str, Sequence[int]]
        Names and sizes of the contravariant indices
    lower : tuple[str, Sequence[int]]
        Names and sizes of the covariant indices
    f : callable
        ``f(upper_coords, lower_coords)`` returns the component

    Examples
    --------
    >>> t = tensor_from_indices(("i", [2]), ("j", [2]), lambda u, l: float(u[0] == l[0]))
    >>> t.to_numpy()
    array([[1., 0.],
           [0., 1.]])
    """
    spec = _mixed_spec(upper, lower)
    if spec is None:
        return Err(INVALID_INDICES)
    names, sizes, variances = spec
    n_upper = len(upper[0])
    return build(
        names,
        sizes,
        variances,
        lambda coords: f(list(coords[:n_upper]), list(coords[n_upper:])),
    )


def tensor_const(
    upper: tuple[str, Sequence[int]],
    lower: tuple[str, Sequence[int]],
    value: Any,
) -> Tensor:
    """Mixed-variance tensor with every component equal to ``value``."""
    spec = _mixed_spec(upper, lower)
    if spec is None:
        return Err(INVALID_INDICES)
    names, sizes, variances = spec
    return build(names, sizes, variances, lambda _coords: value)
