"""
Sampling capability for randomized tensor builders.

Tensor components are drawn from probability distributions through the
``scipy.stats`` interface: any frozen distribution (``norm(0, 1)``,
``gamma(2.0)``, ``poisson(3)``, ``binom(10, 0.5)``, ...) or any other object
exposing ``rvs(size=None, random_state=None)`` can be used.

Randomness comes from a ``numpy.random.Generator``:
- Unseeded builders create a fresh generator from OS entropy on every call
- Seeded builders derive the generator state from an integer seed, so equal
  seeds give equal draw sequences
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import numpy as np
from scipy import stats

_SEED_MODULUS = 2**64


@runtime_checkable
class Sampler(Protocol):
    """Anything that can draw one value per call, e.g. a frozen scipy.stats distribution."""

    def rvs(self, size=None, random_state=None) -> Any:
        ...


def make_rng(seed: int | None = None) -> np.random.Generator:
    """
    Create the random generator used for one builder call.

    Parameters
    ----------
    seed : int, optional
        Randomness seed, any integer. Seeds are taken modulo 2**64, so every
        64-bit signed seed maps to a distinct non-negative one and negative
        seeds are accepted. ``None`` draws fresh entropy from the operating
        system.

    Returns
    -------
    rng : np.random.Generator
    """
    if seed is None:
        return np.random.default_rng()
    return np.random.default_rng(int(seed) % _SEED_MODULUS)


def draw(distribution: Sampler, rng: np.random.Generator) -> Any:
    """Draw one component, unwrapped to a plain Python number where possible."""
    value = distribution.rvs(random_state=rng)
    if isinstance(value, (np.generic, np.ndarray)) and np.size(value) == 1:
        return value.item()
    return value


def is_continuous(distribution: Any) -> bool:
    """True for frozen continuous scipy.stats distributions."""
    return isinstance(getattr(distribution, "dist", None), stats.rv_continuous)


def is_discrete(distribution: Any) -> bool:
    """True for frozen discrete scipy.stats distributions."""
    return isinstance(getattr(distribution, "dist", None), stats.rv_discrete)


def require_sampler(distribution: Any) -> None:
    """Raise TypeError if ``distribution`` cannot draw values."""
    if not isinstance(distribution, Sampler):
        raise TypeError(
            "distribution must provide rvs(size=None, random_state=None), "
            f"got {type(distribution).__name__}"
        )


def require_continuous(distribution: Any) -> None:
    """Raise TypeError unless ``distribution`` is a continuous scipy.stats distribution."""
    if not is_continuous(distribution):
        raise TypeError("Real components require a continuous scipy.stats distribution")


def require_discrete(distribution: Any) -> None:
    """Raise TypeError unless ``distribution`` is a discrete scipy.stats distribution."""
    if not is_discrete(distribution):
        raise TypeError("Integer components require a discrete scipy.stats distribution")
