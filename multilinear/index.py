"""
Tensor index model.

An index is a named, sized dimension carrying a variance tag:
- Covariant indices are lower indices (linear functionals, forms)
- Contravariant indices are upper indices (vectors, n-vectors)

Indices are pure data. Their validity (positive size, one-character name)
is checked by the generator engine, not here, because it depends on the
index-name string the caller supplied.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Variance(Enum):
    """How an index transforms: lower (covariant) or upper (contravariant)."""

    COVARIANT = "covariant"
    CONTRAVARIANT = "contravariant"


@dataclass(frozen=True)
class Index:
    """
    Named, sized tensor index.

    Attributes
    ----------
    name : str
        Index name (one character)
    size : int
        Number of coordinate values the index ranges over
    variance : Variance
        Lower (covariant) or upper (contravariant)
    """

    name: str
    size: int
    variance: Variance

    @property
    def is_covariant(self) -> bool:
        return self.variance is Variance.COVARIANT

    @property
    def is_contravariant(self) -> bool:
        return self.variance is Variance.CONTRAVARIANT

    def __str__(self) -> str:
        marker = "_" if self.is_covariant else "^"
        return f"{marker}{self.name}[{self.size}]"
