"""
Validation of index specifications.

An index specification is a string of index names (one character per index)
together with a sequence of index sizes. Builders check specifications here
before constructing anything and report failures as ``Err`` tensors.
"""

from collections.abc import Sequence

import numpy as np


def is_valid_index_spec(names, sizes) -> bool:
    """
    Check that index names and sizes describe a well-formed tensor shape.

    Checks:
    1. ``names`` is a string (one character per index)
    2. ``sizes`` is a sequence with one entry per name
    3. Every size is a positive integer

    Parameters
    ----------
    names : str
        Index names, one character per index
    sizes : Sequence[int] or 1D np.ndarray
        Index sizes, outermost first

    Returns
    -------
    bool
        True if a tensor can be built from the specification

    Examples
    --------
    >>> is_valid_index_spec("ij", [2, 3])
    True
    >>> is_valid_index_spec("ij", [2])
    False
    >>> is_valid_index_spec("i", [0])
    False
    """
    if not isinstance(names, str):
        return False
    if isinstance(sizes, np.ndarray):
        if sizes.ndim != 1:
            return False
        sizes = sizes.tolist()
    if isinstance(sizes, (str, bytes)) or not isinstance(sizes, Sequence):
        return False
    if len(names) != len(sizes):
        return False
    return all(_is_positive_int(size) for size in sizes)


def is_single_index_name(name) -> bool:
    """True if ``name`` is exactly one character."""
    return isinstance(name, str) and len(name) == 1


def _is_positive_int(value) -> bool:
    # bool is an int subclass but never a meaningful size
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, np.integer)) and value > 0
