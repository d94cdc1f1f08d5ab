"""
Multilinear algebra construction library.

This package builds tensors, linear functionals and n-vectors from index
specifications written in Ricci-Curbastro style: each index has a
one-character name, a size, and a variance (lower = covariant, upper =
contravariant).

Features:
---------
- Recursive tensor representation (Scalar / FiniteTensor / Err)
- Generators from index functions, constants, or scipy.stats distributions
- Seeded generators for reproducible random tensors
- CSV import/export of linear functionals

Typical usage:
--------------
    from scipy.stats import norm
    from multilinear import form, nvector

    # Linear functional with components 0, 2, 4, 6
    w = form.from_indices("i", 4, lambda i: 2.0 * i)

    # Random 3x3 n-vector, reproducible
    m = nvector.random_double_seed("ij", [3, 3], norm(0.0, 1.0), seed=42)
    m.to_numpy()

    # Round trip through CSV
    form.to_csv(w, "w.csv", ";")
    w2 = form.from_csv("i", "w.csv", ";")
"""

from multilinear import form, nvector
from multilinear.codecs import (
    COMPLEX_CODEC,
    FLOAT_CODEC,
    INT_CODEC,
    Codec,
    codec_for,
    common_codec,
    dtype_codec,
)
from multilinear.csv_io import CSVFormat, from_csv, to_csv
from multilinear.exceptions import DecodeError, MultilinearError, TensorError
from multilinear.generators import (
    build,
    const,
    from_indices,
    random_sample,
    random_sample_seeded,
    tensor_const,
    tensor_from_indices,
)
from multilinear.index import Index, Variance
from multilinear.sampling import Sampler
from multilinear.tensor import Err, FiniteTensor, Scalar, Tensor

__version__ = "0.5.0"

__all__ = [
    # Index and tensor types
    "Index",
    "Variance",
    "Tensor",
    "Scalar",
    "FiniteTensor",
    "Err",
    # Generator engine
    "build",
    "from_indices",
    "const",
    "random_sample",
    "random_sample_seeded",
    "tensor_from_indices",
    "tensor_const",
    "Sampler",
    # Specialized builders
    "form",
    "nvector",
    # CSV bridge
    "CSVFormat",
    "from_csv",
    "to_csv",
    "Codec",
    "FLOAT_CODEC",
    "INT_CODEC",
    "COMPLEX_CODEC",
    "codec_for",
    "common_codec",
    "dtype_codec",
    # Exceptions
    "MultilinearError",
    "TensorError",
    "DecodeError",
]
