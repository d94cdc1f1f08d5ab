"""
Tensor construction walkthrough.

Builds a few tensors from index specifications, samples reproducible random
components, and round-trips a linear functional through CSV.
"""

from pathlib import Path
import tempfile

from scipy.stats import norm, poisson

from multilinear import form, nvector, tensor_from_indices

# Linear functional w_i = 2i
w = form.from_indices("i", 5, lambda i: 2.0 * i)
print("w:", [str(index) for index in w.indices()], list(w.leaves()))

# 3x3 upper-index matrix with reproducible normal components
m = nvector.random_double_seed("ij", [3, 3], norm(0.0, 1.0), seed=42)
print("m:\n", m.to_numpy())

# Poisson counts
counts = nvector.random_int_seed("k", [6], poisson(3.0), seed=1)
print("counts:", list(counts.leaves()))

# Kronecker delta with one upper and one lower index
delta = tensor_from_indices(("i", [3]), ("j", [3]), lambda u, l: float(u[0] == l[0]))
print("delta:", [str(index) for index in delta.indices()])
print(delta.to_numpy())

# Invalid specification is a value, not an exception
bad = nvector.from_indices("ij", [3], lambda c: 0.0)
print("bad:", bad)

with tempfile.TemporaryDirectory() as tmp:
    path = Path(tmp) / "w.csv"
    rows = form.to_csv(w, path, ";")
    print(f"wrote {rows} row(s):", path.read_text().strip())

    w2 = form.from_csv("i", path, ";")
    assert w2 == w
    print("round trip OK")
