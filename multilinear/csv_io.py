"""
CSV bridge for linear functionals.

Only rank-1 covariant tensors (linear functionals) have a CSV form: one row
holding the encoded components in index order.

File format
-----------
- One row per ``to_csv`` call
- Fields are the codec encoding of each component
- Fields separated by a caller-chosen single character
- Every field is quoted with ``"``; a quote inside a field is escaped by
  doubling it
- ``from_csv`` reads the first row only, later rows are ignored
"""

from __future__ import annotations

import csv
import warnings
from dataclasses import dataclass
from os import PathLike
from typing import Any, Union

from multilinear.codecs import FLOAT_CODEC, Codec, common_codec
from multilinear.exceptions import DecodeError
from multilinear.generators import FORM_INVALID_INDICES, build
from multilinear.index import Variance
from multilinear.tensor import Err, FiniteTensor, Scalar, Tensor
from multilinear.utils.validation import is_single_index_name

PathType = Union[str, PathLike]


@dataclass(frozen=True)
class CSVFormat:
    """
    CSV dialect used for tensor files.

    Parameters
    ----------
    separator : str, default=','
        Field separator (one character)
    quotechar : str, default='"'
        Quote character, also used as the escape character by doubling
    encoding : str, default='utf-8'
        Text encoding of the file
    """

    separator: str = ","
    quotechar: str = '"'
    encoding: str = "utf-8"

    def __post_init__(self):
        """Validate dialect characters."""
        if not isinstance(self.separator, str) or len(self.separator) != 1:
            raise ValueError(f"separator must be a single character, got {self.separator!r}")
        if not isinstance(self.quotechar, str) or len(self.quotechar) != 1:
            raise ValueError(f"quotechar must be a single character, got {self.quotechar!r}")
        if self.separator == self.quotechar:
            raise ValueError("separator and quotechar must differ")
        if self.separator in "\r\n":
            raise ValueError("separator cannot be a line break")

    def dialect(self) -> dict[str, Any]:
        """Keyword arguments for ``csv.reader`` / ``csv.writer``."""
        return {
            "delimiter": self.separator,
            "quotechar": self.quotechar,
            "doublequote": True,
            "strict": True,
            "quoting": csv.QUOTE_ALL,
            "lineterminator": "\n",
        }


def _is_linear_functional(tensor: Tensor) -> bool:
    return (
        isinstance(tensor, FiniteTensor)
        and tensor.index.is_covariant
        and all(isinstance(child, Scalar) for child in tensor.children)
    )


def to_csv(
    tensor: Tensor,
    file_name: PathType,
    separator: str = ",",
    codec: Codec | None = None,
) -> int:
    """
    Write a linear functional to a CSV file.

    Parameters
    ----------
    tensor : Tensor
        Rank-1 covariant tensor to serialize
    file_name : str or PathLike
        Destination file, overwritten if it exists
    separator : str, default=','
        Field separator (one character)
    codec : Codec, optional
        Component codec. Defaults to ``common_codec`` of the components, so a
        mix of ints and floats is written as floats.

    Returns
    -------
    rows : int
        Number of rows written: 1, or 0 if the tensor is not a linear
        functional (nothing is written in that case)

    Examples
    --------
    >>> from multilinear import form
    >>> to_csv(form.from_indices("a", 4, float), "f.csv")
    1
    """
    if not _is_linear_functional(tensor):
        if tensor.is_err:
            found = f"failed tensor ({tensor.message})"
        else:
            found = f"tensor with indices {[str(i) for i in tensor.indices()]}"
        warnings.warn(
            f"Only linear functionals can be written to CSV, got {found}. Nothing written.",
            UserWarning,
            stacklevel=2,
        )
        return 0

    fmt = CSVFormat(separator)
    values = [child.value for child in tensor.children]
    if codec is None:
        codec = common_codec(values)
    fields = [codec.encode(value).decode(fmt.encoding) for value in values]

    with open(file_name, "w", newline="", encoding=fmt.encoding) as fh:
        writer = csv.writer(fh, **fmt.dialect())
        writer.writerow(fields)

    return 1


def from_csv(
    name: str,
    file_name: PathType,
    separator: str = ",",
    codec: Codec = FLOAT_CODEC,
) -> Tensor:
    """
    Read linear functional components from the first row of a CSV file.

    Fields that cannot be decoded are skipped; the functional is sized to the
    number of fields that decoded successfully.

    Parameters
    ----------
    name : str
        Index name (one character)
    file_name : str or PathLike
        Source file
    separator : str, default=','
        Field separator expected in the file
    codec : Codec, default=FLOAT_CODEC
        Component codec

    Returns
    -------
    Tensor
        Rank-1 covariant tensor, or ``Err`` if ``name`` is not exactly one
        character (the file is not opened in that case)

    Raises
    ------
    DecodeError
        If no field of the first row could be decoded, or the file is empty
    FileNotFoundError
        If the file does not exist
    csv.Error
        If the file is not valid CSV
    """
    if not is_single_index_name(name):
        return Err(FORM_INVALID_INDICES)

    fmt = CSVFormat(separator)

    with open(file_name, "r", newline="", encoding=fmt.encoding) as fh:
        reader = csv.reader(fh, **fmt.dialect())
        first_row = next(reader, None)

    if first_row is None:
        raise DecodeError("Components deserialization error: file is empty", source=str(file_name))

    components = []
    failed = 0
    for field in first_row:
        try:
            components.append(codec.decode(field.encode(fmt.encoding)))
        except ValueError:
            failed += 1

    if not components:
        raise DecodeError(
            f"Components deserialization error: none of {len(first_row)} fields "
            f"decoded as {codec.name}",
            source=str(file_name),
        )

    if failed:
        warnings.warn(
            f"Skipped {failed} of {len(first_row)} fields that could not be decoded "
            f"as {codec.name}",
            UserWarning,
            stacklevel=2,
        )

    return build(name, [len(components)], Variance.COVARIANT, lambda coords: components[coords[0]])
