"""
Element codecs for tensor serialization.

A codec turns one tensor component into a byte string and back. Codecs are
injective: distinct values of the codec's type encode to distinct bytes, and
``decode(encode(v)) == v``.

Built-in codecs:
- FLOAT_CODEC: shortest round-trip decimal representation, ASCII
- INT_CODEC: decimal integer, ASCII
- COMPLEX_CODEC: Python complex literal, ASCII
- dtype_codec(dtype): fixed-width little-endian binary image of a NumPy
  scalar, hex-armored so it can live inside a text file

``codec_for`` picks the codec matching the type of a sample value and
``common_codec`` the narrowest one that fits a whole sequence.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

import numpy as np
import numpy.typing as npt


@dataclass(frozen=True)
class Codec:
    """
    Bidirectional value <-> bytes mapping.

    Attributes
    ----------
    name : str
        Human-readable codec name
    encode : callable
        ``encode(value) -> bytes``
    decode : callable
        ``decode(data: bytes) -> value``, raises ValueError on malformed input
    """

    name: str
    encode: Callable[[Any], bytes]
    decode: Callable[[bytes], Any]


def _ascii(data: bytes) -> str:
    # UnicodeDecodeError is a ValueError, so undecodable bytes fail like bad text
    return bytes(data).decode("ascii")


def _encode_float(value: Any) -> bytes:
    return repr(float(value)).encode("ascii")


def _decode_float(data: bytes) -> float:
    return float(_ascii(data))


def _encode_int(value: Any) -> bytes:
    if isinstance(value, (float, np.floating)) and not float(value).is_integer():
        raise ValueError(f"Cannot encode non-integral value {value!r} as int")
    return str(int(value)).encode("ascii")


def _decode_int(data: bytes) -> int:
    return int(_ascii(data))


def _encode_complex(value: Any) -> bytes:
    return repr(complex(value)).encode("ascii")


def _decode_complex(data: bytes) -> complex:
    return complex(_ascii(data))


FLOAT_CODEC = Codec("float", _encode_float, _decode_float)
INT_CODEC = Codec("int", _encode_int, _decode_int)
COMPLEX_CODEC = Codec("complex", _encode_complex, _decode_complex)


def dtype_codec(dtype: npt.DTypeLike) -> Codec:
    """
    Binary codec for scalars of a fixed NumPy dtype.

    Values are stored as their little-endian memory image, written as
    lowercase hex. Decoding rejects input whose width does not match the
    dtype's item size.

    Examples
    --------
    >>> codec = dtype_codec(np.float32)
    >>> codec.encode(1.0)
    b'0000803f'
    >>> codec.decode(b'0000803f')
    1.0
    """
    dt = np.dtype(dtype).newbyteorder("<")

    def encode(value: Any) -> bytes:
        return np.asarray(value, dtype=dt).tobytes().hex().encode("ascii")

    def decode(data: bytes) -> Any:
        raw = bytes.fromhex(_ascii(data))
        if len(raw) != dt.itemsize:
            raise ValueError(f"Expected {dt.itemsize} bytes for {dt.name}, got {len(raw)}")
        return np.frombuffer(raw, dtype=dt)[0].item()

    return Codec(f"binary[{dt.name}]", encode, decode)


def codec_for(value: Any) -> Codec:
    """
    Default codec for the type of ``value``.

    Booleans and integers (Python or NumPy) map to ``INT_CODEC``, real floats
    to ``FLOAT_CODEC`` and complex numbers to ``COMPLEX_CODEC``. The binary
    ``dtype_codec`` is never chosen implicitly.

    Raises
    ------
    TypeError
        If no codec is known for the value's type
    """
    if isinstance(value, (bool, int, np.bool_, np.integer)):
        return INT_CODEC
    if isinstance(value, (float, np.floating)):
        return FLOAT_CODEC
    if isinstance(value, (complex, np.complexfloating)):
        return COMPLEX_CODEC
    raise TypeError(f"No codec for components of type {type(value).__name__}")


# Promotion order for mixed components: int -> float -> complex
_PROMOTION = (INT_CODEC, FLOAT_CODEC, COMPLEX_CODEC)


def common_codec(values: Iterable[Any]) -> Codec:
    """
    Codec able to encode every value in ``values``.

    Each value is classified with ``codec_for`` and the widest codec wins,
    so ``[0, 0.5]`` is written with ``FLOAT_CODEC`` and ``[1, 2j]`` with
    ``COMPLEX_CODEC``.

    Raises
    ------
    ValueError
        If ``values`` is empty
    TypeError
        If some value has no codec
    """
    rank = -1
    for value in values:
        rank = max(rank, _PROMOTION.index(codec_for(value)))
    if rank < 0:
        raise ValueError("Cannot choose a codec for zero values")
    return _PROMOTION[rank]
