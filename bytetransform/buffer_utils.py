"""Shared buffer helpers used by the transform plugins."""

from typing import Union

import numpy as np

from .errors import InvalidArgumentError, NullParameterError

BytesLike = Union[bytes, bytearray, memoryview]


def to_buffer(data: BytesLike) -> bytearray:
    """Return a fresh, independently owned mutable copy of ``data``."""
    if data is None:
        raise NullParameterError("buffer")
    return bytearray(data)


def require_mutable(buffer: BytesLike, transform: str = None) -> bytearray:
    """Ensure ``buffer`` can be written to in place."""
    if not isinstance(buffer, bytearray):
        raise InvalidArgumentError(
            f"in-place transform requires a bytearray, got {type(buffer).__name__}",
            transform,
        )
    return buffer


def concat(*arrays: BytesLike) -> bytearray:
    """Concatenate all given arrays into a newly allocated buffer."""
    out = bytearray()
    for arr in arrays:
        if arr is None:
            raise NullParameterError("array")
        out += arr
    return out


def shuffle(buffer: bytearray, rng) -> None:
    """Fisher-Yates shuffle of ``buffer`` in place.

    ``rng`` must provide ``randrange`` (e.g. ``random.Random``); index ``i``
    runs from the last position down to 1 and is swapped with a uniformly
    drawn index in ``[0, i]``.
    """
    for i in range(len(buffer) - 1, 0, -1):
        j = rng.randrange(i + 1)
        buffer[i], buffer[j] = buffer[j], buffer[i]


def unsigned_view(buffer: BytesLike) -> np.ndarray:
    """uint8 numpy view over ``buffer`` (writable when ``buffer`` is a bytearray)."""
    return np.frombuffer(buffer, dtype=np.uint8)


def signed_view(buffer: BytesLike) -> np.ndarray:
    """int8 numpy view over ``buffer``; bytes read as two's-complement values."""
    return np.frombuffer(buffer, dtype=np.int8)


def to_signed(value: int) -> int:
    """Map an unsigned byte value (0..255) to its two's-complement value (-128..127)."""
    return value - 256 if value > 127 else value


def parse_buffer(value, name: str = "buffer") -> bytes:
    """Accept bytes-like values, lists of ints or hex strings (``"0a ff"``, ``"0x0aff"``)."""
    if value is None:
        raise NullParameterError(name)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        text = value.strip()
        if text[:2].lower() == "0x":
            text = text[2:]
        try:
            return bytes.fromhex(text)
        except ValueError as e:
            raise InvalidArgumentError(f"{name} is not a valid hex string: {e}")
    if isinstance(value, (list, tuple)):
        try:
            return bytes(value)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"{name} must contain integers between 0 and 255: {e}")
    raise InvalidArgumentError(f"{name} must be bytes or a hex string, got {type(value).__name__}")
