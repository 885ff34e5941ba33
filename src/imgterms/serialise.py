"""Serialisation of floating point values stored in document value slots."""

import struct

from .errors import SerialisationError

_DOUBLE = struct.Struct(">d")


def serialise_double(value: float) -> bytes:
    """Encode a float as 8 big-endian IEEE-754 bytes."""
    return _DOUBLE.pack(value)


def unserialise_double(data: bytes) -> float:
    """Decode bytes produced by ``serialise_double``.

    Raises:
        SerialisationError: If ``data`` is not exactly one encoded double.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        msg = f"expected bytes, got {type(data).__name__}"
        raise SerialisationError(msg)
    if len(data) != _DOUBLE.size:
        msg = f"bad serialised double: expected {_DOUBLE.size} bytes, got {len(data)}"
        raise SerialisationError(msg)
    (value,) = _DOUBLE.unpack(data)
    return float(value)
