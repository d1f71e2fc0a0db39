"""Dump LMDB stores of CBOR documents to readable YAML."""

from .errors import ConvertError, DecodeError, EmitError, MapNotFoundError, OpenError

__all__ = [
    "ConvertError",
    "DecodeError",
    "EmitError",
    "MapNotFoundError",
    "OpenError",
]
