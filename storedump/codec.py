"""CBOR payloads to document trees.

cbor2 does the wire-level parsing; this module only maps the Python objects
it produces onto the closed tree variants. Map order, int/float and explicit
nulls survive unchanged.
"""

import collections.abc
import datetime
import io

import cbor2

from . import tree
from .errors import DecodeError


def decode(data):
    fp = io.BytesIO(data)
    try:
        value = cbor2.CBORDecoder(fp).decode()
    except (cbor2.CBORDecodeError, ValueError) as err:
        raise DecodeError("malformed CBOR: %s" % err) from err
    except RecursionError as err:
        raise DecodeError("document nested too deeply") from err
    if fp.read(1):
        raise DecodeError("trailing data after document at offset %d" % (fp.tell() - 1))
    try:
        return to_node(value)
    except RecursionError as err:
        raise DecodeError("document nested too deeply") from err


def to_node(value, _active=None):
    if _active is None:
        _active = set()

    if value is None or value is cbor2.undefined:
        return tree.NULL
    if isinstance(value, bool):
        return tree.boolean(value)
    if isinstance(value, int):
        return tree.integer(value)
    if isinstance(value, float):
        return tree.floating(value)
    if isinstance(value, str):
        return tree.string(value)
    if isinstance(value, (bytes, bytearray)):
        return tree.binary(value)
    if isinstance(value, cbor2.CBORTag):
        return to_node(value.value, _active)
    if isinstance(value, cbor2.CBORSimpleValue):
        return tree.integer(value.value)
    if isinstance(value, (datetime.datetime, datetime.date)):
        return tree.string(value.isoformat())

    if isinstance(value, (collections.abc.Mapping, list, tuple, set, frozenset)):
        if id(value) in _active:
            raise DecodeError("cyclic shared reference")
        _active.add(id(value))
        try:
            if isinstance(value, collections.abc.Mapping):
                return _mapping(value, _active)
            items = value
            if isinstance(value, (set, frozenset)):
                items = sorted(value, key=lambda v: (type(v).__name__, repr(v)))
            return tree.Sequence(tuple(to_node(v, _active) for v in items))
        finally:
            _active.discard(id(value))

    # decimals, fractions, UUIDs, addresses, regexes, MIME messages
    return tree.string(str(value))


def _mapping(value, active):
    fields = []
    seen = set()
    for key, item in value.items():
        name = field_name(key)
        if name in seen:
            raise DecodeError("duplicate field name %r" % name)
        seen.add(name)
        fields.append((name, to_node(item, active)))
    return tree.Mapping(tuple(fields))


def field_name(key):
    if isinstance(key, str):
        return key
    if key is None or key is cbor2.undefined:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, int):
        return str(key)
    if isinstance(key, float):
        return repr(key)
    raise DecodeError("unsupported map key type %s" % type(key).__name__)
