"""Generic document tree produced by the codec and consumed by the emitter."""

import enum
from dataclasses import dataclass
from typing import Tuple, Union


class Kind(enum.Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    NULL = "null"
    BINARY = "binary"


@dataclass(frozen=True)
class Scalar:
    kind: Kind
    value: Union[str, int, float, bool, bytes, None] = None


@dataclass(frozen=True)
class Sequence:
    items: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Mapping:
    fields: Tuple[Tuple[str, "Node"], ...] = ()


Node = Union[Scalar, Sequence, Mapping]

NULL = Scalar(Kind.NULL)


def string(value):
    return Scalar(Kind.STRING, value)


def integer(value):
    return Scalar(Kind.INTEGER, value)


def floating(value):
    return Scalar(Kind.FLOAT, value)


def boolean(value):
    return Scalar(Kind.BOOLEAN, value)


def binary(value):
    return Scalar(Kind.BINARY, bytes(value))
