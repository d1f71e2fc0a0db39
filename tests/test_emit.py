import io
import math

import pytest
import yaml

from storedump import tree
from storedump.emit import emit
from storedump.errors import EmitError


def dumps(node):
    out = io.StringIO()
    emit(node, out)
    return out.getvalue()


def mapping(**fields):
    return tree.Mapping(tuple(fields.items()))


def test_scalars():
    doc = mapping(a=tree.boolean(True), b=tree.integer(42), c=tree.floating(1.0),
                  d=tree.NULL, e=tree.string("plain"))
    assert dumps(doc) == "a: true\nb: 42\nc: 1.0\nd: null\ne: plain\n"


def test_field_order_not_sorted():
    doc = tree.Mapping((("z", tree.integer(1)), ("a", tree.integer(2))))
    assert dumps(doc) == "z: 1\na: 2\n"


def test_nested_sequence_indented():
    inner = tree.Sequence((tree.integer(1), tree.integer(2), tree.integer(3)))
    doc = mapping(c=mapping(x=inner))
    assert dumps(doc) == "c:\n  x:\n    - 1\n    - 2\n    - 3\n"


def test_empty_mapping():
    assert dumps(tree.Mapping()) == "{}\n"


def test_repeated_nulls_have_no_anchors():
    doc = mapping(a=tree.NULL, b=tree.NULL, c=tree.Sequence((tree.NULL, tree.NULL)))
    text = dumps(doc)
    assert "&" not in text and "*" not in text
    assert yaml.safe_load(text) == {"a": None, "b": None, "c": [None, None]}


AWKWARD = [
    "true", "no", "null", "~", "42", "1.5", "0x1f", "- dash", "a: b", "#hash",
    "line\nbreak", "", " padded ", "[1, 2]", "{k: v}", "'quoted'", '"dq"',
    "&anchor", "*alias", "!tag", "%directive", "@at", "`tick`", "?", "é unicode",
]


@pytest.mark.parametrize("text", AWKWARD)
def test_awkward_strings_survive(text):
    loaded = yaml.safe_load(dumps(mapping(value=tree.string(text))))
    assert loaded == {"value": text}


@pytest.mark.parametrize("text", AWKWARD)
def test_awkward_field_names_survive(text):
    doc = tree.Mapping(((text, tree.integer(1)),))
    assert yaml.safe_load(dumps(doc)) == {text: 1}


def test_reparse_keeps_types_and_order():
    doc = tree.Mapping((
        ("i", tree.integer(7)),
        ("f", tree.floating(7.0)),
        ("inf", tree.floating(float("inf"))),
        ("n", tree.NULL),
        ("bin", tree.binary(b"\x00\xff")),
        ("seq", tree.Sequence((mapping(k=tree.string("v")), tree.Sequence()))),
    ))
    loaded = yaml.safe_load(dumps(doc))
    assert list(loaded) == ["i", "f", "inf", "n", "bin", "seq"]
    assert type(loaded["i"]) is int
    assert type(loaded["f"]) is float
    assert math.isinf(loaded["inf"])
    assert "n" in loaded and loaded["n"] is None
    assert loaded["bin"] == b"\x00\xff"
    assert loaded["seq"] == [{"k": "v"}, []]


def test_long_strings_not_wrapped():
    text = " ".join(["word"] * 100)
    assert dumps(mapping(s=tree.string(text))) == "s: %s\n" % text


class FullDisk(io.StringIO):
    def write(self, data):
        raise OSError(28, "No space left on device")


def test_writer_failure():
    with pytest.raises(EmitError):
        emit(mapping(a=tree.integer(1)), FullDisk())


def test_closed_writer():
    out = io.StringIO()
    out.close()
    with pytest.raises(EmitError):
        emit(mapping(a=tree.integer(1)), out)
