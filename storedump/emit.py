"""Render document trees as block-style YAML.

Quoting is left to PyYAML's resolver, so any string that would re-read as a
number, boolean, null or structural syntax comes out quoted. Field names go
through the same path as string scalars.
"""

import sys

import yaml
from yaml.representer import SafeRepresenter

from . import tree
from .errors import EmitError

INDENT = 2


class TreeDumper(yaml.SafeDumper):
    # indent "- " markers under their parent key
    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)

    # shared nodes (tree.NULL) must never turn into anchors
    def ignore_aliases(self, data):
        return True


_SCALARS = {
    tree.Kind.STRING: SafeRepresenter.represent_str,
    tree.Kind.INTEGER: SafeRepresenter.represent_int,
    tree.Kind.FLOAT: SafeRepresenter.represent_float,
    tree.Kind.BOOLEAN: SafeRepresenter.represent_bool,
    tree.Kind.NULL: SafeRepresenter.represent_none,
    tree.Kind.BINARY: SafeRepresenter.represent_binary,
}


def represent_scalar(dumper, node):
    return _SCALARS[node.kind](dumper, node.value)


def represent_sequence(dumper, node):
    return dumper.represent_sequence("tag:yaml.org,2002:seq", node.items)


def represent_mapping(dumper, node):
    return dumper.represent_mapping("tag:yaml.org,2002:map", node.fields)


TreeDumper.add_representer(tree.Scalar, represent_scalar)
TreeDumper.add_representer(tree.Sequence, represent_sequence)
TreeDumper.add_representer(tree.Mapping, represent_mapping)


def emit(node, writer):
    try:
        yaml.dump(node, writer, Dumper=TreeDumper,
                  default_flow_style=False, sort_keys=False,
                  allow_unicode=True, indent=INDENT, width=sys.maxsize)
    except (OSError, ValueError) as err:
        # ValueError: writer already closed
        raise EmitError("cannot write output: %s" % err) from err
    except yaml.YAMLError as err:
        raise EmitError("cannot render document: %s" % err) from err
