"""Convert stores to YAML files next to them.

Each store is written to a temporary file in the output directory and only
renamed onto ``<store><suffix>`` once every map has been emitted, so a failed
conversion never leaves a truncated or half-updated output behind.
"""

import logging
import os
import tempfile
from collections import namedtuple

from . import codec, emit, tree
from .errors import ConvertError, DecodeError, EmitError
from .store import MAX_MAPS, open_store

log = logging.getLogger(__name__)

OUTPUT_SUFFIX = ".yaml"

Conversion = namedtuple("Conversion", ["path", "output", "error"])


def _apply_umask(tmp):
    # mkstemp creates 0600 files; give the output the usual permissions
    umask = os.umask(0)
    os.umask(umask)
    os.chmod(tmp, 0o666 & ~umask)


def _discard(tmp):
    try:
        os.unlink(tmp)
    except FileNotFoundError:
        pass
    except OSError as err:
        log.warning("cannot remove temporary file %s: %s", tmp, err)


def output_path(path, suffix=OUTPUT_SUFFIX):
    path = str(path)
    stripped = path.rstrip("/" + os.sep)
    return (stripped or path) + suffix


def map_comment(name):
    name = name.replace("\r", "\\r").replace("\n", "\\n")
    return "# Map: %s\n" % name


def build_document(store, map_name, decode=codec.decode):
    fields = []
    for key, value in store.entries(map_name):
        try:
            node = decode(value)
        except DecodeError as err:
            err.map_name = map_name
            err.key = key
            raise
        fields.append((key, node))
    log.debug("%s: map %r has %d entries", store.path, map_name, len(fields))
    return tree.Mapping(tuple(fields))


def write_store(store, writer, decode=codec.decode):
    for name in store.list_maps():
        document = build_document(store, name, decode)
        try:
            writer.write(map_comment(name))
        except (OSError, ValueError) as err:
            raise EmitError("cannot write output: %s" % err) from err
        emit.emit(document, writer)


def convert_store(path, suffix=OUTPUT_SUFFIX, decode=codec.decode, lock=True,
                  max_maps=MAX_MAPS):
    path = str(path)
    target = output_path(path, suffix)
    try:
        with open_store(path, lock=lock, max_maps=max_maps) as store:
            directory = os.path.dirname(os.path.abspath(target))
            try:
                fd, tmp = tempfile.mkstemp(prefix=os.path.basename(target) + ".",
                                           suffix=".tmp", dir=directory)
            except OSError as err:
                raise EmitError("cannot create output: %s" % err) from err
            try:
                with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as writer:
                    _apply_umask(tmp)
                    write_store(store, writer, decode)
                os.replace(tmp, target)
            except OSError as err:
                _discard(tmp)
                raise EmitError("cannot write output: %s" % err) from err
            except BaseException:
                _discard(tmp)
                raise
    except ConvertError as err:
        if err.path is None:
            err.path = path
        raise
    log.info("converted %s -> %s", path, target)
    return target


def convert_all(paths, **options):
    for path in paths:
        path = str(path)
        try:
            target = convert_store(path, **options)
        except ConvertError as err:
            log.debug("conversion of %s failed", path, exc_info=True)
            yield Conversion(path, None, err)
        else:
            yield Conversion(path, target, None)
