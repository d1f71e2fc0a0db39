"""Read-only access to the named maps of an LMDB store.

Every named sub-database of the environment is one map. Keys are UTF-8
text and values are handed back as raw bytes for the codec to decode.
"""

import logging
import os

import lmdb

from .errors import DecodeError, MapNotFoundError, OpenError

log = logging.getLogger(__name__)

# Upper bound on named sub-databases per environment (LMDB's max_dbs).
MAX_MAPS = 4096


class Store:
    """An open store. All reads go through a single read transaction."""

    def __init__(self, path, env):
        self.path = path
        self._env = env
        self._txn = env.begin(buffers=False)
        self._names = {}

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        if self._env is None:
            return
        self._txn.abort()
        self._env.close()
        self._txn = None
        self._env = None

    def list_maps(self):
        names = []
        try:
            with self._txn.cursor() as curs:
                for raw in curs.iternext(keys=True, values=False):
                    try:
                        self._env.open_db(raw, txn=self._txn, create=False)
                    except lmdb.IncompatibleError:
                        # plain record in the main database
                        continue
                    name = raw.decode("utf-8", "backslashreplace")
                    self._names[name] = raw
                    names.append(name)
        except lmdb.Error as err:
            raise OpenError("cannot list maps: %s" % err, self.path) from err
        log.debug("%s: %d maps", self.path, len(names))
        return names

    def entries(self, name):
        raw = self._names.get(name)
        if raw is None:
            raw = name.encode("utf-8")
        try:
            db = self._env.open_db(raw, txn=self._txn, create=False)
        except (lmdb.NotFoundError, lmdb.IncompatibleError):
            raise MapNotFoundError(name, self.path)
        except lmdb.Error as err:
            raise OpenError("cannot open map %r: %s" % (name, err), self.path) from err
        return self._iter_entries(name, db)

    def _iter_entries(self, name, db):
        try:
            with self._txn.cursor(db=db) as curs:
                for key, value in curs:
                    try:
                        key = key.decode("utf-8")
                    except UnicodeDecodeError as err:
                        raise DecodeError("key is not valid UTF-8", self.path,
                                          map_name=name, key=key) from err
                    yield key, value
        except lmdb.Error as err:
            raise OpenError("cannot read map %r: %s" % (name, err), self.path) from err


def open_store(path, lock=True, max_maps=MAX_MAPS):
    path = str(path)
    if os.path.isdir(path):
        subdir = True
    elif os.path.isfile(path):
        subdir = False
    else:
        raise OpenError("no such store", path)

    try:
        env = lmdb.open(path, subdir=subdir, readonly=True, lock=lock,
                        create=False, max_dbs=max_maps)
    except lmdb.Error as err:
        raise OpenError("cannot open store: %s" % err, path) from err

    try:
        return Store(path, env)
    except lmdb.Error as err:
        env.close()
        raise OpenError("cannot read store: %s" % err, path) from err
