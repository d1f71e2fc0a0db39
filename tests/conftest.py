import lmdb
import pytest


def write_store(path, maps, main=None, subdir=False):
    """Create an LMDB store at ``path`` holding ``maps`` as named sub-databases.

    ``maps`` is ``{name: [(key, value), ...]}`` with str keys and bytes values.
    ``main`` optionally adds plain records to the unnamed main database.
    """
    env = lmdb.open(str(path), subdir=subdir, max_dbs=len(maps) + 1, map_size=1 << 24)
    with env.begin(write=True) as txn:
        for name, entries in maps.items():
            db = env.open_db(name.encode("utf-8"), txn=txn)
            for key, value in entries:
                if isinstance(key, str):
                    key = key.encode("utf-8")
                txn.put(key, value, db=db)
        for key, value in (main or {}).items():
            txn.put(key, value)
    env.close()
    return str(path)


@pytest.fixture
def make_store(tmp_path):
    def make(maps, name="store.db", **kwargs):
        return write_store(tmp_path / name, maps, **kwargs)
    return make
