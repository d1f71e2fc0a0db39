import cbor2

import read_db


def test_converts_and_reports(make_store, capsys):
    path = make_store({"settings": [("b", cbor2.dumps(42))]})
    assert read_db.main([path]) == 0
    out = capsys.readouterr().out
    assert "Converted %s -> %s.yaml" % (path, path) in out


def test_failure_sets_exit_status(make_store, tmp_path, capsys):
    good = make_store({"m": []})
    missing = str(tmp_path / "missing.db")
    assert read_db.main([missing, good]) == 1
    captured = capsys.readouterr()
    assert "Failed: %s: no such store" % missing in captured.err
    assert "Converted %s" % good in captured.out


def test_suffix_option(make_store):
    path = make_store({"m": []})
    assert read_db.main(["--suffix", ".txt", "--no-lock", path]) == 0
    with open(path + ".txt") as f:
        assert f.read() == "# Map: m\n{}\n"
