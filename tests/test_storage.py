from jewel_appraiser.storage import LocalStore


def test_round_trip(store):
    assert store.write("slot", {"a": [1, 2]})
    assert store.read("slot") == {"a": [1, 2]}
    assert store.read("other", "dflt") == "dflt"


def test_slots_are_independent(store):
    store.write("one", 1)
    store.write("two", "EUR")
    assert store.read("one") == 1
    assert store.read("two") == "EUR"


def test_missing_file_returns_default(tmp_path):
    assert LocalStore(tmp_path / "nope.json").read("slot", []) == []


def test_corrupt_file_returns_default(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")
    store = LocalStore(path)
    assert store.read("slot", "fallback") == "fallback"
    # a write replaces the unreadable file
    assert store.write("slot", 3)
    assert store.read("slot") == 3


def test_corrupt_slot_returns_default(tmp_path):
    path = tmp_path / "store.json"
    path.write_text('{"slot": "[1, 2"}', encoding="utf-8")
    assert LocalStore(path).read("slot", []) == []


def test_write_failure_is_swallowed(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    store = LocalStore(blocker / "store.json")
    assert store.write("slot", 1) is False
    assert store.read("slot", 0) == 0


def test_failed_write_leaves_no_temp_file(tmp_path, monkeypatch):
    store = LocalStore(tmp_path / "store.json")
    assert store.write("slot", 1)

    def broken_dump(obj, fp, **kw):
        fp.write("{partial")
        raise OSError("disk full")

    monkeypatch.setattr("jewel_appraiser.storage.json.dump", broken_dump)
    assert store.write("slot", 2) is False
    assert not (tmp_path / "store.json.tmp").exists()
    monkeypatch.undo()
    assert store.read("slot") == 1
