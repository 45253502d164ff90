from listener_inspector_mcp.core.store import ConfigDumpStore


def test_store_keeps_latest_snapshot():
    store = ConfigDumpStore()
    assert store.current() is None
    assert store.info() == {"primed": False}

    store.prime({"configs": []}, source="a.json")
    store.prime({"configs": [{}]}, source="b.json")

    snap = store.current()
    assert snap.source == "b.json"
    assert snap.dump == {"configs": [{}]}
    assert store.info()["primed"] is True

    store.clear()
    assert store.current() is None
