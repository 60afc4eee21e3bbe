from fiprofile.adapters.memory_store import InMemoryBlobStore


def test_get_missing_key():
    assert InMemoryBlobStore().get("missing") is None


def test_set_and_get():
    store = InMemoryBlobStore()
    store.set("k", "v1")
    store.set("k", "v2")
    assert store.get("k") == "v2"
    assert store.keys() == ["k"]


def test_remove_is_idempotent():
    store = InMemoryBlobStore({"k": "v"})
    store.remove("k")
    store.remove("k")
    assert store.get("k") is None


def test_initial_data_is_copied():
    initial = {"k": "v"}
    store = InMemoryBlobStore(initial)
    store.set("other", "x")
    assert "other" not in initial
