"""
Unit tests for the durable key/value storage.
"""

from telehealth.storage import MemoryStorage, init_storage


def test_memory_storage_basic():
    s = MemoryStorage({"a": "1"})
    s.set("b", "2")
    s.remove("a")
    s.remove("missing")
    assert s.get("a") is None
    assert s.get("b") == "2"
    assert s.keys() == ["b"]


def test_sql_storage_set_get_overwrite_remove(tmp_path, capsys):
    s = init_storage(f"sqlite:///{tmp_path / 'kv.db'}")
    assert "[init] Storage ready" in capsys.readouterr().out

    assert s.get("telemedicine-role") is None
    s.set("telemedicine-role", "patient")
    s.set("telemedicine-role", "admin")
    s.set("telemedicine-language", "hi")
    assert s.get("telemedicine-role") == "admin"
    assert s.keys() == ["telemedicine-language", "telemedicine-role"]

    s.remove("telemedicine-role")
    s.remove("telemedicine-role")
    assert s.get("telemedicine-role") is None


def test_sql_storage_is_durable_across_engines(tmp_path):
    uri = f"sqlite:///{tmp_path / 'kv.db'}"
    init_storage(uri).set("telemedicine-language", "pa")
    assert init_storage(uri).get("telemedicine-language") == "pa"
