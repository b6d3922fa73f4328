import json

import pytest

from gameresources.jsoncache import JSONManager


@pytest.fixture
def manager(tmp_path):
    (tmp_path / "level.json").write_text(json.dumps({"name": "cave", "enemies": [1, 2]}))
    return JSONManager(tmp_path)


def test_get_json_parses_file(manager):
    assert manager.get_json("level.json") == {"name": "cave", "enemies": [1, 2]}


def test_get_json_is_cached(manager, tmp_path):
    first = manager.get_json("level.json")
    (tmp_path / "level.json").write_text("{}")
    second = manager.get_json("level.json")
    assert second is first
    assert manager.get("level.json") == {"name": "cave", "enemies": [1, 2]}


def test_get_json_missing_file(manager):
    with pytest.raises(FileNotFoundError):
        manager.get_json("absent.json")


def test_get_json_bytes_invalid(manager):
    with pytest.raises(json.JSONDecodeError):
        manager.get_json_bytes("bad", b"{not json")
    assert manager.get("bad") is None


def test_get_json_bytes_cached_key_ignores_new_data(manager):
    manager.get_json_bytes("cfg", b'{"speed": 3}')
    assert manager.get_json_bytes("cfg", b'{"speed": 9}') == {"speed": 3}


def test_put_get_remove_clear(manager):
    manager.put("x", [1, 2, 3])
    manager.put("y", "text")
    assert manager.get("x") == [1, 2, 3]
    manager.remove("x")
    assert manager.get("x") is None
    manager.clear()
    assert manager.get("y") is None


def test_clear_forces_reload(manager, tmp_path):
    manager.get_json("level.json")
    (tmp_path / "level.json").write_text('{"name": "forest"}')
    manager.clear()
    assert manager.get_json("level.json") == {"name": "forest"}