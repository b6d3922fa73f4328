from pathlib import Path

from gameresources.custom import CustomManager
from gameresources.jsoncache import JSONManager
from gameresources.manager import ResourceManager


def test_sub_managers_share_root(tmp_path):
    rm = ResourceManager(tmp_path)
    assert rm.audio.root == tmp_path
    assert rm.font.root == tmp_path
    assert rm.image.root == tmp_path


def test_default_root_is_current_directory():
    rm = ResourceManager()
    assert rm.root == Path(".")


def test_custom_manager_registry():
    rm = ResourceManager()
    custom = CustomManager()
    custom.put("score", 7)
    rm.add_custom_manager(1, custom)
    assert rm.get_custom_manager(1) is custom
    assert rm.get_custom_manager(1).get("score") == 7
    rm.remove_custom_manager(1)
    assert rm.get_custom_manager(1) is None


def test_json_manager_registry(tmp_path):
    (tmp_path / "cfg.json").write_text('{"lives": 3}')
    rm = ResourceManager(tmp_path)
    rm.add_json_manager(2, JSONManager(tmp_path))
    assert rm.get_json_manager(2).get_json("cfg.json") == {"lives": 3}
    rm.remove_json_manager(2)
    assert rm.get_json_manager(2) is None


def test_registries_are_separate():
    rm = ResourceManager()
    rm.add_custom_manager(5, CustomManager())
    assert rm.get_json_manager(5) is None


def test_missing_ids_return_none():
    rm = ResourceManager()
    rm.remove_custom_manager(99)
    assert rm.get_custom_manager(99) is None
    assert rm.get_json_manager(99) is None