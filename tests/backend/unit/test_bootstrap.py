"""
Unit tests for core.bootstrap module.
"""
from jackut.config import Settings
from jackut.core.bootstrap import create_system


def test_create_system_starts_empty_without_snapshot(tmp_path):
    settings = Settings(data_file=str(tmp_path / "jackut.json"))
    system = create_system(settings)
    assert system.users == {}
    assert system.communities == {}


def test_create_system_restores_snapshot(tmp_path):
    settings = Settings(data_file=str(tmp_path / "jackut.json"))
    first = create_system(settings)
    first.create_account("jpsauve", "sauvejp", "Jacques Sauve")
    first.shutdown()

    second = create_system(settings)
    assert second.get_attribute("jpsauve", "nome") == "Jacques Sauve"
