"""Tests for the config loader and factories."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from number_extractor import History, SqliteHistory
from number_extractor.config import create_engine, create_history, load_config, load_from_yaml


def test_defaults():
    cfg = load_config({})
    assert cfg["strict_ukrainian_length"] is False
    assert cfg["ignore"] == set()
    assert cfg["history_backend"] == "memory"
    assert cfg["history_limit"] == 30


def test_nested_and_flat_are_equivalent():
    flat = {"strict_ukrainian_length": True, "ignore": ["+380000000000"]}
    assert load_config({"number_extractor": flat}) == load_config(flat)


def test_unknown_backend():
    with pytest.raises(ValueError):
        load_config({"history": {"backend": "redis"}})


def test_non_positive_limit():
    with pytest.raises(ValueError):
        load_config({"history": {"limit": 0}})


def test_load_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "number_extractor:\n"
        "  strict_ukrainian_length: true\n"
        "  ignore:\n"
        "    - '+380991234567'\n"
        "  history:\n"
        "    backend: sqlite\n"
        f"    path: {tmp_path / 'h.db'}\n"
        "    limit: 5\n",
        encoding="utf-8",
    )
    cfg = load_from_yaml(path)
    assert cfg["strict_ukrainian_length"] is True
    assert cfg["ignore"] == {"+380991234567"}
    assert cfg["history_backend"] == "sqlite"
    assert cfg["history_limit"] == 5


def test_create_engine():
    engine = create_engine({"number_extractor": {"ignore": ["+380991234567"]}})
    assert engine.classify("+380991234567").phones == set()

    strict = create_engine({"strict_ukrainian_length": True})
    assert strict.config.strict_ukrainian_length


def test_create_history(tmp_path):
    memory = create_history({})
    assert isinstance(memory, History)

    sqlite = create_history({"history": {"backend": "sqlite", "path": str(tmp_path / "h.db"), "limit": 2}})
    assert isinstance(sqlite, SqliteHistory)
    assert sqlite.limit == 2
    sqlite.close()
