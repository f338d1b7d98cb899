"""Tests for the local persistence slot."""

import json
import logging

import pytest

from yuzuorders.storage.local_store import LocalOrderStorage


def test_load_missing_returns_none(temp_dir):
    storage = LocalOrderStorage(str(temp_dir / "orders.json"))

    assert storage.load() is None


def test_save_then_load(temp_dir, sample_table):
    storage = LocalOrderStorage(str(temp_dir / "nested" / "orders.json"))

    assert storage.save(sample_table) is True
    assert storage.load() == sample_table


def test_save_overwrites(temp_dir, sample_table):
    storage = LocalOrderStorage(str(temp_dir / "orders.json"))
    storage.save(sample_table)

    storage.save({"tofu": {'9"': {"2025-01-15": 1}}})

    assert storage.load() == {"tofu": {'9"': {"2025-01-15": 1}}}


def test_corrupt_file_logged_not_raised(temp_dir, caplog):
    path = temp_dir / "orders.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        assert LocalOrderStorage(str(path)).load() is None

    assert "Failed to load saved orders" in caplog.text


def test_non_object_document_rejected(temp_dir):
    path = temp_dir / "orders.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    assert LocalOrderStorage(str(path)).load() is None


@pytest.mark.parametrize("document", [
    {"tofu": {"9\"": None}, "yuzu": [1]},
    {"tofu": [1, 2]},
    {"tofu": {"9\"": {"2025-01-15": "lots"}}},
])
def test_wrong_inner_shape_rejected(temp_dir, caplog, document):
    path = temp_dir / "orders.json"
    path.write_text(json.dumps(document), encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        assert LocalOrderStorage(str(path)).load() is None

    assert "do not match" in caplog.text


def test_unwritable_path_returns_false(temp_dir, sample_table):
    # A directory where the file should be makes the final move fail
    path = temp_dir / "orders.json"
    path.mkdir()

    assert LocalOrderStorage(str(path)).save(sample_table) is False


def test_clear(temp_dir, sample_table):
    storage = LocalOrderStorage(str(temp_dir / "orders.json"))
    storage.save(sample_table)

    storage.clear()
    storage.clear()

    assert storage.load() is None
