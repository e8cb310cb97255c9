"""Tests for the JSON settings store."""

import json

from spk_generator.storage import (
    COUNTER_KEY,
    SIGNATURE_KEY,
    SettingsStore,
    load_admin_settings,
    save_counter,
    save_signature,
)


def test_missing_file_gives_defaults(tmp_path):
    settings = load_admin_settings(SettingsStore(tmp_path / "missing.json"))
    assert settings.signature_image is None
    assert settings.document_counter == 1


def test_values_survive_a_new_store_instance(tmp_path):
    path = tmp_path / "nested" / "settings.json"
    store = SettingsStore(path)
    save_signature(store, "data:image/png;base64,AAAA")
    save_counter(store, 8)

    on_disk = json.loads(path.read_text(encoding='utf-8'))
    assert on_disk == {SIGNATURE_KEY: "data:image/png;base64,AAAA", COUNTER_KEY: "8"}

    settings = load_admin_settings(SettingsStore(path))
    assert settings.signature_image == "data:image/png;base64,AAAA"
    assert settings.document_counter == 8


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding='utf-8')

    settings = load_admin_settings(SettingsStore(path))
    assert settings.document_counter == 1
    assert settings.signature_image is None


def test_non_object_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2, 3]", encoding='utf-8')
    assert load_admin_settings(SettingsStore(path)).document_counter == 1


def test_invalid_counter_values_fall_back_to_one(store):
    for raw in ("abc", "0", "-4", ""):
        store.set(COUNTER_KEY, raw)
        assert load_admin_settings(store).document_counter == 1

