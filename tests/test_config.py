"""Tests for YAML configuration loading."""

import logging

import pytest
import yaml

from spk_generator.config import Config, merge_dicts


def test_from_dict_merges_defaults(tmp_path):
    config = Config.from_dict({'paths': {'project_root': '.', 'settings_store': 'store.json'}}, tmp_path)

    assert config.settings_store_path == tmp_path.resolve() / "store.json"
    assert config.output_dir == tmp_path.resolve() / "output"
    assert config.document_title == "SURAT PERINTAH KERJA"
    assert config.approver_title == "Direktur"
    assert config.export_pixel_ratio == 2
    assert config.font_regular is None
    assert config.font_bold is None


def test_config_file_overrides(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({
        'paths': {'project_root': '.', 'font_bold': 'fonts/Bold.ttf'},
        'document': {'approver_title': 'Manajer Proyek', 'export_pixel_ratio': 3},
        'settings': {'logging': {'level': 'DEBUG'}},
    }), encoding='utf-8')

    config = Config(str(path))

    assert config.approver_title == "Manajer Proyek"
    assert config.export_pixel_ratio == 3
    assert config.font_bold == tmp_path.resolve() / "fonts" / "Bold.ttf"
    assert config.get('settings.logging.level') == 'DEBUG'
    assert config.get('document.missing', 'fallback') == 'fallback'


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config(str(tmp_path / "nope.yaml"))


def test_unknown_path_key(tmp_path):
    config = Config.from_dict({}, tmp_path)
    with pytest.raises(ValueError):
        config.get_path('template')


def test_absolute_paths_are_kept(tmp_path):
    target = tmp_path / "elsewhere" / "settings.json"
    config = Config.from_dict({'paths': {'settings_store': str(target)}}, tmp_path)
    assert config.settings_store_path == target.resolve()


def test_merge_dicts_is_recursive():
    merged = merge_dicts({'a': {'b': 1, 'c': 2}, 'd': 3}, {'a': {'c': 20}})
    assert merged == {'a': {'b': 1, 'c': 20}, 'd': 3}


def test_logging_level_is_accepted(tmp_path, caplog):
    Config.from_dict({'settings': {'logging': {'level': 'warning'}}}, tmp_path)
    with caplog.at_level(logging.WARNING):
        logging.getLogger("spk_generator").warning("visible")
    assert "visible" in caplog.text


@pytest.mark.parametrize("ratio", [0, -1, "two"])
def test_invalid_pixel_ratio(tmp_path, ratio):
    config = Config.from_dict({'document': {'export_pixel_ratio': ratio}}, tmp_path)
    with pytest.raises(ValueError):
        config.export_pixel_ratio
