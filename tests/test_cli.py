"""Tests for the command-line interface."""

import json

import pytest
import yaml

from spk_generator.cli import _directory_sink, main
from spk_generator.storage import COUNTER_KEY


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({
        'paths': {
            'project_root': '.',
            'settings_store': 'data/settings.json',
            'output_dir': 'out',
        },
    }), encoding='utf-8')
    return path


@pytest.fixture
def signature_file(tmp_path, signature_png):
    path = tmp_path / "ttd.png"
    path.write_bytes(signature_png)
    return path


def _stored(tmp_path) -> dict:
    return json.loads((tmp_path / "data" / "settings.json").read_text(encoding='utf-8'))


def test_generates_png_into_output_dir(tmp_path, config_file, signature_file):
    code = main([
        '--config', str(config_file),
        '--signature', str(signature_file),
        '--name', 'Budi Santoso',
        '--job-detail', 'Renovasi atap\\nCat ulang dinding',
        '--salary', '5000000',
        '--deadline', '2025-12-31',
    ])

    assert code == 0
    output = tmp_path / "out" / "SPK-0001-Budi-Santoso.png"
    assert output.read_bytes().startswith(b"\x89PNG")
    assert _stored(tmp_path)[COUNTER_KEY] == "2"


def test_output_dir_argument_wins(tmp_path, config_file, signature_file):
    target = tmp_path / "custom"
    code = main([
        '--config', str(config_file), '--signature', str(signature_file),
        '--name', 'Ani', '--job-detail', 'Pasang pagar', '--salary', '750000',
        '--deadline', '2026-01-10', '--output-dir', str(target),
    ])
    assert code == 0
    assert (target / "SPK-0001-Ani.png").exists()


def test_missing_fields_fail(tmp_path, config_file, signature_file, capsys):
    code = main(['--config', str(config_file), '--signature', str(signature_file), '--name', 'Budi'])

    assert code == 1
    assert "Semua field harus diisi" in capsys.readouterr().out
    assert COUNTER_KEY not in _stored(tmp_path)


def test_missing_signature_fails(config_file, capsys):
    code = main([
        '--config', str(config_file), '--name', 'Budi', '--job-detail', 'Renovasi',
        '--salary', '1000', '--deadline', '2025-12-31',
    ])
    assert code == 1
    assert "tanda tangan" in capsys.readouterr().out


def test_non_image_signature_is_rejected(tmp_path, config_file, capsys):
    document = tmp_path / "kontrak.pdf"
    document.write_bytes(b"%PDF-1.7")

    code = main(['--config', str(config_file), '--signature', str(document)])

    assert code == 1
    assert "File harus berupa gambar" in capsys.readouterr().out


def test_invalid_deadline(config_file, signature_file, capsys):
    code = main([
        '--config', str(config_file), '--signature', str(signature_file), '--name', 'Budi',
        '--job-detail', 'Renovasi', '--salary', '1000', '--deadline', '31-12-2025',
    ])
    assert code == 1


def test_reset_counter_only(tmp_path, config_file, signature_file):
    main([
        '--config', str(config_file), '--signature', str(signature_file), '--name', 'Budi',
        '--job-detail', 'Renovasi', '--salary', '1000', '--deadline', '2025-12-31',
    ])
    assert _stored(tmp_path)[COUNTER_KEY] == "2"

    assert main(['--config', str(config_file), '--reset-counter']) == 0
    assert _stored(tmp_path)[COUNTER_KEY] == "1"


def test_missing_config(tmp_path, capsys):
    assert main(['--config', str(tmp_path / "missing.yaml")]) == 1
    assert "Configuration file not found" in capsys.readouterr().out


def test_invalid_pixel_ratio_in_config(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text(yaml.safe_dump({'document': {'export_pixel_ratio': 0}}), encoding='utf-8')

    assert main(['--config', str(path)]) == 1
    assert "export_pixel_ratio" in capsys.readouterr().out


def test_name_with_slash_stays_in_output_dir(tmp_path, config_file, signature_file):
    code = main([
        '--config', str(config_file), '--signature', str(signature_file),
        '--name', 'Budi S/O Ahmad', '--job-detail', 'Pasang pagar', '--salary', '750000',
        '--deadline', '2026-01-10',
    ])

    assert code == 0
    assert [p.name for p in (tmp_path / "out").iterdir()] == ["SPK-0001-Budi-S-O-Ahmad.png"]


def test_directory_sink_refuses_paths_outside_output_dir(tmp_path):
    deliver = _directory_sink(tmp_path / "out")

    with pytest.raises(ValueError):
        deliver("../escaped.png", b"png")
    assert not (tmp_path / "escaped.png").exists()
