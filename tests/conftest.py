"""Shared fixtures for SPK generator tests."""

import io
from datetime import date

import pytest
import streamlit as st
from PIL import Image, ImageDraw

from spk_generator import SettingsStore, SPKGenerator
from spk_generator.layout import FontSet
from spk_generator.signature import encode_data_url

FIXED_TODAY = date(2025, 12, 1)


@pytest.fixture(scope="session")
def fonts() -> FontSet:
    """One font set for the whole run; loading fonts is the slow part."""
    return FontSet()


@pytest.fixture
def signature_png() -> bytes:
    """A small transparent PNG with a scribble, like a scanned signature."""
    img = Image.new('RGBA', (200, 80), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.line([(10, 60), (60, 15), (110, 65), (190, 20)], fill=(20, 20, 80, 255), width=4)
    buffer = io.BytesIO()
    img.save(buffer, format='PNG')
    return buffer.getvalue()


@pytest.fixture
def signature_data_url(signature_png: bytes) -> str:
    return encode_data_url(signature_png, 'image/png')


@pytest.fixture
def store(tmp_path) -> SettingsStore:
    return SettingsStore(tmp_path / "settings.json")


@pytest.fixture
def generator(store: SettingsStore, fonts: FontSet) -> SPKGenerator:
    return SPKGenerator(store, fonts=fonts, today=lambda: FIXED_TODAY)


@pytest.fixture
def signed_generator(generator: SPKGenerator, signature_png: bytes) -> SPKGenerator:
    generator.upload_signature("ttd.png", "image/png", signature_png)
    return generator


def fill_form(generator: SPKGenerator, **overrides) -> None:
    values = {
        'name': "Budi",
        'job_detail': "Renovasi atap",
        'salary_amount': "5000000",
        'deadline': date(2025, 12, 31),
    }
    values.update(overrides)
    for field, value in values.items():
        generator.update_field(field, value)


class RecordingSink:
    """Download sink remembering every delivered file."""

    def __init__(self):
        self.files: list[tuple[str, bytes]] = []

    def __call__(self, filename: str, png_bytes: bytes) -> None:
        self.files.append((filename, png_bytes))


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def session_state(monkeypatch: pytest.MonkeyPatch) -> dict:
    """Replace Streamlit's runtime-bound session state with a plain dictionary."""
    state: dict = {}
    monkeypatch.setattr(st, "session_state", state)
    return state


class ReadOnlyStore(SettingsStore):
    """Settings store whose file can be read but never written."""

    def _flush(self) -> None:
        raise PermissionError(13, "Permission denied", str(self.path))


@pytest.fixture
def readonly_generator(tmp_path, fonts: FontSet, signature_data_url: str) -> SPKGenerator:
    """Generator holding a signature in memory on top of an unwritable store."""
    generator = SPKGenerator(ReadOnlyStore(tmp_path / "settings.json"), fonts=fonts, today=lambda: FIXED_TODAY)
    generator.settings.signature_image = signature_data_url
    return generator
