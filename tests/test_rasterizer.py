"""Tests for drawing layouts to PNG."""

import io
from datetime import date

from PIL import Image

from spk_generator.layout import EXPORT, PREVIEW, build_document_layout
from spk_generator.models import AdminSettings, FormState
from spk_generator.rasterizer import rasterize, to_png_bytes


def _layout(config, fonts, signature=None):
    form = FormState(name="Budi", job_detail="Renovasi atap", salary_amount="5000000",
                     deadline=date(2025, 12, 31))
    settings = AdminSettings(signature_image=signature, document_counter=7)
    return build_document_layout(form, settings, config, fonts, today=date(2025, 12, 1))


def test_export_is_rendered_at_double_density(fonts, signature_data_url):
    layout = _layout(EXPORT, fonts, signature_data_url)
    image = rasterize(layout, fonts)

    assert image.mode == 'RGB'
    assert image.size == (EXPORT.width * 2, round(layout.height * 2))


def test_background_is_opaque_white(fonts):
    image = rasterize(_layout(PREVIEW, fonts), fonts)
    assert image.getpixel((0, 0)) == (255, 255, 255)
    assert image.getpixel((image.width - 1, image.height - 1)) == (255, 255, 255)


def test_content_is_drawn(fonts, signature_data_url):
    image = rasterize(_layout(PREVIEW, fonts, signature_data_url), fonts)
    colors = image.getcolors(maxcolors=image.width * image.height)
    assert len(colors) > 1


def test_pixel_ratio_override(fonts):
    layout = _layout(PREVIEW, fonts)
    image = rasterize(layout, fonts, pixel_ratio=3)
    assert image.width == PREVIEW.width * 3


def test_png_encoding(fonts):
    png = to_png_bytes(rasterize(_layout(PREVIEW, fonts), fonts))
    assert png.startswith(b"\x89PNG\r\n\x1a\n")
    with Image.open(io.BytesIO(png)) as decoded:
        assert decoded.format == 'PNG'
        assert decoded.width == PREVIEW.width
