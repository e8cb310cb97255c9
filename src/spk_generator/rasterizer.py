"""Rasterize document layouts into bitmap images with Pillow."""

import io
import logging
from typing import Optional

from PIL import Image, ImageDraw

from .layout import DocumentLayout, FontSet, ImageElement, RuleElement, TextElement
from .signature import open_signature_image

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = "#ffffff"
TEXT_COLOR = "#0f172a"  # slate-900


def rasterize(
    layout: DocumentLayout,
    fonts: FontSet,
    pixel_ratio: Optional[int] = None,
    background: str = BACKGROUND_COLOR,
) -> Image.Image:
    """Draw a layout onto an opaque RGB canvas.

    Args:
        layout: Layout produced by ``build_document_layout``.
        fonts: Font set the layout was measured with.
        pixel_ratio: Device pixels per CSS pixel (defaults to the layout's config).
        background: Canvas fill colour.

    Returns:
        The rendered RGB image.
    """
    ratio = pixel_ratio or layout.config.pixel_ratio
    size = (round(layout.width * ratio), round(layout.height * ratio))
    canvas = Image.new('RGB', size, background)
    draw = ImageDraw.Draw(canvas)

    for element in layout.elements:
        if isinstance(element, TextElement):
            font = fonts.get(element.size * ratio, element.bold)
            # Vertically centre the glyphs inside the line box
            offset = (element.line_height - element.size) / 2
            draw.text(
                (element.x * ratio, (element.y + offset) * ratio),
                element.text,
                font=font,
                fill=TEXT_COLOR,
            )
        elif isinstance(element, RuleElement):
            x0 = element.x * ratio
            y0 = element.y * ratio
            draw.rectangle(
                [x0, y0, x0 + element.width * ratio - 1, y0 + element.thickness * ratio - 1],
                fill=TEXT_COLOR,
            )
        elif isinstance(element, ImageElement):
            _paste_image(canvas, element, ratio)

    logger.debug(f"Rasterized layout to {size[0]}x{size[1]} at {ratio}x")
    return canvas


def _paste_image(canvas: Image.Image, element: ImageElement, ratio: int) -> None:
    target = (max(1, round(element.width * ratio)), max(1, round(element.height * ratio)))
    with open_signature_image(element.data_url) as source:
        resized = source.resize(target, Image.Resampling.LANCZOS)
    position = (round(element.x * ratio), round(element.y * ratio))
    canvas.paste(resized, position, resized)


def to_png_bytes(image: Image.Image) -> bytes:
    """Encode an image as PNG."""
    buffer = io.BytesIO()
    image.save(buffer, format='PNG')
    return buffer.getvalue()
