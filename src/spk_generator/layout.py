"""Document layout builder for SPK documents.

One builder produces the positioned elements of the document for any
``LayoutConfig``. The inline preview and the exported image are two
invocations of the same builder, so both always share the same
field-to-layout mapping:

    layout = build_document_layout(form, settings, EXPORT, fonts)
    image = rasterize(layout, fonts)

All coordinates are in CSS pixels; the rasterizer multiplies them by
``config.pixel_ratio``. Every block is measured while it is placed, so a
returned layout is final and can be drawn immediately.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Tuple, Union

from PIL import ImageFont

from .formatting import (
    display_value,
    format_document_number,
    format_long_date,
    format_rupiah,
)
from .models import AdminSettings, FormState
from .signature import open_signature_image

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "SURAT PERINTAH KERJA"
DEFAULT_APPROVER_TITLE = "Direktur"
APPROVAL_LABEL = "Menyetujui,"

FIELD_LABELS = {
    'name': "Nama",
    'job_detail': "Pekerjaan",
    'salary_amount': "Nilai Kontrak",
    'deadline': "Deadline",
}

# Fallback TrueType fonts tried before Pillow's bundled default
_SYSTEM_FONTS = {
    False: ["DejaVuSans.ttf", "Arial.ttf", "LiberationSans-Regular.ttf"],
    True: ["DejaVuSans-Bold.ttf", "Arial Bold.ttf", "LiberationSans-Bold.ttf"],
}


@dataclass(frozen=True)
class LayoutConfig:
    """Dimensions for one rendering of the document (CSS pixels)."""
    width: int
    min_height: int
    padding: int
    title_size: int
    title_gap: int
    number_size: int
    header_padding: int
    header_rule: int
    header_margin: int
    body_size: int
    label_width: int
    colon_width: int
    column_gap: int
    row_gap: int
    body_margin: int
    signature_margin: int
    date_gap: int
    approval_gap: int
    signature_height: int
    signature_rule: int
    signature_rule_padding: int
    signature_min_width: int
    approver_size: int
    line_height: float = 1.5
    pixel_ratio: int = 1


PREVIEW = LayoutConfig(
    width=560, min_height=600, padding=32,
    title_size=24, title_gap=4, number_size=14, header_padding=16, header_rule=2, header_margin=32,
    body_size=16, label_width=120, colon_width=10, column_gap=8, row_gap=24, body_margin=48,
    signature_margin=64, date_gap=48, approval_gap=8, signature_height=80,
    signature_rule=1, signature_rule_padding=4, signature_min_width=200, approver_size=16,
    pixel_ratio=1,
)

EXPORT = LayoutConfig(
    width=794, min_height=1123, padding=64,
    title_size=36, title_gap=8, number_size=18, header_padding=24, header_rule=4, header_margin=48,
    body_size=18, label_width=180, colon_width=20, column_gap=16, row_gap=32, body_margin=80,
    signature_margin=96, date_gap=80, approval_gap=16, signature_height=112,
    signature_rule=2, signature_rule_padding=8, signature_min_width=250, approver_size=20,
    pixel_ratio=2,
)


@dataclass
class TextElement:
    x: float
    y: float
    text: str
    size: int
    bold: bool = False
    line_height: float = 0.0


@dataclass
class RuleElement:
    x: float
    y: float
    width: float
    thickness: int


@dataclass
class ImageElement:
    x: float
    y: float
    width: float
    height: float
    data_url: str


Element = Union[TextElement, RuleElement, ImageElement]


@dataclass
class DocumentLayout:
    """Positioned document content, ready to be rasterized."""
    config: LayoutConfig
    height: float
    elements: List[Element] = field(default_factory=list)

    @property
    def width(self) -> int:
        return self.config.width

    def texts(self) -> List[str]:
        """Return all text content in drawing order."""
        return [e.text for e in self.elements if isinstance(e, TextElement)]


class FontSet:
    """Loads and caches fonts by size and weight.

    Configured TrueType paths win; otherwise common system fonts are tried,
    then Pillow's bundled default font.
    """

    def __init__(self, regular_path: Optional[Path] = None, bold_path: Optional[Path] = None):
        self.regular_path = regular_path
        self.bold_path = bold_path
        self.get = lru_cache(maxsize=64)(self._load)

    def _load(self, size: int, bold: bool = False) -> ImageFont.ImageFont:
        configured = self.bold_path if bold else self.regular_path
        candidates = [str(configured)] if configured else []
        candidates.extend(_SYSTEM_FONTS[bold])

        for candidate in candidates:
            try:
                return ImageFont.truetype(candidate, size)
            except OSError:
                continue

        logger.debug(f"No TrueType font found for size={size} bold={bold}, using Pillow default")
        return ImageFont.load_default(size=size)

    def measure(self, text: str, size: int, bold: bool = False) -> float:
        return self.get(size, bold).getlength(text)


def wrap_text(text: str, fonts: FontSet, size: int, max_width: float, bold: bool = False) -> List[str]:
    """Wrap text into lines no wider than ``max_width``.

    Explicit line breaks are kept. Words wider than a whole line are split
    by character.

    Args:
        text: Text to wrap.
        fonts: Font set used for measuring.
        size: Font size in CSS pixels.
        max_width: Available width in CSS pixels.
        bold: Whether the bold face is used.

    Returns:
        List of lines (at least one).
    """
    lines: List[str] = []
    for paragraph in text.splitlines() or [""]:
        current = ""
        for word in paragraph.split(" "):
            candidate = f"{current} {word}" if current else word
            if fonts.measure(candidate, size, bold) <= max_width:
                current = candidate
                continue
            if current:
                lines.append(current)
            current = word
            # Break words that cannot fit on a line of their own
            while current and fonts.measure(current, size, bold) > max_width:
                cut = max(1, len(current) - 1)
                while cut > 1 and fonts.measure(current[:cut], size, bold) > max_width:
                    cut -= 1
                lines.append(current[:cut])
                current = current[cut:]
        lines.append(current)
    return lines


def field_rows(form: FormState) -> List[Tuple[str, str]]:
    """Map the form to (label, display value) rows, blank values as ``-``."""
    salary = format_rupiah(form.salary_amount) if form.salary_amount and form.salary_amount.strip() else None
    deadline = format_long_date(form.deadline) if form.deadline else None
    return [
        (FIELD_LABELS['name'], display_value(form.name)),
        (FIELD_LABELS['job_detail'], display_value(form.job_detail)),
        (FIELD_LABELS['salary_amount'], display_value(salary)),
        (FIELD_LABELS['deadline'], display_value(deadline)),
    ]


def build_document_layout(
    form: FormState,
    settings: AdminSettings,
    config: LayoutConfig,
    fonts: FontSet,
    today: Optional[date] = None,
    title: str = DEFAULT_TITLE,
    approver_title: str = DEFAULT_APPROVER_TITLE,
) -> DocumentLayout:
    """Lay out a complete SPK document.

    Args:
        form: Form data to show.
        settings: Admin settings providing the counter and signature.
        config: Preview or export dimensions.
        fonts: Font set used for measuring text.
        today: Document date (defaults to today).
        title: Document title.
        approver_title: Caption under the signature line.

    Returns:
        DocumentLayout with every element positioned.

    Raises:
        ValueError: If the stored signature is not a valid data URL.
        OSError: If the stored signature cannot be decoded as an image.
    """
    today = today or date.today()
    c = config
    elements: List[Element] = []
    content_left = c.padding
    content_width = c.width - 2 * c.padding

    def line_height(size: int) -> float:
        return size * c.line_height

    def centered_text(text: str, size: int, bold: bool, y: float, left: float, width: float) -> float:
        text_width = fonts.measure(text, size, bold)
        elements.append(TextElement(left + (width - text_width) / 2, y, text, size, bold, line_height(size)))
        return y + line_height(size)

    # Header
    y: float = c.padding
    y = centered_text(title, c.title_size, True, y, content_left, content_width)
    y += c.title_gap
    y = centered_text(f"No: {format_document_number(settings.document_counter, today)}",
                      c.number_size, False, y, content_left, content_width)
    y += c.header_padding
    elements.append(RuleElement(content_left, y, content_width, c.header_rule))
    y += c.header_rule + c.header_margin

    # Labelled rows
    colon_x = content_left + c.label_width + c.column_gap
    value_x = colon_x + c.colon_width + c.column_gap
    value_width = c.width - c.padding - value_x
    body_lh = line_height(c.body_size)

    rows = field_rows(form)
    for index, (label, value) in enumerate(rows):
        elements.append(TextElement(content_left, y, label, c.body_size, True, body_lh))
        elements.append(TextElement(colon_x, y, ":", c.body_size, False, body_lh))
        value_lines = wrap_text(value, fonts, c.body_size, value_width)
        for offset, line in enumerate(value_lines):
            elements.append(TextElement(value_x, y + offset * body_lh, line, c.body_size, False, body_lh))
        y += len(value_lines) * body_lh
        if index < len(rows) - 1:
            y += c.row_gap
    y += c.body_margin + c.signature_margin

    # Signature block, right aligned
    date_text = format_long_date(today)
    signature_size = None
    if settings.signature_image:
        with open_signature_image(settings.signature_image) as sig:
            sig_w, sig_h = sig.size
        scaled_width = c.signature_height * sig_w / sig_h if sig_h else 0
        signature_size = (scaled_width, c.signature_height)

    block_width = max(
        c.signature_min_width,
        fonts.measure(date_text, c.body_size),
        fonts.measure(APPROVAL_LABEL, c.body_size, True),
        fonts.measure(approver_title, c.approver_size, True),
        signature_size[0] if signature_size else 0,
    )
    block_left = c.width - c.padding - block_width

    y = centered_text(date_text, c.body_size, False, y, block_left, block_width)
    y += c.date_gap
    y = centered_text(APPROVAL_LABEL, c.body_size, True, y, block_left, block_width)
    y += c.approval_gap

    if signature_size:
        sig_width, sig_height = signature_size
        elements.append(ImageElement(
            block_left + (block_width - sig_width) / 2, y, sig_width, sig_height, settings.signature_image,
        ))
        y += sig_height + c.approval_gap

    elements.append(RuleElement(block_left, y, block_width, c.signature_rule))
    y += c.signature_rule + c.signature_rule_padding
    y = centered_text(approver_title, c.approver_size, True, y, block_left, block_width)

    height = max(c.min_height, y + c.padding)
    logger.debug(f"Built layout {c.width}x{height:.0f} with {len(elements)} elements")
    return DocumentLayout(config=c, height=height, elements=elements)
