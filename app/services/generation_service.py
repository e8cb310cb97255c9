"""SPK generation service."""

import logging
from dataclasses import dataclass

from spk_generator import SPKError, SPKGenerator, StorageError

from app.state import (
    set_png_bytes,
    set_output_filename,
)

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Result of an SPK generation attempt."""
    success: bool
    filename: str | None = None
    png_bytes: bytes | None = None
    document_number: int | None = None
    error_message: str | None = None
    exception: Exception | None = None
    # File staged and form cleared, but the counter was not saved
    delivered: bool = False


def stage_download(filename: str, png_bytes: bytes) -> None:
    """Download sink handing the PNG to the download button."""
    set_png_bytes(png_bytes)
    set_output_filename(filename)


def generate_spk(generator: SPKGenerator) -> GenerationResult:
    """Run the export pipeline and stage the PNG for download.

    Args:
        generator: Session controller holding the form and settings

    Returns:
        GenerationResult with success status and data
    """
    try:
        result = generator.generate_document(stage_download)
    except StorageError as e:
        return GenerationResult(
            success=False,
            error_message=str(e),
            exception=e,
            delivered=True,
        )
    except SPKError as e:
        return GenerationResult(
            success=False,
            error_message=str(e),
            exception=e,
        )

    return GenerationResult(
        success=True,
        filename=result.filename,
        png_bytes=result.png_bytes,
        document_number=result.document_number,
    )


def render_preview(generator: SPKGenerator) -> tuple[bytes | None, str | None]:
    """Render the inline preview.

    Returns:
        Tuple of (png_bytes, error_message); png_bytes is None while the form is empty
    """
    try:
        return generator.render_preview(), None
    except SPKError as e:
        return None, str(e)
