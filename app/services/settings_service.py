"""Admin settings service - signature uploads and counter resets."""

import logging
from typing import Any

from spk_generator import SPKError, SPKGenerator

from app.state import get_processed_signatures, set_processed_signatures

logger = logging.getLogger(__name__)


def store_signature_upload(generator: SPKGenerator, uploaded_file: Any) -> tuple[bool, str | None]:
    """Store an uploaded signature file unless it was stored already.

    Uploads are tracked by Streamlit's ``file_id``, which is stable across
    reruns and new for every upload, so picking the same file again still
    replaces the stored signature.

    Args:
        generator: Session controller
        uploaded_file: Streamlit UploadedFile (or None)

    Returns:
        Tuple of (stored, error_message)
    """
    if uploaded_file is None:
        return False, None

    processed = get_processed_signatures()
    if uploaded_file.file_id in processed:
        return False, None

    processed.add(uploaded_file.file_id)
    set_processed_signatures(processed)

    try:
        generator.upload_signature(uploaded_file.name, uploaded_file.type, uploaded_file.getvalue())
    except SPKError as e:
        logger.warning(f"Signature upload {uploaded_file.name!r} not stored: {e}")
        return False, str(e)

    return True, None


def reset_counter(generator: SPKGenerator) -> tuple[str, str]:
    """Reset the document counter.

    Returns:
        Tuple of (notification_kind, message)
    """
    try:
        generator.reset_counter()
    except SPKError as e:
        return "error", str(e)
    return "success", "Nomor SPK berhasil direset ke 0001"
