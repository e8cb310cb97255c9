"""Service modules for business logic."""

from app.services.generation_service import (
    GenerationResult,
    generate_spk,
    render_preview,
    stage_download,
)
from app.services.settings_service import (
    store_signature_upload,
    reset_counter,
)

__all__ = [
    # Generation service
    'GenerationResult',
    'generate_spk',
    'render_preview',
    'stage_download',
    # Settings service
    'store_signature_upload',
    'reset_counter',
]
