"""SPK (Surat Perintah Kerja) document generator package."""

from .errors import (
    SPKError,
    ValidationError,
    InvalidFileTypeError,
    RasterizeError,
    DownloadError,
    ExportInProgressError,
    StorageError,
)
from .models import (
    FormState,
    AdminSettings,
    ExportState,
    ExportResult,
)
from .formatting import (
    format_currency,
    format_rupiah,
    format_long_date,
    format_document_number,
    build_filename,
)
from .storage import (
    SettingsStore,
    load_admin_settings,
    SIGNATURE_KEY,
    COUNTER_KEY,
)
from .layout import (
    LayoutConfig,
    DocumentLayout,
    FontSet,
    PREVIEW,
    EXPORT,
    build_document_layout,
)
from .rasterizer import rasterize, to_png_bytes
from .generator import SPKGenerator

__all__ = [
    # Errors
    "SPKError",
    "ValidationError",
    "InvalidFileTypeError",
    "RasterizeError",
    "DownloadError",
    "ExportInProgressError",
    "StorageError",
    # Models
    "FormState",
    "AdminSettings",
    "ExportState",
    "ExportResult",
    # Formatting
    "format_currency",
    "format_rupiah",
    "format_long_date",
    "format_document_number",
    "build_filename",
    # Storage
    "SettingsStore",
    "load_admin_settings",
    "SIGNATURE_KEY",
    "COUNTER_KEY",
    # Layout and rasterizing
    "LayoutConfig",
    "DocumentLayout",
    "FontSet",
    "PREVIEW",
    "EXPORT",
    "build_document_layout",
    "rasterize",
    "to_png_bytes",
    # Controller
    "SPKGenerator",
]
