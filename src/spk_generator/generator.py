"""SPK document generation controller.

``SPKGenerator`` owns all application state (form, signature, counter) and
runs the export pipeline:

    IDLE -> VALIDATING -> RENDERING -> RASTERIZING -> DOWNLOADING -> IDLE
                 \\             \\            \\              \\
                  +-------------+------------+--------------+-> FAILED

The counter is only incremented after the download sink accepted the file,
so a failure at any stage leaves counter, signature and form untouched.
"""

import dataclasses
import logging
from datetime import date
from typing import Callable, Optional, Union

from .config import Config
from .errors import (
    DownloadError,
    ExportInProgressError,
    RasterizeError,
    StorageError,
    ValidationError,
)
from .formatting import build_filename, format_counter
from .layout import (
    DEFAULT_APPROVER_TITLE,
    DEFAULT_TITLE,
    EXPORT,
    PREVIEW,
    DocumentLayout,
    FontSet,
    LayoutConfig,
    build_document_layout,
)
from .models import AdminSettings, ExportResult, ExportState, FormState
from .rasterizer import rasterize, to_png_bytes
from .signature import prepare_signature
from .storage import SettingsStore, load_admin_settings, save_counter, save_signature

logger = logging.getLogger(__name__)

# Receives (filename, png_bytes) and starts the download
DownloadSink = Callable[[str, bytes], None]

MISSING_FIELDS_MESSAGE = "Semua field harus diisi"
MISSING_SIGNATURE_MESSAGE = (
    "Silakan upload tanda tangan admin terlebih dahulu di tab Pengaturan Admin"
)


class SPKGenerator:
    """Single owner of form state and admin settings.

    The UI and the CLI hold one instance and call its operations; nothing
    else mutates the form, the signature or the counter.
    """

    def __init__(
        self,
        store: SettingsStore,
        fonts: Optional[FontSet] = None,
        title: str = DEFAULT_TITLE,
        approver_title: str = DEFAULT_APPROVER_TITLE,
        export_config: LayoutConfig = EXPORT,
        preview_config: LayoutConfig = PREVIEW,
        today: Callable[[], date] = date.today,
    ):
        """Initialize the generator and load persisted settings.

        Args:
            store: Durable store holding signature and counter.
            fonts: Font set for measuring and drawing text.
            title: Document title.
            approver_title: Caption under the signature line.
            export_config: Dimensions of the exported image.
            preview_config: Dimensions of the inline preview.
            today: Clock used for the document date and number.
        """
        self.store = store
        self.fonts = fonts or FontSet()
        self.title = title
        self.approver_title = approver_title
        self.export_config = export_config
        self.preview_config = preview_config
        self._today = today

        self.form = FormState()
        self.settings: AdminSettings = load_admin_settings(store)
        self.state = ExportState.IDLE

    @classmethod
    def from_config(cls, config: Config) -> "SPKGenerator":
        """Build a generator from loaded configuration."""
        export_config = dataclasses.replace(EXPORT, pixel_ratio=config.export_pixel_ratio)
        return cls(
            store=SettingsStore(config.settings_store_path),
            fonts=FontSet(config.font_regular, config.font_bold),
            title=config.document_title,
            approver_title=config.approver_title,
            export_config=export_config,
        )

    # === Form ===

    @property
    def busy(self) -> bool:
        """True while an export run is between validation and download."""
        return self.state not in (ExportState.IDLE, ExportState.FAILED)

    @property
    def next_number(self) -> str:
        return format_counter(self.settings.document_counter)

    def update_field(self, field: str, value: Union[str, date, None]) -> None:
        """Set one form field.

        Args:
            field: One of ``name``, ``job_detail``, ``salary_amount``, ``deadline``.
            value: New value. ``deadline`` accepts a date, an ISO date string
                or an empty value.

        Raises:
            ValueError: If the field is unknown or the deadline string is invalid.
        """
        if field not in FormState.field_names():
            raise ValueError(f"Unknown form field: {field}")

        if field == 'deadline':
            if isinstance(value, str):
                value = date.fromisoformat(value) if value.strip() else None
        else:
            value = value or ""

        setattr(self.form, field, value)

    def reset_form(self) -> None:
        self.form = FormState()

    def validate(self) -> None:
        """Check the form and signature before export.

        Raises:
            ValidationError: If a field is empty or no signature is stored.
        """
        missing = self.form.missing_fields()
        if missing:
            logger.info(f"Validation failed, empty fields: {', '.join(missing)}")
            raise ValidationError(MISSING_FIELDS_MESSAGE)
        if not self.settings.has_signature:
            logger.info("Validation failed, no signature stored")
            raise ValidationError(MISSING_SIGNATURE_MESSAGE)

    # === Admin settings ===

    def _persist(self, write: Callable[..., None], value) -> None:
        """Write one setting through to the store.

        Raises:
            StorageError: If the store file cannot be written.
        """
        try:
            write(self.store, value)
        except OSError as e:
            logger.error(f"Could not write settings to {self.store.path}: {e}")
            raise StorageError(f"Gagal menyimpan pengaturan: {e}") from e

    def upload_signature(self, filename: Optional[str], content_type: Optional[str], data: bytes) -> None:
        """Store a new admin signature, replacing the previous one.

        Raises:
            InvalidFileTypeError: If the file is not declared as an image.
            StorageError: If the signature cannot be persisted.
        """
        data_url = prepare_signature(filename, content_type, data)
        self.settings.signature_image = data_url
        self._persist(save_signature, data_url)
        logger.info("Admin signature updated")

    def reset_counter(self) -> None:
        """Set the document counter back to 1 and persist it.

        Raises:
            StorageError: If the counter cannot be persisted.
        """
        self.settings.document_counter = 1
        self._persist(save_counter, 1)
        logger.info("Document counter reset to 0001")

    # === Rendering ===

    def build_layout(self, config: LayoutConfig) -> DocumentLayout:
        return build_document_layout(
            self.form,
            self.settings,
            config,
            self.fonts,
            today=self._today(),
            title=self.title,
            approver_title=self.approver_title,
        )

    def render_preview(self) -> Optional[bytes]:
        """Render the inline preview as PNG.

        Returns:
            PNG bytes, or None while every field is still empty.

        Raises:
            RasterizeError: If the preview cannot be drawn.
        """
        if not self.form.has_any_input():
            return None
        try:
            layout = self.build_layout(self.preview_config)
            return to_png_bytes(rasterize(layout, self.fonts))
        except Exception as e:
            logger.error(f"Preview rendering failed: {e}")
            raise RasterizeError(f"Gagal menampilkan preview: {e}") from e

    # === Export ===

    def _fail(self, message: str) -> None:
        self.state = ExportState.FAILED
        logger.error(f"Export failed: {message}")

    def generate_document(self, deliver: DownloadSink) -> ExportResult:
        """Validate, render, rasterize and deliver the current document.

        Args:
            deliver: Download sink receiving ``(filename, png_bytes)``.

        Returns:
            ExportResult describing the delivered file.

        Raises:
            ExportInProgressError: If another export is running.
            ValidationError: If the form is incomplete or no signature is stored.
            RasterizeError: If the document cannot be drawn or encoded.
            DownloadError: If the sink rejects the file.
            StorageError: If the advanced counter cannot be persisted. The
                file was already delivered and the generator is back to IDLE.
        """
        if self.busy:
            raise ExportInProgressError("Pembuatan SPK sedang berjalan")

        self.state = ExportState.VALIDATING
        try:
            self.validate()
        except ValidationError as e:
            self._fail(str(e))
            raise

        number = self.settings.document_counter

        self.state = ExportState.RENDERING
        logger.info(f"Rendering SPK {format_counter(number)}")
        try:
            layout = self.build_layout(self.export_config)

            self.state = ExportState.RASTERIZING
            image = rasterize(layout, self.fonts, background="#ffffff")
            png_bytes = to_png_bytes(image)
        except Exception as e:
            self._fail(str(e))
            raise RasterizeError("Gagal membuat SPK. Silakan coba lagi.") from e

        self.state = ExportState.DOWNLOADING
        filename = build_filename(number, self.form.name)
        try:
            deliver(filename, png_bytes)
        except Exception as e:
            self._fail(str(e))
            raise DownloadError(f"Gagal mengunduh {filename}: {e}") from e

        self.settings.document_counter = number + 1
        self.reset_form()
        self.state = ExportState.IDLE
        self._persist(save_counter, self.settings.document_counter)
        logger.info(f"SPK {format_counter(number)} delivered as {filename}")

        return ExportResult(filename=filename, png_bytes=png_bytes, document_number=number)
