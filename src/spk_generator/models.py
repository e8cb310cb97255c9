"""Data structures shared by the SPK pipeline and the UI."""

from dataclasses import dataclass, fields
from datetime import date
from enum import Enum


@dataclass
class FormState:
    """User-entered data for one work order.

    Attributes:
        name: Worker name.
        job_detail: Multi-line description of the work.
        salary_amount: Contract value as typed (digits, may contain separators).
        deadline: Work deadline, or None when not chosen yet.
    """
    name: str = ""
    job_detail: str = ""
    salary_amount: str = ""
    deadline: date | None = None

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def missing_fields(self) -> list[str]:
        """Return the names of fields that are empty or whitespace-only."""
        missing = []
        for name in self.field_names():
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)
        return missing

    def is_complete(self) -> bool:
        return not self.missing_fields()

    def has_any_input(self) -> bool:
        """True once at least one field holds a value (drives the preview)."""
        return len(self.missing_fields()) < len(self.field_names())


@dataclass
class AdminSettings:
    """Settings persisted across sessions.

    Attributes:
        signature_image: Admin signature as a data URL, or None.
        document_counter: Number the next generated document will use.
    """
    signature_image: str | None = None
    document_counter: int = 1

    @property
    def has_signature(self) -> bool:
        return bool(self.signature_image)


class ExportState(str, Enum):
    """Stages of a single export run."""
    IDLE = "idle"
    VALIDATING = "validating"
    RENDERING = "rendering"
    RASTERIZING = "rasterizing"
    DOWNLOADING = "downloading"
    FAILED = "failed"


@dataclass
class ExportResult:
    """Outcome of a successful export.

    Attributes:
        filename: Download filename, e.g. ``SPK-0007-Budi.png``.
        png_bytes: Encoded PNG image.
        document_number: Counter value consumed by this document.
    """
    filename: str
    png_bytes: bytes
    document_number: int
