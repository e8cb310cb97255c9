"""Exceptions raised by the SPK generation pipeline."""


class SPKError(Exception):
    """Base class for all SPK generator errors."""


class ValidationError(SPKError):
    """Raised when the form is incomplete or no signature is stored."""


class InvalidFileTypeError(SPKError):
    """Raised when an uploaded signature file is not an image."""


class RasterizeError(SPKError):
    """Raised when the document layout cannot be drawn to a bitmap."""


class DownloadError(SPKError):
    """Raised when the download sink refuses the generated file."""


class ExportInProgressError(SPKError):
    """Raised when an export is requested while another one is running."""


class StorageError(SPKError):
    """Raised when admin settings cannot be written to the settings store."""
