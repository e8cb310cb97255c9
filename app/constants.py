"""Constants and configuration paths for the Streamlit app."""

from pathlib import Path

# === Directory Paths ===
APP_DIR = Path(__file__).parent
PROJECT_ROOT = APP_DIR.parent
CONFIG_DIR = PROJECT_ROOT / "configs"

# File types for the signature uploader (without dots)
SIGNATURE_FILE_TYPES: list[str] = ['png', 'jpg', 'jpeg', 'gif', 'webp', 'bmp']

PNG_MIME_TYPE = 'image/png'


# === Session State Keys ===
class SessionKeys:
    """Session state key constants to avoid magic strings."""
    BASE_CONFIG = 'base_config'
    GENERATOR = 'spk_generator'
    PNG_BYTES = 'png_bytes'
    OUTPUT_FILENAME = 'output_filename'
    NOTIFICATIONS = 'notifications'
    PROCESSED_SIGNATURES = 'processed_signatures'
    LOG_LEVEL = 'log_level'
    # Form widgets
    NAME = 'form_name'
    JOB_DETAIL = 'form_job_detail'
    SALARY_AMOUNT = 'form_salary_amount'
    DEADLINE = 'form_deadline'
    SIGNATURE_UPLOADER = 'signature_uploader'


# Form field name -> widget key
FORM_WIDGET_KEYS: dict[str, str] = {
    'name': SessionKeys.NAME,
    'job_detail': SessionKeys.JOB_DETAIL,
    'salary_amount': SessionKeys.SALARY_AMOUNT,
    'deadline': SessionKeys.DEADLINE,
}


# === UI Configuration Defaults ===
DEFAULT_PAGE_TITLE = 'Generator SPK'
DEFAULT_PAGE_LAYOUT = 'wide'
DEFAULT_LOG_LEVEL = 'INFO'
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
