"""Application bootstrap and initialization."""

from typing import Any

import streamlit as st

from spk_generator import SPKGenerator

from app.constants import (
    SessionKeys,
    DEFAULT_PAGE_TITLE,
    DEFAULT_PAGE_LAYOUT,
)
from app.config_loader import load_app_config
from app.state import set_state_value, has_state_key, reset_form_widgets


def init_session_state() -> None:
    """Initialize session state with base configuration and the controller.

    The SPKGenerator is created once per session; it loads the stored
    signature and counter when constructed.
    """
    if not has_state_key(SessionKeys.GENERATOR):
        base_config, config = load_app_config()
        set_state_value(SessionKeys.BASE_CONFIG, base_config)
        set_state_value(SessionKeys.GENERATOR, SPKGenerator.from_config(config))

    if not has_state_key(SessionKeys.PNG_BYTES):
        set_state_value(SessionKeys.PNG_BYTES, None)

    if not has_state_key(SessionKeys.OUTPUT_FILENAME):
        set_state_value(SessionKeys.OUTPUT_FILENAME, None)

    if not has_state_key(SessionKeys.NOTIFICATIONS):
        set_state_value(SessionKeys.NOTIFICATIONS, [])

    # Track stored signature uploads to prevent re-saving on rerun
    if not has_state_key(SessionKeys.PROCESSED_SIGNATURES):
        set_state_value(SessionKeys.PROCESSED_SIGNATURES, set())

    # Form widgets read their initial value from session state only
    if not has_state_key(SessionKeys.NAME):
        reset_form_widgets()


def configure_page(base_config: dict[str, Any]) -> None:
    """Configure Streamlit page settings.

    Args:
        base_config: Base configuration dictionary
    """
    ui_config = base_config.get('ui', {})
    page_config = ui_config.get('page', {})

    st.set_page_config(
        page_title=page_config.get('title', DEFAULT_PAGE_TITLE),
        layout=page_config.get('layout', DEFAULT_PAGE_LAYOUT)
    )


def render_header() -> None:
    """Render the application header."""
    st.title("📄 Generator SPK")
    st.markdown("Sistem Generate Surat Perintah Kerja Otomatis")
    st.divider()


def bootstrap_app() -> dict[str, Any]:
    """Bootstrap the application.

    Initializes session state and configures the page. Expects src/ on
    sys.path, which app.py sets up before importing this module.

    Returns:
        The base configuration dictionary
    """
    init_session_state()

    base_config = st.session_state[SessionKeys.BASE_CONFIG]
    configure_page(base_config)
    render_header()

    return base_config
