"""Advanced settings component."""

import logging
from typing import Any

import streamlit as st

from app.constants import LOG_LEVELS, DEFAULT_LOG_LEVEL, SessionKeys
from app.state import get_log_level, get_settings_config


def _apply_log_level() -> None:
    """Widget callback applying the selected level to the root logger."""
    logging.getLogger().setLevel(getattr(logging, get_log_level(), logging.INFO))


def render_advanced_settings(base_config: dict[str, Any]) -> None:
    """Render the advanced settings expander.
    
    Args:
        base_config: Base configuration dictionary
    """
    st.divider()
    
    with st.expander("🔧 Advanced Settings", expanded=False):
        settings_config = get_settings_config()
        
        st.markdown("##### Logging")
        current_level = settings_config.get('logging', {}).get('level', DEFAULT_LOG_LEVEL)
        default_index = LOG_LEVELS.index(current_level) if current_level in LOG_LEVELS else 1
        
        st.selectbox(
            "Log level",
            options=LOG_LEVELS,
            index=default_index,
            key=SessionKeys.LOG_LEVEL,
            on_change=_apply_log_level,
            help="Verbosity of logging output"
        )
        
        paths_config = base_config.get('paths', {})
        st.text_input(
            "Settings store",
            value=paths_config.get('settings_store', 'data/settings.json'),
            disabled=True,
            help="JSON file holding the signature and SPK counter"
        )
