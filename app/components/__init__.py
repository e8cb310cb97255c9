"""UI components for the Streamlit app."""

from app.components.form_input import render_form_section
from app.components.preview import render_preview_section
from app.components.generate_button import render_generate_section
from app.components.download_section import render_download_section
from app.components.admin_settings import render_admin_settings
from app.components.advanced_settings import render_advanced_settings
from app.components.notifications import render_notifications

__all__ = [
    'render_form_section',
    'render_preview_section',
    'render_generate_section',
    'render_download_section',
    'render_admin_settings',
    'render_advanced_settings',
    'render_notifications',
]
