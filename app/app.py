"""Streamlit UI for the SPK Generator."""

import sys
from pathlib import Path

# Add project root and src directory to path for imports
app_dir = Path(__file__).parent
project_root = app_dir.parent
src_dir = project_root / "src"
for path in (project_root, src_dir):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

import streamlit as st

from app.bootstrap import bootstrap_app
from app.components import (
    render_form_section,
    render_preview_section,
    render_generate_section,
    render_download_section,
    render_admin_settings,
    render_advanced_settings,
    render_notifications,
)
from app.state import get_generator


def main():
    """Main Streamlit application."""
    base_config = bootstrap_app()
    generator = get_generator()

    render_notifications()

    tab_generate, tab_settings = st.tabs(["📄 Generate SPK", "⚙️ Pengaturan Admin"])

    with tab_generate:
        col_form, col_preview = st.columns(2)

        with col_form:
            render_form_section(generator)
            render_generate_section(generator)
            render_download_section()

        with col_preview:
            render_preview_section(generator)

    with tab_settings:
        render_admin_settings(generator)
        render_advanced_settings(base_config)


if __name__ == "__main__":
    main()
