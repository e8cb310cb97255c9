"""Live SPK preview component."""

import streamlit as st

from spk_generator import SPKGenerator

from app.services.generation_service import render_preview


def render_preview_section(generator: SPKGenerator) -> None:
    """Render the inline document preview.

    Args:
        generator: Session controller holding the form state
    """
    st.subheader("👀 Preview SPK")
    st.caption("Preview akan muncul setelah mengisi form")

    with st.container(border=True):
        png_bytes, error_message = render_preview(generator)
        if error_message:
            st.error(f"❌ {error_message}")
        elif png_bytes is None:
            st.info("Isi form untuk melihat preview SPK")
        else:
            st.image(png_bytes, use_container_width=True)
