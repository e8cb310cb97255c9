"""Download section component."""

import streamlit as st

from app.constants import PNG_MIME_TYPE
from app.state import get_png_bytes, get_output_filename


def render_download_section() -> None:
    """Render the last generated SPK with its download button.

    The SPK number was already consumed when the file was staged here, so
    downloading it again does not change the counter.
    """
    png_bytes = get_png_bytes()
    if png_bytes is None:
        return

    output_filename = get_output_filename()

    st.divider()
    st.subheader("📥 SPK Terakhir")
    st.image(png_bytes, caption=output_filename, width=220)
    st.download_button(
        label=f"📥 Download {output_filename}",
        data=png_bytes,
        file_name=output_filename,
        mime=PNG_MIME_TYPE,
        use_container_width=True,
        key="download_button",
    )
