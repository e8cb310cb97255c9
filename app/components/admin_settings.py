"""Admin settings component: signature upload and counter reset."""

import streamlit as st

from spk_generator import SPKGenerator
from spk_generator.signature import open_signature_image

from app.constants import SIGNATURE_FILE_TYPES, SessionKeys
from app.services.settings_service import reset_counter, store_signature_upload
from app.state import get_generator, push_notification


def _on_reset_counter() -> None:
    kind, message = reset_counter(get_generator())
    push_notification(kind, message)


def _render_signature_section(generator: SPKGenerator) -> None:
    st.markdown("##### Tanda Tangan Admin")
    st.caption("Upload tanda tangan sekali saja. Akan digunakan untuk semua SPK.")

    uploaded = st.file_uploader(
        "Ganti Tanda Tangan" if generator.settings.has_signature else "Upload Tanda Tangan",
        type=SIGNATURE_FILE_TYPES,
        key=SessionKeys.SIGNATURE_UPLOADER,
    )

    stored, error_message = store_signature_upload(generator, uploaded)
    if error_message:
        st.error(f"❌ {error_message}")
    elif stored:
        st.success("✅ Tanda tangan berhasil disimpan")

    if generator.settings.has_signature:
        with st.container(border=True):
            st.markdown("**Preview Tanda Tangan:**")
            try:
                signature = open_signature_image(generator.settings.signature_image)
            except Exception:
                st.error("❌ Tanda tangan tersimpan rusak. Silakan upload ulang.")
            else:
                st.image(signature, width=240)


def _render_counter_section(generator: SPKGenerator) -> None:
    st.markdown("##### Nomor SPK")
    st.caption(f"Nomor SPK saat ini: **{generator.next_number}**")
    st.button(
        "🔄 Reset Nomor SPK ke 0001",
        key="reset_counter",
        on_click=_on_reset_counter,
    )


def render_admin_settings(generator: SPKGenerator) -> None:
    """Render the admin settings tab.

    Args:
        generator: Session controller holding the admin settings
    """
    st.subheader("⚙️ Pengaturan Admin")
    st.caption("Upload tanda tangan dan kelola nomor SPK")

    _render_signature_section(generator)
    st.divider()
    _render_counter_section(generator)
