"""Generate button and generation logic component."""

import streamlit as st

from spk_generator import SPKGenerator

from app.services.generation_service import generate_spk
from app.state import get_generator, push_notification, reset_form_widgets


def _on_generate() -> None:
    """Button callback running the export pipeline.

    Runs before the script reruns, so the form widgets can still be cleared.
    """
    generator = get_generator()
    result = generate_spk(generator)

    if result.success:
        push_notification(
            "success",
            f"SPK nomor {result.document_number:04d} berhasil di-generate",
        )
        reset_form_widgets()
    else:
        push_notification("error", result.error_message or "Gagal membuat SPK. Silakan coba lagi.")
        if result.delivered:
            reset_form_widgets()


def render_generate_section(generator: SPKGenerator) -> None:
    """Render the generate button and the next document number.

    Args:
        generator: Session controller
    """
    busy = generator.busy
    st.button(
        "Membuat SPK..." if busy else "📥 Generate & Download SPK",
        type="primary",
        use_container_width=True,
        disabled=busy,
        on_click=_on_generate,
    )

    st.caption(f"Nomor SPK Selanjutnya: **{generator.next_number}**")
