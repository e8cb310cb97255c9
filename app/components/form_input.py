"""SPK form input component."""

import streamlit as st

from spk_generator import SPKGenerator, format_currency

from app.constants import FORM_WIDGET_KEYS, SessionKeys
from app.state import get_generator, get_state_value


def _sync_field(field: str) -> None:
    """Widget callback copying one widget value into the controller."""
    generator = get_generator()
    generator.update_field(field, get_state_value(FORM_WIDGET_KEYS[field]))


def render_form_section(generator: SPKGenerator) -> None:
    """Render the four SPK input fields.

    Args:
        generator: Session controller holding the form state
    """
    st.subheader("📝 Form Input SPK")
    st.caption("Isi data untuk membuat Surat Perintah Kerja baru")

    st.text_input(
        "Nama Pekerja",
        placeholder="Masukkan nama lengkap",
        key=SessionKeys.NAME,
        on_change=_sync_field,
        args=('name',),
    )

    st.text_area(
        "Detail Pekerjaan",
        placeholder="Jelaskan detail pekerjaan yang harus dikerjakan",
        height=120,
        key=SessionKeys.JOB_DETAIL,
        on_change=_sync_field,
        args=('job_detail',),
    )

    st.text_input(
        "Nominal Gaji (Rp)",
        placeholder="Masukkan nominal gaji",
        key=SessionKeys.SALARY_AMOUNT,
        on_change=_sync_field,
        args=('salary_amount',),
    )
    if generator.form.salary_amount:
        st.caption(f"Rp {format_currency(generator.form.salary_amount)}")

    st.date_input(
        "Deadline Pekerjaan",
        format="DD/MM/YYYY",
        key=SessionKeys.DEADLINE,
        on_change=_sync_field,
        args=('deadline',),
    )
