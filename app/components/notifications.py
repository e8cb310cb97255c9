"""Transient notifications queued by widget callbacks."""

import streamlit as st

from app.state import pop_notifications


def render_notifications() -> None:
    """Show queued notifications as toasts."""
    for notification in pop_notifications():
        icon = "✅" if notification.kind == "success" else "❌"
        st.toast(notification.message, icon=icon)
