"""Session state management helpers."""

from dataclasses import dataclass
from typing import Any

import streamlit as st

from app.constants import FORM_WIDGET_KEYS, SessionKeys


@dataclass
class Notification:
    """A message shown once on the next rerun."""
    kind: str  # "success" or "error"
    message: str


# === Session State Wrapper Functions ===

def get_state_value(key: str, default: Any = None) -> Any:
    """Get a value from session state with default.

    Args:
        key: Session state key
        default: Default value if key not found

    Returns:
        Value from session state or default
    """
    return st.session_state.get(key, default)


def set_state_value(key: str, value: Any) -> None:
    """Set a value in session state.

    Args:
        key: Session state key
        value: Value to set
    """
    st.session_state[key] = value


def has_state_key(key: str) -> bool:
    """Check if a key exists in session state.

    Args:
        key: Session state key

    Returns:
        True if key exists
    """
    return key in st.session_state


def get_base_config() -> dict[str, Any]:
    """Get the base configuration from session state."""
    return get_state_value(SessionKeys.BASE_CONFIG, {})


def get_settings_config() -> dict[str, Any]:
    """Get the settings configuration section."""
    return get_base_config().get('settings', {})


def get_generator():
    """Get the session's SPKGenerator controller."""
    return get_state_value(SessionKeys.GENERATOR)


def get_png_bytes() -> bytes | None:
    """Get the generated PNG bytes from session state."""
    return get_state_value(SessionKeys.PNG_BYTES)


def set_png_bytes(data: bytes | None) -> None:
    """Set the generated PNG bytes in session state."""
    set_state_value(SessionKeys.PNG_BYTES, data)


def get_output_filename() -> str | None:
    """Get the output filename from session state."""
    return get_state_value(SessionKeys.OUTPUT_FILENAME)


def set_output_filename(filename: str | None) -> None:
    """Set the output filename in session state."""
    set_state_value(SessionKeys.OUTPUT_FILENAME, filename)


def get_processed_signatures() -> set[str]:
    """Get the set of signature uploads already stored."""
    return get_state_value(SessionKeys.PROCESSED_SIGNATURES, set())


def set_processed_signatures(uploads: set[str]) -> None:
    set_state_value(SessionKeys.PROCESSED_SIGNATURES, uploads)


def push_notification(kind: str, message: str) -> None:
    """Queue a notification for the next render."""
    queue = list(get_state_value(SessionKeys.NOTIFICATIONS, []))
    queue.append(Notification(kind, message))
    set_state_value(SessionKeys.NOTIFICATIONS, queue)


def pop_notifications() -> list[Notification]:
    """Return and clear queued notifications."""
    queue = get_state_value(SessionKeys.NOTIFICATIONS, [])
    set_state_value(SessionKeys.NOTIFICATIONS, [])
    return queue


def reset_form_widgets() -> None:
    """Clear the form widgets so they match an empty FormState.

    Must run before the widgets are created in the current run (at startup
    or inside a widget callback).
    """
    for field, key in FORM_WIDGET_KEYS.items():
        set_state_value(key, None if field == 'deadline' else "")


def get_log_level() -> str:
    """Get the current log level from session state."""
    return get_state_value(SessionKeys.LOG_LEVEL, 'INFO')
