"""Published variable and configuration field definitions for the host."""

from __future__ import annotations

from typing import Any

from .session import (
    LINES_MAX,
    LINES_MIN,
    PORT_MAX,
    PORT_MIN,
    DEFAULT_LINES,
    DEFAULT_PORT,
    SILENCE_INTERVAL_MAX_S,
    SILENCE_INTERVAL_MIN_S,
    DEFAULT_CLEAR_AFTER_SILENCE,
    DEFAULT_SILENCE_INTERVAL_S,
)

CAPTIONS_VARIABLE_ID = "captions"

VARIABLE_DEFINITIONS: list[dict[str, str]] = [
    {"variableId": CAPTIONS_VARIABLE_ID, "name": "Captions"},
]

CONFIG_FIELDS: list[dict[str, Any]] = [
    {"type": "textinput", "id": "host", "label": "Host", "default": ""},
    {
        "type": "number",
        "id": "port",
        "label": "Target Port",
        "min": PORT_MIN,
        "max": PORT_MAX,
        "default": DEFAULT_PORT,
    },
    {
        "type": "number",
        "id": "lines",
        "label": "Number of Lines",
        "min": LINES_MIN,
        "max": LINES_MAX,
        "default": DEFAULT_LINES,
    },
    {
        "type": "checkbox",
        "id": "clearAfterInterval",
        "label": "Clear after silence",
        "default": DEFAULT_CLEAR_AFTER_SILENCE,
    },
    {
        "type": "number",
        "id": "silenceInterval",
        "label": "Silence duration (s)",
        "min": SILENCE_INTERVAL_MIN_S,
        "max": SILENCE_INTERVAL_MAX_S,
        "default": DEFAULT_SILENCE_INTERVAL_S,
    },
]

__all__ = ["CAPTIONS_VARIABLE_ID", "CONFIG_FIELDS", "VARIABLE_DEFINITIONS"]
