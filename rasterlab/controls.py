"""Keyboard and mouse identifiers shared by the interactive scenes."""

from __future__ import annotations

import enum
from typing import Union


class SpecialKey(enum.Enum):
    """Non-character keys a scene can react to."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    INSERT = "insert"
    HOME = "home"
    END = "end"


class MouseButton(enum.Enum):
    """Mouse buttons a scene can react to."""

    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"


def parse_special_key(name: Union[str, SpecialKey]) -> SpecialKey:
    """Look up a special key by name, ignoring case, spaces and hyphens."""
    if isinstance(name, SpecialKey):
        return name
    normalized = name.strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return SpecialKey(normalized)
    except ValueError:
        raise ValueError(f"unknown special key: {name!r}") from None