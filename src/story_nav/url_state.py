"""View-state projection and location parsing.

url_state() is what the router serializes; parse_location() is its inverse for
inbound query params. encode_query() renders the string form the router writes.

// [LAW:one-source-of-truth] RESERVED_KEYS lists every param with a meaning of its own.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass

from story_nav.shortcuts import PANEL_POSITIONS, PanelLayout, coerce_panel
from story_nav.state import StoreState

logger = logging.getLogger(__name__)

RESERVED_KEYS = frozenset(
    {"selectedKind", "selectedStory", "addonPanel", "full", "panel", "nav"}
)

# Applied when the key is absent from the location.
LOCATION_DEFAULTS: dict[str, object] = {"full": 0, "panel": "bottom", "nav": True}


def url_state(state: StoreState) -> dict[str, object]:
    """Selection + layout flags, overlaid by custom query params (custom wins)."""
    return {
        "selectedKind": state.selected_kind,
        "selectedStory": state.selected_story,
        "full": state.shortcut_options.full,
        "panel": state.shortcut_options.panel,
        "nav": state.shortcut_options.nav,
        **state.custom_query_params,
    }


def merge_query_params(
    existing: Mapping[str, str], params: Mapping[str, str | None]
) -> dict[str, str]:
    """Merge params into existing. A None value deletes the key; None is never stored."""
    merged = dict(existing)
    for key, value in params.items():
        if value is None:
            merged.pop(key, None)
        else:
            merged[key] = value
    return merged


# Numeric string grammar accepted by a browser's Number(): no underscores,
# and "Infinity" is the only spelling of infinity.
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?Infinity")
_RADIX_RE = re.compile(r"0[xX][0-9a-fA-F]+|0[bB][01]+|0[oO][0-7]+")


def coerce_flag(value: object) -> bool:
    """Truthiness of a numeric-string flag: "1" -> True, "0"/"" -> False.

    Non-numeric strings and None are False.
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return not math.isnan(value) and value != 0
    text = str(value).strip()
    if not text:
        return False
    if _RADIX_RE.fullmatch(text):
        return int(text, 0) != 0
    if _DECIMAL_RE.fullmatch(text):
        return "Infinity" in text or float(text) != 0
    return False


@dataclass(frozen=True)
class LocationUpdate:
    """Parsed inbound location params."""

    full: bool
    panel: PanelLayout
    nav: bool
    selected_kind: str | None = None
    selected_story: str | None = None
    addon_panel: str | None = None
    custom_query_params: Mapping[str, str | None] | None = None


def parse_location(params: Mapping[str, object]) -> LocationUpdate:
    """Split a flat location mapping into recognized options and custom params."""
    values = {**LOCATION_DEFAULTS, **params}
    custom = {k: v for k, v in params.items() if k not in RESERVED_KEYS}
    if custom:
        logger.debug("custom query params from location: %s", sorted(custom))
    return LocationUpdate(
        full=coerce_flag(values["full"]),
        panel=coerce_panel(values["panel"]),
        nav=coerce_flag(values["nav"]),
        selected_kind=params.get("selectedKind") or None,
        selected_story=params.get("selectedStory"),
        addon_panel=params.get("addonPanel") or None,
        custom_query_params=custom,
    )


def _flag_text(value: object) -> str:
    return "1" if value else "0"


def encode_query(state: Mapping[str, object]) -> dict[str, str]:
    """Render a url_state() mapping as router strings; None values are omitted.

    full/nav become "0"|"1" and panel becomes "right"|"bottom"|"".
    """
    encoded: dict[str, str] = {}
    for key, value in state.items():
        if value is None:
            continue
        if key in ("full", "nav"):
            encoded[key] = _flag_text(value)
        elif key == "panel":
            encoded[key] = value if value in PANEL_POSITIONS else ""
        else:
            encoded[key] = str(value)
    return encoded
