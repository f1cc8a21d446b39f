"""Shortcut dispatcher: pure mapping from discrete input events to flag changes.

// [LAW:one-source-of-truth] KEY_FEATURES is the only key→feature table.
// [LAW:dataflow-not-control-flow] dispatch() returns a new ShortcutOptions; it never mutates.

NEXT_STORY / PREV_STORY do not touch the flags. traversal_offset() tells the
store how far to jump; the store owns the hierarchy.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from typing import Literal

logger = logging.getLogger(__name__)

PanelLayout = Literal["right", "bottom", False]
PANEL_POSITIONS: tuple[str, ...] = ("bottom", "right")


class Feature(Enum):
    """Discrete shortcut events."""

    FULLSCREEN = auto()
    ADDON_PANEL = auto()
    STORIES_PANEL = auto()
    SHOW_SEARCH = auto()
    NEXT_STORY = auto()
    PREV_STORY = auto()
    ADDON_PANEL_IN_RIGHT = auto()


@dataclass(frozen=True)
class ShortcutOptions:
    """Shortcut-controlled layout flags. Each flag toggles independently."""

    full: bool = False
    nav: bool = True
    panel: PanelLayout = "right"
    enable_shortcuts: bool = True

    # camelCase keys as they appear in options objects and configs
    _ALIASES = {"enableShortcuts": "enable_shortcuts"}

    def merged(self, options: Mapping[str, object]) -> ShortcutOptions:
        """Return a copy with recognized keys from `options` applied. Unknown keys are dropped.

        Flags are coerced to bool and `panel` to a valid layout.
        """
        known = {f.name for f in dataclasses.fields(self)}
        updates = {}
        for key, value in options.items():
            name = self._ALIASES.get(key, key)
            if name not in known:
                logger.debug("ignoring unknown shortcut option %r", key)
                continue
            updates[name] = coerce_panel(value) if name == "panel" else bool(value)
        return dataclasses.replace(self, **updates) if updates else self


def coerce_panel(value: object) -> PanelLayout:
    """`value` if it is a panel position, else False (panel hidden)."""
    return value if value in PANEL_POSITIONS else False


_TRAVERSAL: dict[Feature, int] = {
    Feature.NEXT_STORY: +1,
    Feature.PREV_STORY: -1,
}


def traversal_offset(event: object) -> int:
    """Offset a story-jump event asks for; 0 for every other event."""
    return _TRAVERSAL.get(event, 0) if isinstance(event, Feature) else 0


def dispatch(event: object, options: ShortcutOptions) -> ShortcutOptions:
    """Apply one shortcut event to the flags. Total and side-effect-free.

    Disabled shortcuts make every event the identity transform.
    """
    if not options.enable_shortcuts:
        return options

    if event is Feature.FULLSCREEN:
        return dataclasses.replace(options, full=not options.full)
    if event is Feature.ADDON_PANEL:
        return dataclasses.replace(options, panel=False if options.panel else "right")
    if event is Feature.STORIES_PANEL:
        return dataclasses.replace(options, nav=not options.nav)
    if event is Feature.ADDON_PANEL_IN_RIGHT:
        return dataclasses.replace(
            options, panel="right" if options.panel == "bottom" else "bottom"
        )
    # SHOW_SEARCH is reserved; story jumps and unknown events leave the flags alone.
    return options


# Textual key names (ctrl+shift chords). Lookups are case-insensitive.
KEY_FEATURES: dict[str, Feature] = {
    "ctrl+shift+f": Feature.FULLSCREEN,
    "ctrl+shift+z": Feature.ADDON_PANEL,
    "ctrl+shift+x": Feature.STORIES_PANEL,
    "ctrl+shift+p": Feature.SHOW_SEARCH,
    "ctrl+shift+right": Feature.NEXT_STORY,
    "ctrl+shift+left": Feature.PREV_STORY,
    "ctrl+shift+g": Feature.ADDON_PANEL_IN_RIGHT,
}


def feature_for_key(key: str | None) -> Feature | None:
    """Map a key name to its Feature, or None when the key is not a shortcut."""
    if not key:
        return None
    return KEY_FEATURES.get(key.lower())
