"""Textual key event → store shortcut bridge.

// [LAW:locality-or-seam] Coupling between Textual key events and the store is isolated here.
// [LAW:single-enforcer] handle_key_event is the sole path from a Key event to a shortcut.

Call from an App's on_key before its own keymap; the event is consumed only
when it maps to a shortcut.
"""

from __future__ import annotations

from textual import events

import story_nav.shortcuts


def feature_for_event(event: events.Key) -> "story_nav.shortcuts.Feature | None":
    """Resolve a Key event to a Feature, trying the key name then its aliases."""
    for name in (event.key, *event.aliases):
        feature = story_nav.shortcuts.feature_for_key(name)
        if feature is not None:
            return feature
    return None


def handle_key_event(store, event: events.Key) -> bool:
    """Dispatch a shortcut key into the store. Returns True when consumed."""
    feature = feature_for_event(event)
    if feature is None:
        return False
    event.prevent_default()
    event.stop()
    store.handle_event(feature)
    return True
