"""Selection reconciliation, linear traversal and panel selection. Pure functions.

// [LAW:single-enforcer] Every fallback policy for kind/story/panel lives here.
// [LAW:one-way-deps] Depends on hierarchy + protocols only. No store imports.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from story_nav.hierarchy import Hierarchy
from story_nav.protocols import DiagnosticSink, panel_title

logger = logging.getLogger(__name__)

PANELS_GROUP_LABEL = "Available Panels ID:"


def ensure_kind(hierarchy: Hierarchy, selected_kind: str | None) -> str | None:
    """Return selected_kind if it exists, else the first kind.

    An empty hierarchy has nothing to validate against, so the candidate is kept.
    """
    if not hierarchy:
        return selected_kind
    if hierarchy.find(selected_kind) is not None:
        return selected_kind
    return hierarchy.first_kind()


def ensure_story(
    hierarchy: Hierarchy, selected_kind: str | None, selected_story: str | None
) -> str | None:
    """Return selected_story if it exists in selected_kind, else that kind's first story.

    None when the kind is absent or has no stories.
    """
    entry = hierarchy.find(selected_kind)
    if entry is None:
        return None
    if entry.has_story(selected_story):
        return selected_story
    return entry.stories[0] if entry.stories else None


def flatten(hierarchy: Hierarchy) -> list[tuple[str, str]]:
    """All (kind, story) pairs, kinds in order and stories in order within each."""
    return [(entry.kind, story) for entry in hierarchy for story in entry.stories]


def jump_target(
    hierarchy: Hierarchy,
    selected_kind: str | None,
    selected_story: str | None,
    direction: int,
) -> tuple[str, str] | None:
    """Return the pair `direction` steps from the selection, or None for a no-op.

    No wraparound: off either end is a no-op, as is a selection not in the hierarchy.
    """
    pairs = flatten(hierarchy)
    try:
        current = pairs.index((selected_kind, selected_story))
    except ValueError:
        return None
    target = current + direction
    if target < 0 or target >= len(pairs):
        return None
    return pairs[target]


def ensure_panel(
    panels: Mapping[str, object],
    selected_panel: str | None,
    current_panel: str | None,
    sink: DiagnosticSink | None = None,
) -> str | None:
    """Return selected_panel if registered, else keep current_panel.

    Panels have no natural order, so the fallback is the previous value. An
    unknown panel enumerates every registered id and title into `sink`.
    """
    if selected_panel in panels:
        return selected_panel

    logger.debug("unknown panel %r, keeping %r", selected_panel, current_panel)
    if sink is not None:
        sink.group(PANELS_GROUP_LABEL)
        for panel_id, panel in panels.items():
            sink.log(f"{panel_id} ({panel_title(panel)})")
        sink.group_end()
    return current_panel
