"""Protocol definitions for the collaborators the store consumes.

The catalog provider and the diagnostic sink are structural: anything with
matching methods satisfies them, no inheritance required.

This module is STABLE and has no dependencies on other project modules.
"""

from collections.abc import Mapping
from typing import Protocol


class Provider(Protocol):
    """Supplies panels and renders previews. Owns the catalog data."""

    def get_panels(self) -> Mapping[str, object]:
        """Return the panel registry: panel id -> panel metadata (with a title)."""
        ...

    def render_preview(self, selected_kind: str | None, selected_story: str | None) -> object:
        """Render the preview for the given selection."""
        ...


class DiagnosticSink(Protocol):
    """Grouped diagnostic output, modelled on console.group/log/groupEnd."""

    def group(self, label: str) -> None: ...

    def log(self, message: str) -> None: ...

    def group_end(self) -> None: ...


def panel_title(panel: object) -> str:
    """Read a panel's title from an attribute or a mapping key."""
    if isinstance(panel, Mapping):
        return str(panel.get("title", ""))
    return str(getattr(panel, "title", ""))
