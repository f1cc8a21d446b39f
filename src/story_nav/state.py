"""Store state value. Frozen; every transition builds a new one.

// [LAW:one-source-of-truth] StoreState is the only record of selection, flags and params.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from story_nav.config import UIOptions
from story_nav.hierarchy import EMPTY, Hierarchy
from story_nav.shortcuts import ShortcutOptions


def frozen_params(params: Mapping[str, str] | None = None) -> Mapping[str, str]:
    """Read-only copy of a params mapping."""
    return MappingProxyType(dict(params or {}))


@dataclass(frozen=True)
class StoreState:
    """Everything the catalog store owns, as one immutable snapshot."""

    stories: Hierarchy = EMPTY
    selected_kind: str | None = None
    selected_story: str | None = None
    selected_addon_panel: str | None = None
    shortcut_options: ShortcutOptions = field(default_factory=ShortcutOptions)
    ui_options: UIOptions = field(default_factory=UIOptions)
    custom_query_params: Mapping[str, str] = field(default_factory=frozen_params)
    story_filter: str | None = None
    show_shortcuts_help: bool = False

    @property
    def selection(self) -> tuple[str | None, str | None]:
        return self.selected_kind, self.selected_story
