"""Store configuration: explicit replacement for global default options.

// [LAW:one-source-of-truth] Defaults for shortcut and UI options live in these dataclasses.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from story_nav.shortcuts import ShortcutOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UIOptions:
    """Presentation options forwarded to the host UI."""

    name: str = "STORYBOOK"
    url: str = "https://github.com/storybooks/storybook"
    sort_stories_by_kind: bool = False
    hierarchy_separator: str = "/"
    hierarchy_root_separator: str | None = None
    sidebar_animations: bool = True
    theme: object = None

    _ALIASES = {
        "sortStoriesByKind": "sort_stories_by_kind",
        "hierarchySeparator": "hierarchy_separator",
        "hierarchyRootSeparator": "hierarchy_root_separator",
        "sidebarAnimations": "sidebar_animations",
    }

    def merged(self, options: Mapping[str, object]) -> UIOptions:
        """Return a copy with recognized keys applied. Unknown keys are dropped."""
        known = {f.name for f in dataclasses.fields(self)}
        updates = {}
        for key, value in options.items():
            name = self._ALIASES.get(key, key)
            if name in known:
                updates[name] = value
            else:
                logger.debug("ignoring unknown ui option %r", key)
        return dataclasses.replace(self, **updates) if updates else self


@dataclass(frozen=True)
class StoreConfig:
    """Initial option values for a CatalogStore."""

    shortcut_options: ShortcutOptions = field(default_factory=ShortcutOptions)
    ui_options: UIOptions = field(default_factory=UIOptions)

    @classmethod
    def from_dict(cls, data: Mapping[str, object] | None) -> StoreConfig:
        """Build from {"shortcutOptions": {...}, "uiOptions": {...}}.

        snake_case section names are accepted too. Non-mapping sections are ignored.
        """
        data = data or {}
        shortcuts = data.get("shortcutOptions", data.get("shortcut_options")) or {}
        ui = data.get("uiOptions", data.get("ui_options")) or {}
        return cls(
            shortcut_options=ShortcutOptions().merged(
                shortcuts if isinstance(shortcuts, Mapping) else {}
            ),
            ui_options=UIOptions().merged(ui if isinstance(ui, Mapping) else {}),
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "shortcutOptions": dataclasses.asdict(self.shortcut_options),
            "uiOptions": dataclasses.asdict(self.ui_options),
        }
