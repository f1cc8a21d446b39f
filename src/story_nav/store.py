"""Catalog store: selection, panel, shortcut and query-param state for the story browser.

// [LAW:one-source-of-truth] self._state is the single StoreState; every read derives from it.
// [LAW:single-enforcer] _commit() is the only writer and the only notifier.

Each operation computes a complete new StoreState and commits it in one
assignment, so a subscriber never sees a reconciled kind next to a stale story.
Subscribers run after the commit, synchronously, in registration order.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterable, Mapping

import story_nav.reconcile as reconcile
import story_nav.shortcuts as shortcuts
import story_nav.url_state
import story_nav.io.logging_setup
import story_nav.io.settings
from story_nav.config import StoreConfig
from story_nav.diagnostics import LoggingSink
from story_nav.hierarchy import Hierarchy
from story_nav.protocols import DiagnosticSink, Provider
from story_nav.state import StoreState, frozen_params

logger = logging.getLogger(__name__)

Subscriber = Callable[[StoreState, StoreState], None]


class CatalogStore:
    """State store backing the catalog browser.

    The provider owns stories and panels; the store owns everything in StoreState.
    """

    def __init__(
        self,
        provider: Provider,
        config: StoreConfig | None = None,
        sink: DiagnosticSink | None = None,
    ):
        config = config or StoreConfig()
        self._provider = provider
        self._sink = sink if sink is not None else LoggingSink()
        self._state = StoreState(
            shortcut_options=config.shortcut_options,
            ui_options=config.ui_options,
        )
        self._subscribers: list[Subscriber] = []

    # ─── State + subscription ─────────────────────────────────────────

    @property
    def state(self) -> StoreState:
        return self._state

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call `callback(new_state, old_state)` after each committed change.

        Returns an unsubscribe function.
        """
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                pass

        return _unsubscribe

    def _commit(self, new_state: StoreState) -> bool:
        """Swap in new_state and notify. Returns False when nothing changed."""
        old_state = self._state
        if new_state == old_state:
            return False
        self._state = new_state
        for callback in list(self._subscribers):
            try:
                callback(new_state, old_state)
            except Exception:
                logger.exception("store subscriber %r failed", callback)
        return True

    def _update(self, **changes) -> bool:
        return self._commit(dataclasses.replace(self._state, **changes))

    # ─── Derived reads ────────────────────────────────────────────────

    @property
    def stories(self) -> Hierarchy:
        return self._state.stories

    @property
    def selected_kind(self) -> str | None:
        return self._state.selected_kind

    @property
    def selected_story(self) -> str | None:
        return self._state.selected_story

    @property
    def selected_addon_panel(self) -> str | None:
        return self._state.selected_addon_panel

    @property
    def shortcut_options(self) -> shortcuts.ShortcutOptions:
        return self._state.shortcut_options

    @property
    def panels(self) -> Mapping[str, object]:
        return self._provider.get_panels()

    @property
    def url_state(self) -> dict[str, object]:
        return story_nav.url_state.url_state(self._state)

    def preview(self) -> object:
        """Render the preview for the current selection."""
        return self._provider.render_preview(self.selected_kind, self.selected_story)

    # ─── Selection ────────────────────────────────────────────────────

    def set_stories(self, stories: Hierarchy | Iterable[Mapping[str, object]]) -> None:
        """Replace the catalog and re-derive the selection.

        The story survives a refresh only when its kind is still the selected one.
        """
        hierarchy = Hierarchy.from_records(stories)
        state = self._state
        kind = reconcile.ensure_kind(hierarchy, state.selected_kind)
        current_story = state.selected_story if kind == state.selected_kind else None
        story = reconcile.ensure_story(hierarchy, kind, current_story)
        self._update(stories=hierarchy, selected_kind=kind, selected_story=story)

    def select_story(self, kind: str | None, story: str | None) -> None:
        hierarchy = self._state.stories
        selected_kind = reconcile.ensure_kind(hierarchy, kind)
        selected_story = reconcile.ensure_story(hierarchy, selected_kind, story)
        self._update(selected_kind=selected_kind, selected_story=selected_story)

    def select_in_current_kind(self, story: str | None) -> None:
        state = self._state
        selected_story = reconcile.ensure_story(state.stories, state.selected_kind, story)
        self._update(selected_story=selected_story)

    def jump_to_story(self, direction: int) -> None:
        """Move the selection `direction` steps through the flattened catalog.

        No-op off either end or when the selection is not in the catalog.
        """
        state = self._state
        target = reconcile.jump_target(
            state.stories, state.selected_kind, state.selected_story, direction
        )
        if target is None:
            logger.debug("jump %+d from %r is a no-op", direction, state.selection)
            return
        kind, story = target
        self._update(selected_kind=kind, selected_story=story)

    # ─── Shortcuts ────────────────────────────────────────────────────

    def handle_event(self, event: object) -> None:
        """Apply one shortcut event. Ignored entirely while shortcuts are disabled."""
        options = self._state.shortcut_options
        if not options.enable_shortcuts:
            return
        offset = shortcuts.traversal_offset(event)
        if offset:
            self.jump_to_story(offset)
            return
        if event is shortcuts.Feature.SHOW_SEARCH:
            self.toggle_search_box()
            return
        self._update(shortcut_options=shortcuts.dispatch(event, options))

    def handle_key(self, key: str | None) -> bool:
        """Dispatch a key name. Returns True when the key is a shortcut."""
        feature = shortcuts.feature_for_key(key)
        if feature is None:
            return False
        self.handle_event(feature)
        return True

    def set_shortcuts_options(self, options: Mapping[str, object]) -> None:
        self._update(shortcut_options=self._state.shortcut_options.merged(options))

    def toggle_search_box(self) -> None:
        """Reserved for the search box shortcut; search state is not modelled."""

    def toggle_shortcuts_help(self) -> None:
        self._update(show_shortcuts_help=not self._state.show_shortcuts_help)

    # ─── Options + panels ─────────────────────────────────────────────

    def set_options(self, options: Mapping[str, object]) -> None:
        """Merge UI options; `selectedAddonPanel` goes through panel reconciliation."""
        options = dict(options)
        requested_panel = options.pop("selectedAddonPanel", None)
        requested_panel = options.pop("selected_addon_panel", requested_panel)
        state = self._state
        panel = state.selected_addon_panel
        if requested_panel:
            panel = reconcile.ensure_panel(self.panels, requested_panel, panel, self._sink)
        self._update(
            selected_addon_panel=panel,
            ui_options=state.ui_options.merged(options),
        )

    def select_addon_panel(self, panel_name: str | None) -> None:
        self._update(selected_addon_panel=panel_name)

    def set_story_filter(self, story_filter: str | None) -> None:
        self._update(story_filter=story_filter)

    # ─── Query params + location ──────────────────────────────────────

    def set_query_params(self, params: Mapping[str, str | None]) -> None:
        merged = story_nav.url_state.merge_query_params(self._state.custom_query_params, params)
        self._update(custom_query_params=frozen_params(merged))

    def update_from_location(self, params: Mapping[str, object]) -> None:
        """Apply inbound location params as one commit.

        With no catalog loaded the selection is taken as-is so it can be
        reconciled once stories arrive; otherwise it is reconciled now.
        """
        location = story_nav.url_state.parse_location(params)
        state = self._state
        changes: dict[str, object] = {}

        if location.selected_kind:
            kind, story = location.selected_kind, location.selected_story
            if state.stories:
                kind = reconcile.ensure_kind(state.stories, kind)
                story = reconcile.ensure_story(state.stories, kind, story)
            changes["selected_kind"] = kind
            changes["selected_story"] = story

        changes["shortcut_options"] = state.shortcut_options.merged(
            {"full": location.full, "panel": location.panel, "nav": location.nav}
        )

        if location.addon_panel:
            changes["selected_addon_panel"] = location.addon_panel

        merged = story_nav.url_state.merge_query_params(
            state.custom_query_params, location.custom_query_params or {}
        )
        changes["custom_query_params"] = frozen_params(merged)

        self._update(**changes)


def create(provider: Provider, sink: DiagnosticSink | None = None) -> CatalogStore:
    """Create a store seeded from the settings file, with logging wired.

    Reads settings once: option sections become the StoreConfig, logLevel and
    logFile configure the story_nav logger.
    """
    settings = story_nav.io.settings.load_settings()
    story_nav.io.logging_setup.configure(settings)
    store = CatalogStore(provider, StoreConfig.from_dict(settings), sink)
    logger.debug("store created with %s", store.shortcut_options)
    return store
