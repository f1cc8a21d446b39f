"""Tests for the pure shortcut dispatcher and key mapping."""

import itertools

import pytest

from story_nav.shortcuts import (
    KEY_FEATURES,
    Feature,
    ShortcutOptions,
    coerce_panel,
    dispatch,
    feature_for_key,
    traversal_offset,
)


ALL_PANELS = ["right", "bottom", False]


class TestDispatch:
    def test_fullscreen_toggles(self):
        opts = dispatch(Feature.FULLSCREEN, ShortcutOptions(full=False))
        assert opts.full is True
        assert dispatch(Feature.FULLSCREEN, opts).full is False

    def test_stories_panel_toggles_nav(self):
        assert dispatch(Feature.STORIES_PANEL, ShortcutOptions(nav=True)).nav is False
        assert dispatch(Feature.STORIES_PANEL, ShortcutOptions(nav=False)).nav is True

    @pytest.mark.parametrize("panel,expected", [("right", False), ("bottom", False), (False, "right")])
    def test_addon_panel_hides_or_restores_right(self, panel, expected):
        assert dispatch(Feature.ADDON_PANEL, ShortcutOptions(panel=panel)).panel == expected

    @pytest.mark.parametrize("panel,expected", [("bottom", "right"), ("right", "bottom"), (False, "bottom")])
    def test_addon_panel_in_right_swaps_position(self, panel, expected):
        assert dispatch(Feature.ADDON_PANEL_IN_RIGHT, ShortcutOptions(panel=panel)).panel == expected

    @pytest.mark.parametrize("event", [Feature.SHOW_SEARCH, Feature.NEXT_STORY, Feature.PREV_STORY, "bogus", None, 42])
    def test_flag_neutral_events(self, event):
        opts = ShortcutOptions(full=True, nav=False, panel="bottom")
        assert dispatch(event, opts) == opts

    def test_does_not_mutate_input(self):
        opts = ShortcutOptions()
        dispatch(Feature.FULLSCREEN, opts)
        assert opts.full is False

    @pytest.mark.parametrize(
        "event,full,nav,panel",
        itertools.product(list(Feature), [True, False], [True, False], ALL_PANELS),
    )
    def test_disabled_shortcuts_ignore_everything(self, event, full, nav, panel):
        opts = ShortcutOptions(full=full, nav=nav, panel=panel, enable_shortcuts=False)
        assert dispatch(event, opts) == opts


class TestTraversalOffset:
    def test_story_jumps(self):
        assert traversal_offset(Feature.NEXT_STORY) == 1
        assert traversal_offset(Feature.PREV_STORY) == -1

    def test_other_events(self):
        assert traversal_offset(Feature.FULLSCREEN) == 0
        assert traversal_offset({"not": "hashable"}) == 0


class TestMerged:
    def test_accepts_camel_case_enable_shortcuts(self):
        assert ShortcutOptions().merged({"enableShortcuts": False}).enable_shortcuts is False

    def test_drops_unknown_keys(self):
        opts = ShortcutOptions()
        assert opts.merged({"showSearchBox": True}) is opts

    def test_partial_update(self):
        merged = ShortcutOptions().merged({"full": True, "panel": "bottom"})
        assert merged == ShortcutOptions(full=True, nav=True, panel="bottom")

    def test_invalid_panel_hides_panel(self):
        assert ShortcutOptions().merged({"panel": "left"}).panel is False
        assert ShortcutOptions().merged({"panel": None}).panel is False

    def test_flags_are_coerced_to_bool(self):
        merged = ShortcutOptions().merged({"full": "yes", "nav": 0, "enableShortcuts": []})
        assert merged == ShortcutOptions(full=True, nav=False, enable_shortcuts=False)


class TestCoercePanel:
    @pytest.mark.parametrize("value,expected", [
        ("right", "right"), ("bottom", "bottom"), ("top", False), ("", False),
        (None, False), (True, False), (False, False),
    ])
    def test_values(self, value, expected):
        assert coerce_panel(value) is expected


class TestKeyMapping:
    def test_every_feature_has_a_key(self):
        assert set(KEY_FEATURES.values()) == set(Feature)

    def test_lookup_is_case_insensitive(self):
        assert feature_for_key("ctrl+shift+F") is Feature.FULLSCREEN
        assert feature_for_key("ctrl+shift+right") is Feature.NEXT_STORY

    def test_unknown_keys(self):
        assert feature_for_key("j") is None
        assert feature_for_key("") is None
        assert feature_for_key(None) is None
