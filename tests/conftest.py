"""Pytest configuration and shared fixtures for story-nav tests."""

from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest

import story_nav.io.logging_setup as logging_setup
import story_nav.io.settings

from story_nav.hierarchy import Hierarchy
from story_nav.store import CatalogStore


@dataclass(frozen=True)
class Panel:
    title: str


class FakeProvider:
    """Provider with a fixed panel registry; records preview renders."""

    def __init__(self, panels=None):
        self.panels = dict(panels or {})
        self.rendered: list[tuple] = []

    def get_panels(self):
        return self.panels

    def render_preview(self, selected_kind, selected_story):
        self.rendered.append((selected_kind, selected_story))
        return f"<preview {selected_kind}/{selected_story}>"


# ---------------------------------------------------------------------------
# Catalog fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def stories():
    """Two kinds: A has a1, a2; B has b1."""
    return [
        {"kind": "A", "stories": ["a1", "a2"]},
        {"kind": "B", "stories": ["b1"]},
    ]


@pytest.fixture
def hierarchy(stories):
    return Hierarchy.from_records(stories)


@pytest.fixture
def provider():
    return FakeProvider({
        "actions": Panel("Action Logger"),
        "notes": Panel("Notes"),
    })


@pytest.fixture
def sink():
    return MagicMock()


@pytest.fixture
def store(provider, sink):
    return CatalogStore(provider, sink=sink)


@pytest.fixture
def loaded_store(store, stories):
    """Store with the two-kind catalog loaded (selection A/a1)."""
    store.set_stories(stories)
    return store


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo any story_nav logger wiring so caplog sees propagated records."""
    logging_setup.reset()
    yield
    logging_setup.reset()


@pytest.fixture
def tmp_settings(tmp_path, monkeypatch):
    """Redirect settings file to a temp directory."""
    settings_file = tmp_path / "story-nav" / "settings.json"
    monkeypatch.setattr(story_nav.io.settings, "get_config_path", lambda: settings_file)
    monkeypatch.delenv("STORY_NAV_LOG_LEVEL", raising=False)
    monkeypatch.delenv("STORY_NAV_LOG_FILE", raising=False)
    return settings_file
