"""Hierarchy index: read-only snapshot of the story catalog.

// [LAW:one-source-of-truth] KindEntry order IS traversal order.
// [LAW:one-way-deps] No store imports. Pure data.

This module is STABLE. Safe for `from` imports everywhere.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KindEntry:
    """A named group of stories."""

    kind: str
    stories: tuple[str, ...] = ()

    def has_story(self, story: str | None) -> bool:
        return story is not None and story in self.stories


@dataclass(frozen=True)
class Hierarchy:
    """Ordered, immutable catalog snapshot. Replaced wholesale, never patched."""

    kinds: tuple[KindEntry, ...] = ()

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, object]] | Hierarchy) -> Hierarchy:
        """Build from the provider shape: [{"kind": str, "stories": [str, ...]}, ...].

        Malformed records (not a mapping, no kind, stories not a list) are skipped.
        """
        if records is None:
            return cls()
        if isinstance(records, Hierarchy):
            return records
        entries = []
        for record in records:
            if isinstance(record, KindEntry):
                entries.append(record)
                continue
            if not isinstance(record, Mapping) or record.get("kind") is None:
                logger.debug("skipping malformed catalog record %r", record)
                continue
            stories = record.get("stories") or ()
            if isinstance(stories, (str, bytes)) or not isinstance(stories, Iterable):
                logger.debug("skipping %r: stories is not a list", record["kind"])
                continue
            entries.append(KindEntry(str(record["kind"]), tuple(str(s) for s in stories)))
        return cls(tuple(entries))

    def __len__(self) -> int:
        return len(self.kinds)

    def __iter__(self):
        return iter(self.kinds)

    def __bool__(self) -> bool:
        return bool(self.kinds)

    def find(self, kind: str | None) -> KindEntry | None:
        """Return the first entry named `kind`, or None."""
        for entry in self.kinds:
            if entry.kind == kind:
                return entry
        return None

    def first_kind(self) -> str | None:
        return self.kinds[0].kind if self.kinds else None

    def to_records(self) -> list[dict[str, object]]:
        return [{"kind": e.kind, "stories": list(e.stories)} for e in self.kinds]


EMPTY = Hierarchy()
