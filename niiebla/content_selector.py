"""Lazily evaluated selection of a content entry of a title."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

from niiebla.title_contents import TitleMetadataContentEntry
from niiebla.title_metadata import ContentNotFoundError

__all__ = ["ContentSelector"]


class _Method(enum.Enum):
    PHYSICAL_POSITION = enum.auto()
    INDEX = enum.auto()
    ID = enum.auto()
    LAST = enum.auto()


@dataclass(frozen=True)
class ContentSelector:
    """Selects a content entry; resolved against a list of entries when queried."""

    method: _Method
    value: int = 0

    @classmethod
    def with_physical_position(cls, position: int) -> ContentSelector:
        """Select the content at the given physical position."""
        return cls(_Method.PHYSICAL_POSITION, position)

    @classmethod
    def with_id(cls, content_id: int) -> ContentSelector:
        """Select the first content with the given ID."""
        return cls(_Method.ID, content_id)

    @classmethod
    def with_index(cls, index: int) -> ContentSelector:
        """Select the first content with the given index."""
        return cls(_Method.INDEX, index)

    @classmethod
    def first(cls) -> ContentSelector:
        """Select the first stored content."""
        return cls.with_physical_position(0)

    @classmethod
    def last(cls) -> ContentSelector:
        """Select the last stored content, resolved at query time."""
        return cls(_Method.LAST)

    def _resolve_last(self, entries: Sequence[TitleMetadataContentEntry]) -> ContentSelector:
        if not entries:
            raise ContentNotFoundError()
        return ContentSelector.with_physical_position(len(entries) - 1)

    def content_entry(
        self, entries: Sequence[TitleMetadataContentEntry]
    ) -> TitleMetadataContentEntry:
        """Return the selected content entry."""
        if self.method is _Method.LAST:
            return self._resolve_last(entries).content_entry(entries)
        if self.method is _Method.PHYSICAL_POSITION:
            if not 0 <= self.value < len(entries):
                raise ContentNotFoundError()
            return entries[self.value]
        return entries[self.physical_position(entries)]

    def physical_position(self, entries: Sequence[TitleMetadataContentEntry]) -> int:
        """Return the physical position of the selected content entry."""
        if self.method is _Method.LAST:
            return self._resolve_last(entries).physical_position(entries)
        if self.method is _Method.PHYSICAL_POSITION:
            return self.value
        attribute = "id" if self.method is _Method.ID else "index"
        for position, entry in enumerate(entries):
            if getattr(entry, attribute) == self.value:
                return position
        raise ContentNotFoundError()

    def id(self, entries: Sequence[TitleMetadataContentEntry]) -> int:
        """Return the ID of the selected content entry."""
        if self.method is _Method.ID:
            return self.value
        return self.content_entry(entries).id

    def index(self, entries: Sequence[TitleMetadataContentEntry]) -> int:
        """Return the index of the selected content entry."""
        if self.method is _Method.INDEX:
            return self.value
        return self.content_entry(entries).index