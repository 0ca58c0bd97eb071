"""Content entries and the version 1 extension of the title metadata (TMD) format."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field
from typing import BinaryIO

from niiebla.binio import read_exact
from niiebla.title_metadata import UnknownContentEntryKindError

__all__ = [
    "ContentEntryKind",
    "TitleMetadataContentEntry",
    "TitleMetadataV1ContentEntriesGroup",
    "TitleMetadataV1",
    "title_metadata_size",
]

_SHA1_SIZE = 20
_SHA256_SIZE = 32
_NUMBER_OF_GROUPS = 64
_ENTRY_HEADER = struct.Struct(">IHHQ")
_GROUP_HEADER = struct.Struct(">HH")


class ContentEntryKind(enum.Enum):
    """Behaviour of a content inside the system, valued by its identifier."""

    NORMAL = 0x0001
    NORMAL_WII_U_KIND_1 = 0x2001
    NORMAL_WII_U_KIND_2 = 0x2003
    NORMAL_WII_U_KIND_3 = 0x6003
    DLC = 0x4001
    SHARED = 0x8001

    @classmethod
    def from_identifier(cls, identifier: int) -> ContentEntryKind:
        """Look up a content kind by its identifier."""
        try:
            return cls(identifier)
        except ValueError:
            raise UnknownContentEntryKindError(identifier) from None


@dataclass
class TitleMetadataContentEntry:
    """An entry describing one content of a title.

    ``hash`` is a 20-byte SHA-1 digest in version 0 metadata and a 32-byte
    SHA-256 digest (or a zero-padded SHA-1 on the Wii U) in version 1.
    """

    id: int
    index: int
    kind: ContentEntryKind
    size: int
    hash: bytes

    def __post_init__(self) -> None:
        self.hash = bytes(self.hash)
        if len(self.hash) not in (_SHA1_SIZE, _SHA256_SIZE):
            raise ValueError(
                f"a content hash must be {_SHA1_SIZE} or {_SHA256_SIZE} bytes long, "
                f"got {len(self.hash)}"
            )

    @property
    def is_version_1(self) -> bool:
        """Whether the entry carries a version 1 (32-byte) hash."""
        return len(self.hash) == _SHA256_SIZE

    @classmethod
    def parse(cls, stream: BinaryIO, version_1: bool) -> TitleMetadataContentEntry:
        """Parse one content entry."""
        content_id, index, kind_identifier, size = _ENTRY_HEADER.unpack(
            read_exact(stream, _ENTRY_HEADER.size)
        )
        kind = ContentEntryKind.from_identifier(kind_identifier)
        content_hash = read_exact(stream, _SHA256_SIZE if version_1 else _SHA1_SIZE)
        return cls(id=content_id, index=index, kind=kind, size=size, hash=content_hash)

    def dump(self, stream: BinaryIO) -> None:
        """Write the content entry."""
        stream.write(_ENTRY_HEADER.pack(self.id, self.index, self.kind.value, self.size))
        stream.write(self.hash)


@dataclass
class TitleMetadataV1ContentEntriesGroup:
    """A group of content entries of the version 1 extension."""

    first_content_index: int = 0
    content_entries_in_the_group: int = 0
    content_entries_group_hash_sha256: bytes = field(default=bytes(_SHA256_SIZE))

    def __post_init__(self) -> None:
        self.content_entries_group_hash_sha256 = bytes(self.content_entries_group_hash_sha256)
        if len(self.content_entries_group_hash_sha256) != _SHA256_SIZE:
            raise ValueError(f"a group hash must be {_SHA256_SIZE} bytes long")

    @classmethod
    def parse(cls, stream: BinaryIO) -> TitleMetadataV1ContentEntriesGroup:
        """Parse one content entries group."""
        first_index, count = _GROUP_HEADER.unpack(read_exact(stream, _GROUP_HEADER.size))
        group_hash = read_exact(stream, _SHA256_SIZE)
        return cls(
            first_content_index=first_index,
            content_entries_in_the_group=count,
            content_entries_group_hash_sha256=group_hash,
        )

    def dump(self, stream: BinaryIO) -> None:
        """Write the content entries group."""
        stream.write(
            _GROUP_HEADER.pack(self.first_content_index, self.content_entries_in_the_group)
        )
        stream.write(self.content_entries_group_hash_sha256)


def _default_groups() -> list[TitleMetadataV1ContentEntriesGroup]:
    return [TitleMetadataV1ContentEntriesGroup() for _ in range(_NUMBER_OF_GROUPS)]


@dataclass
class TitleMetadataV1:
    """Extra data present only in version 1 title metadata."""

    content_entries_groups_hash_sha256: bytes = field(default=bytes(_SHA256_SIZE))
    content_entries_groups: list[TitleMetadataV1ContentEntriesGroup] = field(
        default_factory=_default_groups
    )

    def __post_init__(self) -> None:
        self.content_entries_groups_hash_sha256 = bytes(self.content_entries_groups_hash_sha256)
        self.content_entries_groups = list(self.content_entries_groups)
        if len(self.content_entries_groups_hash_sha256) != _SHA256_SIZE:
            raise ValueError(f"the groups hash must be {_SHA256_SIZE} bytes long")
        if len(self.content_entries_groups) != _NUMBER_OF_GROUPS:
            raise ValueError(f"there must be exactly {_NUMBER_OF_GROUPS} content entries groups")

    @classmethod
    def parse(cls, stream: BinaryIO) -> TitleMetadataV1:
        """Parse the version 1 extension."""
        groups_hash = read_exact(stream, _SHA256_SIZE)
        groups = [TitleMetadataV1ContentEntriesGroup.parse(stream) for _ in range(_NUMBER_OF_GROUPS)]
        return cls(content_entries_groups_hash_sha256=groups_hash, content_entries_groups=groups)

    def dump(self, stream: BinaryIO) -> None:
        """Write the version 1 extension."""
        stream.write(self.content_entries_groups_hash_sha256)
        for group in self.content_entries_groups:
            group.dump(stream)


def title_metadata_size(signed_blob_header_size: int, number_of_entries: int, version_1: bool) -> int:
    """Size in bytes of a title metadata with the given header size and entry count."""
    size = 100 + signed_blob_header_size + 16 * number_of_entries
    if version_1:
        # Per-content hashes, the groups hash and all the groups
        size += 32 * number_of_entries + 32 + (4 + 32) * _NUMBER_OF_GROUPS
    else:
        size += 20 * number_of_entries
    return size