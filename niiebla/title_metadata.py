"""Errors, platforms and platform-specific data of the title metadata (TMD) format."""

from __future__ import annotations

import enum
import io
import struct
from dataclasses import dataclass, field
from typing import BinaryIO

from niiebla.binio import read_exact, write_zeroed

__all__ = [
    "TitleMetadataError",
    "UnknownPlatformError",
    "UnknownWiiRegionError",
    "UnknownContentEntryKindError",
    "IncompatibleVersionError",
    "ContentNotFoundError",
    "Platform",
    "WiiRegion",
    "WiiPlatformData",
    "Console3dsPlatformData",
]

_RATINGS_SIZE = 16
_IPC_MASK_SIZE = 12


class TitleMetadataError(Exception):
    """Base class of the errors raised while handling title metadata."""


class UnknownPlatformError(TitleMetadataError):
    """The platform identifier of the title metadata is not known."""

    def __init__(self, identifier: int) -> None:
        super().__init__(f"The given title metadata platform is not known: {identifier}")
        self.identifier = identifier


class UnknownWiiRegionError(TitleMetadataError):
    """The Wii region identifier of the title metadata is not known."""

    def __init__(self, identifier: int) -> None:
        super().__init__(
            f"The given title metadata Nintendo Wii region is not known: {identifier}"
        )
        self.identifier = identifier


class UnknownContentEntryKindError(TitleMetadataError):
    """The kind of a content entry is not known."""

    def __init__(self, identifier: int) -> None:
        super().__init__(f"The given content entry kind is not known: {identifier}")
        self.identifier = identifier


class IncompatibleVersionError(TitleMetadataError):
    """The format version of the title metadata is not supported."""

    def __init__(self, version: int) -> None:
        super().__init__(
            f"The version of the title metadata is not compatible (version: {version})"
        )
        self.version = version


class ContentNotFoundError(TitleMetadataError):
    """No content entry matches the selection."""

    def __init__(self) -> None:
        super().__init__("Content not found")


class Platform(enum.Enum):
    """Platform a title is made for, valued by its identifier in the metadata."""

    DSI = 0
    WII = 1
    CONSOLE_3DS = 64
    WII_U = 256

    @classmethod
    def from_identifier(cls, identifier: int) -> Platform:
        """Look up a platform by its identifier."""
        try:
            return cls(identifier)
        except ValueError:
            raise UnknownPlatformError(identifier) from None

    def dump_identifier(self, stream: BinaryIO) -> None:
        """Write the identifier as a big-endian 32-bit integer."""
        stream.write(struct.pack(">I", self.value))


class WiiRegion(enum.Enum):
    """Regions a Wii title can be made for."""

    JAPAN = 0
    USA = 1
    EUROPE = 2
    REGION_FREE = 3
    KOREA = 4

    @classmethod
    def from_identifier(cls, identifier: int) -> WiiRegion:
        """Look up a region by its identifier."""
        try:
            return cls(identifier)
        except ValueError:
            raise UnknownWiiRegionError(identifier) from None

    def dump_identifier(self, stream: BinaryIO) -> None:
        """Write the identifier as a big-endian 16-bit integer."""
        stream.write(struct.pack(">H", self.value))


def _skip(stream: BinaryIO, count: int) -> None:
    stream.seek(count, io.SEEK_CUR)


@dataclass
class WiiPlatformData:
    """Data only present on Wii titles (including vWii titles on the Wii U)."""

    is_wii_u_vwii_only_title: bool = False
    region: WiiRegion = WiiRegion.REGION_FREE
    ratings: bytes = field(default=bytes(_RATINGS_SIZE))
    ipc_mask: bytes = field(default=bytes(_IPC_MASK_SIZE))

    platform = Platform.WII

    def __post_init__(self) -> None:
        self.ratings = bytes(self.ratings)
        self.ipc_mask = bytes(self.ipc_mask)
        if len(self.ratings) != _RATINGS_SIZE:
            raise ValueError(f"ratings must be {_RATINGS_SIZE} bytes long")
        if len(self.ipc_mask) != _IPC_MASK_SIZE:
            raise ValueError(f"the IPC mask must be {_IPC_MASK_SIZE} bytes long")

    @classmethod
    def parse(cls, stream: BinaryIO, is_wii_u_vwii_only_title: bool) -> WiiPlatformData:
        """Parse the platform block that follows the group ID."""
        _skip(stream, 2)
        (region_identifier,) = struct.unpack(">H", read_exact(stream, 2))
        region = WiiRegion.from_identifier(region_identifier)
        ratings = read_exact(stream, _RATINGS_SIZE)
        _skip(stream, 12)
        ipc_mask = read_exact(stream, _IPC_MASK_SIZE)
        _skip(stream, 18)
        return cls(
            is_wii_u_vwii_only_title=is_wii_u_vwii_only_title,
            region=region,
            ratings=ratings,
            ipc_mask=ipc_mask,
        )

    def dump(self, stream: BinaryIO) -> None:
        """Write the platform block that follows the group ID."""
        write_zeroed(stream, 2)
        self.region.dump_identifier(stream)
        stream.write(self.ratings)
        write_zeroed(stream, 12)
        stream.write(self.ipc_mask)
        write_zeroed(stream, 18)


@dataclass
class Console3dsPlatformData:
    """Data only present on 3DS titles."""

    public_save_data_size: int = 0
    private_save_data_size: int = 0
    srl_flag: int = 0

    platform = Platform.CONSOLE_3DS

    @classmethod
    def parse(cls, stream: BinaryIO) -> Console3dsPlatformData:
        """Parse the platform block that follows the group ID."""
        public_size, private_size = struct.unpack("<II", read_exact(stream, 8))
        _skip(stream, 4)
        srl_flag = read_exact(stream, 1)[0]
        _skip(stream, 49)
        return cls(
            public_save_data_size=public_size,
            private_save_data_size=private_size,
            srl_flag=srl_flag,
        )

    def dump(self, stream: BinaryIO) -> None:
        """Write the platform block that follows the group ID."""
        stream.write(struct.pack("<II", self.public_save_data_size, self.private_save_data_size))
        write_zeroed(stream, 4)
        stream.write(struct.pack("B", self.srl_flag))
        write_zeroed(stream, 49)