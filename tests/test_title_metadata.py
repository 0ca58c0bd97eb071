import io
import struct

import pytest

from niiebla.title_metadata import (
    Console3dsPlatformData,
    ContentNotFoundError,
    IncompatibleVersionError,
    Platform,
    TitleMetadataError,
    UnknownContentEntryKindError,
    UnknownPlatformError,
    UnknownWiiRegionError,
    WiiPlatformData,
    WiiRegion,
)


def _wii_block(region_id, ratings, ipc_mask):
    return (
        b"\0\0"
        + struct.pack(">H", region_id)
        + ratings
        + bytes(12)
        + ipc_mask
        + bytes(18)
    )


def _3ds_block(public, private, srl):
    return struct.pack("<II", public, private) + bytes(4) + bytes([srl]) + bytes(49)


@pytest.mark.parametrize("platform", list(Platform))
def test_platform_identifier_round_trip(platform):
    stream = io.BytesIO()
    platform.dump_identifier(stream)
    (identifier,) = struct.unpack(">I", stream.getvalue())
    assert Platform.from_identifier(identifier) is platform


def test_platform_3ds_wire_bytes():
    stream = io.BytesIO()
    Platform.CONSOLE_3DS.dump_identifier(stream)
    assert stream.getvalue() == b"\x00\x00\x00\x40"


def test_platform_wii_u_identifier():
    assert Platform.from_identifier(256) is Platform.WII_U


def test_unknown_platform():
    with pytest.raises(UnknownPlatformError) as info:
        Platform.from_identifier(2)
    assert info.value.identifier == 2
    assert isinstance(info.value, TitleMetadataError)


@pytest.mark.parametrize("region", list(WiiRegion))
def test_region_identifier_round_trip(region):
    stream = io.BytesIO()
    region.dump_identifier(stream)
    (identifier,) = struct.unpack(">H", stream.getvalue())
    assert WiiRegion.from_identifier(identifier) is region


def test_unknown_region():
    with pytest.raises(UnknownWiiRegionError) as info:
        WiiRegion.from_identifier(5)
    assert info.value.identifier == 5


def test_wii_platform_data_parse():
    ratings = bytes(range(16))
    ipc_mask = bytes(range(100, 112))
    stream = io.BytesIO(_wii_block(2, ratings, ipc_mask))

    data = WiiPlatformData.parse(stream, True)

    assert data.is_wii_u_vwii_only_title is True
    assert data.region is WiiRegion.EUROPE
    assert data.ratings == ratings
    assert data.ipc_mask == ipc_mask
    assert stream.tell() == 62


def test_wii_platform_data_round_trip():
    block = _wii_block(4, bytes(range(16)), bytes(range(12)))
    data = WiiPlatformData.parse(io.BytesIO(block), False)

    out = io.BytesIO()
    data.dump(out)

    assert out.getvalue() == block


def test_wii_platform_data_default_dump_is_region_free():
    out = io.BytesIO()
    WiiPlatformData().dump(out)
    assert out.getvalue() == _wii_block(3, bytes(16), bytes(12))


def test_wii_platform_data_unknown_region():
    stream = io.BytesIO(_wii_block(9, bytes(16), bytes(12)))
    with pytest.raises(UnknownWiiRegionError):
        WiiPlatformData.parse(stream, False)


def test_wii_platform_data_bad_ratings_length():
    with pytest.raises(ValueError):
        WiiPlatformData(ratings=bytes(3))


def test_wii_platform_data_truncated():
    with pytest.raises(EOFError):
        WiiPlatformData.parse(io.BytesIO(b"\0\0\0\x01" + bytes(5)), False)


def test_3ds_platform_data_parse():
    stream = io.BytesIO(_3ds_block(1000, 2000, 7))

    data = Console3dsPlatformData.parse(stream)

    assert data == Console3dsPlatformData(
        public_save_data_size=1000, private_save_data_size=2000, srl_flag=7
    )
    assert stream.tell() == 62


def test_3ds_platform_data_round_trip():
    block = _3ds_block(123456, 654321, 1)
    data = Console3dsPlatformData.parse(io.BytesIO(block))

    out = io.BytesIO()
    data.dump(out)

    assert out.getvalue() == block


def test_3ds_sizes_are_little_endian():
    out = io.BytesIO()
    Console3dsPlatformData(public_save_data_size=1).dump(out)
    assert out.getvalue()[:4] == b"\x01\x00\x00\x00"


def test_3ds_platform_data_truncated():
    with pytest.raises(EOFError):
        Console3dsPlatformData.parse(io.BytesIO(bytes(3)))


def test_error_attributes_and_hierarchy():
    kind_error = UnknownContentEntryKindError(3)
    version_error = IncompatibleVersionError(2)

    assert kind_error.identifier == 3
    assert version_error.version == 2
    assert str(ContentNotFoundError()) == "Content not found"
    assert all(
        isinstance(error, TitleMetadataError)
        for error in (kind_error, version_error, ContentNotFoundError())
    )