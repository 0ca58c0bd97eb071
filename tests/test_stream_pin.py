import io

import pytest

from niiebla.stream_pin import StreamPin


def _read_u8(stream):
    return stream.read(1)[0]


def test_go_to_pin():
    stream = io.BytesIO(bytes([0, 1, 2, 3, 4]))
    stream.seek(1, io.SEEK_CUR)

    pin = StreamPin(stream)
    pin.seek(3, io.SEEK_CUR)

    assert _read_u8(pin) == 4

    pin.go_to_pin()

    assert _read_u8(pin) == 1


def test_align_position_zero():
    stream = io.BytesIO(bytes(range(10)))
    stream.seek(1, io.SEEK_CUR)

    pin = StreamPin(stream)
    pin.align_position(2)

    assert pin.tell() == 1
    assert _read_u8(pin) == 1


def test_align_position_aligned_and_non_zero():
    stream = io.BytesIO(bytes(range(10)))
    stream.seek(1, io.SEEK_CUR)

    pin = StreamPin(stream)
    pin.seek(2, io.SEEK_CUR)
    pin.align_position(2)

    assert pin.tell() == 3
    assert _read_u8(pin) == 3


def test_align_position_unaligned():
    stream = io.BytesIO(bytes(range(10)))
    stream.seek(1, io.SEEK_CUR)

    pin = StreamPin(stream)
    pin.seek(3, io.SEEK_CUR)
    pin.align_position(2)

    assert pin.tell() == 5
    assert _read_u8(pin) == 5


def test_align_position_before_pin_raises():
    stream = io.BytesIO(bytes(range(10)))
    stream.seek(4)

    pin = StreamPin(stream)
    pin.seek(1)

    with pytest.raises(ValueError):
        pin.align_position(2)


def test_align_zeroed():
    stream = io.BytesIO(bytes(range(10)))
    stream.seek(1, io.SEEK_CUR)

    pin = StreamPin(stream)
    pin.seek(1, io.SEEK_CUR)
    pin.align_zeroed(4)

    assert pin.tell() == 5
    assert _read_u8(pin) == 5

    data = pin.into_inner().getvalue()
    assert data[3] == 0
    assert data[4] == 0


def test_align_zeroed_when_already_aligned_writes_nothing():
    stream = io.BytesIO(bytes(range(10)))
    stream.seek(2)

    pin = StreamPin(stream)
    pin.seek(4, io.SEEK_CUR)
    pin.align_zeroed(4)

    assert pin.tell() == 6
    assert pin.into_inner().getvalue() == bytes(range(10))


def test_go_relative():
    stream = io.BytesIO(bytes(range(10)))
    stream.seek(5, io.SEEK_CUR)

    pin = StreamPin(stream)

    pin.seek_from_pin(2)
    assert _read_u8(pin) == 7

    pin.seek_from_pin(-3)
    assert _read_u8(pin) == 2


def test_relative_position_tracks_pin():
    stream = io.BytesIO(bytes(range(10)))
    stream.seek(1)

    pin = StreamPin(stream)
    pin.seek(3, io.SEEK_CUR)
    assert pin.relative_position() == 3

    pin.seek(0)
    assert pin.relative_position() == -1


def test_write_goes_to_inner_stream():
    stream = io.BytesIO(bytes(5))
    stream.seek(2)

    pin = StreamPin(stream)
    pin.write(b"\xaa\xbb")

    assert stream.getvalue() == b"\x00\x00\xaa\xbb\x00"
    assert pin.relative_position() == 2