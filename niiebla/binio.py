"""Small helpers for reading and writing binary values on seekable streams."""

from __future__ import annotations

from typing import BinaryIO

__all__ = [
    "align_to_boundary",
    "read_exact",
    "read_bool",
    "read_string",
    "string_from_null_terminated_bytes",
    "write_zeroed",
    "write_bytes_padded",
    "write_bool",
]


def align_to_boundary(value: int, boundary: int) -> int:
    """Round ``value`` up to the next multiple of ``boundary`` (zero stays zero)."""
    if value == 0:
        return 0
    return value + (boundary - value % boundary) % boundary


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes, raising ``EOFError`` if the stream runs short."""
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            raise EOFError(f"expected {size} bytes, stream ended after {size - remaining}")
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def read_bool(stream: BinaryIO) -> bool:
    """Read a single byte that must be 0 or 1."""
    value = read_exact(stream, 1)[0]
    if value == 0:
        return False
    if value == 1:
        return True
    raise ValueError(f"The given value cannot be converted into a bool: {value}")


def string_from_null_terminated_bytes(buffer: bytes) -> str:
    """Decode UTF-8 text up to the first NUL byte, or the whole buffer if there is none."""
    data = bytes(buffer)
    end = data.find(b"\0")
    if end == -1:
        end = len(data)
    return data[:end].decode("utf-8")


def read_string(stream: BinaryIO, size: int) -> str:
    """Read a fixed-size, NUL-terminated UTF-8 string."""
    return string_from_null_terminated_bytes(read_exact(stream, size))


def _write_all(stream: BinaryIO, data: bytes) -> None:
    view = memoryview(bytes(data))
    while view:
        written = stream.write(view)
        if written is None:
            return
        if written == 0:
            raise OSError("failed to write the whole buffer")
        view = view[written:]


def write_zeroed(stream: BinaryIO, count: int) -> None:
    """Write ``count`` zero bytes."""
    _write_all(stream, bytes(count))


def write_bytes_padded(stream: BinaryIO, buffer: bytes, padding: int) -> None:
    """Write ``buffer`` and pad it with zeroes up to ``padding`` bytes."""
    if len(buffer) > padding:
        raise ValueError(f"buffer of {len(buffer)} bytes does not fit in {padding} bytes")
    _write_all(stream, buffer)
    write_zeroed(stream, padding - len(buffer))


def write_bool(stream: BinaryIO, value: bool) -> None:
    """Write a bool as a single 0 or 1 byte."""
    _write_all(stream, b"\x01" if value else b"\x00")