"""A stream wrapper that remembers where it was pinned."""

from __future__ import annotations

import io
from typing import BinaryIO

from niiebla.binio import align_to_boundary, write_zeroed

__all__ = ["StreamPin"]


class StreamPin:
    """Wraps a seekable stream and keeps the position it had when pinned.

    Offers seeking and alignment relative to that pinned position. Reads,
    writes and seeks are passed straight to the wrapped stream.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._start_position = stream.tell()

    @property
    def start_position(self) -> int:
        """The absolute position the stream had when the pin was created."""
        return self._start_position

    def into_inner(self) -> BinaryIO:
        """Return the wrapped stream."""
        return self._stream

    def go_to_pin(self) -> None:
        """Seek back to the pinned position."""
        self.seek(self._start_position, io.SEEK_SET)

    def relative_position(self) -> int:
        """Return the current position relative to the pin (may be negative)."""
        return self.tell() - self._start_position

    def seek_from_pin(self, step: int) -> int:
        """Seek ``step`` bytes away from the pinned position; return the absolute position."""
        return self.seek(self._start_position + step, io.SEEK_SET)

    def align_position(self, boundary: int) -> None:
        """Move forward to the next multiple of ``boundary`` counted from the pin."""
        relative = self.tell() - self._start_position
        if relative < 0:
            raise ValueError("the stream is positioned before the pin")
        self.seek(self._start_position + align_to_boundary(relative, boundary), io.SEEK_SET)

    def align_zeroed(self, boundary: int) -> None:
        """Write zeroes up to the next multiple of ``boundary`` counted from the pin."""
        relative = abs(self.tell() - self._start_position)
        aligned = align_to_boundary(relative, boundary)
        write_zeroed(self, aligned - relative)

    def read(self, size: int | None = -1) -> bytes:
        return self._stream.read(size)

    def write(self, data: bytes) -> int | None:
        return self._stream.write(data)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self._stream.seek(offset, whence)

    def tell(self) -> int:
        return self._stream.tell()

    def flush(self) -> None:
        self._stream.flush()