"""Bounded windows over seekable streams."""

from __future__ import annotations

import io
from typing import BinaryIO

__all__ = ["View", "RecallView"]

_NEGATIVE_OFFSET_MESSAGE = "Seeked into a negative offset"


class View:
    """A window of ``length`` bytes starting at the stream's current position.

    Positions reported by :meth:`seek` and :meth:`tell` are relative to the start
    of the window. Reads and writes past its end transfer no bytes. The position
    of the wrapped stream is changed by using the view.
    """

    def __init__(self, stream: BinaryIO, length: int) -> None:
        if length <= 0:
            raise ValueError("the length of a view must be greater than zero")
        self._inner = stream
        self._start_position = stream.tell()
        self.length = length

    def _relative_position(self) -> int:
        return self._inner.tell() - self._start_position

    def _remaining(self) -> int:
        return max(0, self.length - self._relative_position())

    def _position_from(self, position: int, offset: int) -> int:
        new_position = position + offset
        if new_position < 0 or new_position < self._start_position:
            raise OSError(_NEGATIVE_OFFSET_MESSAGE)
        return new_position

    def read(self, size: int | None = -1) -> bytes:
        """Read up to ``size`` bytes (all that remain if negative or None)."""
        remaining = self._remaining()
        if size is None or size < 0:
            size = remaining
        return self._inner.read(min(remaining, size))

    def write(self, data: bytes) -> int:
        """Write as much of ``data`` as fits in the view; return the count written."""
        count = min(self._remaining(), len(data))
        written = self._inner.write(bytes(data[:count]))
        return count if written is None else written

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        """Move inside the view and return the new relative position.

        ``SEEK_END`` is measured from the last byte of the view.
        """
        if whence == io.SEEK_SET:
            if offset < 0:
                raise OSError(_NEGATIVE_OFFSET_MESSAGE)
            new_position = self._start_position + offset
        elif whence == io.SEEK_CUR:
            new_position = self._position_from(self._inner.tell(), offset)
        elif whence == io.SEEK_END:
            end_position = self._start_position + self.length - 1
            new_position = self._position_from(end_position, offset)
        else:
            raise ValueError(f"invalid whence value: {whence}")
        self._inner.seek(new_position)
        return self._relative_position()

    def tell(self) -> int:
        """Return the position relative to the start of the view."""
        return self._relative_position()

    def flush(self) -> None:
        self._inner.flush()

    def into_inner(self) -> BinaryIO:
        """Return the wrapped stream."""
        return self._inner


class RecallView:
    """A :class:`View` that puts the stream back where it started.

    Used as a context manager, the position is restored on exit unless the
    view has been taken out with one of the ``into_*`` methods.
    """

    def __init__(self, stream: BinaryIO, length: int) -> None:
        self._view = View(stream, length)
        self._original_position = self._view.tell()
        self._released = False

    def reset_position(self) -> None:
        """Seek back to the position the view was created at."""
        self._view.seek(self._original_position, io.SEEK_SET)

    def into_view(self) -> View:
        """Reset the position and hand back the wrapped view."""
        self.reset_position()
        return self.into_view_no_reset()

    def into_inner(self) -> BinaryIO:
        """Reset the position and hand back the wrapped stream."""
        return self.into_view().into_inner()

    def into_view_no_reset(self) -> View:
        """Hand back the wrapped view without resetting the position."""
        self._released = True
        return self._view

    def into_inner_no_reset(self) -> BinaryIO:
        """Hand back the wrapped stream without resetting the position."""
        return self.into_view_no_reset().into_inner()

    def read(self, size: int | None = -1) -> bytes:
        return self._view.read(size)

    def write(self, data: bytes) -> int:
        return self._view.write(data)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self._view.seek(offset, whence)

    def tell(self) -> int:
        return self._view.tell()

    def flush(self) -> None:
        self._view.flush()

    def __enter__(self) -> RecallView:
        return self

    def __exit__(self, exc_type, exc, traceback) -> None:
        if not self._released:
            self.reset_position()