"""Random-access AES-128-CBC decryption over a seekable stream."""

from __future__ import annotations

import io
from typing import BinaryIO

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from niiebla.binio import align_to_boundary

__all__ = ["AesCbcStream"]

_BLOCK_SIZE = 16


class AesCbcStream:
    """Stream of AES-128-CBC encrypted bytes.

    Reads decrypt on the fly from any position of the wrapped stream. Writes
    encrypt a whole buffer at once, always chaining from the initial IV.
    """

    def __init__(self, stream: BinaryIO, key: bytes, iv: bytes) -> None:
        key = bytes(key)
        iv = bytes(iv)
        if len(key) != _BLOCK_SIZE:
            raise ValueError(f"an AES-128 key must be 16 bytes long, got {len(key)}")
        if len(iv) != _BLOCK_SIZE:
            raise ValueError(f"an AES-CBC IV must be 16 bytes long, got {len(iv)}")
        self._stream = stream
        self._key = key
        self._iv = iv

    def into_inner(self) -> BinaryIO:
        """Return the wrapped stream."""
        return self._stream

    def _cipher(self, iv: bytes) -> Cipher:
        return Cipher(algorithms.AES(self._key), modes.CBC(iv))

    def read(self, size: int | None = -1) -> bytes:
        """Decrypt and return up to ``size`` bytes from the current position."""
        position = self._stream.tell()
        end = self._stream.seek(0, io.SEEK_END)
        available = max(0, end - position)
        count = available if size is None or size < 0 else min(size, available)

        if count == 0:
            self._stream.seek(position)
            return b""

        block_start = position - position % _BLOCK_SIZE
        read_start = max(0, block_start - _BLOCK_SIZE)
        read_end = align_to_boundary(position + count, _BLOCK_SIZE)

        self._stream.seek(read_start)
        wanted = read_end - read_start
        data = self._stream.read(wanted) or b""
        data = data.ljust(wanted, b"\0")

        if block_start == 0:
            iv, ciphertext = self._iv, data
        else:
            iv, ciphertext = data[:_BLOCK_SIZE], data[_BLOCK_SIZE:]

        decryptor = self._cipher(iv).decryptor()
        plaintext = decryptor.update(ciphertext) + decryptor.finalize()

        offset = position - block_start
        self._stream.seek(position + count)
        return plaintext[offset : offset + count]

    def write(self, data: bytes) -> int:
        """Encrypt ``data`` from the initial IV and write it at the current position.

        The buffer must be a whole number of 16-byte blocks.
        """
        data = bytes(data)
        if len(data) % _BLOCK_SIZE:
            raise ValueError(
                f"Unable to encrypt the buffer: {len(data)} bytes is not a multiple of 16"
            )
        encryptor = self._cipher(self._iv).encryptor()
        ciphertext = encryptor.update(data) + encryptor.finalize()
        written = self._stream.write(ciphertext)
        return len(ciphertext) if written is None else written

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        """Seek the wrapped stream."""
        return self._stream.seek(offset, whence)

    def tell(self) -> int:
        """Return the position of the wrapped stream."""
        return self._stream.tell()

    def flush(self) -> None:
        self._stream.flush()