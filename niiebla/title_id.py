"""The 64-bit identifier of a title on Nintendo consoles."""

from __future__ import annotations

import struct
from typing import BinaryIO

__all__ = ["TitleId"]

_MAX_VALUE = (1 << 64) - 1
_MASK_32 = 0xFFFFFFFF

_WII_PLATFORM_NAMES = {
    0x00000001: "BOOT2",
    0x00000002: "System Menu",
    0x00000100: "BC",
    0x00000101: "MIOS",
    0x00000200: "BC-NAND",
    0x00000201: "BC-WFS",
}


class TitleId:
    """64-bit value used to uniquely identify a title.

    Formatting with the ``#`` flag (``f"{title_id:#}"``) uses uppercase hex digits.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        if not 0 <= value <= _MAX_VALUE:
            raise ValueError(f"a title ID must fit in 64 bits: {value}")
        self._value = value

    @classmethod
    def from_halves(cls, higher_half: int, lower_half: int) -> TitleId:
        """Build a title ID from its higher and lower 32-bit halves."""
        for half in (higher_half, lower_half):
            if not 0 <= half <= _MASK_32:
                raise ValueError(f"a title ID half must fit in 32 bits: {half}")
        return cls((higher_half << 32) | lower_half)

    @property
    def value(self) -> int:
        return self._value

    @property
    def lower_half(self) -> int:
        return self._value & _MASK_32

    @lower_half.setter
    def lower_half(self, lower_half: int) -> None:
        self._value = TitleId.from_halves(self.higher_half, lower_half).value

    @property
    def higher_half(self) -> int:
        return (self._value >> 32) & _MASK_32

    @higher_half.setter
    def higher_half(self, higher_half: int) -> None:
        self._value = TitleId.from_halves(higher_half, self.lower_half).value

    def dump(self, stream: BinaryIO) -> None:
        """Write the title ID as a big-endian 64-bit integer."""
        stream.write(struct.pack(">Q", self._value))

    def _hex(self, uppercase: bool) -> str:
        spec = "08X" if uppercase else "08x"
        return f"{self.higher_half:{spec}}-{self.lower_half:{spec}}"

    def __str__(self) -> str:
        return self._hex(False)

    def __format__(self, format_spec: str) -> str:
        uppercase = format_spec.startswith("#")
        rest = format_spec[1:] if uppercase else format_spec
        return format(self._hex(uppercase), rest)

    def __repr__(self) -> str:
        return f"TitleId({self})"

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TitleId):
            return self._value == other._value
        return NotImplemented

    __hash__ = None  # mutable through its half setters

    def display_ascii(self, uppercase: bool = False) -> str:
        """Show the lower half as ASCII text when it is alphanumeric.

        Falls back to the plain hex display otherwise.
        """
        try:
            text = self.lower_half.to_bytes(4, "big").decode("utf-8")
        except UnicodeDecodeError:
            return self._hex(uppercase)
        if not all(char.isalnum() for char in text):
            return self._hex(uppercase)
        higher = f"{self.higher_half:08X}" if uppercase else f"{self.higher_half:08x}"
        return f"{higher}-{text}"

    def display_wii_platform(self, uppercase: bool = False) -> str:
        """Show well-known Wii system titles (IOS, BOOT2, ...) by name."""
        if self.higher_half != 0x00000001:
            return self._hex(uppercase)
        lower = self.lower_half
        return _WII_PLATFORM_NAMES.get(lower, f"IOS{lower} (Wii)")