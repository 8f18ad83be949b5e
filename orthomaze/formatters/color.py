import string
from typing import NamedTuple


class Color(NamedTuple):
    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parses 'rrggbb' or '#rrggbb'."""
        digits = value[1:] if value.startswith("#") else value
        if len(digits) != 6:
            raise ValueError(f"Expected a 6 character color value in hex, but got: {digits!r}")
        if not all(c in string.hexdigits for c in digits):
            raise ValueError(f"Invalid hex color {value!r}")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
