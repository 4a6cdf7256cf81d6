from __future__ import annotations

from dataclasses import dataclass
import re


RGBA8 = tuple[int, int, int, int]

_HEX_COLOR = re.compile(r"#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")
# Discards float noise from n / 255 * 255 before truncation.
_CHANNEL_EPSILON = 1e-9


def is_valid_hex_color(value: object) -> bool:
    """Accept `#RGB`, `#RRGGBB` and `#RRGGBBAA`, with or without the `#`."""

    return isinstance(value, str) and _HEX_COLOR.fullmatch(value) is not None


@dataclass(frozen=True)
class RgbaColor:
    """Normalized RGBA color, every channel in [0, 1]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"RgbaColor `{name}` must be in [0, 1], got {value}")

    @classmethod
    def from_rgba8(cls, r: int, g: int, b: int, a: int = 255) -> "RgbaColor":
        for channel in (r, g, b, a):
            if not 0 <= channel <= 255:
                raise ValueError(f"8-bit channel must be in [0, 255], got {channel}")
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    @classmethod
    def from_hex(cls, value: str) -> "RgbaColor":
        if not is_valid_hex_color(value):
            raise ValueError(f"invalid hex color: {value!r}")
        digits = value[1:] if value.startswith("#") else value
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        r = int(digits[0:2], 16)
        g = int(digits[2:4], 16)
        b = int(digits[4:6], 16)
        a = int(digits[6:8], 16) if len(digits) == 8 else 255
        return cls.from_rgba8(r, g, b, a)

    def to_rgba8(self) -> RGBA8:
        """Scale to 8-bit channels, truncating toward zero (no rounding)."""

        return (
            _channel_to_u8(self.red),
            _channel_to_u8(self.green),
            _channel_to_u8(self.blue),
            _channel_to_u8(self.alpha),
        )


def _channel_to_u8(channel: float) -> int:
    return max(0, min(255, int(channel * 255.0 + _CHANNEL_EPSILON)))


DEFAULT_PANEL_COLOR = RgbaColor.from_rgba8(40, 44, 52, 237)
