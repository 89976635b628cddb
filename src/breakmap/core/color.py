"""RGBA: immutable four-channel 8-bit color, packed as 0xRRGGBBAA."""

from __future__ import annotations

from dataclasses import dataclass

CHANNELS = ("red", "green", "blue", "alpha")


def _clamp(value: float) -> int:
    """Truncate to int, then clamp into the 8-bit range [0, 255]."""
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class RGBA:
    """A color with red, green, blue and alpha channels.

    Out-of-range channel values are clamped to [0, 255] rather than
    wrapped, so ``RGBA(300, -5, 0, 0) == RGBA(255, 0, 0, 0)``.
    Instances are immutable; every transform returns a new RGBA.
    """

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in CHANNELS:
            object.__setattr__(self, name, _clamp(getattr(self, name)))

    @classmethod
    def from_int(cls, packed: int) -> RGBA:
        """Decode a packed 0xRRGGBBAA integer (masked to 32 bits)."""
        packed = int(packed) & 0xFFFFFFFF
        return cls(
            (packed >> 24) & 0xFF,
            (packed >> 16) & 0xFF,
            (packed >> 8) & 0xFF,
            packed & 0xFF,
        )

    @classmethod
    def from_alpha_percent(cls, red: int, green: int, blue: int, pct: float) -> RGBA:
        """Build a color whose alpha is a fraction (0.0-1.0) of full opacity."""
        pct = max(0.0, min(1.0, float(pct)))
        return cls(red, green, blue, int(pct * 255))

    @classmethod
    def from_hex(cls, text: str) -> RGBA:
        """Parse '#rrggbb', '#rrggbbaa' or a matplotlib color name."""
        from matplotlib.colors import to_rgba

        try:
            r, g, b, a = to_rgba(text)
        except ValueError:
            raise ValueError(
                f"Invalid color '{text}'. Use a hex string like '#66c2a5' "
                "or a named color like 'steelblue'."
            ) from None
        return cls(round(r * 255), round(g * 255), round(b * 255), round(a * 255))

    @property
    def int(self) -> int:
        """Packed 0xRRGGBBAA representation."""
        return (self.red << 24) | (self.green << 16) | (self.blue << 8) | self.alpha

    def unzip_rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def unzip(self) -> tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)

    def channel(self, selector: str) -> int:
        """Read one channel by name ('red', 'green', 'blue' or 'alpha')."""
        if selector not in CHANNELS:
            raise ValueError(
                f"Unknown channel '{selector}'. Expected one of {list(CHANNELS)}."
            )
        return getattr(self, selector)

    def with_alpha(self, alpha: int) -> RGBA:
        return RGBA(self.red, self.green, self.blue, alpha)

    def to_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}{self.alpha:02x}"


TRANSPARENT = RGBA(0, 0, 0, 0)
