# Copyright (c) 2026 Combinator
# SPDX-License-Identifier: MIT

"""
Combination schema -- canonical types for palette pair generation.

Design principles:
- Immutable: All types are frozen dataclasses
- Hashable: Palettes are tuples of ColorEntry, usable as memoization keys
- Deterministic: Same input → same result
- Serializable: JSON-ready via to_dict()/from_dict()

HSL Color Space:
- h (Hue): 0-360 degrees (0=red, 120=green, 240=blue)
- s (Saturation): 0 = gray, 100 = fully saturated
- l (Lightness): 0 = black, 100 = white
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional


# =============================================================================
# Contrast Levels
# =============================================================================


class ContrastLevel(Enum):
    """
    Minimum text contrast level a background color must reach.

    Thresholds follow the WCAG contrast-ratio conventions.
    """
    A = "A"      # 3.0:1 -- large text
    AA = "AA"    # 4.5:1 -- normal text
    AAA = "AAA"  # 7.0:1 -- enhanced

    @property
    def threshold(self) -> float:
        """Minimum contrast ratio required for this level."""
        return CONTRAST_THRESHOLDS[self]


CONTRAST_THRESHOLDS = {
    ContrastLevel.A: 3.0,
    ContrastLevel.AA: 4.5,
    ContrastLevel.AAA: 7.0,
}


# =============================================================================
# Core Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGB:
    """
    An sRGB color with 8-bit channels.

    Attributes:
        r, g, b: Channel values 0-255
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate channel values are 8-bit."""
        for channel, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {channel} must be 0-255, got {value}")

    @property
    def hex(self) -> str:
        """Hex string like "#3941C8"."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGB:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"])


@dataclass(frozen=True, slots=True)
class HSL:
    """
    A color in HSL space.

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation [0, 100]
        l: Lightness [0, 100]
    """
    h: float
    s: float
    l: float

    def __post_init__(self) -> None:
        """Validate component ranges."""
        if not 0.0 <= self.h < 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.h}")
        if not 0.0 <= self.s <= 100.0:
            raise ValueError(f"Saturation must be 0-100, got {self.s}")
        if not 0.0 <= self.l <= 100.0:
            raise ValueError(f"Lightness must be 0-100, got {self.l}")

    @property
    def is_gray(self) -> bool:
        """True for achromatic colors (no saturation)."""
        return self.s == 0.0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "l": self.l}

    @classmethod
    def from_dict(cls, data: dict) -> HSL:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], l=data["l"])


@dataclass(frozen=True, slots=True)
class ColorEntry:
    """
    A single named palette color.

    Palettes are ordered tuples of ColorEntry. Entries are immutable and
    hashable, so a palette tuple can key a memoization cache.

    Attributes:
        name: Color family name (e.g. "slate", "vibrant-blue")
        shade: Shade label (e.g. "500", "base")
        hex: Hex string "#RRGGBB"
        id: Stable unique key within the palette
    """
    name: str
    shade: str
    hex: str
    id: str

    def __post_init__(self) -> None:
        """Validate id is present."""
        if not self.id:
            raise ValueError("Color id cannot be empty")

    @classmethod
    def create(
        cls,
        name: str,
        shade: str,
        hex: str,
        id: Optional[str] = None,
    ) -> ColorEntry:
        """Build an entry, defaulting the id to ``name-shade``."""
        return cls(name=name, shade=shade, hex=hex, id=id or f"{name}-{shade}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"id": self.id, "name": self.name, "shade": self.shade, "hex": self.hex}

    @classmethod
    def from_dict(cls, data: dict) -> ColorEntry:
        """Deserialize from dictionary."""
        return cls(
            name=data["name"],
            shade=data["shade"],
            hex=data["hex"],
            id=data["id"],
        )


@dataclass(frozen=True, slots=True)
class CachedColorData:
    """
    Precomputed per-color data for one (palette, text color, level) triple.

    Attributes:
        rgb: Decoded sRGB value
        hsl: HSL value derived from rgb
        luminance: Relative luminance of rgb
        passes_text_contrast: Whether contrast against the text color
            reaches the level threshold
    """
    rgb: RGB
    hsl: HSL
    luminance: float
    passes_text_contrast: bool


# =============================================================================
# Combinations
# =============================================================================


@dataclass(frozen=True, slots=True)
class Combination:
    """
    An ordered pair of palette colors used as two background regions.

    Role 1 (c1) and role 2 (c2) are distinct: a combination and its
    inverse use the same colors with the roles swapped.

    Attributes:
        c1: First background color
        c2: Second background color
        hsl1: HSL of c1
        hsl2: HSL of c2
    """
    c1: ColorEntry
    c2: ColorEntry
    hsl1: HSL
    hsl2: HSL

    def __post_init__(self) -> None:
        """A color is never paired with itself."""
        if self.c1.id == self.c2.id:
            raise ValueError(f"Combination members must differ, got {self.c1.id!r} twice")

    @property
    def ids(self) -> tuple[str, str]:
        return (self.c1.id, self.c2.id)

    def inverse(self) -> Combination:
        """The mirror combination (roles swapped)."""
        return Combination(c1=self.c2, c2=self.c1, hsl1=self.hsl2, hsl2=self.hsl1)

    def is_mirror_of(self, other: Combination) -> bool:
        return self.c1.id == other.c2.id and self.c2.id == other.c1.id

    def to_dict(self, include_hsl: bool = False) -> dict:
        """
        Serialize to dictionary.

        Args:
            include_hsl: If True, include the HSL values of both members
        """
        d = {"c1": self.c1.to_dict(), "c2": self.c2.to_dict()}
        if include_hsl:
            d["hsl1"] = self.hsl1.to_dict()
            d["hsl2"] = self.hsl2.to_dict()
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Combination:
        """
        Deserialize from dictionary.

        HSL values are recomputed from the member hex when absent.
        """
        c1 = ColorEntry.from_dict(data["c1"])
        c2 = ColorEntry.from_dict(data["c2"])
        if "hsl1" in data and "hsl2" in data:
            hsl1 = HSL.from_dict(data["hsl1"])
            hsl2 = HSL.from_dict(data["hsl2"])
        else:
            from combinator.combine.colorspace import hex_to_rgb, rgb_to_hsl
            hsl1 = rgb_to_hsl(hex_to_rgb(c1.hex))
            hsl2 = rgb_to_hsl(hex_to_rgb(c2.hex))
        return cls(c1=c1, c2=c2, hsl1=hsl1, hsl2=hsl2)


@dataclass(frozen=True, slots=True)
class CombinationResult:
    """
    Output of one pipeline invocation.

    Attributes:
        combinations: Accepted combinations in display order
        total_count: Number accepted by the diversity filter, before any
            display-length cap. ``len(combinations)`` may be smaller.
        passes_contrast: Text contrast outcome for every palette id, so a
            caller can disable individually failing colors
    """
    combinations: tuple[Combination, ...]
    total_count: int
    passes_contrast: Mapping[str, bool]

    def __post_init__(self) -> None:
        """Validate counts."""
        if self.total_count < len(self.combinations):
            raise ValueError(
                f"total_count ({self.total_count}) cannot be smaller than "
                f"the number of combinations ({len(self.combinations)})"
            )

    @property
    def shown(self) -> int:
        return len(self.combinations)

    def to_dict(self, include_hsl: bool = False) -> dict:
        """Serialize to dictionary for JSON output."""
        return {
            "total_count": self.total_count,
            "shown": self.shown,
            "combinations": [c.to_dict(include_hsl=include_hsl) for c in self.combinations],
            "passes_contrast": dict(self.passes_contrast),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> CombinationResult:
        """Deserialize from dictionary."""
        combinations = tuple(Combination.from_dict(c) for c in data["combinations"])
        return cls(
            combinations=combinations,
            total_count=data.get("total_count", len(combinations)),
            passes_contrast=dict(data.get("passes_contrast", {})),
        )

    @classmethod
    def from_json(cls, json_str: str) -> CombinationResult:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
