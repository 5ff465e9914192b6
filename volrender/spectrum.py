"""Tristimulus colours in CIE XYZ space, with and without an alpha channel."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TypeVar

from volrender.color import INF_MAX, Y_WEIGHT, clamp, xyz_to_rgb

_C = TypeVar("_C", bound="ColorXyz")

_FROM_RGB = (
    (0.4124, 0.3576, 0.1805),
    (0.2126, 0.7152, 0.0722),
    (0.0193, 0.1192, 0.9505),
)


class ColorType(enum.Enum):
    """How a colour is meant to be interpreted."""

    REFLECTANCE = 0
    ILLUMINANT = 1


class ColorXyz:
    """An immutable colour in CIE XYZ space.

    Arithmetic, comparison and the derived quantities act on the three
    tristimulus components only; any further components a subclass carries
    are taken from the left-hand operand unchanged.
    """

    __slots__ = ("c",)
    _SIZE = 3

    def __init__(self, *values: float) -> None:
        if len(values) == 0:
            xyz = (0.0, 0.0, 0.0)
        elif len(values) == 1:
            xyz = (float(values[0]),) * 3
        elif len(values) == 3:
            xyz = tuple(float(v) for v in values)
        else:
            raise TypeError(
                f"{type(self).__name__} takes 0, 1 or 3 components, got {len(values)}"
            )
        self.c: tuple[float, ...] = xyz + (0.0,) * (self._SIZE - 3)

    @property
    def xyz(self) -> tuple[float, float, float]:
        """The three tristimulus components."""
        x, y, z = self.c[:3]
        return (x, y, z)

    def _with_xyz(self: _C, xyz: tuple[float, ...]) -> _C:
        result = object.__new__(type(self))
        result.c = tuple(xyz) + self.c[3:]
        return result

    def _combine(self: _C, other: object, op) -> _C:
        if isinstance(other, ColorXyz):
            values = (op(a, b) for a, b in zip(self.c[:3], other.c[:3]))
        elif isinstance(other, (int, float)):
            values = (op(a, other) for a in self.c[:3])
        else:
            return NotImplemented
        return self._with_xyz(tuple(values))

    def __add__(self: _C, other: _C) -> _C:
        if not isinstance(other, ColorXyz):
            return NotImplemented
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self: _C, other: _C) -> _C:
        if not isinstance(other, ColorXyz):
            return NotImplemented
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self: _C, other: object) -> _C:
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self: _C, other: object) -> _C:
        if isinstance(other, ColorXyz):
            return NotImplemented
        return self._combine(other, lambda a, b: a * b)

    def __truediv__(self: _C, other: object) -> _C:
        return self._combine(other, lambda a, b: a / b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorXyz):
            return NotImplemented
        return self.c[:3] == other.c[:3]

    def __hash__(self) -> int:
        return hash(self.c[:3])

    def __getitem__(self, index: int) -> float:
        return self.c[index]

    def __iter__(self):
        return iter(self.c)

    def __len__(self) -> int:
        return len(self.c)

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self.c!r}"

    def is_black(self) -> bool:
        """True when all three tristimulus components are zero."""
        return all(v == 0.0 for v in self.c[:3])

    def clamp(self: _C, low: float = 0.0, high: float = INF_MAX) -> _C:
        """Return a colour with each tristimulus component limited to ``[low, high]``.

        Any components beyond the third are reset to zero.
        """
        result = type(self)()
        result.c = tuple(clamp(v, low, high) for v in self.c[:3]) + result.c[3:]
        return result

    def y(self) -> float:
        """Luminance: the weighted sum of the three components."""
        return sum(w * v for w, v in zip(Y_WEIGHT, self.c[:3]))

    def to_rgb(self) -> tuple[float, float, float]:
        """Convert the tristimulus components to linear RGB."""
        return xyz_to_rgb(self.c[:3])

    @classmethod
    def from_xyz(cls: type[_C], x: float, y: float, z: float) -> _C:
        """Build a colour from XYZ components."""
        return cls(x, y, z)

    @classmethod
    def from_rgb(cls: type[_C], r: float, g: float, b: float) -> _C:
        """Build a colour from linear RGB components."""
        x, y, z = (row[0] * r + row[1] * g + row[2] * b for row in _FROM_RGB)
        return cls.from_xyz(x, y, z)


class ColorXyza(ColorXyz):
    """A colour in CIE XYZ space with a fourth, alpha, component."""

    __slots__ = ()
    _SIZE = 4

    @property
    def alpha(self) -> float:
        """The fourth component."""
        return self.c[3]


@dataclass
class SpectrumSample:
    """A single spectral sample: its value and its index."""

    value: float = 0.0
    index: int = 0


CLR_RAD_BLACK = ColorXyz(0.0)
CLR_RAD_WHITE = ColorXyz(1.0)
CLR_RAD_RED = ColorXyz(1.0, 0.0, 0.0)
CLR_RAD_GREEN = ColorXyz(0.0, 1.0, 0.0)
CLR_RAD_BLUE = ColorXyz(1.0)
SPEC_BLACK = ColorXyz(0.0)
SPEC_GRAY_10 = ColorXyz(1.0)
SPEC_GRAY_20 = ColorXyz(1.0)
SPEC_GRAY_30 = ColorXyz(1.0)
SPEC_GRAY_40 = ColorXyz(1.0)
SPEC_GRAY_50 = ColorXyz(0.5)
SPEC_GRAY_60 = ColorXyz(1.0)
SPEC_GRAY_70 = ColorXyz(1.0)
SPEC_GRAY_80 = ColorXyz(1.0)
SPEC_GRAY_90 = ColorXyz(1.0)
SPEC_WHITE = ColorXyz(1.0)
SPEC_CYAN = ColorXyz(1.0)
SPEC_RED = ColorXyz(1.0, 0.0, 0.0)
XYZA_BLACK = ColorXyza(0.0)