"""Per-pixel running mean and variance of rendered samples."""

from __future__ import annotations

import math

from volrender.color import MB
from volrender.status import Status

_ELEMENT_SIZE = 4

_BUFFER_NAMES = (
    "N buffer",
    "Old Mean Buffer",
    "New Mean Buffer",
    "Old S Buffer",
    "New S Buffer",
    "Magnitude Buffer",
)


class RunningVariance:
    """Welford's online mean and variance, kept for each pixel of an image.

    When a :class:`Status` is given, resizing reports the size of each
    buffer as a statistic.
    """

    def __init__(self, status: Status | None = None) -> None:
        self.status = status
        self.width = 0
        self.height = 0
        self.mean_variance = 0.0
        self._n: list[int] = []
        self._old_m: list[float] = []
        self._new_m: list[float] = []
        self._old_s: list[float] = []
        self._new_s: list[float] = []
        self.variances: list[float] = []

    def resize(self, width: int, height: int) -> None:
        """Allocate buffers for ``width`` x ``height`` pixels and reset them.

        A zero width or height leaves everything unchanged.
        """
        if width == 0 or height == 0:
            return
        if width < 0 or height < 0:
            raise ValueError(f"invalid size {width} x {height}")

        self.width = width
        self.height = height
        self.mean_variance = 0.0

        if self.status is not None:
            count = width * height
            self.status.set_statistic_changed("CUDA Memory", "Variance", "", "MB")
            size = f"{count * _ELEMENT_SIZE / MB:.2f}"
            for name in _BUFFER_NAMES:
                self.status.set_statistic_changed("Variance", name, size, "MB")

        self.reset()

    def reset(self) -> None:
        """Clear all accumulated samples."""
        count = self.width * self.height
        self._n = [0] * count
        self._old_m = [0.0] * count
        self._new_m = [0.0] * count
        self._old_s = [0.0] * count
        self._new_s = [0.0] * count
        self.variances = [0.0] * count

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._n):
            raise IndexError(f"pixel index {index} out of range")

    def push(self, x: float, index: int) -> None:
        """Add sample ``x`` to pixel ``index``."""
        self._check(index)
        self._n[index] += 1
        n = self._n[index]
        if n == 1:
            self._old_m[index] = self._new_m[index] = x
            self._old_s[index] = 0.0
        else:
            old_m = self._old_m[index]
            new_m = old_m + (x - old_m) / n
            new_s = self._old_s[index] + (x - old_m) * (x - new_m)
            self._new_m[index] = self._old_m[index] = new_m
            self._new_s[index] = self._old_s[index] = new_s
        self.variances[index] = self.variance(index)

    def num_data_values(self, index: int) -> int:
        """Number of samples pushed to pixel ``index``."""
        self._check(index)
        return self._n[index]

    def mean(self, index: int) -> float:
        """Mean of the samples of pixel ``index``, 0 when there are none."""
        self._check(index)
        return self._new_m[index] if self._n[index] > 0 else 0.0

    def variance(self, index: int) -> float:
        """Sample variance of pixel ``index``, 0 with fewer than two samples."""
        self._check(index)
        n = self._n[index]
        return self._new_s[index] / (n - 1) if n > 1 else 0.0

    def standard_deviation(self, index: int) -> float:
        """Square root of :meth:`variance`."""
        return math.sqrt(self.variance(index))