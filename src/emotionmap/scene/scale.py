from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

Number = Union[float, "npt.NDArray[np.float64]"]

# Fixed plotting domain. Valid data lies in [-1, 1], leaving a visual margin.
DOMAIN: tuple[float, float] = (-1.2, 1.2)


@dataclass(frozen=True)
class LinearScale:
    """
    Linear map from a data domain to a pixel range.

    A reversed range (start > end) inverts the axis, which is how the y scale
    maps data "up" to screen "up".
    """
    domain: tuple[float, float]
    range: tuple[float, float]

    def __call__(self, value: Number) -> Number:
        d0, d1 = self.domain
        r0, r1 = self.range
        result = r0 + (np.asarray(value, dtype=float) - d0) / (d1 - d0) * (r1 - r0)
        return float(result) if np.ndim(result) == 0 else result

    def invert(self, pixel: Number) -> Number:
        """Pixel position back to data units."""
        d0, d1 = self.domain
        r0, r1 = self.range
        result = d0 + (np.asarray(pixel, dtype=float) - r0) / (r1 - r0) * (d1 - d0)
        return float(result) if np.ndim(result) == 0 else result

    def ticks(self, step: float = 0.2) -> list[float]:
        """Evenly spaced tick values across the domain."""
        lo, hi = sorted(self.domain)
        count = int(round((hi - lo) / step))
        # + 0.0 turns -0.0 into 0.0
        return [round(float(v), 10) + 0.0 for v in np.linspace(lo, hi, count + 1)]


@dataclass(frozen=True)
class Margins:
    top: float = 60.0
    right: float = 20.0
    bottom: float = 60.0
    left: float = 60.0


@dataclass(frozen=True)
class PlotGeometry:
    """Canvas size and margins; the plot area is what remains inside the margins."""
    canvas_width: float = 800.0
    canvas_height: float = 600.0
    margins: Margins = field(default_factory=Margins)

    @property
    def width(self) -> float:
        return self.canvas_width - self.margins.left - self.margins.right

    @property
    def height(self) -> float:
        return self.canvas_height - self.margins.top - self.margins.bottom

    def x_scale(self) -> LinearScale:
        return LinearScale(domain=DOMAIN, range=(0.0, self.width))

    def y_scale(self) -> LinearScale:
        return LinearScale(domain=DOMAIN, range=(self.height, 0.0))
