"""Parzen-window smoothing of one-dimensional weighted samples."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Iterator, List, TextIO, Tuple

from .stats import sample_gaussian, sample_uniform_double

_MAX = sys.float_info.max


@dataclass(frozen=True)
class DataPoint:
    """A sample position with its weight."""

    x: float = 0.0
    y: float = 0.0


def _grid(start: float, stop: float, step: float) -> Iterator[float]:
    if step <= 0:
        raise ValueError("step must be positive")
    x = start
    while x <= stop:
        yield x
        x += step


def _sqr(x: float) -> float:
    return x * x


class DataSmoother:
    """Weighted samples smoothed with a Gaussian kernel of width ``parzen_window``."""

    def __init__(self, parzen_window: float) -> None:
        self.reset(parzen_window)

    def reset(self, parzen_window: float) -> None:
        """Drop all samples and set a new kernel width."""
        self._data: List[DataPoint] = []
        self._cumulated: List[float] = []
        self._integral = -1.0
        self._parzen_window = parzen_window
        self._from = _MAX
        self._to = -_MAX
        self._last_step = 0.001

    @property
    def data(self) -> Tuple[DataPoint, ...]:
        """The samples added so far."""
        return tuple(self._data)

    @property
    def bounds(self) -> Tuple[float, float]:
        """The interval over which the smoothed data is evaluated."""
        return self._from, self._to

    def _require_data(self) -> None:
        if not self._data:
            raise ValueError("the smoother holds no data")

    def set_min_to_zero(self) -> None:
        """Shift all weights so that the smallest one is zero."""
        if self._data:
            minval = min(d.y for d in self._data)
            self._data = [DataPoint(d.x, d.y - minval) for d in self._data]
        self._cumulated.clear()

    def add(self, x: float, p: float) -> None:
        """Add a sample at ``x`` with weight ``p``."""
        self._data.append(DataPoint(x, p))
        self._integral = -1.0
        reach = 3.0 * self._parzen_window
        if x - reach < self._from:
            self._from = x - reach
        if x + reach > self._to:
            self._to = x + reach
        self._cumulated.clear()

    def integrate(self, step: float) -> float:
        """Integrate the smoothed data over its bounds and remember the result."""
        self._last_step = step
        self._integral = sum(self.smoothed_data(x) * step for x in _grid(self._from, self._to, step))
        return self._integral

    def integral(self, step: float, x_to: float) -> float:
        """Integral of the smoothed data from the lower bound to ``x_to``."""
        return sum(self.smoothed_data(x) * step for x in _grid(self._from, x_to, step))

    def smoothed_data(self, x: float) -> float:
        """Normalised kernel density at ``x``."""
        self._require_data()
        p = 0.0
        sum_y = 0.0
        for d in self._data:
            dist = abs(x - d.x)
            p += d.y * math.exp(-0.5 * _sqr(dist / self._parzen_window))
            sum_y += d.y
        denom = math.sqrt(2.0 * math.pi) * sum_y * self._parzen_window
        return p / denom

    def sample_numeric(self, step: float) -> float:
        """Draw from the smoothed density by numeric inversion on a grid."""
        self._require_data()
        if self._integral < 0 or step != self._last_step:
            self.integrate(step)
        r = sample_uniform_double(0.0, self._integral)
        acc = 0.0
        for x in _grid(self._from, self._to, step):
            acc += self.smoothed_data(x) * step
            if acc > r:
                return x - 0.5 * step
        return self._to

    def _compute_cumulated(self) -> None:
        self._require_data()
        total = 0.0
        self._cumulated = []
        for d in self._data:
            total += d.y
            self._cumulated.append(total)

    def sample(self) -> float:
        """Pick a sample by weight and perturb it with the kernel."""
        self._require_data()
        if not self._cumulated:
            self._compute_cumulated()
        threshold = sample_uniform_double(0.0, self._cumulated[-1])
        acc = 0.0
        for d, cum in zip(self._data, self._cumulated):
            acc += cum
            if acc >= threshold:
                return d.x + sample_gaussian(self._parzen_window)
        raise RuntimeError("no sample could be selected")

    def sample_multiple(self, num: int) -> List[float]:
        """Draw ``num`` samples as :meth:`sample` does, in one sweep."""
        self._require_data()
        if not self._cumulated:
            self._compute_cumulated()
        maxval = self._cumulated[-1]
        thresholds = sorted(sample_uniform_double(0.0, maxval) for _ in range(num))
        samples: List[float] = []
        acc = 0.0
        j = 0
        for d, cum in zip(self._data, self._cumulated):
            if j >= num:
                break
            acc += cum
            while j < num and acc >= thresholds[j]:
                samples.append(d.x + sample_gaussian(self._parzen_window))
                j += 1
        return samples

    def approx_gauss(self, step: float) -> Tuple[float, float]:
        """Mean and standard deviation of the smoothed density on a grid."""
        self._require_data()
        total = 0.0
        mean = 0.0
        for x in _grid(self._from, self._to, step):
            d = self.smoothed_data(x)
            total += d
            mean += x * d
        mean /= total
        var = 0.0
        for x in _grid(self._from, self._to, step):
            var += _sqr(x - mean) * self.smoothed_data(x)
        var /= total
        return mean, math.sqrt(var)

    @staticmethod
    def gauss(x: float, mean: float, sigma: float) -> float:
        """Gaussian density at ``x``."""
        return 1.0 / (math.sqrt(2.0 * math.pi) * sigma) * math.exp(-0.5 * _sqr((x - mean) / sigma))

    def cramer_von_mises_to_gauss(self, step: float, mean: float, sigma: float) -> float:
        """Sum of squared differences of the running integrals of data and Gaussian."""
        p = 0.0
        sint = 0.0
        gint = 0.0
        for x in _grid(self._from, self._to, step):
            sint += self.smoothed_data(x) * step
            gint += self.gauss(x, mean, sigma) * step
            p += _sqr(sint - gint)
        return p

    def kld_to_gauss(self, step: float, mean: float, sigma: float) -> float:
        """Kullback-Leibler divergence of the smoothed data from a Gaussian.

        Raises ValueError when the two masses over the bounds differ by more than 0.1.
        """
        p = 0.0
        sd = 0.0
        sg = 0.0
        for x in _grid(self._from, self._to, step):
            d = 1e-10 + self.smoothed_data(x)
            g = 1e-10 + self.gauss(x, mean, sigma)
            sd += d
            sg += g
            p += d * math.log(d / g)
        sd *= step
        sg *= step
        if abs(sd - sg) > 0.1:
            raise ValueError("smoothed data and Gaussian have incomparable mass")
        return p * step

    def dump_data(self, stream: TextIO) -> None:
        """Write the raw samples as ``x y`` lines."""
        for d in self._data:
            stream.write("%f %f\n" % (d.x, d.y))

    def dump_smoothed_data(self, stream: TextIO, step: float) -> None:
        """Write the smoothed density on a grid as ``x density`` lines."""
        for x in _grid(self._from, self._to, step):
            stream.write("%f %f\n" % (x, self.smoothed_data(x)))