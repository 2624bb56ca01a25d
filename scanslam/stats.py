"""Random sampling helpers and a three-dimensional Gaussian over poses."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Tuple

from .eigen3 import eigen_decomposition
from .geometry import OrientedPoint

_rng = random.Random()


def _nonzero_draw() -> float:
    while True:
        r = _rng.random()
        if r != 0.0:
            return r


def _polar_gaussian(sigma: float) -> float:
    """Zero-mean Gaussian draw using the polar Box-Muller transformation."""
    while True:
        x1 = 2.0 * _nonzero_draw() - 1.0
        x2 = 2.0 * _nonzero_draw() - 1.0
        w = x1 * x1 + x2 * x2
        if 0.0 < w <= 1.0:
            return sigma * x2 * math.sqrt(-2.0 * math.log(w) / w)


def sample_gaussian(sigma: float, seed: int = 0) -> float:
    """Draw from a zero-mean Gaussian with deviation ``sigma``.

    A non-zero ``seed`` reseeds the shared generator before drawing.
    """
    if seed != 0:
        _rng.seed(seed)
    if sigma == 0:
        return 0.0
    return _polar_gaussian(sigma)


def sample_uniform_double(low: float, high: float) -> float:
    """Draw uniformly from the interval between ``low`` and ``high``."""
    return low + _rng.random() * (high - low)


def eval_log_gaussian(sigma_square: float, delta: float) -> float:
    """Log density of a zero-mean Gaussian with variance ``sigma_square`` at ``delta``."""
    if sigma_square <= 0:
        sigma_square = 1e-4
    return -0.5 * delta * delta / sigma_square - 0.5 * math.log(2 * math.pi * sigma_square)


@dataclass(frozen=True)
class Covariance3:
    """Symmetric covariance of an (x, y, theta) pose."""

    xx: float = 0.0
    yy: float = 0.0
    tt: float = 0.0
    xy: float = 0.0
    xt: float = 0.0
    yt: float = 0.0

    def __add__(self, other: Covariance3) -> Covariance3:
        if not isinstance(other, Covariance3):
            return NotImplemented
        return Covariance3(
            self.xx + other.xx,
            self.yy + other.yy,
            self.tt + other.tt,
            self.xy + other.xy,
            self.xt + other.xt,
            self.yt + other.yt,
        )

    def as_matrix(self) -> Tuple[Tuple[float, float, float], ...]:
        """The full 3x3 matrix."""
        return (
            (self.xx, self.xy, self.xt),
            (self.xy, self.yy, self.yt),
            (self.xt, self.yt, self.tt),
        )


@dataclass(frozen=True)
class Gaussian3:
    """A Gaussian over poses, kept in its eigen-decomposed form.

    ``eigenvectors[i][j]`` is row ``i`` of the matrix whose columns are the
    eigenvectors belonging to ``eigenvalues[j]``.
    """

    mean: OrientedPoint
    cov: Covariance3
    eigenvalues: Tuple[float, float, float]
    eigenvectors: Tuple[Tuple[float, float, float], ...]

    @classmethod
    def from_covariance(cls, mean: OrientedPoint, covariance: Covariance3) -> Gaussian3:
        """Build the Gaussian from its mean and covariance."""
        values, vectors = eigen_decomposition(covariance.as_matrix())
        return cls(
            mean=mean,
            cov=covariance,
            eigenvalues=tuple(values),
            eigenvectors=tuple(tuple(row) for row in vectors),
        )

    def eval(self, pose: OrientedPoint) -> float:
        """Log density of the Gaussian at ``pose``."""
        dtheta = pose.theta - self.mean.theta
        q = (
            pose.x - self.mean.x,
            pose.y - self.mean.y,
            math.atan2(math.sin(dtheta), math.cos(dtheta)),
        )
        vec = self.eigenvectors
        total = 0.0
        for j, value in enumerate(self.eigenvalues):
            projected = sum(vec[i][j] * q[i] for i in range(3))
            total += eval_log_gaussian(value, projected)
        return total