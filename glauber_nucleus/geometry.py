"""glauber_nucleus/geometry.py
Author: Sabin Thapa <sthapa3@kent.edu>

Geometry primitives:
- Spherical Woods–Saxon shape parameters and density ρ(r)
- Piecewise-linear inverse-CDF sampler for Woods–Saxon radii
- Isotropic direction sampling

Designed to be:
- fast (inverse-CDF table built once, sampling is a vectorized np.interp)
- reproducible (every draw comes from a caller-supplied np.random.Generator)
"""

from __future__ import annotations

import logging

import numpy as np
from dataclasses import dataclass
from scipy.integrate import cumulative_trapezoid
from scipy.special import expit

logger = logging.getLogger(__name__)


# -------------------------
# Woods–Saxon parameters
# -------------------------

@dataclass(frozen=True)
class WoodsSaxonParams:
    """Spherical Woods–Saxon parameters.

    rho(r) ∝ 1 / (1 + exp((r - R)/a))

    A is the mass number (number of nucleons), R the half-density radius and
    a the surface diffuseness, both in fm.
    """
    A: int
    R: float
    a: float

    def __post_init__(self) -> None:
        if int(self.A) < 1:
            raise ValueError(f"Mass number must be positive, got A={self.A}.")
        if not (np.isfinite(self.R) and self.R > 0.0):
            raise ValueError(f"Woods-Saxon radius must be positive, got R={self.R}.")
        if not (np.isfinite(self.a) and self.a > 0.0):
            raise ValueError(f"Woods-Saxon diffuseness must be positive, got a={self.a}.")


def woods_saxon_density(r: np.ndarray, R: float, a: float) -> np.ndarray:
    """Un-normalized density 1 / (1 + exp((r - R)/a))."""
    return expit(-(np.asarray(r, dtype=float) - R) / a)


# -------------------------
# Sampling constants
# -------------------------

@dataclass(frozen=True)
class SamplerConfig:
    """Tuned constants for Woods–Saxon sampling.

    Table support extends to R + rmax_diffuseness * a; for typical heavy-ion
    parameters the mass beyond R + 10a is O(1e-5).  The reported nucleus
    radius is R + radius_diffuseness * a, which bounds impact-parameter
    sampling upstream.
    """
    n_steps: int = 1000
    rmax_diffuseness: float = 10.0
    radius_diffuseness: float = 3.0

    def __post_init__(self) -> None:
        if int(self.n_steps) < 2:
            raise ValueError(f"n_steps must be at least 2, got {self.n_steps}.")
        if not (np.isfinite(self.radius_diffuseness) and self.radius_diffuseness > 0.0):
            raise ValueError(f"radius_diffuseness must be positive and finite, got {self.radius_diffuseness}.")
        if not (np.isfinite(self.rmax_diffuseness) and self.rmax_diffuseness > self.radius_diffuseness):
            raise ValueError(
                f"rmax_diffuseness ({self.rmax_diffuseness}) must be finite and exceed "
                f"radius_diffuseness ({self.radius_diffuseness})."
            )

    def table_rmax(self, R: float, a: float) -> float:
        return float(R + self.rmax_diffuseness * a)

    def cutoff_radius(self, R: float, a: float) -> float:
        return float(R + self.radius_diffuseness * a)


DEFAULT_SAMPLER_CONFIG = SamplerConfig()


# -------------------------
# Directions
# -------------------------

def sample_isotropic_directions(n: int, *, rng: np.random.Generator) -> np.ndarray:
    """Return (n,3) unit vectors uniform on the sphere (uniform cos θ and φ)."""
    cos_th = rng.uniform(-1.0, 1.0, size=n)
    phi = rng.uniform(0.0, 2.0 * np.pi, size=n)
    sin_th = np.sqrt(1.0 - cos_th * cos_th)
    return np.stack([sin_th * np.cos(phi), sin_th * np.sin(phi), cos_th], axis=1)


# -------------------------
# Woods–Saxon sampler
# -------------------------

class WoodsSaxonSampler:
    """Sample radii and 3D positions from a spherical Woods–Saxon density.

    The radial PDF is ∝ r^2 / (1 + exp((r - R)/a)).  Its CDF has no analytic
    inverse, so it is tabulated on [0, r_max] with ``n_steps`` linear segments
    and inverted by linear interpolation.  For a large number of steps this
    is very accurate.

    The table is built in the constructor and never written afterwards, so a
    sampler can be read from several threads once constructed.  The random
    generator passed to each call is the only state that advances.
    """

    def __init__(self, params: WoodsSaxonParams, *, config: SamplerConfig = DEFAULT_SAMPLER_CONFIG):
        self.p = params
        self.config = config
        self.r_max = config.table_rmax(params.R, params.a)
        self._build_inverse_cdf_table(int(config.n_steps))

    def _build_inverse_cdf_table(self, n_steps: int) -> None:
        p = self.p
        r = np.linspace(0.0, self.r_max, n_steps + 1)
        P = r * r * woods_saxon_density(r, p.R, p.a)  # radial PDF up to normalization
        cdf = cumulative_trapezoid(P, r, initial=0.0)
        cdf /= cdf[-1]

        r.flags.writeable = False
        cdf.flags.writeable = False
        self._r = r
        self._cdf = cdf
        logger.debug(
            "Built Woods-Saxon inverse-CDF table: R=%.4g a=%.4g r_max=%.4g n_steps=%d",
            p.R, p.a, self.r_max, n_steps,
        )

    @property
    def table(self) -> tuple[np.ndarray, np.ndarray]:
        """Read-only (r, cdf) nodes of the tabulated distribution."""
        return self._r, self._cdf

    def cdf(self, r: np.ndarray) -> np.ndarray:
        """Tabulated CDF at r (0 below the origin, 1 beyond r_max)."""
        return np.interp(r, self._r, self._cdf)

    def inverse_cdf(self, u: np.ndarray) -> np.ndarray:
        # np.interp clamps u outside [0, 1] to the table end points
        return np.interp(u, self._cdf, self._r)

    def sample_radii(self, n: int, *, rng: np.random.Generator) -> np.ndarray:
        return self.inverse_cdf(rng.random(n))

    def sample_radius(self, rng: np.random.Generator) -> float:
        return float(self.inverse_cdf(rng.random()))

    def sample_positions(self, n: int, *, rng: np.random.Generator) -> np.ndarray:
        """Return (n,3) positions with Woods–Saxon radii and isotropic angles."""
        r = self.sample_radii(n, rng=rng)
        return r[:, None] * sample_isotropic_directions(n, rng=rng)

    def sample_position(self, rng: np.random.Generator) -> np.ndarray:
        return self.sample_positions(1, rng=rng)[0]
