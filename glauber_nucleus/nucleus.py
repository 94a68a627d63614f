"""glauber_nucleus/nucleus.py
Author: Sabin Thapa <sthapa3@kent.edu>

Nucleus types.  A nucleus owns a fixed ensemble of nucleons and resamples
their positions once per event:

- Proton: a single point-like nucleon, radius 0
- WoodsSaxonNucleus: A uncorrelated nucleons from a spherical Woods–Saxon
  density (non-deformed heavy nuclei such as Au, Pb)

Iterating over a nucleus yields its NucleonState objects in a fixed order;
slot i is always the same nucleon, only its position and flags change.

Example::

    nuc = create("Pb")
    bmax = 2.0 * nuc.radius()
    nuc.sample_nucleons(0.5 * b, rng=rng)
    xyz = nuc.positions()  # (208, 3)
"""

from __future__ import annotations

import numpy as np
from typing import Iterator, Literal

from .geometry import DEFAULT_SAMPLER_CONFIG, SamplerConfig, WoodsSaxonParams, WoodsSaxonSampler
from .nucleon import NucleonState


NucleusKind = Literal["proton", "woods-saxon"]


class Nucleus:
    """Common container and iteration over the owned nucleons.

    Subclasses implement radius() and sample_nucleons().  Calling
    sample_nucleons() overwrites every nucleon; any references held from a
    previous pass see the new positions.
    """

    kind: NucleusKind

    def __init__(self, A: int):
        if type(self) is Nucleus:
            raise TypeError("Nucleus is a base class; use Proton, WoodsSaxonNucleus or create().")
        A = int(A)
        if A < 1:
            raise ValueError(f"A nucleus needs at least one nucleon, got A={A}.")
        self._nucleons = tuple(NucleonState() for _ in range(A))

    @property
    def A(self) -> int:
        return len(self._nucleons)

    def radius(self) -> float:
        raise NotImplementedError

    def sample_nucleons(self, offset: float, *, rng: np.random.Generator) -> None:
        raise NotImplementedError

    # ---- sequence access ----

    def __len__(self) -> int:
        return len(self._nucleons)

    def __iter__(self) -> Iterator[NucleonState]:
        return iter(self._nucleons)

    def __reversed__(self) -> Iterator[NucleonState]:
        return reversed(self._nucleons)

    def __getitem__(self, i: int) -> NucleonState:
        return self._nucleons[i]

    # ---- vectorized views ----

    def positions(self) -> np.ndarray:
        """Snapshot (A,3) array of nucleon positions."""
        return np.array([(n.x, n.y, n.z) for n in self._nucleons], dtype=float)

    def n_participants(self) -> int:
        return sum(1 for n in self._nucleons if n.participant)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(A={self.A}, radius={self.radius():.3f})"


class Proton(Nucleus):
    """Trivial nucleus with a single nucleon."""

    kind: NucleusKind = "proton"

    def __init__(self):
        super().__init__(1)

    def radius(self) -> float:
        """Always zero."""
        return 0.0

    def sample_nucleons(self, offset: float, *, rng: np.random.Generator | None = None) -> None:
        """Place the nucleon at (offset, 0, 0); no random numbers are drawn."""
        self._nucleons[0].set_position(offset, 0.0, 0.0)


class WoodsSaxonNucleus(Nucleus):
    """Samples nucleons from a spherically symmetric Woods–Saxon distribution.

    The inverse-CDF table is built once here and reused for every event.
    """

    kind: NucleusKind = "woods-saxon"

    def __init__(self, A: int, R: float, a: float, *, config: SamplerConfig = DEFAULT_SAMPLER_CONFIG):
        self.params = WoodsSaxonParams(A=int(A), R=float(R), a=float(a))
        self._sampler = WoodsSaxonSampler(self.params, config=config)
        super().__init__(self.params.A)

    @property
    def R(self) -> float:
        return self.params.R

    @property
    def a(self) -> float:
        return self.params.a

    @property
    def sampler(self) -> WoodsSaxonSampler:
        return self._sampler

    def radius(self) -> float:
        """Practical cutoff R + 3a, smaller than the table support.

        The density falls off exponentially past R.  Since the radius
        determines the impact parameter range, reporting the true maximum
        would make far too many events have no participants.
        """
        return self._sampler.config.cutoff_radius(self.params.R, self.params.a)

    def sample_nucleons(self, offset: float, *, rng: np.random.Generator) -> None:
        """Sample uncorrelated Woods–Saxon positions, shifted by offset in x."""
        xyz = self._sampler.sample_positions(len(self._nucleons), rng=rng)
        xyz[:, 0] += offset
        for nucleon, (x, y, z) in zip(self._nucleons, xyz):
            nucleon.set_position(x, y, z)
