"""Nuclear geometry sampling for MC Glauber initial conditions

Author: Sabin Thapa <sthapa3@kent.edu>

This small package provides the event-by-event nucleon configurations that a
Monte Carlo Glauber / initial-condition generator collides:

- Species lookup ("p", "Cu", "Au", "Pb") -> nucleus object
- Point-like proton and spherical Woods–Saxon nuclei
- Fast piecewise-linear inverse-CDF sampling of Woods–Saxon radii
- Per-nucleon participation flags for the downstream collision logic

All distances are in fm unless stated otherwise.  Random numbers always come
from a caller-supplied np.random.Generator.
"""

from .geometry import DEFAULT_SAMPLER_CONFIG, SamplerConfig, WoodsSaxonParams, WoodsSaxonSampler
from .nucleon import NucleonState
from .nucleus import Nucleus, Proton, WoodsSaxonNucleus
from .species import UnknownSpeciesError, create, known_species

__all__ = [
    "DEFAULT_SAMPLER_CONFIG",
    "SamplerConfig",
    "WoodsSaxonParams",
    "WoodsSaxonSampler",
    "NucleonState",
    "Nucleus",
    "Proton",
    "WoodsSaxonNucleus",
    "UnknownSpeciesError",
    "create",
    "known_species",
]
