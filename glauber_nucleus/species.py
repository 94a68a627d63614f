"""glauber_nucleus/species.py
Author: Sabin Thapa <sthapa3@kent.edu>

Species symbol -> nucleus factory.

Woods–Saxon parameters (A, R [fm], a [fm]) for non-deformed nuclei follow
the standard heavy-ion Glauber choices.
Override per project by constructing WoodsSaxonNucleus directly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .nucleus import Nucleus, Proton, WoodsSaxonNucleus

logger = logging.getLogger(__name__)


class UnknownSpeciesError(ValueError):
    """Raised by create() for a symbol missing from the species table."""


@dataclass(frozen=True)
class SpeciesEntry:
    symbol: str
    A: int
    # None for point-like species
    R: Optional[float] = None
    a: Optional[float] = None

    def build(self) -> Nucleus:
        if self.R is None:
            return Proton()
        return WoodsSaxonNucleus(self.A, self.R, self.a)


SPECIES = {
    e.symbol: e
    for e in (
        SpeciesEntry("p", A=1),
        SpeciesEntry("Cu", A=62, R=4.20, a=0.596),
        SpeciesEntry("Au", A=197, R=6.38, a=0.535),
        SpeciesEntry("Pb", A=208, R=6.62, a=0.546),
    )
}

_ALIASES = {sym.lower(): sym for sym in SPECIES}


def known_species() -> tuple[str, ...]:
    return tuple(SPECIES)


def create(species: str) -> Nucleus:
    """Create a fresh nucleus for a standard symbol, e.g. "p" or "Pb".

    Each call returns a new object; nuclei hold per-event state and are
    never shared.
    """
    name = str(species).strip()
    symbol = name if name in SPECIES else _ALIASES.get(name.lower())
    if symbol is None:
        raise UnknownSpeciesError(
            f"Unknown nucleus species '{species}'. Known: {', '.join(SPECIES)}."
        )
    logger.debug("Creating nucleus for species %s", symbol)
    return SPECIES[symbol].build()
