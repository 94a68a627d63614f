"""glauber_nucleus/nucleon.py
Author: Sabin Thapa <sthapa3@kent.edu>

Per-nucleon state carried through one event:
- position (x, y, z) in fm, z kept for 3D bookkeeping
- participation flag set by the collision logic
- scratch weight for entropy deposition (mean 1)

Positions are meaningless until the owning nucleus has sampled them.
"""

from __future__ import annotations

import numpy as np
from dataclasses import dataclass


@dataclass(eq=False)
class NucleonState:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    participant: bool = False
    weight: float = 1.0

    @property
    def position(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def set_position(self, x: float, y: float, z: float = 0.0) -> None:
        """Place the nucleon and clear per-event flags."""
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.reset()

    def set_participant(self, weight: float | None = None) -> None:
        self.participant = True
        if weight is not None:
            self.weight = float(weight)

    def reset(self) -> None:
        self.participant = False
        self.weight = 1.0
