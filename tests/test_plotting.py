"""
Smoke tests for the diagnostics plots (Agg backend)
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

from glauber_nucleus import Proton, WoodsSaxonNucleus
from glauber_nucleus.plotting import plot_radial_check, set_pub_style


class TestRadialCheck:

    def test_returns_all_radii(self):
        set_pub_style()
        nuc = WoodsSaxonNucleus(62, 4.20, 0.596)
        fig, ax = plt.subplots()
        try:
            radii = plot_radial_check(ax, nuc, rng=np.random.default_rng(0), n_events=10)
            assert radii.shape == (620,)
            assert np.all(radii <= nuc.sampler.r_max)
            assert ax.get_title() == ""
            assert len(ax.get_lines()) == 2  # analytic curve + radius marker
        finally:
            plt.close(fig)

    def test_rejects_proton(self):
        fig, ax = plt.subplots()
        try:
            with pytest.raises(ValueError):
                plot_radial_check(ax, Proton(), rng=np.random.default_rng(0))
        finally:
            plt.close(fig)
