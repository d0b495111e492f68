# site_coefficients.py
"""
Site coefficients Fa and Fv by piecewise-linear interpolation over the
code tables. Queries outside the tabulated range are clamped to the end values.
"""
import logging
import numpy as np
from typing import Dict, Sequence

from core.model_state import SiteClass

logger = logging.getLogger(__name__)


# Mapped spectral acceleration breakpoints
SS_GRID = (0.25, 0.5, 0.75, 1.0, 1.25)
S1_GRID = (0.1, 0.2, 0.3, 0.4, 0.5)

# Short-period site coefficient Fa, aligned to SS_GRID
FA_TABLE: Dict[SiteClass, tuple] = {
    SiteClass.SA: (0.8, 0.8, 0.8, 0.8, 0.8),
    SiteClass.SB: (0.9, 0.9, 0.9, 0.9, 0.9),
    SiteClass.SC: (1.2, 1.2, 1.1, 1.0, 1.0),
    SiteClass.SD: (1.6, 1.4, 1.2, 1.1, 1.0),
    SiteClass.SE: (2.5, 1.7, 1.2, 0.9, 0.8),
    SiteClass.SF: (0.0, 0.0, 0.0, 0.0, 0.0),
}

# 1-second site coefficient Fv, aligned to S1_GRID
FV_TABLE: Dict[SiteClass, tuple] = {
    SiteClass.SA: (0.8, 0.8, 0.8, 0.8, 0.8),
    SiteClass.SB: (0.9, 0.9, 0.9, 0.9, 0.9),
    SiteClass.SC: (1.7, 1.6, 1.5, 1.4, 1.3),
    SiteClass.SD: (2.4, 2.2, 2.0, 1.9, 1.8),
    SiteClass.SE: (3.5, 3.2, 2.8, 2.4, 2.4),
    SiteClass.SF: (0.0, 0.0, 0.0, 0.0, 0.0),
}


def interpolate(x: float, x_grid: Sequence[float], y_values: Sequence[float]) -> float:
    """Piecewise-linear interpolation clamped to the first and last table values.

    Args:
        x: Query value
        x_grid: Increasing breakpoints
        y_values: Table values aligned to x_grid

    Returns:
        Interpolated value
    """
    if len(x_grid) != len(y_values):
        raise ValueError(
            f"Grid length ({len(x_grid)}) must equal table length ({len(y_values)})"
        )
    # np.interp holds the end values outside [x_grid[0], x_grid[-1]]
    return float(np.interp(x, np.asarray(x_grid), np.asarray(y_values)))


def short_period_coefficient(ss: float, site_class: SiteClass) -> float:
    """Interpolate Fa for the mapped short-period acceleration Ss."""
    site_class = SiteClass.parse(site_class)
    fa = interpolate(ss, SS_GRID, FA_TABLE[site_class])
    logger.debug(f"Fa = {fa:.3f} for Ss = {ss:.3f}, Site Class = {site_class.value}")
    return fa


def long_period_coefficient(s1: float, site_class: SiteClass) -> float:
    """Interpolate Fv for the mapped 1-second acceleration S1."""
    site_class = SiteClass.parse(site_class)
    fv = interpolate(s1, S1_GRID, FV_TABLE[site_class])
    logger.debug(f"Fv = {fv:.3f} for S1 = {s1:.3f}, Site Class = {site_class.value}")
    return fv

