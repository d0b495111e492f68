# force_distribution.py
"""
Vertical distribution of the equivalent lateral force over the floors,
with the resulting story shears and base overturning moment.
"""
import logging
import numpy as np
from typing import List, Sequence

from core.constants import (
    FORCE_BALANCE_TOLERANCE,
    GRAVITY_FACTOR,
    K_PERIOD_LOWER,
    K_PERIOD_UPPER,
)
from core.model_state import FloorForce, Geometry, Loads

logger = logging.getLogger(__name__)


def distribution_exponent(period: float) -> float:
    """Vertical distribution exponent k.

    Args:
        period: Design period

    Returns:
        1.0 up to 0.5 s, 2.0 from 2.5 s, linear in between
    """
    if period <= K_PERIOD_LOWER:
        return 1.0
    if period >= K_PERIOD_UPPER:
        return 2.0
    return 1.0 + (period - K_PERIOD_LOWER) / (K_PERIOD_UPPER - K_PERIOD_LOWER)


def floor_weight(geometry: Geometry, loads: Loads) -> float:
    """Seismic weight of one floor (kN), identical for every floor."""
    return geometry.floor_area * (loads.dead_load + loads.partition_load) * GRAVITY_FACTOR


def floor_heights(geometry: Geometry) -> np.ndarray:
    """Height of each floor level above the base, floor 1 first."""
    return np.arange(1, geometry.number_of_floors + 1) * geometry.height_per_floor


def distribute_lateral_forces(base_shear: float, period: float,
                              geometry: Geometry, loads: Loads) -> List[FloorForce]:
    """Distribute base shear over floors with Cvx = wx·hx^k / Σ wi·hi^k.

    Args:
        base_shear: Base shear V (kN)
        period: Design period, normally Ta
        geometry: Building geometry
        loads: Area loads (kg/m²)

    Returns:
        One FloorForce per floor, ordered from floor 1 upwards
    """
    k = distribution_exponent(period)
    heights = floor_heights(geometry)
    weights = np.full(geometry.number_of_floors, floor_weight(geometry, loads))

    w_h_k = weights * heights ** k
    total = w_h_k.sum()
    if total > 0:
        cvx = w_h_k / total
    else:
        # Zero floor weight; uniform weights cancel out of Cvx
        h_k = heights ** k
        cvx = h_k / h_k.sum()

    forces = base_shear * cvx

    force_sum = float(forces.sum())
    if base_shear > 0 and abs(force_sum - base_shear) > FORCE_BALANCE_TOLERANCE * base_shear:
        logger.warning(f"Force balance error: {abs(force_sum - base_shear):.2f} kN difference")

    logger.info(f"Distributed ELF forces: k={k:.2f}, floors={geometry.number_of_floors}, "
                f"total={force_sum:.2f} kN")

    return [
        FloorForce(floor=i, height=float(h), weight=float(w), force=float(f))
        for i, (h, w, f) in enumerate(zip(heights, weights, forces), start=1)
    ]


def story_shears(floor_forces: Sequence[FloorForce]) -> List[float]:
    """Story shear below each floor, accumulated from the roof down.

    Returns:
        Shears ordered like floor_forces; the first entry equals the base shear
    """
    forces = np.array([f.force for f in floor_forces])
    shears = np.cumsum(forces[::-1])[::-1]
    return [float(s) for s in shears]


def overturning_moment(floor_forces: Sequence[FloorForce]) -> float:
    """Overturning moment at the base, Σ Fx·hx (kN·m)."""
    forces = np.array([f.force for f in floor_forces])
    heights = np.array([f.height for f in floor_forces])

    moment = float(np.sum(forces * heights))
    logger.debug(f"Overturning moment = {moment:.2f} kN·m")
    return moment
