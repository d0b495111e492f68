# src/core/analysis_runner.py
"""
Runs the equivalent lateral force procedure end to end:
site coefficients -> design parameters -> spectrum and period ->
base shear -> vertical distribution.
"""
import logging
import pandas as pd
from dataclasses import dataclass, replace
from typing import List, Optional

from core.model_config import AnalysisInputs
from core.model_state import (
    BaseShear,
    FloorForce,
    FundamentalPeriod,
    Geometry,
    Loads,
    MaterialProperties,
    ResponseSpectrumPoint,
    SeismicParameters,
    SoilData,
)
from Seismic_Design.seismic_functions import (
    calculate_base_shear,
    calculate_building_period,
    derive_seismic_parameters,
    design_period,
    generate_response_spectrum,
)
from Seismic_Design.force_distribution import (
    distribute_lateral_forces,
    overturning_moment,
    story_shears,
)


@dataclass(frozen=True)
class SeismicResults:
    """Outputs of one equivalent lateral force analysis."""

    parameters: SeismicParameters
    spectrum: List[ResponseSpectrumPoint]
    period: FundamentalPeriod
    design_period: float
    base_shear: BaseShear
    floor_forces: List[FloorForce]
    story_shears: List[float]
    overturning_moment: float

    def spectrum_frame(self) -> pd.DataFrame:
        """Response spectrum as a DataFrame with columns period, acceleration."""
        return pd.DataFrame(
            [(p.period, p.acceleration) for p in self.spectrum],
            columns=['period', 'acceleration'],
        )

    def floor_forces_frame(self) -> pd.DataFrame:
        """Floor forces as a DataFrame, one row per floor, with story shear."""
        df = pd.DataFrame(
            [(f.floor, f.height, f.weight, f.force) for f in self.floor_forces],
            columns=['floor', 'height', 'weight', 'force'],
        )
        df['story_shear'] = self.story_shears
        return df

    def summary(self) -> dict:
        """Scalar results keyed by their usual symbols."""
        return {
            'Fa': self.parameters.fa,
            'Fv': self.parameters.fv,
            'SDS': self.parameters.sds,
            'SD1': self.parameters.sd1,
            'T0': self.parameters.t0,
            'Ts': self.parameters.ts,
            'TL': self.parameters.tl,
            'Ta': self.period.ta,
            'Tmax': self.period.tmax,
            'T': self.design_period,
            'Cs': self.base_shear.cs,
            'W': self.base_shear.seismic_weight,
            'V': self.base_shear.v,
            'M': self.overturning_moment,
        }


class SeismicAnalysisRunner:
    """Executes the equivalent lateral force procedure on caller-supplied records."""

    def __init__(self, seismic: SeismicParameters, soil: SoilData, geometry: Geometry,
                 loads: Loads, materials: MaterialProperties,
                 analytical_period: Optional[float] = None):
        """Initialize with input records.

        Args:
            seismic: Mapped hazard inputs (ss, s1, site class, r, importance)
            soil: Soil record; its site class governs the site coefficients
            geometry: Building geometry
            loads: Area loads (kg/m²)
            materials: Material properties
            analytical_period: Optional computed period, capped at Tmax
        """
        self.seismic = seismic
        self.soil = soil
        self.geometry = geometry
        self.loads = loads
        self.materials = materials
        self.analytical_period = analytical_period
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_inputs(cls, inputs: AnalysisInputs) -> 'SeismicAnalysisRunner':
        return cls(inputs.seismic, inputs.soil, inputs.geometry, inputs.loads,
                   inputs.materials, analytical_period=inputs.analytical_period)

    def run(self) -> SeismicResults:
        """Run the full procedure.

        Returns:
            SeismicResults for the supplied records
        """
        self.logger.info(
            f"Starting ELF analysis: {self.geometry.number_of_floors} floors, "
            f"{self.geometry.length:.1f} x {self.geometry.width:.1f} m, "
            f"Site Class {self.soil.site_class.value}"
        )

        seismic = self.seismic
        if seismic.site_class is not self.soil.site_class:
            seismic = replace(seismic, site_class=self.soil.site_class)
        parameters = derive_seismic_parameters(seismic)

        spectrum = generate_response_spectrum(parameters)
        period = calculate_building_period(self.geometry, self.materials, parameters)
        t_design = design_period(period, self.analytical_period)

        base_shear = calculate_base_shear(parameters, self.geometry, self.loads, t_design)
        floor_forces = distribute_lateral_forces(base_shear.v, t_design, self.geometry, self.loads)
        shears = story_shears(floor_forces)
        moment = overturning_moment(floor_forces)

        self.logger.info(f"ELF analysis complete: V = {base_shear.v:.2f} kN, "
                         f"M = {moment:.2f} kN·m")

        return SeismicResults(
            parameters=parameters,
            spectrum=spectrum,
            period=period,
            design_period=t_design,
            base_shear=base_shear,
            floor_forces=floor_forces,
            story_shears=shears,
            overturning_moment=moment,
        )
