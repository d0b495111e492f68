# src/core/model_state.py
"""
Input and result records for the seismic design parameter engine.
All records are immutable; derived values are produced by the calculation
functions, never assigned by callers.
"""
import math
import numbers
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Union

from core.constants import LONG_PERIOD_TRANSITION


def _validate_finite(value: float, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")


def _validate_positive(value: float, name: str) -> None:
    """Validate value is a finite number greater than zero.

    Raises:
        ValueError: If value not positive
    """
    _validate_finite(value, name)
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def _validate_non_negative(value: float, name: str) -> None:
    """Validate value is a finite number greater than or equal to zero.

    Raises:
        ValueError: If value negative
    """
    _validate_finite(value, name)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


class SiteClass(Enum):
    """Soil site classification, hard rock (SA) to site-specific soil (SF)."""

    SA = 'SA'
    SB = 'SB'
    SC = 'SC'
    SD = 'SD'
    SE = 'SE'
    SF = 'SF'

    @classmethod
    def parse(cls, value: Union['SiteClass', str]) -> 'SiteClass':
        """Coerce 'SD', 'sd' or 'D' to SiteClass.SD.

        Raises:
            ValueError: If value is not a known site class
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if len(key) == 1:
                key = f"S{key}"
            if key in cls.__members__:
                return cls[key]
        valid = [member.value for member in cls]
        raise ValueError(f"Site class must be one of {valid}, got {value!r}")

    @property
    def requires_site_specific_analysis(self) -> bool:
        return self is SiteClass.SF


@dataclass(frozen=True)
class SoilData:
    """Soil record; only the site class matters to the seismic engine."""

    site_class: SiteClass

    def __post_init__(self):
        object.__setattr__(self, 'site_class', SiteClass.parse(self.site_class))


@dataclass(frozen=True)
class Geometry:
    """Building plan dimensions and story layout (meters)."""

    length: float
    width: float
    number_of_floors: int
    height_per_floor: float

    def __post_init__(self):
        _validate_positive(self.length, 'length')
        _validate_positive(self.width, 'width')
        _validate_positive(self.height_per_floor, 'height_per_floor')
        if isinstance(self.number_of_floors, bool) or not isinstance(self.number_of_floors, numbers.Integral):
            raise ValueError(
                f"number_of_floors must be an integer, got {self.number_of_floors!r}"
            )
        if self.number_of_floors < 1:
            raise ValueError(
                f"number_of_floors must be at least 1, got {self.number_of_floors}"
            )

    @property
    def floor_area(self) -> float:
        return self.length * self.width

    @property
    def total_height(self) -> float:
        """Height of the roof above the base, hn."""
        return self.height_per_floor * self.number_of_floors


@dataclass(frozen=True)
class Loads:
    """Area-intensity loads in kg/m²."""

    dead_load: float
    live_load: float
    partition_load: float = 0.0

    def __post_init__(self):
        _validate_non_negative(self.dead_load, 'dead_load')
        _validate_non_negative(self.live_load, 'live_load')
        _validate_non_negative(self.partition_load, 'partition_load')


@dataclass(frozen=True)
class MaterialProperties:
    """Material record; fc selects the approximate period coefficient."""

    fc: float

    def __post_init__(self):
        _validate_positive(self.fc, 'fc')


@dataclass(frozen=True)
class SeismicParameters:
    """Mapped hazard inputs plus the derived design parameters.

    Callers populate ``ss``, ``s1``, ``site_class``, ``r`` and ``importance``.
    The remaining fields start unset and are filled in by
    ``Seismic_Design.seismic_functions.derive_seismic_parameters``.
    """

    ss: float
    s1: float
    site_class: SiteClass
    r: float = 8.0
    importance: float = 1.0

    fa: Optional[float] = field(default=None, init=False)
    fv: Optional[float] = field(default=None, init=False)
    sds: Optional[float] = field(default=None, init=False)
    sd1: Optional[float] = field(default=None, init=False)
    t0: Optional[float] = field(default=None, init=False)
    ts: Optional[float] = field(default=None, init=False)
    tl: float = field(default=LONG_PERIOD_TRANSITION, init=False)

    def __post_init__(self):
        object.__setattr__(self, 'site_class', SiteClass.parse(self.site_class))
        _validate_non_negative(self.ss, 'ss')
        _validate_non_negative(self.s1, 's1')
        _validate_positive(self.r, 'r')
        _validate_positive(self.importance, 'importance')

    @property
    def is_derived(self) -> bool:
        return self.sds is not None

    @property
    def r_over_importance(self) -> float:
        return self.r / self.importance

    def with_derived(self, fa: float, fv: float, sds: float, sd1: float,
                     t0: float, ts: float, tl: float) -> 'SeismicParameters':
        """Return a copy carrying the derived design parameters."""
        derived = replace(self)
        for name, value in (('fa', fa), ('fv', fv), ('sds', sds), ('sd1', sd1),
                            ('t0', t0), ('ts', ts), ('tl', tl)):
            object.__setattr__(derived, name, float(value))
        return derived

    def require_derived(self) -> None:
        """
        Raises:
            ValueError: If the design parameters have not been derived yet
        """
        if not self.is_derived:
            raise ValueError(
                "SeismicParameters must be derived before use "
                "(call derive_seismic_parameters first)"
            )


@dataclass(frozen=True)
class ResponseSpectrumPoint:
    period: float
    acceleration: float


@dataclass(frozen=True)
class FundamentalPeriod:
    """Approximate period Ta and its code upper limit Tmax = Cu·Ta."""

    ta: float
    tmax: float
    ct: float
    cu: float
    height: float


@dataclass(frozen=True)
class BaseShear:
    """Equivalent static base shear V = Cs·W (kN)."""

    v: float
    cs: float
    seismic_weight: float
    cs_max: float
    cs_min: float


@dataclass(frozen=True)
class FloorForce:
    """Lateral force at one floor level; floor 1 is the lowest above base."""

    floor: int
    height: float
    weight: float
    force: float
