# seismic_functions.py
"""
Seismic design parameters, design response spectrum, approximate period and
equivalent static base shear.
Every function is pure: results depend only on the arguments.
"""
import logging
import math
from typing import Dict, Iterator, List, Optional

from core.constants import (
    CS_MIN_ABSOLUTE,
    CS_MIN_SDS_FACTOR,
    CS_WARNING_LIMIT,
    CT_FC_THRESHOLD,
    CT_HIGH_STRENGTH,
    CT_NORMAL_STRENGTH,
    CU_DEFAULT,
    CU_TIER_TOLERANCE,
    CU_TIERS,
    DESIGN_SPECTRUM_RATIO,
    GRAVITY_FACTOR,
    HEIGHT_WARNING_LIMIT,
    IMPORTANCE_WARNING_LIMIT,
    LIVE_LOAD_PARTICIPATION,
    LONG_PERIOD_TRANSITION,
    PERIOD_EXPONENT,
    R_WARNING_LIMIT,
    S1_WARNING_LIMIT,
    SPECTRUM_MAX_PERIOD,
    SPECTRUM_PERIOD_STEP,
    SS_WARNING_LIMIT,
)
from core.model_state import (
    BaseShear,
    FundamentalPeriod,
    Geometry,
    Loads,
    MaterialProperties,
    ResponseSpectrumPoint,
    SeismicParameters,
    SiteClass,
)
from Seismic_Design.site_coefficients import (
    long_period_coefficient,
    short_period_coefficient,
)

logger = logging.getLogger(__name__)


# ==================================================================
# DESIGN PARAMETERS
# ==================================================================

def calculate_design_parameters(ss: float, s1: float, site_class: SiteClass) -> Dict[str, float]:
    """Derive site coefficients, design accelerations and corner periods.

    Args:
        ss: Mapped spectral acceleration at short periods (g)
        s1: Mapped spectral acceleration at 1-second period (g)
        site_class: Site class

    Returns:
        Dictionary with fa, fv, sds, sd1, t0, ts, tl
    """
    site_class = SiteClass.parse(site_class)

    if site_class.requires_site_specific_analysis:
        logger.warning(
            f"Site Class {site_class.value} requires site-specific response analysis; "
            f"design spectral accelerations set to zero"
        )
        return {'fa': 0.0, 'fv': 0.0, 'sds': 0.0, 'sd1': 0.0,
                't0': 0.0, 'ts': 0.0, 'tl': LONG_PERIOD_TRANSITION}

    fa = short_period_coefficient(ss, site_class)
    fv = long_period_coefficient(s1, site_class)

    # MCE spectral accelerations adjusted for site class
    sms = fa * ss
    sm1 = fv * s1

    sds = DESIGN_SPECTRUM_RATIO * sms
    sd1 = DESIGN_SPECTRUM_RATIO * sm1

    # sds is zero only for a zero-hazard input (ss = 0)
    if sds > 0:
        t0 = 0.2 * sd1 / sds
        ts = sd1 / sds
    else:
        t0 = 0.0
        ts = 0.0

    return {'fa': fa, 'fv': fv, 'sds': sds, 'sd1': sd1,
            't0': t0, 'ts': ts, 'tl': LONG_PERIOD_TRANSITION}


def derive_seismic_parameters(params: SeismicParameters) -> SeismicParameters:
    """Return a copy of params with the derived design parameters filled in."""
    if params.ss > SS_WARNING_LIMIT:
        logger.warning(f"Ss value seems unusually high (Ss={params.ss:.3f} > {SS_WARNING_LIMIT})")
    if params.s1 > S1_WARNING_LIMIT:
        logger.warning(f"S1 value seems unusually high (S1={params.s1:.3f} > {S1_WARNING_LIMIT})")
    if params.r > R_WARNING_LIMIT:
        logger.warning(f"R value seems unusually high (R={params.r} > {R_WARNING_LIMIT})")
    if params.importance > IMPORTANCE_WARNING_LIMIT:
        logger.warning(f"Importance factor seems unusually high "
                       f"(Ie={params.importance} > {IMPORTANCE_WARNING_LIMIT})")

    design = calculate_design_parameters(params.ss, params.s1, params.site_class)
    derived = params.with_derived(**design)

    logger.info(f"Seismic parameters: SS={derived.ss:.3f}, S1={derived.s1:.3f}, "
                f"Fa={derived.fa:.3f}, Fv={derived.fv:.3f}, "
                f"SDS={derived.sds:.3f}, SD1={derived.sd1:.3f}, "
                f"Site Class={derived.site_class.value}")
    return derived


# ==================================================================
# RESPONSE SPECTRUM
# ==================================================================

def spectral_acceleration(period: float, sds: float, sd1: float,
                          t0: float, ts: float, tl: float) -> float:
    """Design spectral acceleration Sa at a single period.

    Args:
        period: Period T (seconds)
        sds, sd1: Design spectral accelerations
        t0, ts, tl: Corner periods

    Returns:
        Sa (g)
    """
    if period <= t0:
        if t0 <= 0:
            # Starting value of the ramp
            return 0.4 * sds
        return sds * (0.4 + 0.6 * period / t0)
    if period <= ts:
        return sds
    if period <= tl:
        return sd1 / period
    return sd1 * tl / period ** 2


class ResponseSpectrum:
    """Design response spectrum sampled from T = 0 to the maximum period.

    Points are generated lazily on each iteration, so the same instance
    can be iterated any number of times with identical results.
    """

    def __init__(self, sds: float, sd1: float, t0: float, ts: float, tl: float,
                 step: float = SPECTRUM_PERIOD_STEP,
                 max_period: float = SPECTRUM_MAX_PERIOD):
        if step <= 0:
            raise ValueError(f"step must be positive, got {step}")
        self.sds = sds
        self.sd1 = sd1
        self.t0 = t0
        self.ts = ts
        self.tl = tl
        self.step = step
        self.max_period = max_period
        self.n_points = int(round(max_period / step)) + 1

    @classmethod
    def from_parameters(cls, params: SeismicParameters, **kwargs) -> 'ResponseSpectrum':
        params.require_derived()
        return cls(params.sds, params.sd1, params.t0, params.ts, params.tl, **kwargs)

    def periods(self) -> Iterator[float]:
        for i in range(self.n_points):
            # Rounded so branch boundaries and the last period are sampled exactly
            yield round(i * self.step, 10)

    def __iter__(self) -> Iterator[ResponseSpectrumPoint]:
        for period in self.periods():
            yield ResponseSpectrumPoint(
                period=period,
                acceleration=spectral_acceleration(
                    period, self.sds, self.sd1, self.t0, self.ts, self.tl
                ),
            )

    def __len__(self) -> int:
        return self.n_points

    def points(self) -> List[ResponseSpectrumPoint]:
        return list(self)


def generate_response_spectrum(params: SeismicParameters) -> List[ResponseSpectrumPoint]:
    """Design response spectrum for derived seismic parameters.

    Returns:
        Ordered (period, acceleration) points from 0 to 4 s at 0.05 s
    """
    spectrum = ResponseSpectrum.from_parameters(params).points()
    logger.debug(f"Response spectrum: {len(spectrum)} points, "
                 f"peak Sa = {max(p.acceleration for p in spectrum):.3f}")
    return spectrum


# ==================================================================
# FUNDAMENTAL PERIOD
# ==================================================================

def period_coefficient(materials: MaterialProperties) -> float:
    """Approximate period coefficient Ct for RC moment frames."""
    if materials.fc >= CT_FC_THRESHOLD:
        return CT_HIGH_STRENGTH
    return CT_NORMAL_STRENGTH


def upper_limit_coefficient(sd1: float) -> float:
    """Coefficient Cu for the upper limit on the calculated period."""
    for sd1_lower_bound, cu in CU_TIERS:
        if sd1 >= sd1_lower_bound - CU_TIER_TOLERANCE:
            return cu
    return CU_DEFAULT


def calculate_building_period(geometry: Geometry, materials: MaterialProperties,
                              params: SeismicParameters) -> FundamentalPeriod:
    """Calculate approximate period Ta = Ct·hn^x and the upper limit Tmax.

    Args:
        geometry: Building geometry
        materials: Material properties (fc selects Ct)
        params: Derived seismic parameters (sd1 selects Cu)

    Returns:
        FundamentalPeriod with Ta and Tmax (seconds)
    """
    params.require_derived()

    hn = geometry.total_height
    if hn > HEIGHT_WARNING_LIMIT:
        logger.warning(f"Building height exceeds typical high-rise limits "
                       f"({hn:.1f} m > {HEIGHT_WARNING_LIMIT:.0f} m)")

    ct = period_coefficient(materials)
    ta = ct * hn ** PERIOD_EXPONENT

    cu = upper_limit_coefficient(params.sd1)
    tmax = cu * ta

    logger.debug(f"Approximate period Ta = {ta:.3f} sec (height = {hn:.1f} m, Ct = {ct}), "
                 f"Cu = {cu:.2f}, Tmax = {tmax:.3f} sec")
    return FundamentalPeriod(ta=ta, tmax=tmax, ct=ct, cu=cu, height=hn)


def design_period(period: FundamentalPeriod, analytical_period: Optional[float] = None) -> float:
    """Period used for force calculation.

    Args:
        period: Approximate period estimate
        analytical_period: Computed period from eigenvalue analysis

    Returns:
        Analytical period capped at Tmax, or Ta when none is given
    """
    if analytical_period is None:
        return period.ta

    if analytical_period <= 0:
        raise ValueError(f"analytical_period must be positive, got {analytical_period}")

    t_design = min(analytical_period, period.tmax)
    logger.debug(f"Design period T = {t_design:.3f} sec "
                 f"(min of {analytical_period:.3f}, Tmax = {period.tmax:.3f})")
    return t_design


# ==================================================================
# BASE SHEAR
# ==================================================================

def seismic_weight(geometry: Geometry, loads: Loads) -> float:
    """Total seismic weight W (kN): dead + partition + 25% live over all floors."""
    dead_load = (loads.dead_load + loads.partition_load) * GRAVITY_FACTOR
    live_load = loads.live_load * GRAVITY_FACTOR
    return (geometry.floor_area * geometry.number_of_floors
            * (dead_load + LIVE_LOAD_PARTICIPATION * live_load))


def calculate_cs_coefficient(params: SeismicParameters, period: float) -> Dict[str, float]:
    """Calculate seismic response coefficient Cs.

    Args:
        params: Derived seismic parameters
        period: Design period

    Returns:
        Dictionary with cs, cs_max, cs_min
    """
    params.require_derived()
    r_over_ie = params.r_over_importance

    # Initial value
    cs = params.sds / r_over_ie

    # Upper limit depends on period
    if period <= 0:
        cs_max = math.inf
    elif period <= params.tl:
        cs_max = params.sd1 / (period * r_over_ie)
    else:
        cs_max = (params.sd1 * params.tl) / (period ** 2 * r_over_ie)

    cs = min(cs, cs_max)

    # Lower limit applied last
    cs_min = max(CS_MIN_SDS_FACTOR * params.sds * params.importance, CS_MIN_ABSOLUTE)
    cs = max(cs, cs_min)

    if cs > CS_WARNING_LIMIT:
        logger.warning(f"Seismic coefficient exceeds {CS_WARNING_LIMIT} (Cs={cs:.4f})")

    logger.debug(f"Cs = {cs:.4f} for T = {period:.3f} sec "
                 f"(max={cs_max:.4f}, min={cs_min:.4f})")
    return {'cs': cs, 'cs_max': cs_max, 'cs_min': cs_min}


def calculate_base_shear(params: SeismicParameters, geometry: Geometry,
                         loads: Loads, period: float) -> BaseShear:
    """Calculate equivalent static base shear V = Cs·W.

    Args:
        params: Derived seismic parameters
        geometry: Building geometry
        loads: Area loads (kg/m²)
        period: Design period, normally Ta

    Returns:
        BaseShear with V (kN), Cs and seismic weight W (kN)
    """
    coefficients = calculate_cs_coefficient(params, period)
    weight = seismic_weight(geometry, loads)
    v = coefficients['cs'] * weight

    logger.info(f"Base shear V = {v:.2f} kN (Cs={coefficients['cs']:.4f}, W={weight:.2f} kN)")
    return BaseShear(v=v, cs=coefficients['cs'], seismic_weight=weight,
                     cs_max=coefficients['cs_max'], cs_min=coefficients['cs_min'])
