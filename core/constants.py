# src/core/constants.py
"""Shared constants for the seismic design parameter engine."""

# Units (SI base: kN, m, s)
meter = 1.0
sec = 1.0
g = 9.81 * meter / sec ** 2

# Mass in kg -> force in kN
GRAVITY_FACTOR = g / 1000

# Long-period transition period (fixed for this code family)
LONG_PERIOD_TRANSITION = 12.0 * sec

# Design response spectrum sampling
SPECTRUM_PERIOD_STEP = 0.05 * sec
SPECTRUM_MAX_PERIOD = 4.0 * sec

# Design spectral accelerations are 2/3 of the MCE values
DESIGN_SPECTRUM_RATIO = 2.0 / 3.0

# Fraction of live load included in seismic weight
LIVE_LOAD_PARTICIPATION = 0.25

# Approximate period, RC moment frames
CT_HIGH_STRENGTH = 0.0466
CT_NORMAL_STRENGTH = 0.0488
CT_FC_THRESHOLD = 25.0
PERIOD_EXPONENT = 0.9

# Upper-limit coefficient Cu, (SD1 lower bound, Cu) checked top-down
CU_TIERS = [(0.4, 1.4), (0.3, 1.5), (0.2, 1.6)]
CU_DEFAULT = 1.7

# Absorbs rounding of derived SD1 at a tier bound
CU_TIER_TOLERANCE = 1e-9

# Vertical distribution exponent k
K_PERIOD_LOWER = 0.5 * sec
K_PERIOD_UPPER = 2.5 * sec

# Seismic response coefficient floor
CS_MIN_SDS_FACTOR = 0.044
CS_MIN_ABSOLUTE = 0.01

# Plausibility limits (warnings only)
SS_WARNING_LIMIT = 2.0
S1_WARNING_LIMIT = 1.0
R_WARNING_LIMIT = 12.0
IMPORTANCE_WARNING_LIMIT = 1.5
HEIGHT_WARNING_LIMIT = 200.0 * meter
CS_WARNING_LIMIT = 1.0
FORCE_BALANCE_TOLERANCE = 0.01
