"""
Application-wide constants for reference evapotranspiration.

Coefficients follow the ASCE-EWRI Standardized Reference Evapotranspiration
Equation for a daily time step. Equation numbers refer to that report.
"""

# Penman-Monteith
LATENT_HEAT_FACTOR = 0.408  # 1/λ, mm day⁻¹ per MJ m⁻² day⁻¹
SOIL_HEAT_FLUX = 0.0  # G, MJ m⁻² day⁻¹ (daily time step)

# Reference surfaces: (numerator constant Cn, denominator constant Cd)
SHORT_REFERENCE_CN = 900.0
SHORT_REFERENCE_CD = 0.34
TALL_REFERENCE_CN = 1600.0
TALL_REFERENCE_CD = 0.38

# Atmospheric pressure (Eq. 3)
SEA_LEVEL_PRESSURE = 101.3  # kPa
STANDARD_TEMPERATURE_K = 293.0  # K
LAPSE_RATE = 0.0065  # K/m
PRESSURE_EXPONENT = 5.26

# Psychrometric Constant Coefficient (Eq. 4)
PSYCHROMETRIC_COEF = 0.000665  # kPa/°C per kPa

# Vapor Pressure Constants (Tetens formula, Eq. 7)
TETENS_A = 0.6108  # kPa
TETENS_B = 17.27
TETENS_C = 237.3  # °C
SLOPE_COEF = 2503.0  # 4098 * 0.6108 (Eq. 5)

# Dewpoint depression used when only Tmin is available (Appendix E)
DEWPOINT_DEPRESSION = 3.0  # °C

# Solar Geometry Constants (Eqs. 23, 24)
EARTH_ORBIT_ECCENTRICITY = 0.033
SOLAR_DECLINATION_AMPLITUDE = 0.409
SOLAR_DECLINATION_PHASE = 1.39  # radians
DAYS_PER_YEAR = 365.0

# Solar constant, MJ m⁻² h⁻¹ (Eq. 21)
SOLAR_CONSTANT = 4.92

# Clear-sky radiation (Eq. 19)
CLEAR_SKY_COEF = 0.75
ALTITUDE_FACTOR = 2e-5

# Hargreaves-Samani radiation adjustment coefficient
HARGREAVES_KRS = 0.16

# Cloudiness function bounds and coefficients (Eq. 18)
RELATIVE_RADIATION_MIN = 0.3
RELATIVE_RADIATION_MAX = 1.0
FCD_SLOPE = 1.35
FCD_OFFSET = 0.35

# Net Longwave Radiation Constants (Eq. 17)
STEFAN_BOLTZMANN = 4.901e-9  # MJ K⁻⁴ m⁻² day⁻¹
KELVIN_OFFSET = 273.16
NLW_EMISSIVITY_A = 0.34
NLW_EMISSIVITY_B = 0.14

# Albedo of the reference surface (Eq. 16)
REFERENCE_ALBEDO = 0.23

# Wind profile adjustment to 2 m (Eq. 33)
REFERENCE_WIND_HEIGHT = 2.0  # m
WIND_PROFILE_NUMERATOR = 4.87
WIND_PROFILE_SCALE = 67.8
WIND_PROFILE_OFFSET = 5.42

# Kelvin offset used in the aerodynamic term of Eq. 1
ET_KELVIN_OFFSET = 273.0
