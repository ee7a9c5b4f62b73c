"""Physical constants and game configuration values."""

# Fundamental constants (CODATA 2018)
G = 6.67430e-11  # m^3 / (kg s^2)
C = 299792458  # m/s
H = 6.62607015e-34  # J s
K_B = 1.380649e-23  # J/K
SIGMA = 5.670374419e-8  # W / (m^2 K^4), Stefan-Boltzmann
N_A = 6.02214076e23  # 1/mol

# Astronomical constants
AU = 1.495978707e11  # meters
PARSEC = 3.085677581e16  # meters
LIGHT_YEAR = 9.460730473e15  # meters
SOLAR_MASS = 1.98847e30  # kg
SOLAR_RADIUS = 6.957e8  # meters
SOLAR_LUMINOSITY = 3.828e26  # W

# Planetary constants (Earth)
EARTH_MASS = 5.9722e24  # kg
EARTH_RADIUS = 6.371e6  # meters
EARTH_DENSITY = 5514  # kg/m^3
EARTH_ALBEDO = 0.306  # Bond albedo

# Time scales
YEAR_SECONDS = 31557600  # Julian year
GALACTIC_YEAR = 2.25e8  # years

# Stellar evolution
SOLAR_LIFETIME = 1e10  # Main sequence lifetime of the Sun (years)
MINIMUM_FUSION_MASS = 0.08  # Solar masses

# Orbital mechanics
KEPLER_ITERATIONS = 10  # Fixed-point iterations for Kepler's equation
RESONANCE_TOLERANCE = 0.02
STABILITY_HILL_FACTOR = 3.5  # Minimum separation in Hill radii

# Climate
KELVIN_OFFSET = 273.15
DEFAULT_ALBEDO = 0.3
CLIMATE_SENSITIVITY = 0.8  # degC per W/m^2
PREINDUSTRIAL_REFERENCE = 0.00028
KPA_PER_ATMOSPHERE_GRAVITY = 101.325

# System creation bounds
PLANET_COUNT_RANGE = (1, 15)
STAR_MASS_RANGE = (0.1, 100.0)
STAR_AGE_RANGE_MYR = (1, 15000)  # Millions of years

# Galaxy map
GALAXY_SIZE = 50000
GALAXY_CENTER = (25000, 25000)
COORDINATE_RANGE = (2500, 47500)

# Time advance
DEFAULT_ADVANCE_YEARS = 100
MIGRATION_HORIZONS = (100, 1000, 10000)  # Years projected ahead

# Testing
RNG_SEED_DEFAULT = 42  # Default seed for testing


def to_earth_masses(kg: float) -> float:
    """Convert kilograms to Earth masses."""
    return kg / EARTH_MASS


def to_solar_masses(kg: float) -> float:
    """Convert kilograms to solar masses."""
    return kg / SOLAR_MASS


def to_au(meters: float) -> float:
    """Convert meters to astronomical units."""
    return meters / AU


def to_meters(au: float) -> float:
    """Convert astronomical units to meters."""
    return au * AU
