"""Static reference catalogs for star and planet types.

Loaded once at import and exposed read-only; nothing in the game mutates
these tables.
"""

from types import MappingProxyType

# Star type keys
YELLOW_DWARF = "enana_amarilla"
RED_DWARF = "enana_roja"
BLUE_GIANT = "gigante_azul"
RED_GIANT = "gigante_roja"
WHITE_DWARF = "enana_blanca"

# Planet type keys
ROCKY = "rocoso"
GASEOUS = "gaseoso"
ICY = "helado"
OCEANIC = "oceanico"

STAR_TYPES = MappingProxyType(
    {
        YELLOW_DWARF: MappingProxyType(
            {
                "mass_range": (0.8, 1.2),
                "temperature": (5300, 6000),
                "luminosity": (0.6, 1.5),
                "lifespan": 1e10,
                "color": "#FDB813",
            }
        ),
        RED_DWARF: MappingProxyType(
            {
                "mass_range": (0.08, 0.45),
                "temperature": (2400, 3700),
                "luminosity": (0.0001, 0.08),
                "lifespan": 1e12,
                "color": "#FF4422",
            }
        ),
        BLUE_GIANT: MappingProxyType(
            {
                "mass_range": (2.5, 90),
                "temperature": (10000, 50000),
                "luminosity": (100, 1000000),
                "lifespan": 1e7,
                "color": "#4499FF",
            }
        ),
        RED_GIANT: MappingProxyType(
            {
                "mass_range": (0.8, 8),
                "temperature": (3500, 5000),
                "luminosity": (100, 1000),
                "lifespan": 1e9,
                "color": "#FF6B35",
            }
        ),
        WHITE_DWARF: MappingProxyType(
            {
                "mass_range": (0.17, 1.4),
                "temperature": (8000, 40000),
                "luminosity": (0.0001, 100),
                "lifespan": 1e13,
                "color": "#FFFFFF",
            }
        ),
    }
)

PLANET_TYPES = MappingProxyType(
    {
        ROCKY: MappingProxyType(
            {
                "density": (3000, 5500),
                "size_range": (0.3, 2.0),
                "habitability": (0.1, 0.9),
            }
        ),
        GASEOUS: MappingProxyType(
            {
                "density": (600, 2000),
                "size_range": (3.0, 20.0),
                "habitability": (0.0, 0.1),
            }
        ),
        ICY: MappingProxyType(
            {
                "density": (1000, 2000),
                "size_range": (0.5, 4.0),
                "habitability": (0.0, 0.3),
            }
        ),
        OCEANIC: MappingProxyType(
            {
                "density": (2000, 4000),
                "size_range": (0.8, 3.0),
                "habitability": (0.5, 0.95),
            }
        ),
    }
)

GOVERNMENT_TYPES = (
    "democratica",
    "tecnocratica",
    "imperio",
    "colectiva",
    "corporativista",
)

MULTIPLE_SYSTEM_TYPES = ("single", "binary", "trinary")

HABITABLE_ZONE_PREFERENCES = ("optimal", "inner", "outer", "none")
