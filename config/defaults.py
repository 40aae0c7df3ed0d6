"""Default configuration constants for the Flooring Material Estimator."""

from types import MappingProxyType

# Waste factors by "material-pattern" key (NWFA / TCNA industry standards).
# Carpet has a single flat factor regardless of pattern.
WASTE_FACTORS = MappingProxyType({
    "tile-straight": 0.10,
    "tile-diagonal": 0.15,
    "tile-herringbone": 0.22,
    "hardwood-straight": 0.10,
    "hardwood-diagonal": 0.15,
    "laminate-straight": 0.08,
    "laminate-diagonal": 0.13,
    "vinyl-straight": 0.05,
    "vinyl-diagonal": 0.10,
    "carpet": 0.10,
})

# Used for any combination missing from WASTE_FACTORS
DEFAULT_WASTE_FACTOR = 0.10

# Auxiliary material coverage (area units per purchase unit)
COVERAGE_RATES = MappingProxyType({
    "underlayment": 100,  # per roll
    "adhesive": 50,       # per gallon (average)
    "grout": 150,         # per 25lb bag (varies by joint size)
})

# Which flooring types trigger each auxiliary material
UNDERLAYMENT_MATERIALS = frozenset({"laminate", "vinyl"})
ADHESIVE_MATERIALS = frozenset({"tile", "hardwood"})
GROUT_MATERIALS = frozenset({"tile"})

# Flooring types and their display labels
MATERIALS = {
    "tile": "Tile",
    "hardwood": "Hardwood",
    "laminate": "Laminate",
    "vinyl": "Vinyl/LVP",
    "carpet": "Carpet",
}
DEFAULT_MATERIAL = "tile"

# Installation patterns and their display labels
PATTERNS = {
    "straight": "Straight/Standard",
    "diagonal": "Diagonal (45°)",
    "herringbone": "Herringbone/Chevron",
}
DEFAULT_PATTERN = "straight"

# Unit systems: labels only, the engine never converts
UNIT_SYSTEMS = {
    "imperial": {"name": "Imperial", "length": "ft", "length_long": "feet", "area": "sq ft"},
    "metric": {"name": "Metric", "length": "m", "length_long": "meters", "area": "sq m"},
}
DEFAULT_UNIT_SYSTEM = "imperial"

# Presentation rounding (round-half-up)
ROUNDING_PLACES = 2

# Input limits (feet or meters / currency or area units)
MAX_DIMENSION = 1_000_000
MAX_AMOUNT = 1_000_000

# Auxiliary material display metadata: (label, coverage unit, purchase unit)
AUXILIARY_LABELS = {
    "underlayment": ("Underlayment Rolls", "roll", "rolls"),
    "adhesive": ("Adhesive/Thinset", "gal", "gallons"),
    "grout": ("Grout", "25lb bag", "bags"),
}

AUXILIARY_NOTE = (
    "Auxiliary material estimates are approximate. Coverage rates vary by product "
    "and application method. Consult manufacturer specifications for accurate quantities."
)

PRO_TIPS = [
    "Waste factors are based on NWFA and TCNA industry standards",
    "Purchase boxes rounded up to ensure complete coverage",
    "Order extra material for future repairs and replacements",
    "Herringbone and diagonal patterns require higher waste factors due to increased cuts",
]

DISCLAIMER = (
    "This calculator provides estimates based on industry standard waste factors. "
    "Actual material needs may vary depending on room complexity, material defects, "
    "installer experience, and specific product requirements. Always consult with a "
    "professional installer and purchase extra material for irregularly shaped rooms, "
    "pattern matching, or future repairs. Verify all measurements before ordering materials."
)
