from typing import Dict, Tuple

# Units / conversions
CARAT_TO_GRAM = 0.2
MM_PER_CM = 10.0

# Weight entry units -> grams (anything else is read as grams)
WEIGHT_UNIT_TO_GRAM: Dict[str, float] = {
    "g": 1.0,
    "dwt": 1.555,
    "ozt": 31.103,
}
WEIGHT_UNITS = tuple(WEIGHT_UNIT_TO_GRAM.keys())

# Empirical round-brilliant estimate: ct ≈ 0.0061 · d² · depth (mm)
DIAMOND_CARAT_FACTOR = 0.0061

# Pricing units and the quantity label shown next to the unit price
PER_GRAM = "per_gram"
PER_CARAT = "per_carat"
PER_CM3 = "per_cm3"
PRICING_UNIT_LABELS: Dict[str, str] = {
    PER_GRAM: "g",
    PER_CARAT: "ct",
    PER_CM3: "cm3",
}

DEFAULT_DENSITY = 2.7  # g/cm³
DEFAULT_MATERIAL_KEY = "gold_18k"
DIAMOND_KEY = "diamond"

# Line modes and shapes
MODE_WEIGHT = "weight"
MODE_DIMENSIONS = "dimensions"
MODE_VOLUME = "volume"  # legacy single-purpose mode, same as dimensions + volume shape
LINE_MODES = (MODE_WEIGHT, MODE_DIMENSIONS)
SHAPES = ("box", "cylinder", "volume", "diamond_round")

# Labor
DEFAULT_RATE_PER_HOUR = 60.0
DEFAULT_SUGGESTED_HOURS = 1.0
COMPLEXITY_LEVELS = ("baja", "media", "alta")
COMPLEXITY_LABELS: Dict[str, str] = {"baja": "Low", "media": "Medium", "alta": "High"}

PIECE_TYPES: Dict[str, str] = {
    "anillo_fino": "Thin ring",
    "caja_reloj": "Watch case",
    "eslabon": "Chain link",
    "diamante_redondo": "Round diamond setting",
    "pendiente": "Earring",
    "pulsera": "Bracelet",
    "colgante": "Pendant",
    "reloj_completo": "Complete watch",
}

SUGGESTED_HOURS: Dict[str, Dict[str, float]] = {
    "anillo_fino": {"baja": 0.5, "media": 1.0, "alta": 1.5},
    "caja_reloj": {"baja": 2.0, "media": 4.0, "alta": 6.0},
    "eslabon": {"baja": 0.8, "media": 1.2, "alta": 2.0},
    "pulsera": {"baja": 1.5, "media": 2.5, "alta": 4.0},
    "colgante": {"baja": 0.8, "media": 1.2, "alta": 2.0},
    "pendiente": {"baja": 0.8, "media": 1.5, "alta": 2.5},
    "diamante_redondo": {"baja": 1.0, "media": 1.5, "alta": 2.5},
    "reloj_completo": {"baja": 2.5, "media": 4.5, "alta": 6.5},
}

# Diagnosis labels and overage thresholds (strict >)
DIAG_SUSPICIOUS = "suspicious price"
DIAG_OVERVALUED = "overvalued"
DIAG_POSSIBLY_OVERVALUED = "possibly overvalued"
DIAG_REASONABLE = "reasonable price"
OVERVALUED_PCT = 40.0
POSSIBLY_OVERVALUED_PCT = 20.0

# Validation ranges (g/cm³) and limits
GEM_DENSITY_RANGE: Tuple[float, float] = (2.0, 5.5)
METAL_DENSITY_RANGE: Tuple[float, float] = (3.5, 22.0)
MAX_LINE_QUANTITY = 100_000.0
EXTREME_OVERAGE_PCT = 1000.0

# Currencies offered in the UI
CURRENCIES: Dict[str, str] = {"EUR": "€", "USD": "$", "GBP": "£"}
DEFAULT_CURRENCY = "EUR"

# Persistence slots and history limits
HISTORY_SLOT = "jewel_appraiser.history.v2"
CUSTOM_MATERIALS_SLOT = "jewel_appraiser.custom_materials.v1"
CURRENCY_SLOT = "jewel_appraiser.currency.v1"
HISTORY_MAX = 500
PDF_MAX_ENTRIES = 80

HISTORY_COLUMNS: Tuple[Tuple[str, str], ...] = (
    ("timestamp", "Timestamp"),
    ("currency", "Currency"),
    ("description", "Description"),
    ("subtotal", "Materials subtotal"),
    ("labor_cost", "Labor cost"),
    ("total_cost", "Total cost"),
    ("piece_price", "Quoted price"),
    ("pct_materials", "% materials"),
    ("pct_total", "% total"),
    ("diagnosis", "Diagnosis"),
)
