from typing import Dict, List, Tuple

from .constants import PER_CARAT, PER_GRAM


def _material_rows() -> List[Dict]:
    rows = []
    def add(key, label, unit, density, aliases=()):
        rows.append({
            "key": key, "label": label, "pricing_unit": unit,
            "density": float(density), "aliases": tuple(aliases),
        })
    # Metals priced per gram
    add("gold_24k", "Gold 24k", PER_GRAM, 19.32, ["oro 999", "oro puro", "24 quilates"])
    add("gold_18k", "Gold 18k", PER_GRAM, 15.6, ["oro 750", "18 quilates", "oro 750/1000"])
    add("gold_14k", "Gold 14k", PER_GRAM, 13.1, ["oro 585", "14 quilates"])
    add("silver_925", "Silver 925", PER_GRAM, 10.36, ["plata sterling", "plata de ley", "925"])
    add("platinum_950", "Platinum 950", PER_GRAM, 21.45, ["platino", "950"])
    add("palladium", "Palladium", PER_GRAM, 12.0)
    add("titanium", "Titanium", PER_GRAM, 4.5)
    add("steel_316L", "Steel 316L", PER_GRAM, 8.0, ["acero"])
    add("brass", "Brass", PER_GRAM, 8.5)
    # Gems priced per carat
    add("diamond", "Diamond", PER_CARAT, 3.52, ["diamante"])
    add("ruby", "Ruby", PER_CARAT, 4.0, ["rubí"])
    add("sapphire", "Sapphire", PER_CARAT, 4.0, ["zafiro"])
    add("emerald", "Emerald", PER_CARAT, 2.7, ["esmeralda"])
    # Catch-alls
    add("other_metal", "Other metal", PER_GRAM, 7.8)
    add("other_mineral", "Other mineral", PER_CARAT, 2.7)
    return rows


MATERIAL_ROWS: Tuple[Dict, ...] = tuple(_material_rows())

# Purity / fineness notations -> material key. Evaluated top to bottom, first match wins.
ALIAS_RULES: Tuple[Tuple[str, str], ...] = (
    (r"\b999\b|\b24\s*k(?:t|arat)?\b|24\s*quilates|oro\s+puro", "gold_24k"),
    (r"\b750\b|\b18\s*k(?:t|arat)?\b|18\s*quilates", "gold_18k"),
    (r"\b585\b|\b14\s*k(?:t|arat)?\b|14\s*quilates", "gold_14k"),
    (r"\b925\b|sterling|plata\s+de\s+ley", "silver_925"),
    (r"\b950\s*pt\b|\bpt\s*950\b|platino\s*950|platinum\s*950|\b950\b|\bplatino\b|\bplatinum\b", "platinum_950"),
    (r"\b316\s*l\b|\bacero\b|stainless", "steel_316L"),
    (r"\bdiamond\b|\bdiamante\b", "diamond"),
    (r"\bruby\b|\brub[ií]\b", "ruby"),
    (r"\bsapphire\b|\bzafiro\b", "sapphire"),
    (r"\bemerald\b|\besmeralda\b", "emerald"),
)
