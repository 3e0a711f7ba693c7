import re
from dataclasses import replace
from typing import List, Optional, Tuple

from .catalog import Material
from .constants import PER_GRAM, WEIGHT_UNITS
from .data import ALIAS_RULES
from .pricing import Line

_COMPILED: List[Tuple[re.Pattern, str]] = [(re.compile(p, re.IGNORECASE), key) for p, key in ALIAS_RULES]


def resolve_alias(text: Optional[str]) -> Optional[str]:
    """Map an engraving / fineness mark such as "750/1000" or "sterling" to a material key."""
    s = (text or "").strip()
    if not s:
        return None
    for pattern, key in _COMPILED:
        if pattern.search(s):
            return key
    return None


def apply_material(line: Line, material: Material) -> Line:
    if material.pricing_unit == PER_GRAM:
        unit = line.weight_unit if line.weight_unit in WEIGHT_UNITS else "g"
    else:
        unit = material.unit_label
    return replace(line, material_key=material.key, density=str(material.density), weight_unit=unit)
