import math
import uuid
from dataclasses import dataclass, field
from typing import Any, Optional

from .catalog import Material
from .constants import (
    CARAT_TO_GRAM, DIAMOND_KEY, MODE_DIMENSIONS, MODE_VOLUME, PER_CARAT, PER_GRAM,
    PRICING_UNIT_LABELS, WEIGHT_UNIT_TO_GRAM,
)
from .geometry import box_volume_cm3, cylinder_volume_cm3, diamond_carats
from .utils import parse_number_or


# ----------------- Unit conversion -----------------
def weight_to_grams(value, unit: str) -> float:
    return parse_number_or(value, 0.0) * WEIGHT_UNIT_TO_GRAM.get(unit, 1.0)


def grams_to_carats(g: float) -> float:
    return g / CARAT_TO_GRAM


def carats_to_grams(ct: float) -> float:
    return ct * CARAT_TO_GRAM


# ----------------- Lines -----------------
def _line_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass
class Line:
    """One priced material entry. Measurement fields hold raw form input and are coerced on use."""
    material_key: str
    unit_price: Any = ""
    mode: str = "weight"
    weight_val: Any = ""
    weight_unit: str = "g"
    shape: str = "box"
    length_mm: Any = ""
    width_mm: Any = ""
    height_mm: Any = ""
    diameter_mm: Any = ""
    depth_mm: Any = ""
    volume_cm3: Any = ""
    density: Any = ""
    qty: Any = 1
    alias: str = ""
    id: str = field(default_factory=_line_id)


def create_line(material: Material) -> Line:
    unit = "g" if material.pricing_unit == PER_GRAM else PRICING_UNIT_LABELS.get(material.pricing_unit, "g")
    return Line(material_key=material.key, density=str(material.density), weight_unit=unit)


@dataclass(frozen=True)
class LineCost:
    material_key: str
    effective_quantity: float   # grams, carats or cm³ per unit, per the material's pricing unit
    quantity_unit: str
    multiplier: int
    raw_multiplier: float
    density: float
    grams: float                # mass of the whole line (all units) in grams
    line_cost: float

    @property
    def total_quantity(self) -> float:
        return self.effective_quantity * self.multiplier


def line_multiplier(qty) -> int:
    return max(1, int(math.floor(parse_number_or(qty, 1.0))))


def line_density(line: Line, material: Material) -> float:
    return parse_number_or(line.density, material.density)


def line_volume_cm3(line: Line) -> float:
    if line.mode == MODE_VOLUME or line.shape == "volume":
        return max(0.0, parse_number_or(line.volume_cm3, 0.0))
    if line.shape == "box":
        return box_volume_cm3(line.length_mm, line.width_mm, line.height_mm)
    if line.shape == "cylinder":
        return cylinder_volume_cm3(line.diameter_mm, line.height_mm)
    return 0.0


def effective_quantity(line: Line, material: Material, density: Optional[float] = None) -> float:
    if density is None:
        density = line_density(line, material)
    if line.mode in (MODE_DIMENSIONS, MODE_VOLUME):
        if line.mode == MODE_DIMENSIONS and line.shape == "diamond_round":
            if material.key == DIAMOND_KEY:
                return diamond_carats(line.diameter_mm, line.depth_mm)
            return 0.0
        vol = line_volume_cm3(line)
        if material.pricing_unit == PER_CARAT:
            return grams_to_carats(vol * density)
        if material.pricing_unit == PER_GRAM:
            return vol * density
        return vol
    if material.pricing_unit == PER_GRAM:
        return weight_to_grams(line.weight_val, line.weight_unit)
    return parse_number_or(line.weight_val, 0.0)


def _quantity_in_grams(qty: float, material: Material, density: float) -> float:
    if material.pricing_unit == PER_GRAM:
        return qty
    if material.pricing_unit == PER_CARAT:
        return carats_to_grams(qty)
    return qty * density


def cost_line(line: Line, material: Material) -> LineCost:
    density = line_density(line, material)
    eff = effective_quantity(line, material, density)
    mult = line_multiplier(line.qty)
    price = parse_number_or(line.unit_price, 0.0)
    return LineCost(
        material_key=material.key,
        effective_quantity=eff,
        quantity_unit=material.unit_label,
        multiplier=mult,
        raw_multiplier=parse_number_or(line.qty, 1.0),
        density=density,
        grams=_quantity_in_grams(eff, material, density) * mult,
        line_cost=price * eff * mult,
    )
