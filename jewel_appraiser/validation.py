from typing import List, Optional, Sequence

from .catalog import MaterialCatalog
from .constants import (
    EXTREME_OVERAGE_PCT, GEM_DENSITY_RANGE, MAX_LINE_QUANTITY, METAL_DENSITY_RANGE,
)
from .pricing import Line, LineCost


def dedupe_alerts(items: List[str]) -> List[str]:
    seen = set()
    out = []
    for s in items:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def line_alerts(index: int, line: Line, cost: LineCost, catalog: MaterialCatalog) -> List[str]:
    """Per-line alerts. The density check looks at the density the line was costed with
    (its own field, or the shape's fixed density), not the catalog default."""
    mat = catalog.get(line.material_key)
    lo, hi = GEM_DENSITY_RANGE if mat.is_gem else METAL_DENSITY_RANGE
    alerts = []
    if not (lo <= cost.density <= hi):
        kind = "gem" if mat.is_gem else "metal"
        alerts.append(f"Line {index}: density used for this line ({cost.density:g} g/cm³) is outside "
                      f"the usual {kind} range ({lo:g}–{hi:g}) for {mat.label}.")
    if cost.total_quantity > MAX_LINE_QUANTITY:
        alerts.append(f"Line {index}: quantity {cost.total_quantity:,.2f} {cost.quantity_unit} looks too large; "
                      f"check the weight unit.")
    if cost.raw_multiplier < 1:
        alerts.append(f"Line {index}: unit count below 1, counted as 1.")
    return alerts


def validate(lines: Sequence[Line], costs: Sequence[LineCost], catalog: MaterialCatalog,
             total_cost: float, piece_price: float, labor_cost: float,
             overage_pct: Optional[float] = None) -> List[str]:
    """Advisory alerts for the current inputs. Never blocks computing or saving."""
    alerts: List[str] = []
    for i, (line, cost) in enumerate(zip(lines, costs), start=1):
        alerts.extend(line_alerts(i, line, cost, catalog))
    if piece_price > 0 and piece_price < total_cost:
        alerts.append("Quoted price is below the estimated total cost.")
    if overage_pct is not None and overage_pct > EXTREME_OVERAGE_PCT:
        alerts.append(f"Quoted price exceeds cost by more than {EXTREME_OVERAGE_PCT:g}%; check the inputs.")
    if labor_cost < 0:
        alerts.append("Labor cost is negative.")
    return dedupe_alerts(alerts)
