"""Aggregation of material lines into subtotal, labor and total, plus the price diagnosis.

``compute_appraisal`` is the single entry point the UI calls after every edit; it is
pure and recomputes everything from the context it is given.
"""
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Tuple

from .catalog import MaterialCatalog
from .constants import (
    DEFAULT_CURRENCY, DEFAULT_RATE_PER_HOUR, DEFAULT_SUGGESTED_HOURS, DIAG_OVERVALUED,
    DIAG_POSSIBLY_OVERVALUED, DIAG_REASONABLE, DIAG_SUSPICIOUS, OVERVALUED_PCT,
    POSSIBLY_OVERVALUED_PCT, SUGGESTED_HOURS,
)
from .pricing import Line, LineCost, cost_line
from .utils import is_number, parse_number_or
from .validation import validate


@dataclass
class AppraisalContext:
    lines: List[Line]
    currency: str = DEFAULT_CURRENCY
    piece_type: str = "anillo_fino"
    complexity: str = "media"
    labor_override: Any = ""
    piece_price: Any = ""
    description: str = ""


@dataclass(frozen=True)
class AppraisalResult:
    lines: Tuple[LineCost, ...]
    subtotal: float
    total_weight_grams: float
    suggested_hours: float
    labor_estimate: float
    labor_cost: float
    labor_overridden: bool
    total_cost: float
    piece_price: float
    pct_materials: float
    pct_total: float
    overage_pct: float
    diagnosis: str
    alerts: Tuple[str, ...] = field(default_factory=tuple)

    def snapshot(self) -> Dict[str, Any]:
        """The flat view the UI renders."""
        keys = ("subtotal", "total_weight_grams", "labor_cost", "total_cost",
                "pct_materials", "pct_total", "overage_pct", "diagnosis")
        out = {k: getattr(self, k) for k in keys}
        out["alerts"] = list(self.alerts)
        return out

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["lines"] = [asdict(c) for c in self.lines]
        d["alerts"] = list(self.alerts)
        return d


def suggested_hours(piece_type: str, complexity: str) -> float:
    table = SUGGESTED_HOURS.get(piece_type)
    if table is None:
        return DEFAULT_SUGGESTED_HOURS
    return float(table.get(complexity, DEFAULT_SUGGESTED_HOURS))


def labor_estimate(piece_type: str, complexity: str, rate: float = DEFAULT_RATE_PER_HOUR) -> float:
    return rate * suggested_hours(piece_type, complexity)


def resolve_labor(estimate: float, override) -> Tuple[float, bool]:
    if is_number(override):
        return parse_number_or(override, estimate), True
    return estimate, False


def diagnose(price: float, total_cost: float) -> str:
    if not (price > 0 and total_cost > 0):
        return ""
    if price < total_cost:
        return DIAG_SUSPICIOUS
    overage = (price - total_cost) * 100.0 / total_cost
    if overage > OVERVALUED_PCT:
        return DIAG_OVERVALUED
    if overage > POSSIBLY_OVERVALUED_PCT:
        return DIAG_POSSIBLY_OVERVALUED
    return DIAG_REASONABLE


def price_ratios(subtotal: float, total_cost: float, price: float) -> Tuple[float, float, float]:
    pct_materials = subtotal * 100.0 / price if price > 0 else 0.0
    pct_total = total_cost * 100.0 / price if price > 0 else 0.0
    overage = (price - total_cost) * 100.0 / total_cost if (price > 0 and total_cost > 0) else 0.0
    return pct_materials, pct_total, overage


def compute_appraisal(context: AppraisalContext, catalog: MaterialCatalog,
                      rate: float = DEFAULT_RATE_PER_HOUR) -> AppraisalResult:
    costs = tuple(cost_line(ln, catalog.get(ln.material_key)) for ln in context.lines)
    subtotal = sum(c.line_cost for c in costs)
    grams = sum(c.grams for c in costs)

    hours = suggested_hours(context.piece_type, context.complexity)
    estimate = labor_estimate(context.piece_type, context.complexity, rate)
    labor, overridden = resolve_labor(estimate, context.labor_override)
    total = subtotal + labor

    price = parse_number_or(context.piece_price, 0.0)
    pct_materials, pct_total, overage = price_ratios(subtotal, total, price)
    diagnosis = diagnose(price, total)
    alerts = validate(context.lines, costs, catalog, total_cost=total, piece_price=price,
                      labor_cost=labor, overage_pct=overage if diagnosis else None)

    return AppraisalResult(
        lines=costs, subtotal=subtotal, total_weight_grams=grams,
        suggested_hours=hours, labor_estimate=estimate, labor_cost=labor, labor_overridden=overridden,
        total_cost=total, piece_price=price,
        pct_materials=pct_materials, pct_total=pct_total, overage_pct=overage,
        diagnosis=diagnosis, alerts=tuple(alerts),
    )
