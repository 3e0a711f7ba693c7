import logging
import uuid
from dataclasses import asdict, dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

from .constants import DEFAULT_DENSITY, PER_CARAT, PRICING_UNIT_LABELS
from .data import MATERIAL_ROWS
from .utils import parse_number_or

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Material:
    key: str
    label: str
    pricing_unit: str
    density: float
    aliases: Tuple[str, ...] = field(default_factory=tuple)
    custom: bool = False

    @property
    def unit_label(self) -> str:
        return PRICING_UNIT_LABELS.get(self.pricing_unit, self.pricing_unit)

    @property
    def is_gem(self) -> bool:
        return self.pricing_unit == PER_CARAT

    def to_record(self) -> Dict:
        rec = asdict(self)
        rec["aliases"] = list(self.aliases)
        return rec


BUILTIN_MATERIALS: Tuple[Material, ...] = tuple(Material(**row) for row in MATERIAL_ROWS)


class MaterialCatalog:
    """Built-in materials plus the user's session extensions.

    Built-ins are shared and never modified; custom entries are only ever appended.
    """

    def __init__(self, extensions: Optional[Iterable[Material]] = None):
        self._builtins = BUILTIN_MATERIALS
        self._extensions: List[Material] = list(extensions or [])

    @property
    def default(self) -> Material:
        return self._builtins[0]

    @property
    def extensions(self) -> Tuple[Material, ...]:
        return tuple(self._extensions)

    def all(self) -> Tuple[Material, ...]:
        return self._builtins + tuple(self._extensions)

    def keys(self) -> List[str]:
        return [m.key for m in self.all()]

    def __contains__(self, key) -> bool:
        return any(m.key == key for m in self.all())

    def get(self, key: Optional[str]) -> Material:
        for m in self.all():
            if m.key == key:
                return m
        return self.default

    def add_custom(self, label: str, pricing_unit: str, density=None) -> Material:
        label = (label or "").strip()
        if not label:
            raise ValueError("custom material needs a label")
        if pricing_unit not in PRICING_UNIT_LABELS:
            raise ValueError(f"pricing unit must be one of {', '.join(PRICING_UNIT_LABELS)}")
        dens = parse_number_or(density, DEFAULT_DENSITY)
        if dens <= 0:
            dens = DEFAULT_DENSITY
        key = f"custom_{uuid.uuid4().hex[:10]}"
        while key in self:
            key = f"custom_{uuid.uuid4().hex[:10]}"
        mat = Material(key=key, label=label, pricing_unit=pricing_unit, density=dens, custom=True)
        self._extensions.append(mat)
        logger.info("Added custom material %s (%s, %s, %.3f g/cm³)", key, label, pricing_unit, dens)
        return mat

    def load_extensions(self, records) -> int:
        """Append persisted custom materials, skipping anything malformed. Returns how many were added."""
        added = 0
        for rec in records or []:
            try:
                key = str(rec["key"])
                label = str(rec["label"]).strip()
                unit = rec["pricing_unit"]
            except (KeyError, TypeError):
                logger.warning("Skipping malformed custom material record: %r", rec)
                continue
            if not label or unit not in PRICING_UNIT_LABELS or key in self:
                logger.warning("Skipping invalid or duplicate custom material %r", key)
                continue
            dens = parse_number_or(rec.get("density"), DEFAULT_DENSITY)
            self._extensions.append(Material(key=key, label=label, pricing_unit=unit,
                                             density=dens if dens > 0 else DEFAULT_DENSITY, custom=True))
            added += 1
        return added

    def extension_records(self) -> List[Dict]:
        return [m.to_record() for m in self._extensions]

    def to_frame(self) -> pd.DataFrame:
        rows = [{
            "Key": m.key,
            "Material": m.label,
            "Priced per": m.unit_label,
            "Density (g/cm³)": m.density,
            "Aliases": ", ".join(m.aliases),
            "Custom": m.custom,
        } for m in self.all()]
        return pd.DataFrame(rows, columns=["Key", "Material", "Priced per", "Density (g/cm³)", "Aliases", "Custom"])
