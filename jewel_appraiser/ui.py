from dataclasses import replace
from typing import Dict, List

import streamlit as st

from .aliases import apply_material, resolve_alias
from .catalog import MaterialCatalog
from .constants import (
    COMPLEXITY_LABELS, COMPLEXITY_LEVELS, CURRENCIES, CURRENCY_SLOT, CUSTOM_MATERIALS_SLOT,
    DEFAULT_MATERIAL_KEY, LINE_MODES, PER_GRAM, PIECE_TYPES, PRICING_UNIT_LABELS, SHAPES, WEIGHT_UNITS,
)
from .pricing import Line, cost_line, create_line
from .storage import LocalStore
from .utils import fmt_money

SHAPE_LABELS = {"box": "Box (L×W×H)", "cylinder": "Cylinder (Ø×H)", "volume": "Volume (cm³)",
                "diamond_round": "Round diamond (Ø×depth)"}


def init_session_state(store: LocalStore, initial_currency: str):
    if "catalog" not in st.session_state:
        catalog = MaterialCatalog()
        catalog.load_extensions(store.read(CUSTOM_MATERIALS_SLOT, []))
        st.session_state["catalog"] = catalog
    if "currency" not in st.session_state:
        cur = store.read(CURRENCY_SLOT, initial_currency)
        st.session_state["currency"] = cur if cur in CURRENCIES else initial_currency
    if "lines" not in st.session_state:
        st.session_state["lines"] = [new_line(st.session_state["catalog"])]


def new_line(catalog: MaterialCatalog) -> Line:
    return create_line(catalog.get(DEFAULT_MATERIAL_KEY))


def set_line(idx: int, line: Line):
    lines: List[Line] = list(st.session_state["lines"])
    lines[idx] = line
    st.session_state["lines"] = lines


def remove_line(line_id: str):
    lines = [ln for ln in st.session_state["lines"] if ln.id != line_id]
    # the working set never goes empty
    st.session_state["lines"] = lines or [new_line(st.session_state["catalog"])]


def sidebar_settings(store: LocalStore) -> Dict:
    st.sidebar.header("Appraisal")
    _seed("currency_choice", st.session_state["currency"])
    currency = st.sidebar.selectbox("Currency", list(CURRENCIES.keys()), key="currency_choice")
    if currency != st.session_state["currency"]:
        st.session_state["currency"] = currency
        store.write(CURRENCY_SLOT, currency)

    piece_keys = list(PIECE_TYPES.keys())
    piece_type = st.sidebar.selectbox("Piece type", piece_keys, format_func=lambda k: PIECE_TYPES[k])
    complexity = st.sidebar.selectbox("Complexity", list(COMPLEXITY_LEVELS), index=1,
                                      format_func=lambda k: COMPLEXITY_LABELS[k])
    # keyed so the values survive a currency change relabelling the price field
    labor_override = st.sidebar.text_input("Labor cost override (blank = estimate)", key="labor_override")
    piece_price = st.sidebar.text_input(f"Quoted piece price ({CURRENCIES[currency]})", key="piece_price")
    description = st.sidebar.text_input("Description", key="description")
    return dict(currency=currency, piece_type=piece_type, complexity=complexity,
                labor_override=labor_override, piece_price=piece_price, description=description)


def sidebar_custom_material(store: LocalStore):
    catalog: MaterialCatalog = st.session_state["catalog"]
    with st.sidebar.expander("Add custom material", expanded=False):
        label = st.text_input("Name", key="custom_label")
        unit = st.radio("Priced per", list(PRICING_UNIT_LABELS.keys()), horizontal=True,
                        format_func=lambda u: PRICING_UNIT_LABELS[u], key="custom_unit")
        density = st.text_input("Density g/cm³ (optional)", key="custom_density")
        if st.button("Add material"):
            try:
                mat = catalog.add_custom(label, unit, density)
            except ValueError as e:
                st.error(str(e))
            else:
                store.write(CUSTOM_MATERIALS_SLOT, catalog.extension_records())
                st.success(f"Added {mat.label}.")
        if catalog.extensions:
            st.caption("Custom: " + ", ".join(m.label for m in catalog.extensions))


def _seed(key: str, value):
    # keyed widgets read their value from session_state; seed it once instead of passing value=
    if key not in st.session_state:
        st.session_state[key] = value


def _sync_material_widgets(line: Line):
    st.session_state[f"mat_{line.id}"] = line.material_key
    st.session_state[f"density_{line.id}"] = str(line.density)
    if line.weight_unit in WEIGHT_UNITS:
        st.session_state[f"wu_{line.id}"] = line.weight_unit


def _apply_detected(idx: int, line: Line, key: str):
    catalog: MaterialCatalog = st.session_state["catalog"]
    updated = apply_material(line, catalog.get(key))
    set_line(idx, updated)
    _sync_material_widgets(updated)


def _detected_alias_prompt(idx: int, line: Line, catalog: MaterialCatalog):
    key = resolve_alias(line.alias)
    if key is None or key == line.material_key or key not in catalog:
        return
    mat = catalog.get(key)
    st.info(f"“{line.alias}” looks like **{mat.label}**.")
    st.button(f"Use {mat.label}", key=f"alias_apply_{line.id}", on_click=_apply_detected, args=(idx, line, key))


def _text(container, label: str, line: Line, field: str) -> str:
    key = f"{field}_{line.id}"
    _seed(key, str(getattr(line, field)))
    return container.text_input(label, key=key)


def line_editor(idx: int, line: Line, currency: str) -> Line:
    catalog: MaterialCatalog = st.session_state["catalog"]
    keys = catalog.keys()
    k = line.id
    _seed(f"mat_{k}", line.material_key if line.material_key in keys else keys[0])
    _seed(f"mode_{k}", line.mode if line.mode in LINE_MODES else LINE_MODES[0])
    _seed(f"shape_{k}", line.shape if line.shape in SHAPES else SHAPES[0])
    _seed(f"wu_{k}", line.weight_unit if line.weight_unit in WEIGHT_UNITS else "g")

    cols = st.columns([3, 2, 1, 2])
    mat_key = cols[0].selectbox("Material", keys, format_func=lambda key: catalog.get(key).label, key=f"mat_{k}")
    mat = catalog.get(mat_key)
    if mat_key != line.material_key:
        line = apply_material(line, mat)
        st.session_state[f"density_{k}"] = str(line.density)
        if line.weight_unit in WEIGHT_UNITS:
            st.session_state[f"wu_{k}"] = line.weight_unit
    patch = dict(
        unit_price=_text(cols[1], f"Price ({CURRENCIES.get(currency, currency)}/{mat.unit_label})", line, "unit_price"),
        qty=_text(cols[2], "Units", line, "qty"),
        mode=cols[3].radio("Quantity by", list(LINE_MODES), horizontal=True, key=f"mode_{k}"),
    )

    if patch["mode"] == "weight":
        c1, c2 = st.columns([3, 1])
        patch["weight_val"] = _text(c1, f"Weight ({line.weight_unit})", line, "weight_val")
        if mat.pricing_unit == PER_GRAM:
            patch["weight_unit"] = c2.selectbox("Unit", list(WEIGHT_UNITS), key=f"wu_{k}")
    else:
        shape = st.selectbox("Shape", list(SHAPES), format_func=lambda s: SHAPE_LABELS[s], key=f"shape_{k}")
        patch["shape"] = shape
        c1, c2, c3, c4 = st.columns(4)
        if shape == "box":
            patch["length_mm"] = _text(c1, "Length (mm)", line, "length_mm")
            patch["width_mm"] = _text(c2, "Width (mm)", line, "width_mm")
            patch["height_mm"] = _text(c3, "Height (mm)", line, "height_mm")
        elif shape == "cylinder":
            patch["diameter_mm"] = _text(c1, "Diameter (mm)", line, "diameter_mm")
            patch["height_mm"] = _text(c2, "Height (mm)", line, "height_mm")
        elif shape == "volume":
            patch["volume_cm3"] = _text(c1, "Volume (cm³)", line, "volume_cm3")
        else:
            patch["diameter_mm"] = _text(c1, "Diameter (mm)", line, "diameter_mm")
            patch["depth_mm"] = _text(c2, "Depth (mm)", line, "depth_mm")
        if shape != "diamond_round":
            patch["density"] = _text(c4, "Density (g/cm³)", line, "density")

    patch["alias"] = _text(st, "Stamp / alias (e.g. 750/1000, 925)", line, "alias")
    line = replace(line, **patch)
    set_line(idx, line)
    _detected_alias_prompt(idx, line, catalog)

    cost = cost_line(line, catalog.get(line.material_key))
    st.caption(f"{cost.effective_quantity:,.4f} {cost.quantity_unit} × {cost.multiplier} → "
               f"**{fmt_money(cost.line_cost, currency)}**")
    return line
