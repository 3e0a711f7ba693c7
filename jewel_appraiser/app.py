# Jewel Appraiser: material cost vs. quoted price (Streamlit App)
#
# - One or more material lines (metal or gem) by weight or by dimensions.
# - Materials subtotal + estimated labor (piece type × complexity) or manual override.
# - Diagnosis of the quoted price against total cost, with advisory alerts.
# - Local history (newest first, capped) with CSV / PDF export.
# - Custom materials and currency preference persisted to a local store.

import logging

import streamlit as st

from .appraisal import AppraisalContext, compute_appraisal
from .config import INITIAL_CURRENCY, STORE_PATH, setup_logging
from .constants import (
    COMPLEXITY_LABELS, DIAG_OVERVALUED, DIAG_POSSIBLY_OVERVALUED, DIAG_REASONABLE, DIAG_SUSPICIOUS,
    PIECE_TYPES,
)
from .history import (
    clear_history, export_history_csv, history_frame, init_history_state, save_to_history,
)
from .pdf import build_history_pdf
from .storage import LocalStore
from .ui import (
    init_session_state, line_editor, new_line, remove_line, sidebar_custom_material, sidebar_settings,
)
from .utils import fmt_money

logger = logging.getLogger(__name__)

_DIAGNOSIS_STYLE = {
    DIAG_REASONABLE: st.success,
    DIAG_POSSIBLY_OVERVALUED: st.warning,
    DIAG_OVERVALUED: st.error,
    DIAG_SUSPICIOUS: st.error,
}


def _st_title():
    st.set_page_config(layout="wide", page_title="Jewel Appraiser", page_icon="💍")
    st.title("Jewel Appraiser")
    st.caption("Material lines • labor estimate • quoted-price diagnosis • local history")


def _render_lines(currency: str):
    st.header("Materials")
    for idx, line in enumerate(list(st.session_state["lines"])):
        with st.container(border=True):
            head, btn = st.columns([6, 1])
            head.markdown(f"**Line {idx + 1}**")
            if btn.button("Remove", key=f"remove_{line.id}", disabled=len(st.session_state["lines"]) <= 1):
                remove_line(line.id)
                st.rerun()
            line_editor(idx, line, currency)
    if st.button("Add line"):
        st.session_state["lines"] = list(st.session_state["lines"]) + [new_line(st.session_state["catalog"])]
        st.rerun()


def _render_results(context: AppraisalContext, result):
    cur = context.currency
    st.header("Results")
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Materials subtotal", fmt_money(result.subtotal, cur))
    labor_note = "manual" if result.labor_overridden else (
        f"{result.suggested_hours:g} h · {PIECE_TYPES.get(context.piece_type, context.piece_type)} / "
        f"{COMPLEXITY_LABELS.get(context.complexity, context.complexity)}")
    c2.metric("Labor", fmt_money(result.labor_cost, cur), delta=labor_note, delta_color="off")
    c3.metric("Total cost", fmt_money(result.total_cost, cur))
    c4.metric("Total weight", f"{result.total_weight_grams:,.3f} g")

    if result.piece_price > 0:
        p1, p2, p3 = st.columns(3)
        p1.metric("% materials / price", f"{result.pct_materials:.1f}%")
        p2.metric("% total / price", f"{result.pct_total:.1f}%")
        p3.metric("Overage vs cost", f"{result.overage_pct:.1f}%")
    if result.diagnosis:
        _DIAGNOSIS_STYLE.get(result.diagnosis, st.info)(f"Diagnosis: **{result.diagnosis}**")
    else:
        st.caption("Enter a quoted price and at least one priced line to get a diagnosis.")

    for alert in result.alerts:
        st.warning(alert)


def _render_history(store: LocalStore, context: AppraisalContext, result):
    st.header("History")
    init_history_state(st, store)
    left, right = st.columns([1, 3])
    with left:
        if st.button("Save to history", type="primary"):
            save_to_history(st, store, context, result)
            st.success("Saved.")
        if st.button("Clear history", disabled=not st.session_state["history"]):
            clear_history(st, store)
            st.rerun()
    history = st.session_state["history"]
    with right:
        if not history:
            st.info("No saved appraisals yet.")
            return
        st.dataframe(history_frame(history), use_container_width=True, hide_index=True)
        d1, d2 = st.columns(2)
        d1.download_button("Download history (CSV)", data=export_history_csv(history),
                           file_name="appraisal_history.csv", mime="text/csv")
        d2.download_button("Download history (PDF)", data=build_history_pdf(history),
                           file_name="appraisal_history.pdf", mime="application/pdf")


def main():
    setup_logging()
    _st_title()
    store = LocalStore(STORE_PATH)
    init_session_state(store, INITIAL_CURRENCY)

    settings = sidebar_settings(store)
    sidebar_custom_material(store)
    with st.sidebar.expander("Material catalog", expanded=False):
        st.dataframe(st.session_state["catalog"].to_frame(), hide_index=True, use_container_width=True)

    _render_lines(settings["currency"])

    context = AppraisalContext(lines=list(st.session_state["lines"]), **settings)
    result = compute_appraisal(context, st.session_state["catalog"])
    logger.debug("Recomputed appraisal: %s", result.snapshot())

    st.markdown("---")
    _render_results(context, result)
    st.markdown("---")
    _render_history(store, context, result)

