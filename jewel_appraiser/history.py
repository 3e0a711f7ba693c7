import logging
from typing import Dict, List, Optional

import pandas as pd

from .appraisal import AppraisalContext, AppraisalResult
from .constants import HISTORY_COLUMNS, HISTORY_MAX, HISTORY_SLOT
from .storage import LocalStore
from .utils import now_iso, round2

logger = logging.getLogger(__name__)


def make_history_entry(context: AppraisalContext, result: AppraisalResult, when: Optional[str] = None) -> Dict:
    return {
        "timestamp": when or now_iso(),
        "currency": context.currency,
        "description": (context.description or "").strip(),
        "subtotal": round2(result.subtotal),
        "labor_cost": round2(result.labor_cost),
        "total_cost": round2(result.total_cost),
        "piece_price": round2(result.piece_price),
        "pct_materials": round2(result.pct_materials),
        "pct_total": round2(result.pct_total),
        "diagnosis": result.diagnosis,
    }


def push_history(history: List[Dict], entry: Dict, limit: int = HISTORY_MAX) -> List[Dict]:
    """Newest first; anything past ``limit`` (the oldest) is dropped."""
    return ([dict(entry)] + list(history or []))[:max(0, limit)]


def _valid_entries(raw) -> List[Dict]:
    if not isinstance(raw, list):
        return []
    return [e for e in raw if isinstance(e, dict)][:HISTORY_MAX]


def init_history_state(st, store: LocalStore):
    if "history" not in st.session_state:
        st.session_state["history"] = _valid_entries(store.read(HISTORY_SLOT, []))


def save_to_history(st, store: LocalStore, context: AppraisalContext, result: AppraisalResult) -> Dict:
    init_history_state(st, store)
    entry = make_history_entry(context, result)
    st.session_state["history"] = push_history(st.session_state["history"], entry)
    store.write(HISTORY_SLOT, st.session_state["history"])
    logger.info("Saved appraisal to history (%d entries)", len(st.session_state["history"]))
    return entry


def clear_history(st, store: LocalStore):
    st.session_state["history"] = []
    store.write(HISTORY_SLOT, [])


def history_frame(history: List[Dict]) -> pd.DataFrame:
    keys = [k for k, _ in HISTORY_COLUMNS]
    df = pd.DataFrame([{k: e.get(k, "") for k in keys} for e in (history or [])], columns=keys)
    return df.rename(columns=dict(HISTORY_COLUMNS))


def export_history_csv(history: List[Dict]) -> bytes:
    return history_frame(history).to_csv(index=False).encode("utf-8")
