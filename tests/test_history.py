import csv
import io

from jewel_appraiser.appraisal import AppraisalContext, compute_appraisal
from jewel_appraiser.constants import HISTORY_SLOT
from jewel_appraiser.history import (
    clear_history, export_history_csv, history_frame, init_history_state, make_history_entry,
    push_history, save_to_history,
)
from jewel_appraiser.pdf import build_history_pdf
from jewel_appraiser.pricing import Line


def _context(**kw):
    line = Line(material_key="gold_18k", unit_price=100, weight_val=10, density="15.6")
    return AppraisalContext(lines=[line], piece_type="anillo_fino", complexity="alta", piece_price=1400, **kw)


def test_make_history_entry(catalog):
    ctx = _context(currency="USD", description=" Ring ")
    entry = make_history_entry(ctx, compute_appraisal(ctx, catalog), when="2026-01-01T00:00:00+00:00")
    assert entry == {
        "timestamp": "2026-01-01T00:00:00+00:00",
        "currency": "USD",
        "description": "Ring",
        "subtotal": 1000.0,
        "labor_cost": 90.0,
        "total_cost": 1090.0,
        "piece_price": 1400.0,
        "pct_materials": 71.43,
        "pct_total": 77.86,
        "diagnosis": "possibly overvalued",
    }


def test_push_history_caps_and_keeps_newest_first():
    history = []
    for i in range(505):
        history = push_history(history, {"n": i})
    assert len(history) == 500
    assert history[0]["n"] == 504
    assert history[-1]["n"] == 5


def test_push_history_does_not_mutate_input():
    original = [{"n": 0}]
    push_history(original, {"n": 1})
    assert original == [{"n": 0}]


def test_save_to_history_persists(fake_st, store, catalog):
    ctx = _context()
    save_to_history(fake_st, store, ctx, compute_appraisal(ctx, catalog))
    save_to_history(fake_st, store, ctx, compute_appraisal(ctx, catalog))
    assert len(fake_st.session_state["history"]) == 2
    assert len(store.read(HISTORY_SLOT)) == 2
    clear_history(fake_st, store)
    assert store.read(HISTORY_SLOT) == []


def test_init_history_state_ignores_corrupt_slot(fake_st, store):
    store.write(HISTORY_SLOT, {"not": "a list"})
    init_history_state(fake_st, store)
    assert fake_st.session_state["history"] == []


def test_csv_export_header_and_escaping():
    entry = {"timestamp": "t", "currency": "EUR", "description": 'He said "hi", ok', "subtotal": 1.0,
             "labor_cost": 2.0, "total_cost": 3.0, "piece_price": 4.0, "pct_materials": 25.0,
             "pct_total": 75.0, "diagnosis": "reasonable price"}
    data = export_history_csv([entry])
    assert b'"He said ""hi"", ok"' in data
    rows = list(csv.reader(io.StringIO(data.decode("utf-8"))))
    assert rows[0] == ["Timestamp", "Currency", "Description", "Materials subtotal", "Labor cost",
                       "Total cost", "Quoted price", "% materials", "% total", "Diagnosis"]
    assert rows[1][2] == 'He said "hi", ok'


def test_history_frame_empty():
    assert history_frame([]).empty


def test_pdf_export():
    entries = [{"timestamp": f"2026-01-{i % 28 + 1:02d}", "currency": "EUR", "description": "x" * 40,
                "subtotal": 1000.0, "labor_cost": 90.0, "total_cost": 1090.0, "piece_price": 1400.0,
                "pct_materials": 71.43, "pct_total": 77.86, "diagnosis": "possibly overvalued"}
               for i in range(120)]
    pdf = build_history_pdf(entries)
    assert pdf.startswith(b"%PDF")
    assert build_history_pdf([]).startswith(b"%PDF")
