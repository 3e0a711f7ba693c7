from pathlib import Path
from types import SimpleNamespace

from streamlit.testing.v1 import AppTest

from jewel_appraiser import ui
from jewel_appraiser.catalog import MaterialCatalog
from jewel_appraiser.constants import CURRENCY_SLOT, DEFAULT_MATERIAL_KEY
from jewel_appraiser.pricing import Line
from jewel_appraiser.storage import LocalStore

APP_FILE = str(Path(ui.__file__).with_name("streamlit_app.py"))


def _session(monkeypatch, lines):
    fake = SimpleNamespace(session_state={"catalog": MaterialCatalog(), "lines": lines})
    monkeypatch.setattr(ui, "st", fake)
    return fake.session_state


def test_remove_line_drops_only_that_line(monkeypatch):
    a, b = Line(material_key="ruby"), Line(material_key="silver_925")
    state = _session(monkeypatch, [a, b])
    ui.remove_line(a.id)
    assert state["lines"] == [b]


def test_removing_last_line_leaves_a_fresh_default(monkeypatch):
    only = Line(material_key="ruby", unit_price="80")
    state = _session(monkeypatch, [only])
    ui.remove_line(only.id)
    [fresh] = state["lines"]
    assert fresh.material_key == DEFAULT_MATERIAL_KEY
    assert fresh.id != only.id
    assert fresh.unit_price != "80"


def test_currency_change_keeps_sidebar_inputs(tmp_path, monkeypatch):
    store_path = tmp_path / "store.json"
    monkeypatch.setattr("jewel_appraiser.app.STORE_PATH", store_path)
    at = AppTest.from_file(APP_FILE, default_timeout=30).run()
    assert not at.exception

    at.text_input(key="piece_price").input("1400").run()
    at.text_input(key="description").input("Ring").run()
    at.selectbox(key="currency_choice").select("USD").run()

    assert not at.exception
    assert at.text_input(key="piece_price").value == "1400"
    assert at.text_input(key="description").value == "Ring"
    assert at.text_input(key="piece_price").label.endswith("($)")
    assert LocalStore(store_path).read(CURRENCY_SLOT) == "USD"
