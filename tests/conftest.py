from types import SimpleNamespace

import pytest

from jewel_appraiser.catalog import MaterialCatalog
from jewel_appraiser.storage import LocalStore


@pytest.fixture
def catalog():
    return MaterialCatalog()


@pytest.fixture
def store(tmp_path):
    return LocalStore(tmp_path / "store.json")


@pytest.fixture
def fake_st():
    # stands in for the streamlit module: only session_state is touched
    return SimpleNamespace(session_state={})
