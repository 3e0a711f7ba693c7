import logging
import os
from pathlib import Path

from .constants import CURRENCIES, DEFAULT_CURRENCY

STORE_PATH = Path(os.getenv("JEWEL_APPRAISER_STORE", str(Path.home() / ".jewel_appraiser" / "store.json")))
LOG_LEVEL = os.getenv("JEWEL_APPRAISER_LOG_LEVEL", "INFO").upper()

INITIAL_CURRENCY = os.getenv("JEWEL_APPRAISER_CURRENCY", DEFAULT_CURRENCY).upper()
if INITIAL_CURRENCY not in CURRENCIES:
    INITIAL_CURRENCY = DEFAULT_CURRENCY

_configured = False


def setup_logging(level: str = LOG_LEVEL):
    """Configure root logging once; Streamlit reruns the script on every edit."""
    global _configured
    if _configured:
        return
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    _configured = True
