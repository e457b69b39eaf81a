# app.py
from pathlib import Path
import sys
import importlib
import streamlit as st
from loguru import logger

# ==== Paths & sys.path ====
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import settings  # noqa: E402

# ==== Streamlit ====
st.set_page_config(
    page_title=settings.page_title,
    page_icon="🔐",
    layout="centered",
)

# ==== Pages ====
required_modules = {
    "mainwindow_page": "🏠 Home",
    "generator_page":  "🔐 Generator",
}

PAGES = {}
errors = []

for mod_name, label in required_modules.items():
    try:
        mod = importlib.import_module(f"ui.{mod_name}")
        render_fn = getattr(mod, "render", None)
        if callable(render_fn):
            PAGES[label] = render_fn
        else:
            errors.append(f"Module 'ui.{mod_name}' has no render() function.")
    except Exception as e:
        logger.exception("Failed to import ui.{}", mod_name)
        errors.append(f"Failed to import 'ui.{mod_name}': {e}")

# Show errors but keep the remaining pages usable
for msg in errors:
    st.error(msg)
if not PAGES:
    st.stop()

# ==== Sidebar navigation ====
labels = list(PAGES.keys())
default_index = labels.index("🔐 Generator") if "🔐 Generator" in labels else 0
choice = st.sidebar.radio(" ", labels, index=default_index)
PAGES[choice]()
