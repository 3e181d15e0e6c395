# interface/app.py
"""
Conso / Retour – End-of-PO reconciliation screen

Streamlit view over the reconciliation calculator: the operator enters returned
quantities, consumption and deviation are re-derived on every edit, and the
table can be exported as CSV or JSON.

Run with: streamlit run interface/app.py
"""

import logging

import streamlit as st

from config import configure_logging
from domain.seed import PO_HEADER, initial_materials
from fields.consumption_math import derive_all
from fields.retour_edits import quick_set, set_retour
from input_readers import ExportFormatError, read_export_json
from interface.components import (
    render_display_rules,
    render_download_buttons,
    render_header,
    render_import_panel,
    render_material_table,
    render_quick_set,
    render_reset_button,
    render_summary,
)
from interface.styles import get_custom_css
from writers.export_writer import csv_artifact, json_artifact

configure_logging()
logger = logging.getLogger(__name__)


def _replace_materials(materials) -> None:
    """Swap in a new material list and drop the editor's pending diff before rerunning."""
    st.session_state.materials = materials
    st.session_state.pop("material_table", None)
    st.rerun()


# ============================================================================
# PAGE CONFIG
# ============================================================================
st.set_page_config(
    page_title="Conso / Retour",
    page_icon="🏭",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# ============================================================================
# APPLY STYLES
# ============================================================================
st.markdown(get_custom_css(), unsafe_allow_html=True)

# ============================================================================
# SESSION STATE INITIALIZATION
# ============================================================================
if "materials" not in st.session_state:
    st.session_state.materials = initial_materials()
    logger.info("New session seeded with %d materials", len(st.session_state.materials))
if "loaded_file_id" not in st.session_state:
    st.session_state.loaded_file_id = None

rows, totals = derive_all(st.session_state.materials)

# ============================================================================
# MAIN APP FLOW
# ============================================================================
main_col, side_col = st.columns([3, 1])

with main_col:
    render_header(PO_HEADER)

    # ------------------------------------------------------------------------
    # IMPORT
    # ------------------------------------------------------------------------
    uploaded_file = render_import_panel()
    if uploaded_file is not None and uploaded_file.file_id != st.session_state.loaded_file_id:
        st.session_state.loaded_file_id = uploaded_file.file_id

        if uploaded_file.name.lower().endswith(".json"):
            try:
                materials = read_export_json(uploaded_file.getvalue().decode("utf-8"))
            except (ExportFormatError, UnicodeDecodeError) as e:
                logger.warning("Rejected JSON export %s: %s", uploaded_file.name, e)
                st.error(f"❌ Error: {e}")
            else:
                _replace_materials(materials)
        else:
            st.info("ℹ️ L'import TXT SAP n'est pas encore disponible.")

    # ------------------------------------------------------------------------
    # OPERATOR VIEW
    # ------------------------------------------------------------------------
    st.subheader("Vue opérateur")

    validate_clicked = render_download_buttons(json_artifact(rows), csv_artifact(rows))
    if validate_clicked:
        st.info("ℹ️ La validation du PO n'est pas encore disponible.")

    changes = render_material_table(rows, totals)
    if changes:
        materials = st.session_state.materials
        for material_id, raw_value in changes.items():
            materials = set_retour(materials, material_id, raw_value)
        _replace_materials(materials)

    shortcut = render_quick_set(rows)
    if shortcut is not None:
        material_id, mode = shortcut
        _replace_materials(quick_set(st.session_state.materials, material_id, mode))

with side_col:
    render_summary(totals)
    render_display_rules()

    if render_reset_button():
        for key in list(st.session_state.keys()):
            del st.session_state[key]
        st.rerun()
