"""
Streamlit building blocks for the Conso / Retour screen.

Each `render_*` function draws one section of the page. Functions that accept
operator input return it; none of them touch `st.session_state` directly,
except through widget keys.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd
import streamlit as st

from config import MAX_UPLOAD_SIZE_MB
from domain.material import DerivedRow, POHeader, Totals
from fields.consumption_math import delta_within_tolerance
from fields.retour_edits import QuickSetMode
from writers.export_writer import ExportArtifact

from .formatting import fmt_delta, fmt_quantity, fmt_quantity_with_unit

logger = logging.getLogger(__name__)

TABLE_COLUMNS = {
    "id": "Material",
    "description": "Description",
    "unit_of_measure": "UoM",
    "assigned": "Assigned",
    "issued": "Issued",
    "total": "Total",
    "retour": "Retour saisi",
    "consomme": "Consommé (auto)",
    "delta": "Δ vs Assigned",
}

QUICK_SET_LABELS = {
    QuickSetMode.ZERO: "0",
    QuickSetMode.HALF: "½",
    QuickSetMode.ASSIGNED: "=Assigned",
}

DISPLAY_RULES = [
    "Δ vs Assigned en vert si l'écart est inférieur ou égal à ±2%.",
    "Consommé calculé automatiquement : Assigned − Retour.",
    "Les raccourcis facilitent la saisie opérateur (0, moitié, assigné).",
    "Exportez les données en CSV ou JSON pour intégration SAP.",
]


def render_header(header: POHeader) -> None:
    st.markdown('<p class="po-eyebrow">Suivi de production</p>', unsafe_allow_html=True)
    st.title("Conso / Retour – Fin de PO")
    st.markdown(
        f'<span class="po-chip"><b>PO:</b> {header["po_number"]}</span>'
        f'<span class="po-chip"><b>Produit:</b> {header["product"]}</span>'
        f'<span class="po-chip"><b>Batch:</b> {header["batch"]}</span>',
        unsafe_allow_html=True,
    )


def render_import_panel() -> Optional[Any]:
    """
    Import section. Returns the uploaded file, if any.

    SAP TXT files are accepted by the widget but not parsed; JSON files are
    previous exports that can be reloaded.
    """
    st.subheader("Import fichier TXT")
    st.caption(
        "Glissez un fichier TXT issu de SAP ou cliquez sur le bouton ci-dessous pour le sélectionner. "
        "Un export JSON précédent peut aussi être rechargé."
    )
    uploaded = st.file_uploader(
        "Déposez votre fichier ici",
        type=["txt", "json"],
        key="import_file",
    )
    if uploaded is not None and uploaded.size > MAX_UPLOAD_SIZE_MB * 1024 * 1024:
        st.error(f"❌ Fichier trop volumineux (max {MAX_UPLOAD_SIZE_MB} MB).")
        return None
    return uploaded


def _table_frame(rows: List[DerivedRow]) -> pd.DataFrame:
    """Display frame: raw numbers for the editable retour, formatted strings elsewhere."""
    records: List[Dict[str, Any]] = []
    for row in rows:
        records.append({
            "id": row["id"],
            "description": row["description"],
            "unit_of_measure": row["unit_of_measure"],
            "assigned": fmt_quantity(row["assigned"]),
            "issued": fmt_quantity(row["issued"]),
            "total": fmt_quantity(row["total"]),
            "retour": float(row["retour"]),
            "consomme": fmt_quantity(row["consomme"]),
            "delta": ("🟢 " if delta_within_tolerance(row["delta_percent"]) else "🔴 ")
            + fmt_delta(row["delta_percent"]),
        })
    return pd.DataFrame(records, columns=list(TABLE_COLUMNS))


def render_material_table(rows: List[DerivedRow], totals: Totals) -> Dict[str, Any]:
    """
    Operator table with an editable "Retour saisi" column.

    Returns {material_id: new_raw_value} for the rows whose retour was edited.
    """
    df = _table_frame(rows)

    edited_df = st.data_editor(
        df,
        hide_index=True,
        width="stretch",
        disabled=[c for c in TABLE_COLUMNS if c != "retour"],
        column_config={
            key: st.column_config.TextColumn(label) for key, label in TABLE_COLUMNS.items() if key != "retour"
        } | {
            "retour": st.column_config.NumberColumn(TABLE_COLUMNS["retour"], min_value=0),
        },
        key="material_table",
    )

    st.markdown(
        f"**Totaux** — Assigned {fmt_quantity(totals['assigned'])} · Issued {fmt_quantity(totals['issued'])} · "
        f"Total {fmt_quantity(totals['total'])} · Retour {fmt_quantity(totals['retour'])} · "
        f"Consommé {fmt_quantity(totals['consomme'])}"
    )

    changes: Dict[str, Any] = {}
    if edited_df is None:
        return changes
    for before, after in zip(df.to_dict(orient="records"), edited_df.to_dict(orient="records")):
        if before["retour"] != after["retour"]:
            changes[before["id"]] = after["retour"]
    return changes


def render_quick_set(rows: List[DerivedRow]) -> Optional[Tuple[str, QuickSetMode]]:
    """Per-row shortcut buttons. Returns (material_id, mode) for the button clicked, if any."""
    st.markdown("**Raccourcis**")
    clicked: Optional[Tuple[str, QuickSetMode]] = None

    for row in rows:
        cols = st.columns([3, 1, 1, 1])
        cols[0].caption(f"{row['id']} · {row['description']}")
        for col, (mode, label) in zip(cols[1:], QUICK_SET_LABELS.items()):
            if col.button(label, key=f"quick_{mode.value}_{row['id']}"):
                clicked = (row["id"], mode)

    return clicked


def _log_download(artifact: ExportArtifact) -> None:
    logger.info("Operator downloaded %s (%d bytes)", artifact.filename, len(artifact.data))


def render_download_buttons(json_export: ExportArtifact, csv_export: ExportArtifact) -> bool:
    """Export CSV / Export JSON / Valider le PO. Returns True when "Valider le PO" was clicked."""
    col_csv, col_json, col_validate = st.columns(3)

    with col_csv:
        st.download_button(
            label="Export CSV",
            data=csv_export.data,
            file_name=csv_export.filename,
            mime=csv_export.mime_type,
            on_click=_log_download,
            args=(csv_export,),
            width="stretch",
            key="download_csv",
        )
    with col_json:
        st.download_button(
            label="Export JSON",
            data=json_export.data,
            file_name=json_export.filename,
            mime=json_export.mime_type,
            on_click=_log_download,
            args=(json_export,),
            width="stretch",
            key="download_json",
        )
    with col_validate:
        return st.button("Valider le PO", type="primary", width="stretch", key="validate_po")


def _info_tile(label: str, value: str, accent: bool = False) -> str:
    tone = "info-tile accent" if accent else "info-tile"
    return f'<div class="{tone}"><div class="label">{label}</div><div class="value">{value}</div></div>'


def render_summary(totals: Totals, unit: str = "EA") -> None:
    st.subheader("Synthèse PO")
    st.markdown(
        _info_tile("Planifié", fmt_quantity_with_unit(totals["planned"], unit), accent=True)
        + _info_tile("Assigné", fmt_quantity_with_unit(totals["assigned"], unit))
        + _info_tile("Consommé", fmt_quantity_with_unit(totals["consomme"], unit))
        + _info_tile("Retour", fmt_quantity_with_unit(totals["retour"], unit)),
        unsafe_allow_html=True,
    )


def render_display_rules() -> None:
    st.subheader("Règles d'affichage")
    st.markdown("\n".join(f"- {rule}" for rule in DISPLAY_RULES))


def render_reset_button() -> bool:
    return st.button("🔄 Réinitialiser la session", key="reset_session")
