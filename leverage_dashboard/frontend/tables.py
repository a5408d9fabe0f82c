"""
Table rendering functions for the Futures Leverage Dashboard
Handles DataFrame display of the per-symbol futures exposure.
"""

from typing import Dict, List

import pandas as pd
import streamlit as st

EXPOSURE_COLUMNS = ["Symbol", "Qty", "Multiplier", "Last Price", "Notional", "Share %"]


def build_exposure_dataframe(exposures: List[Dict]) -> pd.DataFrame:
    if not exposures:
        return pd.DataFrame(columns=EXPOSURE_COLUMNS)
    rows = []
    for e in exposures:
        rows.append({
            "Symbol": e.get("symbol"),
            "Qty": int(e.get("quantity", 0)),
            "Multiplier": int(e.get("multiplier", 0)),
            "Last Price": float(e.get("price", 0.0)),
            "Notional": float(e.get("notional", 0.0)),
        })
    df = pd.DataFrame(rows)
    total = df["Notional"].sum()
    df["Share %"] = (df["Notional"] / total * 100) if total else 0.0
    return df.sort_values("Notional", ascending=False).reset_index(drop=True)


def render_exposure_table(exposure_df: pd.DataFrame) -> None:
    if exposure_df.empty:
        st.info("No priced futures positions")
        return
    st.dataframe(
        exposure_df,
        use_container_width=True,
        hide_index=True,
        column_config={
            "Last Price": st.column_config.NumberColumn(format="%.2f"),
            "Notional": st.column_config.NumberColumn(format="$%.2f"),
            "Share %": st.column_config.NumberColumn(format="%.1f%%"),
        },
    )
