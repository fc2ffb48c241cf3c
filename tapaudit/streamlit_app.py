"""
Streamlit front-end for the tap target audit.

- Accepts one or more collector JSON files (TapTargets + Viewport).
- Runs `TapTargetsRule().evaluate()` per file with the sidebar thresholds.
- Shows verdict, score and the failing pairs table per file.
- Exposes CSV/JSON downloads (per file).

Goal: see which buttons/links sit too close for a finger without opening
devtools on a phone. All processing happens locally.
"""

from __future__ import annotations

# --- ensure package imports work when launched directly ---
import sys, os
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

import json
from typing import List, Tuple

import streamlit as st

# --- Internal modules ---
from tapaudit.config import AuditConfig, FINGER_SIZE_PX, MAX_ACCEPTABLE_OVERLAP_SCORE_RATIO
from tapaudit.models.schemas import RuleResult
from tapaudit.rules.tap_targets import TapTargetsRule
from tapaudit.services.artifacts import artifacts_from_dict
from tapaudit.services.report import failures_to_dataframe

# ---------------------------- Page setup ----------------------------

st.set_page_config(page_title="Tap Target Audit (Local)", layout="wide")
st.title("Tap Target Audit (Local)")
st.caption("Collector JSON → finger-overlap check → failing pairs, score, downloads.")

# ---------------------------- Sidebar ----------------------------

with st.sidebar:
    st.header("How it works")
    st.markdown(
        "- A finger press is a square centered on each tap target rect.\n"
        "- If that square covers a neighbor by more than the cutoff share of the\n"
        "  target's own area, the pair fails.\n"
        "- Nested/identical rects are never flagged.\n"
        "- Pages without `width=device-width` are skipped."
    )
    st.divider()
    finger = st.number_input("Finger size (px)", min_value=1.0, value=float(FINGER_SIZE_PX), step=1.0)
    cutoff = st.number_input(
        "Max overlap ratio", min_value=0.0, max_value=1.0,
        value=float(MAX_ACCEPTABLE_OVERLAP_SCORE_RATIO), step=0.01,
    )

# ---------------------------- Uploader & Controls ----------------------------

uploaded = st.file_uploader(
    "Upload one or more tap target artifact files",
    type=["json"],
    accept_multiple_files=True,
    help="Each file: {\"TapTargets\": [...], \"Viewport\": \"width=device-width\"}",
)

run_btn = st.button("Run Audit", type="primary")

# ---------------------------- Main run ----------------------------

results: List[Tuple[str, RuleResult]] = []

if run_btn and uploaded:
    rule = TapTargetsRule(AuditConfig(finger_size_px=finger, max_overlap_ratio=cutoff))
    for uf in uploaded:
        artifacts = artifacts_from_dict(json.loads(uf.read()))
        results.append((uf.name, rule.evaluate(artifacts)))

# ---------------------------- Display results ----------------------------

if not results:
    st.info("Upload artifact files and click **Run Audit** to see results.")
else:
    tabs = st.tabs([name for name, _ in results])

    for tab, (name, res) in zip(tabs, results):
        with tab:
            if not res.applicable:
                st.warning(res.explanation)
                continue

            col_a, col_b = st.columns(2)
            col_a.metric("Verdict", "Pass" if res.passed else "Fail")
            col_b.metric("Score", res.display_value)

            st.subheader("Failing Pairs")
            df = failures_to_dataframe(res.items)
            st.dataframe(df, use_container_width=True)

            col_dl1, col_dl2 = st.columns(2)
            with col_dl1:
                st.download_button(
                    "Download JSON",
                    data=json.dumps(res.model_dump(), indent=2),
                    file_name=f"{name}.tap-targets.json",
                    mime="application/json",
                    use_container_width=True
                )
            with col_dl2:
                st.download_button(
                    "Download CSV",
                    data=df.to_csv(index=False),
                    file_name=f"{name}.tap-targets.csv",
                    mime="text/csv",
                    use_container_width=True
                )
