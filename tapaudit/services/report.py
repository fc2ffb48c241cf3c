"""
Failure records for the report layer.

`failure_rows()` flattens PairResults into the record the report consumes;
`failures_to_dataframe()` gives a fixed-column table for display/CSV.
"""

from typing import Any, Dict, List

import pandas as pd

from tapaudit.models.schemas import AuditResult, PairResult

FAILURE_COLUMNS = [
    "tapTarget", "overlappingTarget", "size",
    "width", "height",
    "tapTargetScore", "overlappingTargetScore", "overlapScoreRatio",
]


def failure_to_row(res: PairResult) -> Dict[str, Any]:
    return {
        "tapTarget": res.subject.snippet,
        "overlappingTarget": res.neighbor.snippet,
        "size": res.size,
        "width": res.width,
        "height": res.height,
        "tapTargetScore": res.subject_score,
        "overlappingTargetScore": res.neighbor_score,
        "overlapScoreRatio": res.overlap_score_ratio,
    }


def failure_rows(result: AuditResult) -> List[Dict[str, Any]]:
    return [failure_to_row(res) for res in result.failures]


def failures_to_dataframe(rows: List[Dict[str, Any]]) -> pd.DataFrame:
    df = pd.DataFrame(rows)
    for c in FAILURE_COLUMNS:
        if c not in df.columns:
            df[c] = None
    return df[FAILURE_COLUMNS]
