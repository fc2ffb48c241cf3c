"""
Data shapes for the tap target audit.

- Rect: one client rect in CSS px (left/top/right/bottom + width/height).
- TapTarget: an interactive element (snippet for diagnostics + its client rects).
- OverlapCandidate: a finger area that spills into a neighbor rect.
- PairResult: a scored candidate (ratio, scores, pass/fail, subject size).
- AuditResult: verdict + score + ordered failures for one run.
- TapTargetArtifacts: what the page collector hands us (targets + viewport).
- RuleResult: report-ready output of a rule.

If the report needs a new column, I add it to `PairResult` here first and then
populate it in `score.py`.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Rect(BaseModel):
    """
    Axis-aligned box in device pixels.

    The collector sends all six numbers; when `right`/`bottom` are missing we
    derive them from `left + width` / `top + height`.
    """

    left: float
    top: float
    right: float
    bottom: float
    width: float
    height: float

    @model_validator(mode="before")
    @classmethod
    def _fill_edges(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            if "right" not in data and "left" in data and "width" in data:
                data["right"] = data["left"] + data["width"]
            if "bottom" not in data and "top" in data and "height" in data:
                data["bottom"] = data["top"] + data["height"]
            if "width" not in data and "left" in data and "right" in data:
                data["width"] = data["right"] - data["left"]
            if "height" not in data and "top" in data and "bottom" in data:
                data["height"] = data["bottom"] - data["top"]
        return data

    @classmethod
    def from_xywh(cls, left: float, top: float, width: float, height: float) -> "Rect":
        return cls(
            left=left,
            top=top,
            right=left + width,
            bottom=top + height,
            width=width,
            height=height,
        )

    @property
    def is_well_formed(self) -> bool:
        """Non-negative size; anything else is a collector bug."""
        return self.width >= 0 and self.height >= 0


class TapTarget(BaseModel):
    """
    Interactive element on the page.

    Fields I care about:
    - snippet: outer HTML (trimmed) so the report can point at the element
    - rects: one per rendered box; a wrapped inline link has several
    """

    model_config = ConfigDict(populate_by_name=True)

    snippet: str
    rects: List[Rect] = Field(default_factory=list, alias="clientRects")


class OverlapCandidate(BaseModel):
    """Finger area of `subject_rect` reaching into `neighbor_rect`."""

    subject_index: int
    neighbor_index: int
    subject: TapTarget
    neighbor: TapTarget
    subject_rect: Rect
    neighbor_rect: Rect
    intersection: Rect


class PairResult(BaseModel):
    """
    One scored (subject -> neighbor) overlap.

    - subject_score: area of the subject rect
    - neighbor_score: area of finger area ∩ neighbor rect
    - overlap_score_ratio: neighbor_score / subject_score
    - intersection_width/height: raw size of that intersection
    - width/height/size: the subject rect's own dimensions ("10x10")
    """

    subject_index: int
    neighbor_index: int
    subject: TapTarget
    neighbor: TapTarget
    overlap_score_ratio: float
    subject_score: float
    neighbor_score: float
    intersection_width: float
    intersection_height: float
    width: float
    height: float
    size: str
    passed: bool


class AuditResult(BaseModel):
    """
    Final output of one engine run.

    - passed: no failing pairs
    - score: share of targets that are never the subject of a failure, in [0, 1]
    - failures: failing pairs in discovery order
    """

    passed: bool
    score: float
    failures: List[PairResult] = Field(default_factory=list)


class TapTargetArtifacts(BaseModel):
    """Collector output: tap targets plus the page's viewport meta content."""

    model_config = ConfigDict(populate_by_name=True)

    tap_targets: List[TapTarget] = Field(default_factory=list, alias="TapTargets")
    viewport: Optional[str] = Field(default=None, alias="Viewport")


class RuleResult(BaseModel):
    """
    Report-ready result of a rule.

    `applicable=False` means the rule was skipped (see `explanation`); then
    `score` is None and `items` is empty.
    """

    rule_id: str
    title: str
    applicable: bool = True
    passed: bool
    score: Optional[float] = None
    display_value: Optional[str] = None
    explanation: Optional[str] = None
    headings: List[Dict[str, str]] = Field(default_factory=list)
    items: List[Dict[str, Any]] = Field(default_factory=list)
