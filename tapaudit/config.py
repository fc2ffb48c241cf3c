"""
Centralized thresholds for the tap target audit.

- FINGER_SIZE_PX: side of the square that models a finger press, in CSS px.
- MAX_ACCEPTABLE_OVERLAP_SCORE_RATIO: above this, a press on the subject
  bleeds too far into the neighbor and the pair fails.
- SCORE_PRECISION: decimal places kept on the final audit score.

These live here so the engine stays readable and we change numbers in one place.
Anything that runs the engine takes an `AuditConfig`; the constants are only
its defaults.
"""

from pydantic import BaseModel, Field

FINGER_SIZE_PX = 48

# 25% of the subject's own area landing on a neighbor is the most we accept
MAX_ACCEPTABLE_OVERLAP_SCORE_RATIO = 0.25

SCORE_PRECISION = 2


class AuditConfig(BaseModel):
    """
    Knobs for one audit run.

    Defaults match the constants above; tests build borderline layouts with
    other values to check the engine doesn't secretly rely on them.
    """

    finger_size_px: float = Field(default=FINGER_SIZE_PX, gt=0)
    max_overlap_ratio: float = Field(default=MAX_ACCEPTABLE_OVERLAP_SCORE_RATIO, ge=0)
    score_precision: int = Field(default=SCORE_PRECISION, ge=0)
