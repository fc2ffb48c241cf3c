"""
Pair scoring.

- subject_score: area of the subject rect (how much press it can absorb).
- neighbor_score: area of finger area ∩ neighbor rect (how much press lands
  on the neighbor instead).
- overlap_score_ratio: neighbor_score / subject_score; above the cutoff the
  pair fails.

A subject rect with zero area has no defined ratio; we skip it rather than
fail it.
"""

from typing import List, Optional

from tapaudit.config import AuditConfig
from tapaudit.models.schemas import OverlapCandidate, PairResult
from tapaudit.util.layout import rect_area
from tapaudit.util.logger import get_logger


def format_size(width: float, height: float) -> str:
    """10.0, 10.0 -> '10x10'; fractional sizes keep their decimals."""
    def _num(v: float) -> str:
        return str(int(v)) if float(v).is_integer() else str(v)
    return f"{_num(width)}x{_num(height)}"


def score_candidate(
    candidate: OverlapCandidate,
    config: Optional[AuditConfig] = None,
) -> Optional[PairResult]:
    config = config or AuditConfig()

    subject_score = rect_area(candidate.subject_rect)
    if subject_score == 0:
        return None

    neighbor_score = rect_area(candidate.intersection)
    ratio = neighbor_score / subject_score

    return PairResult(
        subject_index=candidate.subject_index,
        neighbor_index=candidate.neighbor_index,
        subject=candidate.subject,
        neighbor=candidate.neighbor,
        overlap_score_ratio=ratio,
        subject_score=subject_score,
        neighbor_score=neighbor_score,
        intersection_width=candidate.intersection.width,
        intersection_height=candidate.intersection.height,
        width=candidate.subject_rect.width,
        height=candidate.subject_rect.height,
        size=format_size(candidate.subject_rect.width, candidate.subject_rect.height),
        passed=ratio <= config.max_overlap_ratio,
    )


def score_candidates(
    candidates: List[OverlapCandidate],
    config: Optional[AuditConfig] = None,
) -> List[PairResult]:
    """Score in input order; zero-area subjects drop out."""
    logger = get_logger()
    config = config or AuditConfig()

    results: List[PairResult] = []
    for c in candidates:
        res = score_candidate(c, config)
        if res is None:
            logger.debug(f"Zero-area subject rect in {c.subject.snippet!r}; skipping pair")
            continue
        results.append(res)
    return results
