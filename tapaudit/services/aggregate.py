"""
Reduce scored pairs to the audit verdict.

- Keep failing pairs only, one per (subject, neighbor) direction: when several
  rect combinations of the same pair fail, keep the worst ratio.
- Keep first-discovery order; never re-sort by score so the report is stable.
- Score: share of targets that are never the subject of a failure.

No geometry happens here.
"""

from typing import Dict, List, Optional, Tuple

from tapaudit.config import AuditConfig
from tapaudit.models.schemas import AuditResult, PairResult, TapTarget
from tapaudit.services.detect import is_scorable


def _pair_key(res: PairResult) -> Tuple[int, int]:
    return (res.subject_index, res.neighbor_index)


def collect_failures(results: List[PairResult]) -> List[PairResult]:
    worst: Dict[Tuple[int, int], PairResult] = {}
    for res in results:
        if res.passed:
            continue
        key = _pair_key(res)
        # replacing a value keeps the key's original position
        if key not in worst or res.overlap_score_ratio > worst[key].overlap_score_ratio:
            worst[key] = res
    return list(worst.values())


def aggregate(
    targets: List[TapTarget],
    results: List[PairResult],
    config: Optional[AuditConfig] = None,
) -> AuditResult:
    config = config or AuditConfig()

    failures = collect_failures(results)

    scorable = {idx for idx, t in enumerate(targets) if is_scorable(t)}
    if not scorable:
        return AuditResult(passed=True, score=1.0, failures=[])

    failing_subjects = {res.subject_index for res in failures} & scorable
    score = (len(scorable) - len(failing_subjects)) / len(scorable)

    return AuditResult(
        passed=not failures,
        score=round(score, config.score_precision),
        failures=failures,
    )
