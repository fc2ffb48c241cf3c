"""
Engine entry point: tap targets -> AuditResult.

detect -> score -> aggregate, one pass, no state kept between calls. The
viewport check and report shaping live in `rules/tap_targets.py`.
"""

from typing import List, Optional

from tapaudit.config import AuditConfig
from tapaudit.models.schemas import AuditResult, TapTarget
from tapaudit.services.aggregate import aggregate
from tapaudit.services.detect import find_overlap_candidates
from tapaudit.services.score import score_candidates
from tapaudit.util.logger import get_logger


def audit_tap_targets(
    targets: List[TapTarget],
    config: Optional[AuditConfig] = None,
) -> AuditResult:
    """
    Run the full spacing audit over one snapshot of tap targets.

    Args:
        targets: tap targets in page order; the order drives failure order.
        config: thresholds; defaults to `AuditConfig()`.

    Returns:
        AuditResult: verdict, score in [0, 1], failing pairs.
    """
    logger = get_logger()
    config = config or AuditConfig()
    logger.info(f"Auditing {len(targets)} tap targets (finger {config.finger_size_px}px)")

    candidates = find_overlap_candidates(targets, config)
    scored = score_candidates(candidates, config)
    result = aggregate(targets, scored, config)

    logger.info(
        f"Tap target audit {'passed' if result.passed else 'failed'}: "
        f"score={result.score}, {len(result.failures)} failing pairs from {len(candidates)} overlaps"
    )
    return result
