"""
Finger-overlap detection.

For every ordered pair of distinct tap targets (subject, neighbor) and every
combination of their client rects:
- skip the rect pair when one rect contains the other (a label wrapping its
  own input, or two elements rendered in the same box);
- put a finger-sized square on the subject rect's center;
- emit a candidate when that square overlaps the neighbor rect with area > 0.

Direction matters: the finger is always centered on the subject, so
subject->neighbor and neighbor->subject are separate candidates with
different numbers.
"""

from typing import List, Optional

from tapaudit.config import AuditConfig
from tapaudit.models.schemas import OverlapCandidate, TapTarget
from tapaudit.util.layout import contains, finger_area, intersect
from tapaudit.util.logger import get_logger


def is_scorable(target: TapTarget) -> bool:
    """At least one rect and no negative sizes; everything else is excluded."""
    return bool(target.rects) and all(r.is_well_formed for r in target.rects)


def find_overlap_candidates(
    targets: List[TapTarget],
    config: Optional[AuditConfig] = None,
) -> List[OverlapCandidate]:
    """
    Return every finger-area overlap between distinct targets.

    Order is deterministic: subject index, then neighbor index, then subject
    rect, then neighbor rect (all in input order).
    """
    logger = get_logger()
    config = config or AuditConfig()

    usable = []
    for idx, target in enumerate(targets):
        if is_scorable(target):
            usable.append(idx)
        elif target.rects:
            logger.warning(f"Skipping tap target {idx} with negative rect size: {target.snippet!r}")

    candidates: List[OverlapCandidate] = []
    for subject_idx in usable:
        subject = targets[subject_idx]
        for neighbor_idx in usable:
            if neighbor_idx == subject_idx:
                continue
            neighbor = targets[neighbor_idx]

            for subject_rect in subject.rects:
                finger = finger_area(subject_rect, config.finger_size_px)
                for neighbor_rect in neighbor.rects:
                    # evaluated on the raw rects, not the finger area
                    if contains(subject_rect, neighbor_rect) or contains(neighbor_rect, subject_rect):
                        continue
                    overlap = intersect(finger, neighbor_rect)
                    if overlap is None:
                        continue
                    candidates.append(OverlapCandidate(
                        subject_index=subject_idx,
                        neighbor_index=neighbor_idx,
                        subject=subject,
                        neighbor=neighbor,
                        subject_rect=subject_rect,
                        neighbor_rect=neighbor_rect,
                        intersection=overlap,
                    ))

    logger.debug(f"Found {len(candidates)} finger overlaps across {len(usable)} tap targets")
    return candidates
