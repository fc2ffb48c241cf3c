"""
Tap targets rule: viewport gate + spacing engine + report details.

- Pages without `width=device-width` aren't laid out for phones, so the rule
  is not applicable and the engine never runs.
- Otherwise run `audit_tap_targets()` and shape failures into table items.
"""

from typing import Optional

from tapaudit.config import AuditConfig
from tapaudit.models.schemas import RuleResult, TapTargetArtifacts
from tapaudit.rules.base import Rule
from tapaudit.services.audit import audit_tap_targets
from tapaudit.services.report import failure_rows
from tapaudit.util.logger import get_logger
from tapaudit.util.viewport import is_mobile_optimized

NOT_MOBILE_EXPLANATION = (
    "Tap targets are too small because there's no viewport meta tag "
    "optimized for mobile screens"
)

HEADINGS = [
    {"key": "tapTarget", "itemType": "code", "text": "Tap Target"},
    {"key": "size", "itemType": "text", "text": "Size"},
    {"key": "overlappingTarget", "itemType": "code", "text": "Overlapping Target"},
]


class TapTargetsRule(Rule):
    rule_id = "tap-targets"
    title = "Tap targets are sized appropriately"

    def __init__(self, config: Optional[AuditConfig] = None):
        self.config = config or AuditConfig()

    def evaluate(self, artifacts: TapTargetArtifacts) -> RuleResult:
        logger = get_logger()

        if not is_mobile_optimized(artifacts.viewport):
            logger.info(f"Viewport {artifacts.viewport!r} is not mobile optimized; skipping tap targets")
            return RuleResult(
                rule_id=self.rule_id,
                title=self.title,
                applicable=False,
                passed=False,
                explanation=NOT_MOBILE_EXPLANATION,
            )

        result = audit_tap_targets(artifacts.tap_targets, self.config)
        pct = round(result.score * 100)

        return RuleResult(
            rule_id=self.rule_id,
            title=self.title,
            passed=result.passed,
            score=result.score,
            display_value=f"{pct}% appropriately sized tap targets",
            headings=HEADINGS,
            items=failure_rows(result),
        )
