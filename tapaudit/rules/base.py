"""
Rule capability.

A rule takes the collector artifacts and returns a report-ready `RuleResult`.
Rules backed by an outside library implement this as a thin adapter; nothing
in the geometry engine depends on it.
"""

from abc import ABC, abstractmethod

from tapaudit.models.schemas import RuleResult, TapTargetArtifacts


class Rule(ABC):
    rule_id: str = ""
    title: str = ""

    @abstractmethod
    def evaluate(self, artifacts: TapTargetArtifacts) -> RuleResult:
        ...
