"""
Unit tests for the layers around the engine: artifacts adapter, viewport gate,
the tap targets rule and report rows.
"""

import json

import pytest
from pydantic import ValidationError

from tapaudit.config import FINGER_SIZE_PX
from tapaudit.models.schemas import TapTargetArtifacts
from tapaudit.rules.base import Rule
from tapaudit.rules.tap_targets import NOT_MOBILE_EXPLANATION, TapTargetsRule
from tapaudit.services.artifacts import artifacts_from_dict, load_artifacts
from tapaudit.services.audit import audit_tap_targets
from tapaudit.services.report import FAILURE_COLUMNS, failure_rows, failures_to_dataframe
from tapaudit.util.viewport import is_mobile_optimized, parse_viewport_content


def client_rect(x, y, size=10):
    return {"left": x, "top": y, "width": size, "height": size, "right": x + size, "bottom": y + size}


def collector_payload(viewport="width=device-width", fail_right=True):
    right_x = FINGER_SIZE_PX - 22 if fail_right else FINGER_SIZE_PX
    return {
        "TapTargets": [
            {"snippet": "<main></main>", "clientRects": [client_rect(0, 0)]},
            {"snippet": "<below></below>", "clientRects": [client_rect(0, FINGER_SIZE_PX)]},
            {"snippet": "<right></right>", "clientRects": [client_rect(right_x, 0)]},
        ],
        "Viewport": viewport,
    }


class TestArtifacts:
    """Test the collector JSON adapter."""

    def test_from_dict(self):
        artifacts = artifacts_from_dict(collector_payload())

        assert len(artifacts.tap_targets) == 3
        assert artifacts.tap_targets[0].snippet == "<main></main>"
        assert artifacts.tap_targets[2].rects[0].left == FINGER_SIZE_PX - 22
        assert artifacts.viewport == "width=device-width"

    def test_rect_edges_derived_when_missing(self):
        data = {"TapTargets": [{"snippet": "<a></a>", "clientRects": [{"left": 1, "top": 2, "width": 3, "height": 4}]}]}

        rect = artifacts_from_dict(data).tap_targets[0].rects[0]

        assert (rect.right, rect.bottom) == (4, 6)

    def test_missing_snippet_is_rejected(self):
        with pytest.raises(ValidationError):
            artifacts_from_dict({"TapTargets": [{"clientRects": []}]})

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "artifacts.json"
        path.write_text(json.dumps(collector_payload()), encoding="utf-8")

        artifacts = load_artifacts(path)

        assert [t.snippet for t in artifacts.tap_targets] == ["<main></main>", "<below></below>", "<right></right>"]

    def test_load_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_artifacts(tmp_path / "nope.json")


class TestViewport:
    """Test viewport meta parsing."""

    def test_parse_content(self):
        props = parse_viewport_content("width=device-width, initial-scale=1")

        assert props == {"width": "device-width", "initial-scale": "1"}

    def test_mobile_optimized(self):
        assert is_mobile_optimized("width=device-width") is True
        assert is_mobile_optimized("initial-scale=1, WIDTH = Device-Width") is True

    def test_not_mobile_optimized(self):
        assert is_mobile_optimized(None) is False
        assert is_mobile_optimized("") is False
        assert is_mobile_optimized("width=1024") is False


class TestTapTargetsRule:
    """Test the rule wrapper around the engine."""

    def test_is_a_rule(self):
        assert isinstance(TapTargetsRule(), Rule)

    def test_not_applicable_without_mobile_viewport(self):
        artifacts = artifacts_from_dict(collector_payload(viewport=None))

        res = TapTargetsRule().evaluate(artifacts)

        assert res.applicable is False
        assert res.passed is False
        assert res.score is None
        assert res.explanation == NOT_MOBILE_EXPLANATION
        assert res.items == []

    def test_failing_page(self):
        res = TapTargetsRule().evaluate(artifacts_from_dict(collector_payload()))

        assert res.applicable is True
        assert res.passed is False
        assert res.display_value == "33% appropriately sized tap targets"
        assert len(res.items) == 2
        item = res.items[0]
        assert item["tapTarget"] == "<main></main>"
        assert item["overlappingTarget"] == "<right></right>"
        assert item["size"] == "10x10"
        assert item["tapTargetScore"] == 100
        assert item["overlappingTargetScore"] == 30
        assert item["overlapScoreRatio"] == 0.3
        assert (item["width"], item["height"]) == (10, 10)

    def test_passing_page(self):
        res = TapTargetsRule().evaluate(artifacts_from_dict(collector_payload(fail_right=False)))

        assert res.passed is True
        assert res.score == 1
        assert res.display_value == "100% appropriately sized tap targets"
        assert res.items == []

    def test_empty_page(self):
        res = TapTargetsRule().evaluate(TapTargetArtifacts(viewport="width=device-width"))

        assert res.passed is True
        assert res.score == 1


class TestReport:
    """Test failure rows and the report table."""

    def test_rows_match_failures(self):
        artifacts = artifacts_from_dict(collector_payload())
        rows = failure_rows(audit_tap_targets(artifacts.tap_targets))

        assert [r["tapTarget"] for r in rows] == ["<main></main>", "<right></right>"]

    def test_dataframe_columns(self):
        artifacts = artifacts_from_dict(collector_payload())
        df = failures_to_dataframe(failure_rows(audit_tap_targets(artifacts.tap_targets)))

        assert list(df.columns) == FAILURE_COLUMNS
        assert len(df) == 2
        assert df.iloc[0]["size"] == "10x10"

    def test_empty_dataframe_keeps_columns(self):
        df = failures_to_dataframe([])

        assert list(df.columns) == FAILURE_COLUMNS
        assert len(df) == 0
