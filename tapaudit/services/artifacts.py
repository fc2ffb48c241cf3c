"""
Collector JSON -> TapTargetArtifacts (input adapter).

- Accepts the collector's shape: {"TapTargets": [{"snippet", "clientRects"}], "Viewport": "..."}.
- Validates through pydantic; a malformed file raises `ValidationError`.
- No geometry here; this module just surfaces what the collector gave us in a
  structured, consistent way.
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from tapaudit.models.schemas import TapTargetArtifacts
from tapaudit.util.logger import get_logger


def artifacts_from_dict(data: Dict[str, Any]) -> TapTargetArtifacts:
    return TapTargetArtifacts.model_validate(data)


def load_artifacts(path: Union[str, Path]) -> TapTargetArtifacts:
    """
    Read a collector JSON file.

    Returns:
        TapTargetArtifacts: tap targets in page order plus the viewport content.
    """
    logger = get_logger()
    logger.info(f"Loading tap target artifacts from: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        artifacts = artifacts_from_dict(data)
    except Exception as e:
        logger.error(f"Error loading artifacts {path}: {str(e)}")
        raise

    logger.info(f"Loaded {len(artifacts.tap_targets)} tap targets")
    return artifacts
