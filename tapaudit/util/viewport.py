"""
Viewport meta parsing.

The tap target audit only makes sense on pages that lay out for phones, i.e.
pages whose `<meta name="viewport">` says `width=device-width`.
"""

from typing import Dict, Optional


def parse_viewport_content(content: Optional[str]) -> Dict[str, str]:
    """'width=device-width, initial-scale=1' -> {'width': 'device-width', 'initial-scale': '1'}"""
    props: Dict[str, str] = {}
    if not content:
        return props
    for part in content.replace(";", ",").split(","):
        if "=" not in part:
            continue
        key, _, value = part.partition("=")
        key = key.strip().lower()
        if key:
            props[key] = value.strip().lower()
    return props


def is_mobile_optimized(content: Optional[str]) -> bool:
    return parse_viewport_content(content).get("width") == "device-width"
