import json
import os

FINGER_SIZE_PX = 48
SIZE = 10
# 3px deeper than the closest non-failing spot -> 0.3 overlap ratio
OVERLAP = (FINGER_SIZE_PX - SIZE) / 2 + 3

out_path = os.path.join(os.path.dirname(__file__), "..", "data", "raw", "synthetic_tap_targets.json")
os.makedirs(os.path.dirname(out_path), exist_ok=True)


def rect(x, y):
    return {"left": x, "top": y, "width": SIZE, "height": SIZE, "right": x + SIZE, "bottom": y + SIZE}


artifacts = {
    "Viewport": "width=device-width, initial-scale=1",
    "TapTargets": [
        {"snippet": "<a href=\"/home\">Home</a>", "clientRects": [rect(0, 0)]},
        {"snippet": "<a href=\"/below\">Below</a>", "clientRects": [rect(0, FINGER_SIZE_PX - OVERLAP)]},
        {"snippet": "<a href=\"/right\">Right</a>", "clientRects": [rect(FINGER_SIZE_PX, 0)]},
        {"snippet": "<button>Far away</button>", "clientRects": [rect(300, 300)]},
    ],
}

with open(out_path, "w", encoding="utf-8") as f:
    json.dump(artifacts, f, indent=2)

print(f"Created {out_path}")
