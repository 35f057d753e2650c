"""JSON export of the screen state.

Why JSON:
- Lets the viewer be used from scripts and pipelines (`random-dog fetch`).
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import DogScreenState


def dump_state_json(state: DogScreenState) -> str:
    """Serialize `state` with a stable layout."""

    payload = state.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_state_json(*, state: DogScreenState, output_path: Path) -> Path:
    """Write `state` as UTF-8 JSON to `output_path`."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_state_json(state), encoding="utf-8")
    return output_path
