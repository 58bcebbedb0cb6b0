"""JSON export of API payloads.

Used by the CLI `--output` option to persist a response for later inspection
or as a test fixture.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel


def export_payload_json(*, payload: Any, output_path: Path) -> Path:
    """Write `payload` (raw JSON value or pydantic record) as stable UTF-8 JSON."""

    if isinstance(payload, BaseModel):
        payload = payload.model_dump(mode="json", by_alias=True)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
