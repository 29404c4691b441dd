"""
Scytale Report Generator
=========================

Writes cipher results, frequency reports and brute-force rankings as
JSON documents with a small metadata header. Payloads are produced by
pydantic's ``model_dump``.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Sequence

from pydantic import BaseModel

from scytale import __version__


class ReportGenerator:
    """Serialises Scytale models to JSON.

    Usage::

        gen = ReportGenerator()
        text = gen.to_json("frequency", report)
        gen.generate_json("frequency", report, Path("report.json"))
    """

    def build(self, kind: str, payload: BaseModel | Sequence[BaseModel]) -> dict[str, Any]:
        """Wrap *payload* with report metadata."""
        if isinstance(payload, BaseModel):
            data: Any = payload.model_dump(mode="json")
        else:
            data = [item.model_dump(mode="json") for item in payload]
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": "scytale",
                "kind": kind,
                "version": __version__,
            },
            "result": data,
        }

    def to_json(self, kind: str, payload: BaseModel | Sequence[BaseModel]) -> str:
        return json.dumps(
            self.build(kind, payload), indent=2, ensure_ascii=False, default=str
        )

    def generate_json(
        self,
        kind: str,
        payload: BaseModel | Sequence[BaseModel],
        output_path: Path,
    ) -> Path:
        """Write the report to *output_path*, creating parent directories.

        Returns:
            Path to the generated JSON file.
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_json(kind, payload), encoding="utf-8")
        return output_path
