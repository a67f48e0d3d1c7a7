"""
Breaker Report Generator
=========================

Writes Breaker results as JSON documents: the result model's fields
inside a small envelope recording the tool, version, result type and
generation time. Suitable for scripting and for diffing runs.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from breaker import __tool_name__, __version__


class BreakerReportGenerator:
    """Serialise result models to JSON.

    Usage::

        reporter = BreakerReportGenerator()
        reporter.generate_json(engine.crack_caesar(text), Path("caesar.json"))
    """

    def build(self, result: BaseModel) -> dict[str, Any]:
        """Envelope plus the result's fields as plain data."""
        return {
            "tool": __tool_name__,
            "version": __version__,
            "result_type": type(result).__name__,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "result": result.model_dump(mode="json"),
        }

    def to_json(self, result: BaseModel, indent: int = 2) -> str:
        return json.dumps(self.build(result), indent=indent, ensure_ascii=False)

    def generate_json(self, result: BaseModel, output_path: Path) -> Path:
        """Write the JSON report to *output_path*, creating parent directories.

        Returns:
            The resolved path of the written file.
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_json(result) + "\n", encoding="utf-8")
        return output_path.resolve()
