"""
rdelf Report Generator
=======================

Writes decoded ELF reports as JSON.  The document wraps the report in a
:class:`~shared.models.RunResult` envelope so that consumers can tell
successful runs from failed ones without parsing the payload.

Integers stay integers in the JSON output; only the 16 identification
bytes are rendered as a hex string.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from shared.models import RunResult

from rdelf import __version__
from rdelf.core.models import ElfReport


REPORT_TYPE = "rdelf_elf_headers"


class ReadelfReportGenerator:
    """Builds and writes JSON reports.

    Usage::

        generator = ReadelfReportGenerator()
        generator.generate_json(run, "report.json")
    """

    @staticmethod
    def build_run(report: ElfReport, run: RunResult | None = None) -> RunResult:
        """Attach *report* as the payload of *run* (a new one if ``None``)."""
        if run is None:
            run = RunResult(tool_name="rdelf", target=report.path)
        run.payload = report.model_dump(mode="json")
        return run

    def to_dict(self, run: RunResult) -> dict[str, Any]:
        """Return the JSON-compatible report document for *run*."""
        return {
            "report_type": REPORT_TYPE,
            "version": __version__,
            "run": run.model_dump(mode="json", exclude={"payload"}),
            "duration_seconds": run.duration_seconds,
            "elf": run.payload,
        }

    def to_json(self, run: RunResult) -> str:
        """Serialise *run* to an indented JSON string."""
        return json.dumps(self.to_dict(run), indent=2, ensure_ascii=False)

    def generate_json(self, run: RunResult, output_path: str | Path) -> str:
        """Write the JSON report for *run* to *output_path*.

        Returns:
            The absolute path of the generated report.
        """
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json(run) + "\n", encoding="utf-8")
        return str(path.resolve())
