"""Tests for JSON report generation and the RunResult envelope."""

import json

from rdelf import __version__
from rdelf.core.engine import ReadelfEngine
from rdelf.output.report import REPORT_TYPE, ReadelfReportGenerator
from shared.models import RunResult


def _report(config, logger, image):
    engine = ReadelfEngine(config=config, logger=logger)
    return engine.analyze_data(
        image, "sample.elf", program_headers=True, section_headers=True
    )


class TestRunResult:
    def test_unfinished(self):
        run = RunResult(tool_name="rdelf", target="x")
        assert run.duration_seconds is None
        assert not run.succeeded

    def test_finalize_success(self):
        run = RunResult(tool_name="rdelf", target="x").finalize(summary="ok")
        assert run.succeeded
        assert run.summary == "ok"
        assert run.duration_seconds >= 0

    def test_finalize_error(self):
        run = RunResult(tool_name="rdelf", target="x").finalize(error="boom")
        assert not run.succeeded
        assert run.summary == "Run failed: boom"


class TestReadelfReportGenerator:
    def test_document_layout(self, default_config, quiet_logger, sample_image):
        generator = ReadelfReportGenerator()
        run = generator.build_run(_report(default_config, quiet_logger, sample_image))
        run.finalize()
        doc = generator.to_dict(run)

        assert doc["report_type"] == REPORT_TYPE
        assert doc["version"] == __version__
        assert doc["run"]["target"] == "sample.elf"
        assert "payload" not in doc["run"]
        assert doc["duration_seconds"] >= 0

        elf = doc["elf"]
        assert elf["path"] == "sample.elf"
        assert elf["header"]["ident"]["magic"].startswith("7f 45 4c 46")
        assert elf["header"]["entry_point"] == 0x401000
        assert elf["program_headers"][1]["flags"] == "Readable          Executable"
        assert elf["section_headers"][1]["name"] == ".text"
        assert elf["warnings"] == []

    def test_generate_json(self, tmp_path, default_config, quiet_logger, sample_image):
        generator = ReadelfReportGenerator()
        run = generator.build_run(_report(default_config, quiet_logger, sample_image))
        run.finalize(summary="done")

        written = generator.generate_json(run, tmp_path / "out" / "report.json")
        doc = json.loads((tmp_path / "out" / "report.json").read_text("utf-8"))
        assert written == str((tmp_path / "out" / "report.json").resolve())
        assert doc["run"]["summary"] == "done"
        assert len(doc["elf"]["section_headers"]) == 5
