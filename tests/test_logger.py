"""Tests for RdelfLogger."""

import json
import logging

from shared.logger import RdelfLogger


class TestRdelfLogger:
    def test_namespace_and_level(self):
        log = RdelfLogger("ns-check", log_level="error", console_output=False)
        assert log.underlying.name == "rdelf.ns-check"
        assert log.underlying.level == logging.ERROR
        assert log.tool_name == "ns-check"

    def test_reinit_does_not_stack_handlers(self, tmp_path):
        RdelfLogger("stack", log_file=tmp_path / "a.log")
        log = RdelfLogger("stack", log_file=tmp_path / "a.log")
        assert len(log.underlying.handlers) == 2

    def test_plain_file_log(self, tmp_path):
        path = tmp_path / "logs" / "rdelf.log"
        log = RdelfLogger("plain", log_file=path, console_output=False)
        log.warning("decoded %d headers", 3)
        for handler in log.underlying.handlers:
            handler.flush()
        text = path.read_text(encoding="utf-8")
        assert "WARNING" in text
        assert "rdelf.plain" in text
        assert "decoded 3 headers" in text

    def test_json_file_log(self, tmp_path):
        path = tmp_path / "rdelf.jsonl"
        log = RdelfLogger(
            "json", log_level="DEBUG", log_file=path, json_logs=True,
            console_output=False,
        )
        with log.operation("section_headers"):
            log.info("resolved names", count=5)
        log.debug("outside")
        for handler in log.underlying.handlers:
            handler.flush()

        first, second = (
            json.loads(line)
            for line in path.read_text(encoding="utf-8").splitlines()
        )
        assert first["level"] == "INFO"
        assert first["tool"] == "json"
        assert first["operation"] == "section_headers"
        assert first["data"] == {"count": 5}
        assert first["message"] == "resolved names"
        assert "operation" not in second

    def test_timed_logs_at_debug(self, caplog):
        log = RdelfLogger("timed", log_level="DEBUG", console_output=False)
        log.underlying.propagate = True
        try:
            with caplog.at_level(logging.DEBUG, logger="rdelf.timed"):
                with log.timed("decode x"):
                    pass
        finally:
            log.underlying.propagate = False
        messages = [r.getMessage() for r in caplog.records]
        assert messages[0] == "Started: decode x"
        assert messages[1].startswith("Completed: decode x")

    def test_plain_file_shows_operation(self, tmp_path):
        path = tmp_path / "ops.log"
        log = RdelfLogger("ops", log_file=path, console_output=False)
        with log.operation("elf_header"):
            with log.operation("section_headers"):
                log.error("inner")
            log.error("outer")
        log.error("none")
        for handler in log.underlying.handlers:
            handler.flush()
        inner, outer, none = path.read_text(encoding="utf-8").splitlines()
        assert "[section_headers] inner" in inner
        assert "[elf_header] outer" in outer
        assert "[-] none" in none

    def test_unknown_level_name_defaults_to_info(self):
        log = RdelfLogger("lvl", log_level="chatty", console_output=False)
        assert log.underlying.level == logging.INFO
