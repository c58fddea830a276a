"""
rdelf Structured Logger
========================

:class:`RdelfLogger` is a thin layer over :mod:`logging` for the rdelf
tools.  Records go to a Rich handler on stderr and, when a log file is
configured, to a size-rotated file as plain text or JSON lines.

Every record is stamped with the tool name and the decode stage that was
running (``elf_header``, ``program_headers``, ...), so a file log of a
failing run shows which table the failure came from.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_STDERR_THEME = Theme(
    {
        "logging.level.debug": "dim cyan",
        "logging.level.info": "bright_blue",
        "logging.level.warning": "bold yellow",
        "logging.level.error": "bold red",
        "logging.level.critical": "bold white on red",
    }
)

_PLAIN_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(operation)s] %(message)s"

# Keyword arguments the stdlib logging calls accept themselves
_LOGGING_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel", "extra"})


class _ContextFilter(logging.Filter):
    """Stamp ``tool_name`` and the current ``operation`` on each record."""

    def __init__(self, owner: RdelfLogger) -> None:
        super().__init__()
        self._owner = owner

    def filter(self, record: logging.LogRecord) -> bool:
        record.tool_name = self._owner.tool_name
        record.operation = self._owner.current_operation or "-"
        return True


class _JSONLineFormatter(logging.Formatter):
    """One JSON object per record.

    Fields: ``time``, ``level``, ``logger``, ``tool``, ``operation``,
    ``message``, plus ``data`` for keyword arguments passed to the log call
    and ``traceback`` when exception info is attached.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "tool": getattr(record, "tool_name", None),
            "message": record.getMessage(),
        }
        operation = getattr(record, "operation", "-")
        if operation != "-":
            entry["operation"] = operation
        data = getattr(record, "rdelf_data", None)
        if data:
            entry["data"] = data
        if record.exc_info and record.exc_info[1] is not None:
            entry["traceback"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class RdelfLogger:
    """Logger bound to one rdelf tool (``rdelf.<tool_name>``).

    Usage::

        log = RdelfLogger("engine", log_file="rdelf.log", json_logs=True)
        with log.operation("program_headers"):
            log.debug("Decoding %d entries", count, offset=0x40)

    Keyword arguments other than the stdlib ones are attached to the
    record as structured data and appear under ``data`` in JSON logs.

    Args:
        tool_name:      Suffix of the logger name.
        log_level:      Minimum severity name; unknown names mean INFO.
        log_file:       Rotating log file; ``None`` or ``""`` disables it.
        json_logs:      Write the file as JSON lines instead of plain text.
        max_bytes:      File size that triggers rotation.
        backup_count:   Rotated files kept.
        console_output: Attach the Rich stderr handler.
    """

    def __init__(
        self,
        tool_name: str,
        *,
        log_level: str = "INFO",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> None:
        self._tool_name = tool_name
        self._operations: list[str] = []
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            level = logging.INFO

        self._logger = logging.getLogger(f"rdelf.{tool_name}")
        self._logger.setLevel(level)
        self._logger.propagate = False

        # A second logger for the same tool replaces the first one's handlers
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()
        for old_filter in list(self._logger.filters):
            self._logger.removeFilter(old_filter)
        self._logger.addFilter(_ContextFilter(self))

        if console_output:
            self._logger.addHandler(RichHandler(
                level=level,
                console=Console(theme=_STDERR_THEME, stderr=True),
                show_path=False,
                markup=False,
                rich_tracebacks=True,
            ))

        if log_file:
            path = Path(log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(
                _JSONLineFormatter() if json_logs else logging.Formatter(_PLAIN_FORMAT)
            )
            self._logger.addHandler(file_handler)

    # ------------------------------------------------------------------ #
    #  Context
    # ------------------------------------------------------------------ #

    @property
    def tool_name(self) -> str:
        return self._tool_name

    @property
    def current_operation(self) -> str | None:
        """Innermost active :meth:`operation` name, if any."""
        return self._operations[-1] if self._operations else None

    @property
    def underlying(self) -> logging.Logger:
        """The stdlib logger records are sent to."""
        return self._logger

    @contextmanager
    def operation(self, name: str) -> Iterator[RdelfLogger]:
        """Tag records logged inside the block with *name*."""
        self._operations.append(name)
        try:
            yield self
        finally:
            self._operations.pop()

    @contextmanager
    def timed(self, label: str) -> Iterator[None]:
        """Log *label* at DEBUG on entry and again with the elapsed time on exit."""
        start = time.perf_counter()
        self.debug("Started: %s", label)
        try:
            yield
        finally:
            self.debug(
                "Completed: %s (%.3f sec)", label, time.perf_counter() - start
            )

    # ------------------------------------------------------------------ #
    #  Log calls
    # ------------------------------------------------------------------ #

    def _log(self, level: int, msg: str, args: tuple, kwargs: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        data = {k: kwargs.pop(k) for k in list(kwargs) if k not in _LOGGING_KWARGS}
        if data:
            kwargs["extra"] = {**(kwargs.get("extra") or {}), "rdelf_data": data}
        kwargs.setdefault("stacklevel", 3)
        self._logger.log(level, msg, *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, args, kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, args, kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, args, kwargs)
