"""
rdelf Shared Data Models
=========================

Pydantic v2 models shared across rdelf tools.  :class:`RunResult` is the
envelope every tool wraps around its own payload when it writes a JSON
report: what was examined, when, for how long, and whether it succeeded.

References:
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


class RunResult(BaseModel):
    """Outcome of a single tool run against one target.

    Attributes:
        tool_name:  Name of the rdelf tool.
        target:     Target that was examined (usually a file path).
        start_time: UTC timestamp when the run started.
        end_time:   UTC timestamp when the run ended.
        summary:    Human-readable one-line result summary.
        error:      Error message when the run failed, else empty.
        payload:    Tool-specific result data (JSON-compatible).
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",
    )

    tool_name: str = Field(..., min_length=1, description="Tool name")
    target: str = Field(..., min_length=1, description="Examined target")
    start_time: _dt.datetime = Field(
        default_factory=_utcnow,
        description="Run start timestamp (UTC)",
    )
    end_time: Optional[_dt.datetime] = Field(
        default=None,
        description="Run end timestamp (UTC)",
    )
    summary: str = Field(default="", description="Result summary")
    error: str = Field(default="", description="Failure message")
    payload: dict[str, Any] = Field(
        default_factory=dict,
        description="Tool-specific result data",
    )

    @property
    def duration_seconds(self) -> float | None:
        """Elapsed run time in seconds, or ``None`` if *end_time* is unset."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    @property
    def succeeded(self) -> bool:
        """``True`` once the run has finished without an error."""
        return self.end_time is not None and not self.error

    def finalize(
        self,
        summary: str | None = None,
        error: str | None = None,
    ) -> RunResult:
        """Mark the run as complete by setting *end_time*.

        Returns:
            ``self`` for fluent chaining.
        """
        self.end_time = _utcnow()
        if error is not None:
            self.error = error
        if summary is not None:
            self.summary = summary
        elif not self.summary:
            self.summary = f"Run failed: {self.error}" if self.error else "Run complete."
        return self
