"""
rdelf Output Module
====================

Console rendering and JSON report generation for decoded ELF reports.
"""

from rdelf.output.console import ReadelfConsoleOutput
from rdelf.output.report import ReadelfReportGenerator

__all__ = ["ReadelfConsoleOutput", "ReadelfReportGenerator"]
