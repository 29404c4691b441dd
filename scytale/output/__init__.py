"""
Scytale Output Module
======================

Console (Rich) and JSON report output for Scytale results.
"""

from scytale.output.console import ScytaleConsoleOutput
from scytale.output.report import ReportGenerator

__all__ = ["ReportGenerator", "ScytaleConsoleOutput"]
