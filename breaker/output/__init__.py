"""
Breaker Output Module
======================

Console display and JSON report generation for Breaker results.
"""

from breaker.output.console import BreakerConsoleOutput
from breaker.output.report import BreakerReportGenerator

__all__ = [
    "BreakerConsoleOutput",
    "BreakerReportGenerator",
]
