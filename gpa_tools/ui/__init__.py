"""
User Interface module.

This package contains UI implementations for displaying GPA results.
Currently implements terminal/console output and a plain-text report.

To add a new UI (e.g., web, PDF), create a new module in this package
with the same method signatures as TerminalDisplay.
"""

from .terminal import TerminalDisplay
from .report import TextReport

__all__ = ["TerminalDisplay", "TextReport"]
