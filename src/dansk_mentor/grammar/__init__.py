"""
Heuristic grammar feedback: verb position, conjugation and article agreement.
"""

from .analyzer import ARTICLES, GrammarAnalyzer
from .diagnostics import Diagnostic, DiagnosticKind, GrammarReport

__all__ = ["ARTICLES", "Diagnostic", "DiagnosticKind", "GrammarAnalyzer", "GrammarReport"]
