"""
Models package for tmpl

Contains data structures and type definitions for the substitution pipeline.
"""

from .state import ProgramState, pipeline
from .directives import DirectiveToken, MatchMode, WHOLE_FILE_NAME, PREAMBLE_NAME
from .config import SubstConfig
from .section import ExtractResult, SectionSpan, SubstResult

__all__ = [
    "ProgramState",
    "pipeline",
    "DirectiveToken",
    "MatchMode",
    "WHOLE_FILE_NAME",
    "PREAMBLE_NAME",
    "SubstConfig",
    "ExtractResult",
    "SectionSpan",
    "SubstResult",
]
