"""
tmpl - Directive-driven section substitution

Splices named sections of a source file into a template skeleton.
"""

from .scanner import LineScanner
from .directives import directive_classify, boundary_classify, names_match
from .extractor import SectionExtractor, IndexedSectionExtractor
from .substitute import Substituter, text_substitute
from .log import LOG, WARN, state_connectToLogger

__all__ = [
    "LineScanner",
    "directive_classify",
    "boundary_classify",
    "names_match",
    "SectionExtractor",
    "IndexedSectionExtractor",
    "Substituter",
    "text_substitute",
    "LOG",
    "WARN",
    "state_connectToLogger",
]
