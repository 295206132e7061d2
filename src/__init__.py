"""
tmpl - Directive-driven section substitution

Copies a template to standard output, replacing directive lines with named
sections spliced out of a source file.
"""

__version__ = "1.0.0"

from .lib import Substituter, text_substitute, LOG, state_connectToLogger
from .models import SubstConfig, MatchMode

__all__ = [
    "Substituter",
    "text_substitute",
    "SubstConfig",
    "MatchMode",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
