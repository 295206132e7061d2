"""
Section extraction data models

Result structures returned by the extractor and the substitution driver.
"""

from dataclasses import dataclass, field
from typing import Any, List

from .directives import DirectiveToken


@dataclass
class ExtractResult:
    """
    Outcome of one section lookup

    Attributes:
        token: The directive token that was looked up
        matched: True if the whole-file name, the preamble seed or at least
                 one boundary line matched the token
        lines: Number of source lines written
        whole_file: True if the token selected the whole source
    """
    token: DirectiveToken
    matched: bool
    lines: int = 0
    whole_file: bool = False


@dataclass
class SectionSpan:
    """
    One entry of the optional section index

    Attributes:
        name: Boundary name (the preamble name for the leading span)
        start: Stream position just after the boundary line
    """
    name: str
    start: Any


@dataclass
class SubstResult:
    """
    Summary of a substitution run

    Attributes:
        status: True when the template was processed to the end
        template_lines: Template lines read
        directives: Directive lines replaced
        emitted_lines: Source lines written, whole-file copies included
        unmatched: Directive tokens that selected nothing
    """
    status: bool = False
    template_lines: int = 0
    directives: int = 0
    emitted_lines: int = 0
    unmatched: List[str] = field(default_factory=list)
