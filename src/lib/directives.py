"""
Directive and boundary detection

Template lines are directives when their first non-blank character is the
delimiter. Source lines are section boundaries only when their very first
character is the delimiter.
"""

import re
from typing import Optional

from ..models.config import SubstConfig
from ..models.directives import DirectiveToken, MatchMode


# Token names run to the first whitespace character or line terminator
_NAME = re.compile(r'\S*')


def token_read(line: str, start: int, config: SubstConfig) -> DirectiveToken:
    """Build the token whose delimiter sits at line[start]"""
    match = _NAME.match(line, start + 1)
    return DirectiveToken(delimiter=config.delimiter, name=match.group(0))


def directive_classify(line: str, config: SubstConfig) -> Optional[DirectiveToken]:
    """
    Classify a template line

    Args:
        line: Raw template line, terminator included
        config: Run configuration (delimiter)

    Returns:
        DirectiveToken if the line is a directive line, else None

    Example:
        >>> directive_classify("  #intro\\n", SubstConfig())
        DirectiveToken(delimiter='#', name='intro')
        >>> directive_classify("text #intro\\n", SubstConfig()) is None
        True
    """
    stripped = line.lstrip(' \t')
    if not stripped.startswith(config.delimiter):
        return None
    return token_read(line, len(line) - len(stripped), config)


def boundary_classify(line: str, config: SubstConfig) -> Optional[DirectiveToken]:
    """
    Classify a source line as a section boundary

    No leading whitespace is skipped: "  #intro" is ordinary content.
    """
    if not line.startswith(config.delimiter):
        return None
    return token_read(line, 0, config)


def names_match(requested: str, candidate: str, mode: MatchMode) -> bool:
    """
    Compare a requested section name with a boundary (or reserved) name

    STRICT requires equality. LEGACY compares only the first
    min(len(requested), len(candidate)) characters, so either name being a
    prefix of the other counts as a match, and an empty name matches
    everything.
    """
    if mode is MatchMode.STRICT:
        return requested == candidate
    span = min(len(requested), len(candidate))
    return requested[:span] == candidate[:span]


def wholeFile_is(token: DirectiveToken, config: SubstConfig) -> bool:
    """Check whether a token selects the entire source"""
    return names_match(token.name, config.whole_file_name, config.match_mode)
